"""Presentation layer — Rich, JSON, and quiet rendering of ServiceResult."""
