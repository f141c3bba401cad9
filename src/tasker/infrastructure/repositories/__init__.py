"""Repositories encapsulating SQL for each table."""
