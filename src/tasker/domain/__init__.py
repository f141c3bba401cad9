"""Domain layer — the Task model, its lifecycle, and timestamp format.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
