"""Infrastructure layer — database, task repository, CSV writer.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from services, commands, or output.
"""
