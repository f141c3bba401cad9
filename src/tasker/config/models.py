"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tasker.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    db_file: str = "tasker.db"


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    output: str = "tasks.csv"
