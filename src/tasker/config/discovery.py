"""Locating ``tasker.toml``.

``TASKER_CONFIG`` names the file outright. Otherwise the nearest
``tasker.toml`` in the start directory or any ancestor is used, so
running tasker from a subdirectory still finds the project's database.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tasker.toml"
CONFIG_ENV_VAR = "TASKER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A ``TASKER_CONFIG`` that points at a missing file disables discovery.
    """
    if override := os.environ.get(CONFIG_ENV_VAR):
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
