"""Locate ``pdvkit.toml``.

``PDVKIT_CONFIG`` names the file outright; otherwise the nearest
``pdvkit.toml`` in the working directory or one of its parents is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pdvkit.toml"
CONFIG_ENV_VAR = "PDVKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a run started in *start* (default: cwd).

    A ``PDVKIT_CONFIG`` pointing at a missing file yields None rather than
    falling back to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
