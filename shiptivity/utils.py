"""Shared helpers for shiptivity."""

import os
from pathlib import Path


def get_shiptivity_home() -> Path:
    """Return the shiptivity data directory.

    Honors SHIPTIVITY_DATA_DIR, otherwise ``~/.shiptivity``.
    """
    env_dir = os.environ.get("SHIPTIVITY_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".shiptivity"
