"""
Install path resolution.

The mod keeps its config.json and its sounds/ folder next to its own code,
the same way a game mod keeps them next to its DLL. These helpers work out
where that is, once per process.
"""

from __future__ import annotations

import os
from functools import lru_cache

SOUNDS_SUBDIR = "sounds"


@lru_cache(maxsize=None)
def get_install_dir() -> str:
    """
    Get the directory the customsound package is installed in.

    Returns:
        Absolute directory path, or "" if it cannot be determined.
    """
    try:
        import customsound

        module_file = getattr(customsound, "__file__", None)
        if not module_file:
            return ""
        return os.path.dirname(os.path.abspath(module_file))
    except (ImportError, OSError, ValueError):
        return ""


@lru_cache(maxsize=None)
def get_sounds_dir() -> str:
    """
    Get the directory holding the sound assets (<install>/sounds).

    Returns "" when the install directory is unknown; callers treat that as
    "no sounds available".
    """
    return sounds_dir_for(get_install_dir())


def sounds_dir_for(base_dir: str, subdir: str = SOUNDS_SUBDIR) -> str:
    """
    Same rule as get_sounds_dir() for an arbitrary base directory.
    """
    if not base_dir:
        return ""
    return os.path.join(base_dir, subdir)
