# This file initializes the 'utils' module.
# This module contains helpers used across the mod: install path resolution
# and logging configuration.

from customsound.utils.logging import (
    attach_file_log,
    dump_groups,
    get_logger,
    setup_logging,
)
from customsound.utils.paths import (
    get_install_dir,
    get_sounds_dir,
    sounds_dir_for,
)

__all__ = [
    # Logging
    "attach_file_log",
    "dump_groups",
    "get_logger",
    "setup_logging",
    # Paths
    "get_install_dir",
    "get_sounds_dir",
    "sounds_dir_for",
]
