# This file initializes the 'config' module.
# This module handles loading config.json and the mod's runtime settings.

from customsound.config.loader import (
    CONFIG_FILENAME,
    get_template_config,
    load,
    read_config,
    resolve_sound_type,
    validate_group,
    validate_groups,
)
from customsound.config.settings import CustomSoundSettings, get_settings

__all__ = [
    # Main function
    "load",
    # Loading steps
    "read_config",
    "validate_groups",
    "validate_group",
    "resolve_sound_type",
    # Settings
    "CustomSoundSettings",
    "get_settings",
    # Utilities
    "CONFIG_FILENAME",
    "get_template_config",
]
