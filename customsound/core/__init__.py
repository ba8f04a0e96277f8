# This file initializes the 'core' module.
# The core module contains the fundamental building blocks of the mod,
# such as the noise categories, exceptions, and protocols (host interfaces).

from customsound.core.types import SoundType
from customsound.core.exceptions import (
    CustomSoundError,
    ConfigError,
    ConfigMissingError,
    ConfigEmptyError,
    ConfigParseError,
    ConfigGroupsEmptyError,
    NoSelectableGroupError,
    MissingAssetError,
)
from customsound.core.protocols import (
    Character,
    InputAction,
    InputHost,
    GameHost,
    ModLifecycle,
    NoiseEvent,
)

__all__ = [
    # Types
    "SoundType",
    # Exceptions
    "CustomSoundError",
    "ConfigError",
    "ConfigMissingError",
    "ConfigEmptyError",
    "ConfigParseError",
    "ConfigGroupsEmptyError",
    "NoSelectableGroupError",
    "MissingAssetError",
    # Protocols
    "Character",
    "InputAction",
    "InputHost",
    "GameHost",
    "ModLifecycle",
    "NoiseEvent",
]
