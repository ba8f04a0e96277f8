# This file initializes the 'models' module.
# This module contains the data structures (Pydantic models) used to represent
# the mod's configuration and the result of one random selection.

from customsound.models.sound import (
    DEFAULT_RADIUS,
    UNSET_WEIGHT,
    ConfigRoot,
    SelectedSound,
    SoundGroup,
)

__all__ = [
    "DEFAULT_RADIUS",
    "UNSET_WEIGHT",
    "ConfigRoot",
    "SelectedSound",
    "SoundGroup",
]
