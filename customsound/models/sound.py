from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from customsound.core.types import SoundType

# We use Pydantic 'BaseModel' to define our data structures.
# Pydantic decodes config.json straight into these classes in one pass and
# checks the types for us. The models are frozen: validation builds new
# instances instead of editing the parsed ones.

DEFAULT_RADIUS = 15.0
UNSET_WEIGHT = -1


def _primitive_as_text(v: Any) -> Any:
    # JSON true/false are written back the way they appear in the file
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return v


class SoundGroup(BaseModel):
    """
    One bucket of interchangeable noise variants.

    Example JSON:
        {
          "name": "greetings",
          "sounds": ["hello.ogg", "hi.ogg"],
          "texts": ["Hello!", null],
          "soundType": "unknowNoise",
          "radius": 10,
          "weight": 3
        }
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",          # Unknown keys in config.json are ignored
        populate_by_name=True,
    )

    name: Optional[str] = Field(
        default=None,
        description="Only used to identify the group in logs; may repeat"
    )
    sounds: Tuple[Optional[str], ...] = Field(
        default=(),
        description="Sound files relative to the sounds folder; after validation "
                    "absolute paths, or '' where the file was missing"
    )
    texts: Tuple[Optional[str], ...] = Field(
        default=(),
        description="Captions; drawn independently from the sounds"
    )
    sound_type_raw: Optional[str] = Field(
        default=None,
        alias="soundType",
        description="Category name exactly as written in config.json"
    )
    sound_type: SoundType = Field(
        default=SoundType.UNKNOWN_NOISE,
        alias="resolvedSoundType",
        description="Category the AI receives, resolved from soundType"
    )
    radius: float = Field(
        default=DEFAULT_RADIUS,
        description="How far the noise carries, in world units"
    )
    weight: int = Field(
        default=UNSET_WEIGHT,
        description="Selection weight; negative means 'derive from the list sizes'"
    )

    @field_validator("name", mode="before")
    @classmethod
    def lenient_name(cls, v: Any) -> Any:
        return _primitive_as_text(v)

    @field_validator("sounds", "texts", mode="before")
    @classmethod
    def lenient_list(cls, v: Any) -> Any:
        """
        A null list is empty; numbers and booleans inside it become text.
        """
        if v is None:
            return ()
        if isinstance(v, (list, tuple)):
            return tuple(_primitive_as_text(item) for item in v)
        return v

    @field_validator("sound_type_raw", mode="before")
    @classmethod
    def lenient_sound_type(cls, v: Any) -> Any:
        """
        Anything but a string (numbers, objects) is treated as "not given".
        """
        return v if isinstance(v, str) else None

    @field_validator("radius", mode="before")
    @classmethod
    def default_radius(cls, v: Any) -> Any:
        return DEFAULT_RADIUS if v is None else v

    @field_validator("weight", mode="before")
    @classmethod
    def default_weight(cls, v: Any) -> Any:
        return UNSET_WEIGHT if v is None else v

    @property
    def display_name(self) -> str:
        return self.name or "unnamed"

    @property
    def valid_sound_count(self) -> int:
        return sum(1 for s in self.sounds if s)


class ConfigRoot(BaseModel):
    """
    The whole config.json document.

    Only "soundGroups" is recognized; everything else is ignored.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sound_groups: List[Optional[SoundGroup]] = Field(
        default_factory=list,
        alias="soundGroups",
    )

    @field_validator("sound_groups", mode="before")
    @classmethod
    def null_groups_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


@dataclass(frozen=True)
class SelectedSound:
    """
    The outcome of one random draw, created fresh for every trigger.

    Attributes:
        name: Name of the group it came from.
        sound: Absolute path of the chosen sound, '' for a missing file, or None.
        text: The chosen caption, or None.
        sound_type: Category reported to the AI.
        radius: How far the noise carries.
    """
    name: Optional[str]
    sound: Optional[str]
    text: Optional[str]
    sound_type: SoundType = SoundType.UNKNOWN_NOISE
    radius: float = DEFAULT_RADIUS

    @property
    def has_sound(self) -> bool:
        # '' is the missing-file placeholder, never a playable path
        return bool(self.sound)

    @property
    def has_text(self) -> bool:
        return bool(self.text)
