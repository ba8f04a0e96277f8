from __future__ import annotations

from enum import Enum
from typing import Optional

# We use Enums (Enumerations) to define a fixed set of options.
# The values match the category names the game's AI awareness system uses,
# so a config file can say "soundType": "combat" and we forward it unchanged.


class SoundType(str, Enum):
    """
    Categories of noise the AI awareness system understands.
    Inheriting from 'str' allows these to be used directly as strings.
    """
    UNKNOWN_NOISE = "unknowNoise"  # Spelling matches the game's own category name
    COMBAT = "combat"              # Gunfire, explosions, fighting
    GRENADE_DROP = "grenadeDropSound"

    @classmethod
    def from_name(cls, raw: Optional[str]) -> Optional["SoundType"]:
        """
        Case-insensitive lookup by value or member name.

        Returns None when nothing matches, so callers can pick their own fallback.
        """
        if not raw:
            return None
        wanted = raw.strip().lower()
        for member in cls:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
        return None
