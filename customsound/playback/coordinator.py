"""
Playback Coordinator

Runs every time the noise key is pressed:

1. Ask the selector for a SelectedSound
2. Play its sound and tell the AI about the noise
3. Show its caption, or hide the previous one

Hiding is the tricky part. The caption widget has no "hide" call, so we show
an empty caption that lasts zero seconds. We only do that when the previous
trigger actually showed something, otherwise every caption-less press would
send a pointless hide request.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from customsound.core.exceptions import NoSelectableGroupError
from customsound.core.protocols import GameHost, NoiseEvent
from customsound.models.sound import SelectedSound, SoundGroup
from customsound.selection.selector import pick
from customsound.utils.logging import get_logger

logger = get_logger("playback")


@dataclass
class SessionContext:
    """
    State of one enabled session of the mod.

    Created when the mod is enabled and thrown away when it is disabled, so
    nothing leaks from one session into the next.

    Attributes:
        groups: The validated sound groups (never modified).
        rng: Random source for selections.
        caption_shown: Whether the last trigger left a caption on screen.
    """
    groups: List[SoundGroup] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random)
    caption_shown: bool = False


class PlaybackCoordinator:
    """
    Turns a random selection into calls on the game host.
    """

    def __init__(self, host: GameHost, context: Optional[SessionContext] = None):
        self.host = host
        self.context = context or SessionContext()
        self.last_selected: Optional[SelectedSound] = None

    def trigger(self, groups: Optional[Sequence[SoundGroup]] = None) -> Optional[SelectedSound]:
        """
        Handle one press of the noise key.

        Args:
            groups: Groups to draw from. Defaults to the session's groups.

        Returns:
            What was selected, or None if nothing happened.
        """
        self.last_selected = None
        character = self.host.main_character()
        if character is None:
            logger.debug("No live player character, ignoring trigger")
            return None

        if groups is None:
            groups = self.context.groups

        selected = pick(groups, self.context.rng)
        if selected is None:
            logger.info(str(NoSelectableGroupError()))
            return None

        if selected.has_sound:
            self.host.play_sound(selected.sound)
            self.host.make_noise(NoiseEvent(
                from_character=character,
                team=character.team,
                position=character.position,
                sound_type=selected.sound_type,
                radius=selected.radius,
            ))

        if selected.has_text:
            self.host.show_caption(selected.text, character.transform)
            self.context.caption_shown = True
        elif self.context.caption_shown:
            # Instant, empty caption replaces the one still on screen
            self.host.show_caption("", character.transform, speed=0.0, duration=0.0)
            self.context.caption_shown = False

        self.last_selected = selected
        return selected
