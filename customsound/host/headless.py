"""
Headless host.

Implements the GameHost protocol without a game: every call is recorded
(and logged), and input actions live in a small in-memory map. The CLI uses
it for dry runs, and tests use it to check exactly what the mod asked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from customsound.core.protocols import NoiseEvent, TriggerCallback, Vector3
from customsound.utils.logging import get_logger

logger = get_logger("host")


@dataclass
class HeadlessCharacter:
    position: Vector3 = (0.0, 0.0, 0.0)
    team: Any = "player"
    transform: Any = "player.transform"


@dataclass(frozen=True)
class CaptionCall:
    text: str
    target: Any
    speed: Optional[float] = None
    duration: Optional[float] = None

    @property
    def is_hide(self) -> bool:
        return self.text == "" and self.duration == 0.0


class HeadlessAction:
    """
    An input action bound to one control (e.g. "<Keyboard>/q").
    """

    def __init__(self, name: str, control: str, enabled: bool = True):
        self.name = name
        self.control = control
        self.enabled = enabled
        self.callbacks: List[TriggerCallback] = []

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def subscribe(self, callback: TriggerCallback) -> None:
        self.callbacks.append(callback)

    def unsubscribe(self, callback: TriggerCallback) -> None:
        if callback in self.callbacks:
            self.callbacks.remove(callback)

    def perform(self) -> None:
        if not self.enabled:
            return
        for callback in list(self.callbacks):
            callback(self)


class HeadlessInput:
    """
    Named actions plus any clones made from them.
    """

    def __init__(self):
        self.actions: Dict[str, HeadlessAction] = {}
        self.clones: List[HeadlessAction] = []

    def register(self, name: str, control: str) -> HeadlessAction:
        action = HeadlessAction(name, control)
        self.actions[name] = action
        return action

    def find_action(self, name: str) -> Optional[HeadlessAction]:
        return self.actions.get(name)

    def clone_binding(self, action: HeadlessAction) -> HeadlessAction:
        clone = HeadlessAction(f"{action.name} (custom)", action.control, enabled=False)
        self.clones.append(clone)
        return clone

    def press(self, control: str) -> None:
        """
        Simulate the player pressing `control`: every enabled action bound to
        it is performed.
        """
        for action in [*self.actions.values(), *self.clones]:
            if action.control == control:
                action.perform()


class HeadlessHost:
    """
    Records every call the mod makes.

    Attributes:
        character: The live character, or None to simulate "no player".
        played: Paths passed to play_sound().
        noises: Events passed to make_noise().
        captions: Calls to show_caption().
    """

    def __init__(self, character: Optional[HeadlessCharacter] = None, with_default_action: bool = True):
        self.character = character
        self.input = HeadlessInput()
        self.played: List[str] = []
        self.noises: List[NoiseEvent] = []
        self.captions: List[CaptionCall] = []
        self.default_actions: List[HeadlessAction] = []

        if with_default_action:
            # The game's own quack key; performing it plays the stock sound
            quack = self.input.register("Quack", "<Keyboard>/q")
            quack.subscribe(self._default_quack)

    def _default_quack(self, action: HeadlessAction) -> None:
        self.default_actions.append(action)

    def main_character(self) -> Optional[HeadlessCharacter]:
        return self.character

    def play_sound(self, path: str) -> None:
        logger.info(f"play_sound: {path}")
        self.played.append(path)

    def make_noise(self, event: NoiseEvent) -> None:
        logger.info(f"make_noise: {event.sound_type.value} radius={event.radius} at {event.position}")
        self.noises.append(event)

    def show_caption(
        self,
        text: str,
        target: Any,
        speed: Optional[float] = None,
        duration: Optional[float] = None,
    ) -> None:
        call = CaptionCall(text, target, speed, duration)
        logger.info("show_caption: hide" if call.is_hide else f"show_caption: {text!r}")
        self.captions.append(call)

    @property
    def hide_requests(self) -> int:
        return sum(1 for c in self.captions if c.is_hide)
