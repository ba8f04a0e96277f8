from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Tuple

from customsound.core.types import SoundType

# We use 'Protocol' to define interfaces.
# Think of these as contracts with the game. The mod never talks to the engine
# directly: whatever object is handed to it just has to provide these methods.
# This keeps the core testable without a running game.

Vector3 = Tuple[float, float, float]
TriggerCallback = Callable[..., Any]


@dataclass(frozen=True)
class NoiseEvent:
    """
    A noise reported to the AI awareness system.

    Attributes:
        from_character: The character that made the noise.
        team: The character's team (enemies of this team react).
        position: World position the noise comes from.
        sound_type: Category the AI uses to decide how to react.
        radius: How far the noise carries, in world units.
    """
    from_character: Any
    team: Any
    position: Vector3
    sound_type: SoundType
    radius: float


class Character(Protocol):
    """
    The player's live character as seen by the mod.
    """

    @property
    def position(self) -> Vector3:
        ...

    @property
    def team(self) -> Any:
        ...

    @property
    def transform(self) -> Any:
        """
        Anchor used for captions (they follow the character).
        """
        ...


class InputAction(Protocol):
    """
    A named input action (e.g. the "Quack" key).
    """

    def enable(self) -> None:
        ...

    def disable(self) -> None:
        ...

    def subscribe(self, callback: TriggerCallback) -> None:
        """
        Call `callback` every time the action is performed.
        """
        ...

    def unsubscribe(self, callback: TriggerCallback) -> None:
        ...


class InputHost(Protocol):
    """
    Access to the game's input actions.
    """

    def find_action(self, name: str) -> Optional[InputAction]:
        ...

    def clone_binding(self, action: InputAction) -> InputAction:
        """
        Create a new action bound to the same control as `action`.
        """
        ...


class GameHost(Protocol):
    """
    Everything the mod asks of the game.
    """

    @property
    def input(self) -> InputHost:
        ...

    def main_character(self) -> Optional[Character]:
        """
        Returns the live player character, or None (menus, loading, dead).
        """
        ...

    def play_sound(self, path: str) -> None:
        """
        Play an audio file by absolute path.
        """
        ...

    def make_noise(self, event: NoiseEvent) -> None:
        """
        Tell the AI that a noise happened.
        """
        ...

    def show_caption(
        self,
        text: str,
        target: Any,
        speed: Optional[float] = None,
        duration: Optional[float] = None,
    ) -> None:
        """
        Show a speech bubble above `target`.

        The caption widget has no hide call. Showing an empty caption with
        speed=0 and duration=0 replaces (and so hides) the current one.
        """
        ...


class ModLifecycle(Protocol):
    """
    Hooks the game's mod loader calls, in this order: load once, then any
    number of enable/disable pairs.
    """

    def on_load(self) -> None:
        ...

    def on_enable(self) -> None:
        ...

    def on_disable(self) -> None:
        ...
