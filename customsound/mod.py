"""
The mod itself: wires the loader, the selector and the playback coordinator
to the game's lifecycle hooks.

The game calls on_load() once, then on_enable()/on_disable() whenever the
player toggles the mod. Each enable starts from scratch: config.json is read
again and the caption state is reset.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from customsound.config.loader import load, log_load_result
from customsound.config.settings import CustomSoundSettings, get_settings
from customsound.core.protocols import GameHost, InputAction
from customsound.models.sound import SelectedSound
from customsound.playback.coordinator import PlaybackCoordinator, SessionContext
from customsound.utils.logging import attach_file_log, detach_file_log, dump_groups, get_logger

logger = get_logger("mod")


class CustomSoundMod:
    """
    Replaces the noise key with a random pick from config.json.

    Implements the ModLifecycle protocol.
    """

    def __init__(
        self,
        host: GameHost,
        settings: Optional[CustomSoundSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.host = host
        self.settings = settings or get_settings()
        self._rng = rng
        self.session: Optional[SessionContext] = None
        self.coordinator: Optional[PlaybackCoordinator] = None
        self._original_action: Optional[InputAction] = None
        self._custom_action: Optional[InputAction] = None
        self._file_log: Optional[logging.FileHandler] = None

    @property
    def is_active(self) -> bool:
        return self._custom_action is not None

    def _open_log(self) -> None:
        get_logger().setLevel(self.settings.log_level.upper())
        if self.settings.log_to_file and self._file_log is None:
            self._file_log = attach_file_log(self.settings.base_dir, self.settings.log_name)

    def _close_log(self) -> None:
        detach_file_log(self._file_log)
        self._file_log = None

    def on_load(self) -> None:
        self._open_log()
        logger.info("CustomSound loaded")

    def on_enable(self) -> None:
        if self.is_active:
            # Enabled twice in a row: release the first takeover before making another
            self.on_disable()

        self._open_log()
        groups = load(
            self.settings.base_dir,
            self.settings.sounds_dir,
            config_filename=self.settings.config_filename,
            drop_invalid_groups=self.settings.drop_invalid_groups,
        )

        self.session = SessionContext(groups=groups, rng=self._rng or random.Random())
        self.coordinator = PlaybackCoordinator(self.host, self.session)

        if not groups:
            logger.warning("No sound groups available, the mod will have no effect")
            return

        log_load_result(groups)
        if self.settings.dump_config:
            dump_groups(groups)

        original = self.host.input.find_action(self.settings.trigger_action)
        if original is None:
            logger.error(f"Input action '{self.settings.trigger_action}' not found, the mod will have no effect")
            return

        # Take the key over: silence the stock action, listen on a copy of its binding
        original.disable()
        custom = self.host.input.clone_binding(original)
        custom.subscribe(self.handle_trigger)
        custom.enable()

        self._original_action = original
        self._custom_action = custom
        logger.info("CustomSound enabled")

    def on_disable(self) -> None:
        if self._custom_action is not None:
            self._custom_action.unsubscribe(self.handle_trigger)
            self._custom_action.disable()
        if self._original_action is not None:
            self._original_action.enable()

        self._custom_action = None
        self._original_action = None
        self.coordinator = None
        self.session = None
        logger.info("CustomSound disabled")
        self._close_log()

    def handle_trigger(self, *_args) -> Optional[SelectedSound]:
        """
        Input callback for the noise key.
        """
        if self.coordinator is None:
            return None
        return self.coordinator.trigger()
