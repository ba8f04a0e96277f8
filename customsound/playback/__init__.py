# This file initializes the 'playback' module.
# It turns a selection into calls on the game: sound, AI noise and caption.

from customsound.playback.coordinator import PlaybackCoordinator, SessionContext

__all__ = [
    "PlaybackCoordinator",
    "SessionContext",
]
