# This file initializes the 'host' module.
# A host is whatever runs the mod: the game itself, or the headless stand-in
# defined here for the CLI and for tests.

from customsound.host.headless import (
    CaptionCall,
    HeadlessAction,
    HeadlessCharacter,
    HeadlessHost,
    HeadlessInput,
)

__all__ = [
    "CaptionCall",
    "HeadlessAction",
    "HeadlessCharacter",
    "HeadlessHost",
    "HeadlessInput",
]
