# This file initializes the 'selection' module.
# It turns a list of validated sound groups into one random SelectedSound.

from customsound.selection.selector import pick, select_weighted

__all__ = [
    "pick",
    "select_weighted",
]
