from __future__ import annotations


class CustomSoundError(Exception):
    """
    Base exception for all errors in the CustomSound mod.
    All other custom exceptions will inherit from this one.
    This allows us to catch ANY mod-specific error with `except CustomSoundError:`.
    """
    pass


class ConfigError(CustomSoundError):
    """
    Raised when there is a problem with config.json.
    None of these are fatal: the loader logs them and continues with no sound groups.
    """
    pass


class ConfigMissingError(ConfigError):
    """
    Raised when config.json does not exist next to the mod.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Configuration file {path} does not exist")


class ConfigEmptyError(ConfigError):
    """
    Raised when config.json exists but contains only whitespace.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Configuration file {path} is empty")


class ConfigParseError(ConfigError):
    """
    Raised when config.json is not valid JSON or does not match the schema.
    Examples: missing comma, "radius": "far", "soundGroups": 3.
    """

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"JSON parse error in {path}: {detail}")


class ConfigGroupsEmptyError(ConfigError):
    """
    Raised when config.json parses but holds no usable sound groups.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Configuration file {path} contains no sound groups")


class NoSelectableGroupError(CustomSoundError):
    """
    No group can be drawn: the list is empty or every weight is 0.
    This is an expected outcome, the trigger simply does nothing.
    """

    def __init__(self, message: str = "No selectable sound group (empty list or all weights are 0)"):
        super().__init__(message)


class MissingAssetError(CustomSoundError):
    """
    A sound file referenced by a group is not on disk.
    The entry is replaced with an empty string; the rest of the group survives.
    """

    def __init__(self, entry: str, path: str):
        self.entry = entry
        self.path = path
        super().__init__(f"Sound file does not exist: {entry} (full path: {path})")
