"""
Sound Group Configuration Loader

This module reads config.json, checks every sound file it mentions against the
disk, and hands back a list of ready-to-use SoundGroup objects.

Think of it like a librarian checking a reading list:
- You write the list (config.json) with file names relative to the sounds folder
- This module looks each file up and writes down where it actually is
- Books that are not on the shelf are crossed out ('') but keep their line,
  so the list keeps its shape

Loading never raises. A missing, empty or broken config.json is logged and
the mod simply runs with no sound groups (it does nothing when triggered).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from customsound.core.exceptions import (
    ConfigEmptyError,
    ConfigError,
    ConfigGroupsEmptyError,
    ConfigMissingError,
    ConfigParseError,
    MissingAssetError,
)
from customsound.core.types import SoundType
from customsound.models.sound import ConfigRoot, SoundGroup
from customsound.utils.logging import get_logger
from customsound.utils.paths import sounds_dir_for

logger = get_logger("config")

CONFIG_FILENAME = "config.json"

# Sentinel stored in place of a sound whose file was not found
MISSING_SOUND = ""


# =============================================================================
# READING
# =============================================================================


def read_config(config_path: str | Path) -> ConfigRoot:
    """
    Read and decode config.json, raising on any problem.

    Args:
        config_path: Full path of the configuration file.

    Returns:
        The decoded document, before any file checks.

    Raises:
        ConfigMissingError: The file does not exist.
        ConfigEmptyError: The file is blank.
        ConfigParseError: The file is not valid JSON or does not fit the schema.
    """
    path = Path(config_path)

    if not path.is_file():
        raise ConfigMissingError(str(path))

    # utf-8-sig: editors on Windows like to prepend a BOM
    text = path.read_text(encoding="utf-8-sig")
    if not text.strip():
        raise ConfigEmptyError(str(path))

    try:
        return ConfigRoot.model_validate_json(text)
    except ValidationError as e:
        raise ConfigParseError(str(path), format_validation_error(e)) from e


def read_groups(config_path: str | Path) -> List[SoundGroup]:
    """
    Like read_config(), but returns the non-null groups and insists there is one.

    Raises:
        ConfigGroupsEmptyError: The document holds no sound groups.
    """
    root = read_config(config_path)
    groups = [g for g in root.sound_groups if g is not None]
    if not groups:
        raise ConfigGroupsEmptyError(str(config_path))
    return groups


def format_validation_error(error: ValidationError) -> str:
    """
    Format Pydantic validation errors into human-readable messages.
    """
    lines = []
    for err in error.errors():
        # Build the field path (e.g., "soundGroups → 0 → radius")
        loc = " → ".join(str(part) for part in err["loc"])
        msg = err["msg"]
        lines.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(lines)


# =============================================================================
# VALIDATION
# =============================================================================


def resolve_sound_type(raw: Optional[str]) -> SoundType:
    """
    Map a soundType string to a category, ignoring case.
    Unknown or missing names fall back to SoundType.UNKNOWN_NOISE.
    """
    return SoundType.from_name(raw) or SoundType.UNKNOWN_NOISE


def default_weight(group: SoundGroup) -> int:
    """
    Weight used when the config does not give one: bigger groups are
    proportionally more likely to be picked.
    """
    return max(1, len(group.sounds)) * max(1, len(group.texts))


def _resolve_sound_path(entry: str, sounds_dir: str) -> str:
    """
    Turn one config entry into an absolute path, or MISSING_SOUND.
    """
    if os.path.isabs(entry):
        candidate = entry
    elif sounds_dir:
        candidate = os.path.join(sounds_dir, entry)
    else:
        logger.warning(f"Sounds directory is unknown, cannot resolve {entry}")
        return MISSING_SOUND

    if os.path.isfile(candidate):
        logger.debug(f"Validated - {entry}")
        return os.path.abspath(candidate)

    logger.warning(f"{MissingAssetError(entry, candidate)}, replaced with an empty string")
    return MISSING_SOUND


def validate_group(group: SoundGroup, sounds_dir: str) -> SoundGroup:
    """
    Check one group against the disk.

    - Every non-empty sound entry becomes an absolute path, or '' when the file
      is missing. Slots are never removed, so list positions stay the same.
    - soundType is resolved to a SoundType.
    - A negative weight is replaced with default_weight().

    Running this on an already validated group changes nothing.

    Args:
        group: The group as decoded from config.json.
        sounds_dir: Folder relative sound entries are looked up in.

    Returns:
        A new, validated SoundGroup. The input is left untouched.
    """
    sounds = tuple(
        entry if not entry else _resolve_sound_path(entry, sounds_dir)
        for entry in group.sounds
    )

    weight = group.weight if group.weight >= 0 else default_weight(group)

    validated = group.model_copy(update={
        "sounds": sounds,
        "sound_type": resolve_sound_type(group.sound_type_raw),
        "weight": weight,
    })

    logger.info(
        f"Sound group '{group.display_name}' processed: "
        f"{validated.valid_sound_count}/{len(sounds)} valid sound files"
    )
    return validated


def validate_groups(
    groups: List[Optional[SoundGroup]],
    sounds_dir: str,
    drop_invalid_groups: bool = False,
) -> List[SoundGroup]:
    """
    Validate every group, keeping their order.

    Null entries are skipped. By default every group is kept, even one whose
    files are all missing (it still offers its captions, and the selector
    treats it as having no sound). With drop_invalid_groups=True, groups that
    listed sound files but ended up with none valid are removed; groups that
    never listed any sounds (caption-only) are always kept.
    """
    validated = []
    for group in groups:
        if group is None:
            continue

        result = validate_group(group, sounds_dir)

        configured = any(group.sounds)
        if drop_invalid_groups and configured and result.valid_sound_count == 0:
            logger.warning(
                f"Sound group '{group.display_name}' dropped: none of its sound files exist"
            )
            continue

        validated.append(result)
    return validated


# =============================================================================
# LOADING
# =============================================================================


def load(
    base_path: str | Path,
    sounds_dir: Optional[str] = None,
    *,
    config_filename: str = CONFIG_FILENAME,
    drop_invalid_groups: bool = False,
) -> List[SoundGroup]:
    """
    Load and validate the sound groups of a mod installation.

    This is the main function you'll use. It:
    1. Reads <base_path>/config.json
    2. Decodes it into SoundGroup objects in one pass
    3. Checks every sound file against <sounds_dir> (default <base_path>/sounds)
    4. Returns the validated groups, in file order

    Args:
        base_path: The mod's install directory.
        sounds_dir: Where sound files live. Defaults to <base_path>/sounds.
        config_filename: Name of the configuration file.
        drop_invalid_groups: See validate_groups().

    Returns:
        The validated groups, or [] if anything went wrong. Never raises.

    Example:
        groups = load(get_install_dir())
        selected = pick(groups)
    """
    base = str(base_path) if base_path else ""
    if not base:
        logger.error("Install directory is unknown, no configuration to load")
        return []
    if sounds_dir is None:
        sounds_dir = sounds_dir_for(base)

    config_path = os.path.join(base, config_filename)

    try:
        raw_groups = read_groups(config_path)
    except ConfigMissingError as e:
        logger.error(str(e))
        return []
    except ConfigParseError as e:
        logger.error(f"JSON parse error: {e.detail}")
        return []
    except ConfigError as e:
        logger.warning(str(e))
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading configuration file {config_path}: {e}")
        return []

    groups = validate_groups(raw_groups, sounds_dir, drop_invalid_groups=drop_invalid_groups)

    if not groups:
        logger.warning("All sound groups are invalid (sound files missing)")
        return []

    logger.info(f"Loaded {len(groups)} sound groups")
    return groups


def log_load_result(groups: List[SoundGroup], log: Optional[logging.Logger] = None) -> None:
    """
    One summary line per group, for the diagnostics log.
    """
    log = log or logger
    for index, group in enumerate(groups):
        log.info(
            f"[{index}] {group.display_name}: sounds={group.valid_sound_count}/{len(group.sounds)} "
            f"texts={len(group.texts)} type={group.sound_type.value} "
            f"radius={group.radius} weight={group.weight}"
        )


# =============================================================================
# TEMPLATE GENERATION
# =============================================================================


def get_template_config() -> str:
    """
    Generate a starter config.json.

    This is used by 'customsound config init'. JSON has no comments, so the
    template explains itself through its group names.

    Returns:
        A string containing a complete config.json.
    """
    return '''{
  "soundGroups": [
    {
      "name": "quacks",
      "sounds": ["quack1.ogg", "quack2.ogg", "quack3.ogg"],
      "texts": ["Quack!", "QUACK!", null],
      "soundType": "unknowNoise",
      "radius": 15
    },
    {
      "name": "battle cry (rare, loud)",
      "sounds": ["battle_cry.ogg"],
      "texts": ["For the pond!"],
      "soundType": "combat",
      "radius": 30,
      "weight": 1
    },
    {
      "name": "caption only",
      "sounds": [],
      "texts": ["...", "*waddles*"],
      "weight": 2
    },
    {
      "name": "disabled group",
      "sounds": ["secret.ogg"],
      "weight": 0
    }
  ]
}
'''


# =============================================================================
# MODULE EXPORTS
# =============================================================================

__all__ = [
    # Main function
    "load",
    # Steps
    "read_config",
    "read_groups",
    "validate_groups",
    "validate_group",
    "resolve_sound_type",
    "default_weight",
    "log_load_result",
    # Utilities
    "CONFIG_FILENAME",
    "MISSING_SOUND",
    "format_validation_error",
    "get_template_config",
]
