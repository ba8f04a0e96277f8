import json
import logging
import os
from typing import Iterable, Optional, TYPE_CHECKING

from rich.logging import RichHandler

if TYPE_CHECKING:
    from customsound.models.sound import SoundGroup

# We use 'rich' to make our logs look nice in the terminal (colors, timestamps).
# Next to that, the mod appends plain lines to <install>/<name>.log so players
# can send the file along with a bug report.

LOG_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: The name of the logger. If None, returns the root customsound logger.

    Returns:
        A configured logger instance.
    """
    if name is None:
        return logging.getLogger("customsound")
    return logging.getLogger(f"customsound.{name}")


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the console logging system.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR).
               DEBUG shows everything. ERROR shows only critical problems.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",  # We only want the message, Rich adds the timestamp/level
        datefmt="[%X]",        # Time format (e.g., [14:30:05])
        handlers=[
            RichHandler(rich_tracebacks=True, markup=False)
        ]
    )

    logger = logging.getLogger("customsound")
    logger.setLevel(level)


def attach_file_log(directory: str, name: str) -> Optional[logging.FileHandler]:
    """
    Append every customsound log record to <directory>/<name>.log.

    Calling this twice for the same file does not add a second handler.

    Args:
        directory: Folder for the log file. Empty means "unknown", nothing is attached.
        name: File name without the .log extension.

    Returns:
        The file handler, or None when nothing was attached.
    """
    if not directory:
        return None

    path = os.path.abspath(os.path.join(directory, f"{name}.log"))
    logger = get_logger()

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            return handler

    try:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as e:
        logger.warning(f"Cannot open log file {path}: {e}")
        return None

    handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
    logger.addHandler(handler)
    return handler


def detach_file_log(handler: Optional[logging.FileHandler]) -> None:
    if handler is None:
        return
    get_logger().removeHandler(handler)
    handler.close()


def dump_groups(groups: Iterable["SoundGroup"], logger: Optional[logging.Logger] = None) -> str:
    """
    Log the validated configuration as pretty-printed JSON.

    Returns:
        The JSON text that was logged.
    """
    logger = logger or get_logger("config")
    payload = {
        "soundGroups": [
            group.model_dump(mode="json", by_alias=True) for group in groups
        ]
    }
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    logger.info(f"Validated configuration:\n{text}")
    return text
