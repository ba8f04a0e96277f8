import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

# This file contains "fixtures" for our tests.
# Fixtures are helper functions that set up the environment before a test runs
# and clean it up afterwards. Most tests need a fake mod install: a folder with
# a config.json and a sounds/ subfolder.


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mod_dir(temp_dir: Path) -> Path:
    """An empty mod install: just the sounds folder."""
    (temp_dir / "sounds").mkdir()
    return temp_dir


@pytest.fixture
def write_config(mod_dir: Path) -> Callable[[Any], Path]:
    """
    Returns a function that writes config.json into the mod install.
    Dicts and lists are dumped as JSON, strings are written as-is.
    """
    def _write(content: Any) -> Path:
        path = mod_dir / "config.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def add_sounds(mod_dir: Path) -> Callable[..., list]:
    """
    Returns a function that creates (empty) sound files under sounds/.
    """
    def _add(*names: str) -> list:
        paths = []
        for name in names:
            path = mod_dir / "sounds" / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"OggS")
            paths.append(str(path))
        return paths
    return _add


@pytest.fixture
def info_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog with INFO enabled on the customsound logger."""
    caplog.set_level(logging.INFO, logger="customsound")
    return caplog
