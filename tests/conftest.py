"""Pytest configuration for contools tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to sys.path for test imports
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

CONTOOLS_ENV_VARS = (
    "CONTOOLS_FOREGROUND",
    "CONTOOLS_BACKGROUND",
    "CONTOOLS_COLOR_SYSTEM",
    "CONTOOLS_FORCE_TERMINAL",
    "CONTOOLS_LOG_LEVEL",
    "CONTOOLS_LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate each test from the developer's environment.

    This fixture:
    - Clears CONTOOLS_* environment variables
    - Runs from a temporary directory so no stray .env file is read
    - Resets the global settings and terminal before each test
    """
    for name in CONTOOLS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    from contools.config import reset_settings
    from contools.terminal import reset_terminal

    reset_settings()
    reset_terminal()
    yield
    reset_settings()
    reset_terminal()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Reset structlog and the root handler after each test.

    configure_logging() binds a handler to the captured stderr of the test
    that called it; later tests must not write to that closed stream.
    """
    yield
    from contools.logging import reset_logging

    reset_logging()
