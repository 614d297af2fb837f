import logging
import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"

# Ensure src/ is importable when running tests without installing the package.
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def _isolate_textcut_home(monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path):
    """Point TEXTCUT_HOME at a per-test sandbox and clear TEXTCUT_* overrides."""

    home = tmp_path / "textcut-home"
    monkeypatch.setenv("TEXTCUT_HOME", str(home))
    for key in (
        "TEXTCUT_MAX_CHARS",
        "TEXTCUT_ELLIPSIS_HTML",
        "TEXTCUT_ELLIPSIS_TEXT",
        "TEXTCUT_HTML_MODE",
        "TEXTCUT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def clean_textcut_logger():
    """Remove the package's own handler before and after a test."""

    from textcut.logging import LOGGER_NAME, package_handler

    logger = logging.getLogger(LOGGER_NAME)

    def _reset() -> None:
        handler = package_handler(logger)
        if handler is not None:
            logger.removeHandler(handler)
            handler.close()

    _reset()
    yield logger
    _reset()
