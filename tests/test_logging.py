import logging
from pathlib import Path

from textcut.config import LogLevel
from textcut.logging import LOGGER_NAME, _to_logging_level, configure_logger, package_handler
from textcut.truncate.markup import truncate_html


def test_configure_logger_writes_file(tmp_path: Path, clean_textcut_logger) -> None:
    log_file = tmp_path / "logs" / "textcut.log"
    logger = configure_logger(LogLevel.INFO, log_path=log_file)

    logger.info("hello world")

    assert log_file.exists()
    assert "hello world" in log_file.read_text(encoding="utf-8")
    assert logger.propagate is False


def test_configure_logger_is_idempotent(tmp_path: Path, clean_textcut_logger) -> None:
    logger1 = configure_logger(log_path=tmp_path / "a.log")
    handler = package_handler(logger1)
    logger2 = configure_logger(LogLevel.DEBUG, log_path=tmp_path / "b.log")

    assert logger1 is logger2
    assert handler is not None
    assert package_handler(logger2) is handler
    assert [h for h in logger1.handlers if h.get_name() == LOGGER_NAME] == [handler]
    assert logger1.level == logging.DEBUG
    assert handler.level == logging.DEBUG


def test_defaults_to_stream_handler(clean_textcut_logger) -> None:
    logger = configure_logger()

    handler = package_handler(logger)
    assert isinstance(handler, logging.StreamHandler)
    assert not isinstance(handler, logging.FileHandler)


def test_foreign_handler_does_not_block_setup(tmp_path: Path, clean_textcut_logger) -> None:
    foreign = logging.NullHandler()
    clean_textcut_logger.addHandler(foreign)
    try:
        log_file = tmp_path / "with-foreign.log"
        logger = configure_logger(log_path=log_file)
        logger.warning("still written")

        assert foreign in logger.handlers
        assert isinstance(package_handler(logger), logging.FileHandler)
        assert "still written" in log_file.read_text(encoding="utf-8")
    finally:
        clean_textcut_logger.removeHandler(foreign)


def test_truncation_debug_records_reach_package_logger(tmp_path: Path, clean_textcut_logger) -> None:
    log_file = tmp_path / "debug.log"
    configure_logger(LogLevel.DEBUG, log_path=log_file)

    truncate_html("<b>abcdef</b>", 3)

    content = log_file.read_text(encoding="utf-8")
    assert "textcut.truncate.markup" in content
    assert "dropping text run" in content


def test_package_handler_absent_before_setup(clean_textcut_logger) -> None:
    assert package_handler() is None


def test_log_level_mapping() -> None:
    assert _to_logging_level(LogLevel.DEBUG) == logging.DEBUG
    assert _to_logging_level("ERROR") == logging.ERROR
    assert _to_logging_level("verbose") == logging.WARNING
