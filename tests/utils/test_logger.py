"""Unit tests for logger setup."""

import logging
import sys
from datetime import date
from pathlib import Path

from src.imdb.utils.logger import (
    _CONFIGURED,
    _console_handler,
    _file_handler,
    log_file_path,
    setup_logger,
)


class TestSetupLogger:
    @staticmethod
    def test_returns_logger() -> None:
        logger = setup_logger("test.imdb.unique1", to_file=False)
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.imdb.unique1"

    @staticmethod
    def test_console_only() -> None:
        logger = setup_logger("test.imdb.unique2", to_file=False)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    @staticmethod
    def test_level_by_name() -> None:
        logger = setup_logger("test.imdb.unique3", level="debug", to_file=False)
        assert logger.level == logging.DEBUG

    @staticmethod
    def test_level_by_number() -> None:
        logger = setup_logger("test.imdb.unique4", level=logging.WARNING, to_file=False)
        assert logger.level == logging.WARNING

    @staticmethod
    def test_cache_returns_same_instance() -> None:
        logger1 = setup_logger("test.imdb.cached", to_file=False)
        logger2 = setup_logger("test.imdb.cached", level=logging.ERROR)
        assert logger1 is logger2
        assert "test.imdb.cached" in _CONFIGURED

    @staticmethod
    def test_propagate_disabled() -> None:
        assert setup_logger("test.imdb.unique5", to_file=False).propagate is False

    @staticmethod
    def test_file_handler_added(tmp_path: Path) -> None:
        logger = setup_logger("test.imdb.file", log_dir=tmp_path, to_file=True)
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        for handler in file_handlers:
            handler.close()


class TestHandlers:
    @staticmethod
    def test_console_handler() -> None:
        formatter = logging.Formatter("%(message)s")
        handler = _console_handler(formatter, logging.WARNING)
        assert handler.stream is sys.stderr
        assert handler.level == logging.WARNING
        assert handler.formatter is formatter

    @staticmethod
    def test_file_handler(tmp_path: Path) -> None:
        formatter = logging.Formatter("%(message)s")
        handler = _file_handler("test", formatter, logging.INFO, tmp_path)
        assert isinstance(handler, logging.FileHandler)
        assert handler.level == logging.INFO
        handler.close()

    @staticmethod
    def test_file_handler_unwritable_dir(tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        formatter = logging.Formatter("%(message)s")
        assert _file_handler("test", formatter, logging.INFO, blocker / "logs") is None


class TestLogFilePath:
    @staticmethod
    def test_dated_name(tmp_path: Path) -> None:
        path = log_file_path("imdb.movie", tmp_path)
        assert path == tmp_path / f"imdb_movie_{date.today():%Y%m%d}.log"

    @staticmethod
    def test_creates_directory(tmp_path: Path) -> None:
        log_dir = tmp_path / "nested" / "logs"
        log_file_path("imdb", log_dir)
        assert log_dir.is_dir()
