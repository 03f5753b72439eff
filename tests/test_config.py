"""Tests for configuration and logging setup."""

import logging

from library_tui.config import DEFAULT_FONT_SIZE, Config
from library_tui.logging_config import LOG_FILENAME, get_logger, setup_logging


class TestConfig:
    """Test Config load/save."""

    def test_defaults_when_missing(self, tmp_path):
        config = Config.load(tmp_path / "config.json")
        assert config.data_dir is None
        assert config.font_size == DEFAULT_FONT_SIZE
        assert config.data_path is None
        assert config.progress_path.name == "progress.json"

    def test_roundtrip(self, tmp_path):
        path = tmp_path / "config.json"
        Config(data_dir=str(tmp_path), font_size="lg", progress_file=str(tmp_path / "p.json")).save(path)

        config = Config.load(path)
        assert config.data_path == tmp_path
        assert config.font_size == "lg"
        assert config.progress_path == tmp_path / "p.json"

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"font_size": "xl"}', encoding="utf-8")
        config = Config.load(path)
        assert config.font_size == "xl"
        assert config.log_path.name == "logs"

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("not json", encoding="utf-8")
        assert Config.load(path).font_size == DEFAULT_FONT_SIZE

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert Config.load(path).font_size == DEFAULT_FONT_SIZE


class TestLogging:
    """Test file logging setup."""

    def test_writes_to_file(self, tmp_path):
        logger = setup_logging(tmp_path / "logs")
        get_logger("tests").info("hello from tests")
        for handler in logger.handlers:
            handler.flush()
        content = (tmp_path / "logs" / LOG_FILENAME).read_text(encoding="utf-8")
        assert "hello from tests" in content
        assert "library_tui.tests" in content
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_rotates_large_log(self, tmp_path):
        log_dir = tmp_path / "logs"
        log_dir.mkdir()
        (log_dir / LOG_FILENAME).write_bytes(b"x" * (10 * 1024 * 1024 + 1))
        logger = setup_logging(log_dir)
        assert (log_dir / f"{LOG_FILENAME}.1").exists()
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_get_logger_namespacing(self):
        assert get_logger("library_tui.state").name == "library_tui.state"
        assert get_logger("x").name == "library_tui.x"
        assert isinstance(get_logger("x"), logging.Logger)
