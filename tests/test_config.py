"""
Tests for showcase.config settings and showcase.utils logging setup.
"""

import logging

import pytest

from showcase.config import Settings
from showcase.log_level import LogLevel
from showcase.utils import CHANGE, has_number, has_text, setup_logging


@pytest.fixture
def restore_showcase_logger():
    logger = logging.getLogger("showcase")
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestSettings:

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("SHOWCASE_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///data/showcase.db"
        assert settings.api_prefix == "/api"
        assert settings.log_level == LogLevel.CHANGES

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("SHOWCASE_DATABASE_URL", "sqlite://")
        monkeypatch.setenv("SHOWCASE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SHOWCASE_PORT", "9001")
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite://"
        assert settings.log_level == LogLevel.DEBUG
        assert settings.port == 9001

    def test_ensure_directories(self, tmp_path) -> None:
        settings = Settings(
            _env_file=None,
            database_url=f"sqlite:///{tmp_path}/db/showcase.db",
            logs_dir=tmp_path / "logs"
        )
        settings.ensure_directories()
        assert (tmp_path / "db").is_dir()
        assert (tmp_path / "logs").is_dir()


class TestLogging:

    def test_change_level_is_registered(self) -> None:
        assert logging.getLevelName(CHANGE) == "CHANGE"
        assert hasattr(logging.Logger, "change")

    def test_none_adds_no_handlers(self, restore_showcase_logger) -> None:
        logger = setup_logging(None, LogLevel.NONE)
        assert logger.handlers == []
        assert not logger.isEnabledFor(logging.CRITICAL)

    def test_changes_level_writes_log_file(self, tmp_path, restore_showcase_logger) -> None:
        logger = setup_logging(tmp_path, LogLevel.CHANGES)
        logger.info("not recorded")
        logger.change("Created artist 1")
        for handler in logger.handlers:
            handler.flush()

        contents = (tmp_path / "showcase.log").read_text()
        assert "CHANGE - Created artist 1" in contents
        assert "not recorded" not in contents


class TestMergeHelpers:

    @pytest.mark.parametrize("value, expected", [
        (None, False), ("", False), ("   ", False), ("Ada", True),
    ])
    def test_has_text(self, value, expected) -> None:
        assert has_text(value) is expected

    @pytest.mark.parametrize("value, expected", [
        (None, False), (0, False), (1843, True), (-5, True),
    ])
    def test_has_number(self, value, expected) -> None:
        assert has_number(value) is expected
