"""Tests for settings loading and logging bootstrap."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from config import Settings, load_settings
from logging_setup import init_logging


def test_defaults_when_environment_is_empty() -> None:
    assert load_settings({}) == Settings()


def test_values_are_read_and_coerced() -> None:
    settings = load_settings({
        "ALGOTRACE_DEFAULT_SPEED": "turbo",
        "ALGOTRACE_MAX_ARRAY_LENGTH": "12",
        "ALGOTRACE_LOG_LEVEL": "debug",
        "ALGOTRACE_DEBUG": "yes",
        "ALGOTRACE_LOG_FILE": "/tmp/algotrace.log",
        "ALGOTRACE_PORT": "8080",
    })
    assert settings.default_speed == "turbo"
    assert settings.max_array_length == 12
    assert settings.log_level == "DEBUG"
    assert settings.debug is True
    assert settings.log_file == "/tmp/algotrace.log"
    assert settings.port == 8080


@pytest.mark.parametrize(
    ("name", "raw"),
    [
        ("DEFAULT_SPEED", "warp"),
        ("MAX_ARRAY_LENGTH", "many"),
        ("MAX_VALUE", "-5"),
        ("LOG_LEVEL", "LOUD"),
        ("DEBUG", "maybe"),
    ],
)
def test_bad_values_fall_back_to_defaults(name: str, raw: str, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="config"):
        settings = load_settings({f"ALGOTRACE_{name}": raw})
    assert settings == Settings()
    assert f"ALGOTRACE_{name}" in caplog.text


def test_empty_values_are_ignored() -> None:
    assert load_settings({"ALGOTRACE_PORT": ""}).port == 5000


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_init_logging_attaches_rotating_file_handler(tmp_path, clean_root_logger) -> None:
    path = init_logging("debug", str(tmp_path / "logs" / "app.log"))
    assert path == tmp_path / "logs" / "app.log"
    assert path.parent.is_dir()
    assert clean_root_logger.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in clean_root_logger.handlers)


def test_init_logging_is_idempotent(clean_root_logger) -> None:
    init_logging("INFO")
    count = len(clean_root_logger.handlers)
    init_logging("INFO")
    assert len(clean_root_logger.handlers) == count
    assert init_logging("nonsense") is None
    assert clean_root_logger.level == logging.INFO
