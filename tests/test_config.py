import logging
from pathlib import Path

import pytest

from config import get_log_dir, get_log_level, get_out_dir
from logging_config import configure_logging, get_logger


def test_get_out_dir_precedence(monkeypatch):
    monkeypatch.delenv("RECIPE_OUT_DIR", raising=False)
    assert get_out_dir() == Path("./out")

    monkeypatch.setenv("RECIPE_OUT_DIR", "/tmp/recipes")
    assert get_out_dir() == Path("/tmp/recipes")
    assert get_out_dir("elsewhere") == Path("elsewhere")


def test_get_log_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level() == logging.INFO

    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError):
        get_log_level()


def test_get_log_dir(monkeypatch):
    monkeypatch.delenv("LOG_DIR", raising=False)
    assert get_log_dir() is None

    monkeypatch.setenv("LOG_DIR", "logs")
    assert get_log_dir() == Path("logs")


def test_configure_logging_adds_file_handler(monkeypatch, tmp_path):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    try:
        base = configure_logging()
        assert len(base.handlers) == 2
        get_logger("tests").warning("hello")
        assert list((tmp_path / "logs").glob("recipe_normalizer_*.log"))
    finally:
        monkeypatch.delenv("LOG_DIR")
        base = configure_logging()
    assert len(base.handlers) == 1


def test_unknown_log_level_only_fails_explicit_configuration(monkeypatch):
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    base = logging.getLogger("recipe_normalizer")
    for handler in list(base.handlers):
        base.removeHandler(handler)
    try:
        assert get_logger("tests").name == "recipe_normalizer.tests"
        assert base.level == logging.INFO
        assert len(base.handlers) == 1

        with pytest.raises(RuntimeError):
            configure_logging()
        assert len(base.handlers) == 1
    finally:
        monkeypatch.delenv("LOG_LEVEL")
        configure_logging()


def test_get_logger_returns_children():
    assert get_logger("recipe_extractor").name == "recipe_normalizer.recipe_extractor"
    assert get_logger().name == "recipe_normalizer"
