import json
import logging

import pytest
from rich.logging import RichHandler

from gotopts.utils import equal_to_any, select_not_none, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_select_not_none():
    assert select_not_none([1, 2, 3, 4], lambda n: n * 10 if n % 2 else None) == [
        10,
        30,
    ]
    assert select_not_none([], lambda n: n) == []


def test_select_not_none_keeps_falsy_results():
    assert select_not_none(["", "a"], lambda s: s) == ["", "a"]


@pytest.mark.parametrize(
    "target, values, expected",
    [
        ("t", ("1", "t"), True),
        ("1", ("1", "t"), True),
        ("0", ("1", "t"), False),
        (None, ("1", None), False),
        ("x", (), False),
    ],
)
def test_equal_to_any(target, values, expected):
    assert equal_to_any(target, *values) is expected


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="fancy")


def test_setup_logging_cli_mode(restore_root_logger, monkeypatch):
    monkeypatch.delenv("GOTOPTS_LOG_LEVEL", raising=False)
    setup_logging(mode="cli")
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_level_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("GOTOPTS_LOG_LEVEL", "debug")
    setup_logging(mode="cli")
    assert restore_root_logger.handlers[0].level == logging.DEBUG


def test_setup_logging_invalid_level(restore_root_logger, monkeypatch):
    monkeypatch.setenv("GOTOPTS_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging(mode="cli")


def test_setup_logging_mode_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("GOTOPTS_LOG_MODE", "json")
    monkeypatch.delenv("GOTOPTS_LOG_LEVEL", raising=False)
    setup_logging()
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], RichHandler)


def test_setup_logging_json_file(restore_root_logger, monkeypatch, tmp_path):
    monkeypatch.delenv("GOTOPTS_LOG_LEVEL", raising=False)
    log_file = tmp_path / "gotopts.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    assert len(restore_root_logger.handlers) == 2

    logging.getLogger("gotopts").debug("hello %s", "there")
    for handler in restore_root_logger.handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records[-1]["message"] == "hello there"
    assert records[-1]["name"] == "gotopts"
    assert records[-1]["levelname"] == "DEBUG"
