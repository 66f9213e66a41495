import logging

import pytest

from app.config import env_flag
from app.logging_setup import setup_logging


@pytest.mark.parametrize("raw,expected", [
    ("1", True),
    ("true", True),
    (" Yes ", True),
    ("ON", True),
    ("0", False),
    ("false", False),
    ("", False),
])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("TASKS_TEST_FLAG", raw)
    assert env_flag("TASKS_TEST_FLAG") is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("TASKS_TEST_FLAG", raising=False)
    assert env_flag("TASKS_TEST_FLAG") is False
    assert env_flag("TASKS_TEST_FLAG", default=True) is True


def test_setup_logging_replaces_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
