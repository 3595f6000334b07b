import logging

import pytest

import config


def test_unknown_log_level_raises():
    with pytest.raises(ValueError):
        config.configure_logging("DEBG")


def test_log_level_names_are_case_insensitive(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    config.configure_logging("debug")
    config.configure_logging(logging.ERROR)

    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.ERROR
