from __future__ import annotations

import logging

import pytest

from backend.config import Config, _split_csv


def test_split_csv_drops_blanks():
    assert _split_csv(" a, ,b ,") == ["a", "b"]
    assert _split_csv("") == []


def test_validate_config_warns_on_missing_key(monkeypatch, caplog):
    monkeypatch.setattr(Config, "GEMINI_API_KEY", "")

    with caplog.at_level(logging.WARNING, logger="backend.config"):
        Config.validate_config()

    assert not Config.gemini_key_present()
    assert "GEMINI_API_KEY not set" in caplog.text


def test_validate_config_rejects_non_positive_quiz_count(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_QUIZ_COUNT", 0)

    with pytest.raises(ValueError):
        Config.validate_config()


def test_key_present(monkeypatch):
    monkeypatch.setattr(Config, "GEMINI_API_KEY", "abc")

    assert Config.gemini_key_present()
