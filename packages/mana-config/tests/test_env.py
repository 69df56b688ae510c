"""Tests for env_or_default."""
from __future__ import annotations

import logging

from mana_config import env_or_default

VAR = "MANA_TEST_SETTING"


def test_unset_gives_default(monkeypatch):
    monkeypatch.delenv(VAR, raising=False)
    assert env_or_default(VAR, "fallback") == "fallback"
    assert env_or_default(VAR, 7) == 7


def test_blank_gives_default(monkeypatch):
    monkeypatch.setenv(VAR, "   ")
    assert env_or_default(VAR, 2.5) == 2.5


def test_string(monkeypatch):
    monkeypatch.setenv(VAR, " /srv/mana.yaml ")
    assert env_or_default(VAR, "x") == "/srv/mana.yaml"


def test_int(monkeypatch):
    monkeypatch.setenv(VAR, "42")
    assert env_or_default(VAR, 0) == 42


def test_float(monkeypatch):
    monkeypatch.setenv(VAR, "0.75")
    assert env_or_default(VAR, 1.0) == 0.75


def test_invalid_number_logged(monkeypatch, caplog):
    monkeypatch.setenv(VAR, "many")
    with caplog.at_level(logging.WARNING, logger="mana_config.env"):
        assert env_or_default(VAR, 5) == 5
    assert VAR in caplog.text


def test_bool(monkeypatch):
    for raw in ("1", "true", "YES", "On"):
        monkeypatch.setenv(VAR, raw)
        assert env_or_default(VAR, False) is True
    for raw in ("0", "false", "nope"):
        monkeypatch.setenv(VAR, raw)
        assert env_or_default(VAR, True) is False
