"""Tests for persisted logging configuration."""

import logging

import pytest

from llama_common.logging import config


def test_missing_config_is_empty(tmp_path):
    assert config.load_config(tmp_path / "missing.json") == {}


def test_invalid_or_non_object_config_is_empty(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert config.load_config(bad) == {}

    listy = tmp_path / "list.json"
    listy.write_text("[1, 2]")
    assert config.load_config(listy) == {}


def test_save_and_load_log_level(tmp_path):
    path = tmp_path / "nested" / "logging.json"
    assert config.save_log_level("warning", path) == path
    assert config.load_config(path) == {"log_level": "WARNING"}
    assert config.load_log_level(path) == logging.WARNING


def test_save_log_level_keeps_other_keys(tmp_path):
    path = tmp_path / "logging.json"
    config.save_config({"other": 1}, path)
    config.save_log_level(logging.DEBUG, path)
    assert config.load_config(path) == {"other": 1, "log_level": "DEBUG"}


def test_unknown_level_rejected(tmp_path):
    with pytest.raises(ValueError):
        config.save_log_level("LOUD", tmp_path / "logging.json")


def test_load_log_level_ignores_garbage(tmp_path):
    path = tmp_path / "logging.json"
    config.save_config({"log_level": "LOUD"}, path)
    assert config.load_log_level(path) is None


def test_config_path_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.delenv("LLAMA_COMMON_LOG_CONFIG", raising=False)
    monkeypatch.setenv("LLAMA_COMMON_CONFIG_DIR", str(tmp_path / "cfg"))
    assert config.config_path() == tmp_path / "cfg" / "logging.json"

    monkeypatch.setenv("LLAMA_COMMON_LOG_CONFIG", str(tmp_path / "explicit.json"))
    assert config.config_path() == tmp_path / "explicit.json"
    assert config.config_path(tmp_path / "arg.json") == tmp_path / "arg.json"
