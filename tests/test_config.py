from __future__ import annotations

import pytest

from vernum.core.config import (
    VernumConfig,
    get_config,
    parse_bool,
    set_config,
    system_case_sensitive,
)


@pytest.mark.parametrize(
    "platform, expected",
    [("linux", True), ("freebsd13", True), ("win32", False), ("cygwin", False), ("darwin", False)],
)
def test_system_case_sensitive(platform, expected):
    assert system_case_sensitive(platform) is expected


def test_defaults():
    config = VernumConfig()
    assert config.case_sensitive is None
    assert config.version_separator == "."
    assert config.log_level == "WARNING"


def test_resolve_case_sensitive_prefers_explicit_value():
    assert VernumConfig(case_sensitive=False).resolve_case_sensitive() is False
    assert VernumConfig(case_sensitive=True).resolve_case_sensitive() is True
    assert VernumConfig().resolve_case_sensitive() is system_case_sensitive()


def test_from_env(monkeypatch):
    monkeypatch.setenv("VERNUM_CASE_SENSITIVE", "no")
    monkeypatch.setenv("VERNUM_VERSION_SEPARATOR", "_")
    monkeypatch.setenv("VERNUM_LOG_LEVEL", "debug")

    config = VernumConfig.from_env()

    assert config.case_sensitive is False
    assert config.version_separator == "_"
    assert config.log_level == "DEBUG"


def test_from_env_rejects_bad_boolean(monkeypatch):
    monkeypatch.setenv("VERNUM_CASE_SENSITIVE", "maybe")
    with pytest.raises(ValueError):
        VernumConfig.from_env()


def test_parse_bool():
    assert parse_bool(" TRUE ") is True
    assert parse_bool("0") is False


def test_get_config_lazily_reads_env(monkeypatch):
    monkeypatch.setenv("VERNUM_CASE_SENSITIVE", "1")
    set_config(None)
    assert get_config().case_sensitive is True
    assert get_config() is get_config()
