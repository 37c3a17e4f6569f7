import pytest

from dlms_enums.conf import ENVIRONMENT_VARIABLE, Settings, global_settings
from dlms_enums.exceptions import ImproperlyConfigured


def test_defaults(monkeypatch):
    monkeypatch.delenv(ENVIRONMENT_VARIABLE, raising=False)
    settings = Settings()
    assert settings.FLAG_SEPARATOR == global_settings.FLAG_SEPARATOR == ","
    assert settings.FLAG_ZERO_SPELLING == "None"
    assert settings.SETTINGS_MODULE is None


def test_module_from_environment(monkeypatch, settings_module):
    name = settings_module("enum_settings_env", 'FLAG_SEPARATOR = ";"\n')
    monkeypatch.setenv(ENVIRONMENT_VARIABLE, name)
    settings = Settings()
    assert settings.FLAG_SEPARATOR == ";"
    assert settings.FLAG_ZERO_SPELLING == "None"
    assert repr(settings) == '<Settings "enum_settings_env">'


def test_only_upper_case_settings_are_loaded(settings_module):
    name = settings_module(
        "enum_settings_case", 'FLAG_ZERO_SPELLING = "Nothing"\nflag_separator = "|"\n'
    )
    settings = Settings(name)
    assert settings.FLAG_ZERO_SPELLING == "Nothing"
    assert settings.FLAG_SEPARATOR == ","
    assert not hasattr(settings, "flag_separator")


def test_missing_module_raises(monkeypatch):
    monkeypatch.setenv(ENVIRONMENT_VARIABLE, "no_such_settings_module")
    with pytest.raises(ImproperlyConfigured):
        Settings()


def test_empty_separator_raises(settings_module):
    name = settings_module("enum_settings_empty", 'FLAG_SEPARATOR = ""\n')
    with pytest.raises(ImproperlyConfigured):
        Settings(name)
