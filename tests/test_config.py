import pytest
from pydantic import ValidationError
from stringdict.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("STRINGDICT_KEY_PREFIX", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings.load()
    assert settings.KEY_PREFIX == "string-dict_"
    assert settings.LOG_LEVEL == "INFO"


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("STRINGDICT_KEY_PREFIX", "ns:")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.load()
    assert settings.KEY_PREFIX == "ns:"
    assert settings.LOG_LEVEL == "DEBUG"


def test_rejects_empty_prefix():
    with pytest.raises(ValidationError):
        Settings(KEY_PREFIX="")


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
        Settings(LOG_LEVEL="verbose")
