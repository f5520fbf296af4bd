from config import DEFAULT_ENV, get_settings_module, resolve_env


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("PUNCH_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_settings_module_aliases(monkeypatch):
    monkeypatch.setenv("PUNCH_ENV", "prod")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("PUNCH_ENV", "Testing")
    assert get_settings_module() == "config.testing"


def test_explicit_env_beats_environment(monkeypatch):
    monkeypatch.setenv("PUNCH_ENV", "production")
    assert get_settings_module("test") == "config.testing"


def test_unknown_env_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PUNCH_ENV", "staging")
    assert resolve_env() == DEFAULT_ENV
    assert resolve_env("  PROD ") == "production"
