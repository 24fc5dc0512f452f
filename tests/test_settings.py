from pathlib import Path

import pytest

import settings

ENV_VARS = [
    "WORDLE_LOG_DIR",
    "WORDLE_REQUEST_DELAY",
    "WORDLE_REQUEST_TIMEOUT",
    "WORDLE_TIMEZONE",
    "DEBUG_MODE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


def test_store_path_and_interval_are_fixed():
    assert settings.WORDS_FILE == settings.BASE_DIR / "wordle-words.json"
    assert settings.CHECK_INTERVAL == 1440 * 60


def test_defaults():
    s = settings.get_settings()
    assert s.log_dir == settings.BASE_DIR / "logs"
    assert s.request_delay == 1.0
    assert s.request_timeout is None
    assert s.timezone is None
    assert s.debug_mode is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WORDLE_LOG_DIR", "/var/log/wordle")
    monkeypatch.setenv("WORDLE_REQUEST_DELAY", "0.25")
    monkeypatch.setenv("WORDLE_REQUEST_TIMEOUT", "15")
    monkeypatch.setenv("WORDLE_TIMEZONE", "America/New_York")
    monkeypatch.setenv("DEBUG_MODE", "true")

    s = settings.get_settings()
    assert s.log_dir == Path("/var/log/wordle")
    assert s.request_delay == 0.25
    assert s.request_timeout == 15.0
    assert s.timezone == "America/New_York"
    assert s.debug_mode is True


def test_interval_and_store_path_ignore_the_environment(monkeypatch):
    monkeypatch.setenv("WORDLE_WORDS_FILE", "/data/words.json")
    monkeypatch.setenv("WORDLE_CHECK_INTERVAL_MINUTES", "60")

    s = settings.get_settings()
    assert not hasattr(s, "words_file")
    assert not hasattr(s, "check_interval_minutes")
    assert settings.WORDS_FILE == settings.BASE_DIR / "wordle-words.json"
    assert settings.CHECK_INTERVAL == 1440 * 60


def test_bad_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("WORDLE_REQUEST_DELAY", "soon")
    monkeypatch.setenv("WORDLE_REQUEST_TIMEOUT", "")

    s = settings.get_settings()
    assert s.request_delay == 1.0
    assert s.request_timeout is None


def test_settings_are_cached():
    assert settings.get_settings() is settings.get_settings()
