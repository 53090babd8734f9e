"""Tests for configuration loading."""

import pytest

from tealoop.config import Config
from tealoop.constants import DEFAULT_PROBE_TIMEOUT, DEFAULT_PROBE_URL


@pytest.fixture
def clean_env(monkeypatch, temp_dir):
    """Run without TEALOOP_* variables and without a stray .env file."""
    for name in (
        "TEALOOP_PROBE_URL",
        "TEALOOP_PROBE_TIMEOUT",
        "TEALOOP_SCAN_SUFFIX",
        "TEALOOP_RESPECT_IGNORE",
        "TEALOOP_BLINK_INTERVAL",
        "TEALOOP_ALT_SCREEN",
        "TEALOOP_LOG_EVENTS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr("tealoop.config.load_dotenv", lambda: False)
    return monkeypatch


def test_defaults(clean_env):
    """Without environment the defaults apply."""
    config = Config.load()

    assert config.probe_url == DEFAULT_PROBE_URL
    assert config.probe_timeout == DEFAULT_PROBE_TIMEOUT
    assert config.scan_suffix == ".pdf"
    assert not config.respect_ignore
    assert config.validate() == []


def test_environment_overrides(clean_env):
    """TEALOOP_* variables override the defaults."""
    clean_env.setenv("TEALOOP_PROBE_URL", "http://localhost:8080/health")
    clean_env.setenv("TEALOOP_PROBE_TIMEOUT", "2.5")
    clean_env.setenv("TEALOOP_RESPECT_IGNORE", "yes")
    clean_env.setenv("TEALOOP_LOG_EVENTS", "true")

    config = Config.load()

    assert config.probe_url == "http://localhost:8080/health"
    assert config.probe_timeout == 2.5
    assert config.respect_ignore
    assert config.log_events
    assert not config.alt_screen


def test_bad_number_raises(clean_env):
    """Unparseable numbers are a load error."""
    clean_env.setenv("TEALOOP_PROBE_TIMEOUT", "soon")

    with pytest.raises(ValueError):
        Config.load()


def test_validate_reports_errors():
    """Invalid settings are listed, not raised."""
    config = Config(probe_url="ftp://example.test", probe_timeout=0, scan_suffix="")

    errors = config.validate()

    assert "probe_url must start with http:// or https://" in errors
    assert "probe_timeout must be positive" in errors
    assert "scan_suffix must not be empty" in errors


def test_to_dict():
    """to_dict lists every setting."""
    assert set(Config().to_dict()) == {
        "probe_url",
        "probe_timeout",
        "scan_suffix",
        "respect_ignore",
        "blink_interval",
        "alt_screen",
        "log_events",
    }
