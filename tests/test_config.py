import pytest

from core.config import DEFAULT_MODEL, DEFAULT_PORT, ConfigurationError, Settings


def test_defaults():
    settings = Settings.from_env({"GEMINI_API_KEY": "secret"})
    assert settings.gemini_api_key == "secret"
    assert settings.gemini_model == DEFAULT_MODEL
    assert settings.port == DEFAULT_PORT == 3000
    assert settings.host == "0.0.0.0"
    assert settings.mcp_path == "/mcp"
    assert settings.request_timeout_ms is None
    assert settings.log_level == "INFO"


def test_overrides():
    settings = Settings.from_env({
        "GEMINI_API_KEY": "secret",
        "GEMINI_MODEL": "gemini-2.0-flash",
        "GEMINI_TIMEOUT_MS": "15000",
        "HOST": "127.0.0.1",
        "PORT": "8080",
        "LOG_LEVEL": "debug",
    })
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.request_timeout_ms == 15000
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("env", [{}, {"GEMINI_API_KEY": ""}, {"GEMINI_API_KEY": "   "}])
def test_missing_api_key(env):
    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY is not set"):
        Settings.from_env(env)


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_bad_port(port):
    with pytest.raises(ConfigurationError, match="PORT"):
        Settings.from_env({"GEMINI_API_KEY": "k", "PORT": port})


@pytest.mark.parametrize("timeout", ["soon", "0", "-5"])
def test_bad_timeout(timeout):
    with pytest.raises(ConfigurationError, match="GEMINI_TIMEOUT_MS"):
        Settings.from_env({"GEMINI_API_KEY": "k", "GEMINI_TIMEOUT_MS": timeout})


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    monkeypatch.setenv("PORT", "4000")
    settings = Settings.from_env()
    assert settings.gemini_api_key == "from-env"
    assert settings.port == 4000


def test_settings_are_immutable():
    settings = Settings.from_env({"GEMINI_API_KEY": "k"})
    with pytest.raises(AttributeError):
        settings.gemini_api_key = "other"


@pytest.mark.parametrize("level", ["verbose", "LOUD", "5"])
def test_unknown_log_level(level):
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        Settings.from_env({"GEMINI_API_KEY": "k", "LOG_LEVEL": level})


@pytest.mark.parametrize("level, expected", [("warning", "WARNING"), (" error ", "ERROR"), ("", "INFO")])
def test_known_log_levels(level, expected):
    settings = Settings.from_env({"GEMINI_API_KEY": "k", "LOG_LEVEL": level})
    assert settings.log_level == expected
