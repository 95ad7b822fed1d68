# =============================================================================
# core/config.py  -  Process Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the environment ONCE at startup and freezes it into a Settings
#   object.  Everything downstream (backend client, server, entry point)
#   receives that object explicitly; nothing else reads os.environ.
#
# ENVIRONMENT VARIABLES:
#   GEMINI_API_KEY     required, no default
#   GEMINI_MODEL       Gemini model id            (default: gemini-1.5-flash)
#   GEMINI_TIMEOUT_MS  client HTTP timeout in ms  (default: client's own)
#   HOST               bind address               (default: 0.0.0.0)
#   PORT               listen port                (default: 3000)
#   LOG_LEVEL          logging level name         (default: INFO)
#
# main.py calls load_dotenv() before from_env(), so a .env file in the
# working directory is honoured too.
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_MCP_PATH = "/mcp"


class ConfigurationError(Exception):
    """The process cannot start with the current environment."""


@dataclass(frozen=True)
class Settings:
    """Immutable startup configuration, shared read-only by every request."""

    gemini_api_key: str
    gemini_model: str = DEFAULT_MODEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    mcp_path: str = DEFAULT_MCP_PATH
    request_timeout_ms: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            ConfigurationError: GEMINI_API_KEY is missing or empty, PORT /
                GEMINI_TIMEOUT_MS are not valid integers, or LOG_LEVEL is
                not a known logging level.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("GEMINI_API_KEY", "").strip()
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set in the environment.")

        port = _parse_int(env, "PORT", DEFAULT_PORT)
        if not 0 < port < 65536:
            raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}.")

        timeout_ms = _parse_int(env, "GEMINI_TIMEOUT_MS", None)
        if timeout_ms is not None and timeout_ms <= 0:
            raise ConfigurationError(
                f"GEMINI_TIMEOUT_MS must be a positive integer, got {timeout_ms}."
            )

        log_level = (env.get("LOG_LEVEL") or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"LOG_LEVEL must be a logging level name, got {log_level!r}.")

        return cls(
            gemini_api_key=api_key,
            gemini_model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
            host=env.get("HOST") or DEFAULT_HOST,
            port=port,
            request_timeout_ms=timeout_ms,
            log_level=log_level,
        )


def _parse_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}.") from None
