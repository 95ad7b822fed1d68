# =============================================================================
# main.py  -  Entry Point for the AI Content Assistant MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or: content-assistant, once the package is installed)
#
# WHAT HAPPENS:
#   1. Loads .env into the process environment (GEMINI_API_KEY, PORT, ...)
#   2. Freezes the environment into a Settings object; a missing API key
#      stops the process here, before any socket is opened
#   3. Wires Gemini backend -> OutlineAdapter -> FastMCP server -> ASGI app
#   4. Serves it with uvicorn:  GET /  health check,  /mcp  MCP endpoint
# =============================================================================

import logging
import sys
from typing import Mapping, Optional

import uvicorn
from dotenv import load_dotenv

from core.backend import GeminiBackend
from core.config import ConfigurationError, Settings
from core.outline import OutlineAdapter
from tools.mcp_server import configure_logging, create_app, create_mcp_server


def main(environ: Optional[Mapping[str, str]] = None) -> None:
    """Start the server, or exit with status 1 if it cannot be configured."""

    # Must happen before Settings.from_env() reads the environment.
    load_dotenv()

    try:
        settings = Settings.from_env(environ)
    except ConfigurationError as e:
        configure_logging()
        logging.error(f"Error: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)

    backend = GeminiBackend.from_settings(settings)
    adapter = OutlineAdapter(backend)
    mcp = create_mcp_server(adapter)
    app = create_app(mcp, settings)

    logging.info(f"Server is live on port {settings.port} (model={settings.gemini_model})")
    uvicorn.run(app, host=settings.host, port=settings.port)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
