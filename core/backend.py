# =============================================================================
# core/backend.py  -  Gemini Text Generation Boundary
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends one prompt to Gemini and hands back a BackendResult.  Errors are
#   turned into values here, at the edge, so the adapter never has to guess
#   which exceptions the google-genai SDK might raise.
#
# FAILURE MAPPING:
#   httpx.TransportError            ->  FailureKind.NETWORK
#   google.genai.errors.APIError    ->  FailureKind.API
#   no text in the response         ->  FailureKind.MALFORMED_RESPONSE
#   anything else                   ->  FailureKind.UNEXPECTED
#
#   With aiohttp installed, google-genai routes async calls through it and
#   transport failures land in UNEXPECTED.  Only the logged kind differs.
#
#   asyncio.CancelledError is a BaseException and passes straight through,
#   so a cancelled tool call also cancels the HTTP request underneath it.
# =============================================================================

from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from core.config import Settings
from core.models import BackendResult, FailureKind


class GeminiBackend:
    """Async text generation against a single Gemini model.

    The wrapped client is created once and only read afterwards, so one
    instance is safe to share across concurrent tool calls.
    """

    def __init__(self, client: Any, model: str):
        self._client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiBackend":
        http_options = None
        if settings.request_timeout_ms is not None:
            http_options = types.HttpOptions(timeout=settings.request_timeout_ms)
        client = genai.Client(api_key=settings.gemini_api_key, http_options=http_options)
        return cls(client, settings.gemini_model)

    async def generate(self, prompt: str) -> BackendResult:
        """Generate text for ``prompt``.  Never raises for backend failures."""
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except httpx.TransportError as e:
            return BackendResult.failed(FailureKind.NETWORK, repr(e))
        except errors.APIError as e:
            return BackendResult.failed(FailureKind.API, repr(e))
        except Exception as e:
            return BackendResult.failed(FailureKind.UNEXPECTED, repr(e))

        try:
            text = response.text
        except (AttributeError, ValueError) as e:
            return BackendResult.failed(FailureKind.MALFORMED_RESPONSE, repr(e))
        if text is None:
            return BackendResult.failed(
                FailureKind.MALFORMED_RESPONSE, "response contained no text parts"
            )
        return BackendResult.success(text)
