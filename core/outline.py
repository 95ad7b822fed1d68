# =============================================================================
# core/outline.py  -  Outline Tool Adapter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns one OutlineRequest into one OutlineResponse:
#     1. fill the content strategist prompt with the topic
#     2. await exactly one backend call
#     3. pass the generated text through untouched, or
#     4. log the failure and raise BackendError with a fixed message
#
# Per-call flow is two-state: pending -> success | failed.  No retries.
#
# The backend is injected, so tests drive this module with a fake object
# that has an ``async generate(prompt) -> BackendResult`` method.
# =============================================================================

import asyncio
import logging

from core.models import BackendResult, FailureKind, OutlineRequest, OutlineResponse
from core.prompt import build_outline_prompt

GENERIC_BACKEND_ERROR = "There was an issue contacting the AI content strategist."


class BackendError(Exception):
    """The backend failed to produce an outline.

    ``str(err)`` is always GENERIC_BACKEND_ERROR; ``err.kind`` keeps the
    reason for operators.
    """

    def __init__(self, kind: FailureKind):
        super().__init__(GENERIC_BACKEND_ERROR)
        self.kind = kind


class OutlineAdapter:
    def __init__(self, backend):
        self._backend = backend

    async def generate_outline(self, request: OutlineRequest) -> OutlineResponse:
        """Generate an outline for ``request.topic``.

        Raises:
            BackendError: the backend call failed for any reason.
        """
        prompt = build_outline_prompt(request.topic)

        try:
            result: BackendResult = await self._backend.generate(prompt)
        except asyncio.CancelledError:
            logging.warning("Outline generation cancelled before the backend answered")
            raise
        except Exception as e:
            result = BackendResult.failed(FailureKind.UNEXPECTED, repr(e))

        if not result.ok:
            logging.error(f"Error calling Gemini API (kind={result.failure.value}): {result.detail}")
            raise BackendError(result.failure)

        return OutlineResponse(outline=result.text)
