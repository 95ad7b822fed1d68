# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through one
# tool call.  None of them live longer than a single invocation.
#
#   OutlineRequest   what the MCP caller sends    { topic }
#   OutlineResponse  what the MCP caller gets     { outline }
#   BackendResult    what the Gemini boundary hands back to the adapter
# =============================================================================

import enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OutlineRequest:
    """Input of the generateContentOutline tool."""

    topic: str                         # Main topic or title of the piece


@dataclass(frozen=True)
class OutlineResponse:
    """Output of the generateContentOutline tool.

    Only ever built on success.  Failures travel as BackendError instead.
    """

    outline: str                       # Generated text, exactly as returned


# -----------------------------------------------------------------------------
# FailureKind - why a backend call did not produce text
# -----------------------------------------------------------------------------
# Operators see the kind in the logs.  Callers never do: they always get the
# same generic message.
# -----------------------------------------------------------------------------
class FailureKind(str, enum.Enum):
    NETWORK = "network"
    API = "api"
    MALFORMED_RESPONSE = "malformed_response"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class BackendResult:
    """Outcome of one backend call: either text or a failure kind, never both."""

    text: Optional[str] = None
    failure: Optional[FailureKind] = None
    detail: Optional[str] = None       # Raw error text, for logs only

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "BackendResult":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind, detail: str) -> "BackendResult":
        return cls(failure=kind, detail=detail)
