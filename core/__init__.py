# =============================================================================
# core/__init__.py
# =============================================================================
# Business logic for the AI Content Assistant.
#
# Nothing in this package imports FastMCP or any server framework.  The
# adapter, prompt and models can be exercised from a bare REPL; only
# core/backend.py touches the network (through google-genai).
# =============================================================================
