# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/.
#
# tools/ is the translation layer between MCP and the business logic:
#   1. declare the tool name, description and argument schema
#   2. convert MCP arguments into core dataclasses
#   3. convert core results and errors back into MCP responses
#
# No prompt text or backend handling lives here; that is core/'s job.
# =============================================================================
