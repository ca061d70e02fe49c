# =============================================================================
# bamboohr_mcp/core/__init__.py
# =============================================================================
# This package contains ALL the BambooHR logic: records, tolerant decoding,
# payload shapes, configuration and the HTTP client.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or knows it is being served as
#   MCP tools.  The only third-party import is httpx, in core/client.py.
#   The decoders and records can be exercised in a bare REPL with no
#   network at all.
# =============================================================================

__version__ = "1.0.0"
