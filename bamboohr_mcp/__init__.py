# =============================================================================
# bamboohr_mcp/__init__.py
# =============================================================================
# BambooHR time-off tools served over MCP.
#
#   core/    BambooHR records, decoding, payloads, config and HTTP client
#   tools/   FastMCP tool server and the handlers behind each tool
#   main.py  command-line entry point (`bamboohr-mcp`, `python -m bamboohr_mcp`)
# =============================================================================

from bamboohr_mcp.core import __version__

__all__ = ["__version__"]
