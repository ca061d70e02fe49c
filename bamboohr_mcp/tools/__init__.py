# =============================================================================
# bamboohr_mcp/tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool layer.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and the BambooHR client
#   in core/.
#     - handlers.py   validate string arguments, call core/, format JSON
#                     text, turn BambooHRErrors into ToolErrors
#     - mcp_server.py bind the handlers to tool names on a FastMCP server
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP themselves (that's core/client.py)
#   - They do NOT decode BambooHR JSON (that's core/codec.py)
#   - They do NOT read configuration (that's main.py + core/config.py)
# =============================================================================
