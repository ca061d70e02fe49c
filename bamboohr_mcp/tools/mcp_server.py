# =============================================================================
# bamboohr_mcp/tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and binds the four BambooHR tools to the
#   handlers in tools/handlers.py.  The functions below only log and
#   delegate; validation, the HTTP calls and error translation happen in
#   the handlers.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (Claude Desktop, VS Code, an agent...) calls a tool by
#      name over stdio, e.g. "get_time_off_balance" with {"employeeId": "157"}
#   2. FastMCP routes the call to the matching function below
#   3. The handler validates, calls BambooHR, and returns indented JSON text
#   4. Failures come back as ToolError, which FastMCP reports as an error
#      result; the server keeps serving
#
# TOOL NAMING CONVENTIONS:
#   - get_* / list_*  read-only, safe to retry
#   - create_*        writes to BambooHR; NOT safe to blindly retry
#
# ARGUMENT NAMES:
#   Tool arguments keep BambooHR's camelCase spelling (employeeId,
#   timeOffTypeId, ...) and are all strings, since that is what MCP clients
#   have been sending this server from the start.
# =============================================================================

import logging
import sys

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from bamboohr_mcp.core.client import BambooHRClient
from bamboohr_mcp.tools import handlers

SERVER_NAME = "BambooHR Time-Off MCP Server"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Anything printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status and errors
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logger = logging.getLogger("bamboohr.mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the size of the tool response in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(result)} chars{_RESET}")
    return result


def _run(tool_name: str, call) -> str:
    try:
        result = call()
    except ToolError as exc:
        _log_status(f"{tool_name} failed: {exc}")
        raise
    return _log_response(tool_name, result)


# =============================================================================
# Server factory
# =============================================================================
# The client is built in main.py from the startup configuration and handed
# in here; every tool closes over the same read-only instance.
# =============================================================================
def build_server(client: BambooHRClient) -> FastMCP:
    """Create the FastMCP server with all four tools bound to ``client``."""
    mcp = FastMCP(SERVER_NAME)

    # -------------------------------------------------------------------------
    # TOOL 1: get_time_off_requests
    # -------------------------------------------------------------------------
    @mcp.tool()
    def get_time_off_requests(employeeId: str, start: str = "", end: str = "") -> str:
        """Get time-off requests for an employee.

        Args:
            employeeId: The ID of the employee to get time-off requests for.
            start: Start date for filtering requests (YYYY-MM-DD). Optional.
            end: End date for filtering requests (YYYY-MM-DD). Optional.
                If either date is left out, the whole current year is used.

        Returns:
            A JSON array of requests with type, amount, notes, status,
            allowed actions and the per-day breakdown.
        """
        _log_request("get_time_off_requests", employeeId=employeeId, start=start, end=end)
        return _run(
            "get_time_off_requests",
            lambda: handlers.get_time_off_requests(client, employeeId, start, end),
        )

    # -------------------------------------------------------------------------
    # TOOL 2: get_time_off_balance
    # -------------------------------------------------------------------------
    @mcp.tool()
    def get_time_off_balance(employeeId: str) -> str:
        """Get time-off balance for an employee.

        Args:
            employeeId: The ID of the employee to get time-off balance for.

        Returns:
            A JSON array with one entry per time-off type: name, units,
            current balance, period end, policy type and amount used this year.
        """
        _log_request("get_time_off_balance", employeeId=employeeId)
        return _run(
            "get_time_off_balance",
            lambda: handlers.get_time_off_balance(client, employeeId),
        )

    # -------------------------------------------------------------------------
    # TOOL 3: list_employees
    # -------------------------------------------------------------------------
    @mcp.tool()
    def list_employees() -> str:
        """List all employees in the company directory.

        Returns:
            The BambooHR employee directory as JSON, unmodified.  Use it to
            look up the employeeId the other tools need.
        """
        _log_request("list_employees")
        return _run("list_employees", lambda: handlers.list_employees(client))

    # -------------------------------------------------------------------------
    # TOOL 4: create_time_off_request
    # -------------------------------------------------------------------------
    # The only write.  Calling it twice files two requests.
    # -------------------------------------------------------------------------
    @mcp.tool()
    def create_time_off_request(
        employeeId: str,
        timeOffTypeId: str,
        start: str,
        end: str,
        amount: str = "",
        notes: str = "",
        employeeNote: str = "",
        skipManagerApproval: str = "",
    ) -> str:
        """Create a new time-off request for an employee.

        Args:
            employeeId: The ID of the employee to create the request for.
            timeOffTypeId: The ID of the time-off type (e.g. '1' for Vacation,
                '2' for Sick Days, '27' for Home Office days).  Use
                get_time_off_balance to see the types an employee has.
            start: First day off (YYYY-MM-DD).
            end: Last day off (YYYY-MM-DD).
            amount: Amount of time off in days (e.g. '1', '2').  Optional;
                defaults to one per calendar day from start to end.
            notes: Optional note from the employee.
            employeeNote: Same as notes; takes precedence when both are given.
            skipManagerApproval: 'true' to skip manager approval (default 'false').

        Returns:
            The created request as JSON, including its new id.
        """
        _log_request(
            "create_time_off_request",
            employeeId=employeeId,
            timeOffTypeId=timeOffTypeId,
            start=start,
            end=end,
            amount=amount,
            skipManagerApproval=skipManagerApproval,
        )
        return _run(
            "create_time_off_request",
            lambda: handlers.create_time_off_request(
                client,
                employeeId,
                timeOffTypeId,
                start,
                end,
                amount=amount,
                notes=notes,
                employee_note=employeeNote,
                skip_manager_approval=skipManagerApproval,
            ),
        )

    return mcp
