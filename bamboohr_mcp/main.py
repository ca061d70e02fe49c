# =============================================================================
# bamboohr_mcp/main.py  -  Entry Point for the BambooHR Time-Off MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python -m bamboohr_mcp                  # serve MCP over stdio
#   uv run python -m bamboohr_mcp --version
#   uv run python -m bamboohr_mcp test-requests --employee-id 157
#
#   Installed as a package, the same entry point is the `bamboohr-mcp`
#   console script.
#
# WHAT HAPPENS:
#   1. Loads .env (if present) into the environment
#   2. Reads BAMBOOHR_COMPANY / BAMBOOHR_API_KEY; exits with status 1 if
#      either is missing, before any network call
#   3. Builds one BambooHRClient shared by every tool call
#   4. Builds the FastMCP server (tools/mcp_server.py) and serves stdio
#
# The test-requests command is a smoke test against the real API: it
# fetches this year's requests for one employee and prints a short summary.
# =============================================================================

import argparse
import sys

from dotenv import load_dotenv

from bamboohr_mcp.core import __version__
from bamboohr_mcp.core.client import BambooHRClient
from bamboohr_mcp.core.config import load_settings
from bamboohr_mcp.core.errors import BambooHRError, ConfigurationError
from bamboohr_mcp.tools.mcp_server import SERVER_NAME, build_server, configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bamboohr-mcp",
        description="Expose BambooHR time-off endpoints as MCP tools over stdio",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subcommands = parser.add_subparsers(dest="command")
    smoke = subcommands.add_parser(
        "test-requests",
        help="Fetch this year's time-off requests for one employee and print a summary",
    )
    smoke.add_argument("--employee-id", type=int, default=157, help="Employee to query (default: 157)")
    return parser


def run_smoke_test(client: BambooHRClient, employee_id: int) -> int:
    """Print the first three of an employee's requests for the current year."""
    print("Testing time-off requests API call...")
    try:
        requests = client.get_time_off_requests(employee_id)
    except BambooHRError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Success! Got {len(requests)} request records")
    for i, request in enumerate(requests[:3]):
        print(
            f"Request {i}: ID={request.id}, Start={request.start}, End={request.end}, "
            f"Type={request.type.name}, Amount={request.amount.amount:g}"
        )
    return 0


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    # Must happen before load_settings(), which reads os.environ.
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    with BambooHRClient(settings) as client:
        if args.command == "test-requests":
            return run_smoke_test(client, args.employee_id)

        print(f"Starting {SERVER_NAME} {__version__} for company {settings.company!r}", file=sys.stderr)
        build_server(client).run()
    return 0


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
