# =============================================================================
# bamboohr_mcp/tools/handlers.py  -  Tool Handlers (argument plumbing + result formatting)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   One plain function per MCP tool.  Each one:
#     1. Validates the string arguments the MCP client sent
#        (employeeId must be an integer, dates must be YYYY-MM-DD, ...)
#     2. Calls the matching BambooHRClient operation
#     3. Serializes the records to indented JSON text
#     4. Converts every BambooHRError into a ToolError
#
#   FastMCP reports a ToolError to the caller as an error tool result
#   (isError: true) carrying our message.  The server keeps running; one bad
#   call never takes it down.
#
# WHY SEPARATE FROM mcp_server.py?
#   These functions take the client as an argument and have no FastMCP
#   decorators, so tests call them directly with a mocked client.
#   mcp_server.py only binds them to tool names.
# =============================================================================

import functools
import json
import math
import re
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from fastmcp.exceptions import ToolError

from bamboohr_mcp.core.client import BambooHRClient
from bamboohr_mcp.core.codec import encode_time_off_balance, encode_time_off_request
from bamboohr_mcp.core.errors import BambooHRError, ValidationError
from bamboohr_mcp.core.flexible import NUMERIC_STRING
from bamboohr_mcp.core.models import DateAmount, Note, TimeOffRequestCreate


def _tool_errors(action: str) -> Callable:
    """Turn BambooHRErrors raised by a handler into ToolErrors.

    Validation messages are passed through as-is; everything else is
    prefixed with what we were trying to do.
    """

    def decorator(handler: Callable[..., str]) -> Callable[..., str]:
        @functools.wraps(handler)
        def wrapper(*args, **kwargs) -> str:
            try:
                return handler(*args, **kwargs)
            except ValidationError as exc:
                raise ToolError(str(exc)) from exc
            except BambooHRError as exc:
                raise ToolError(f"Failed to {action}: {exc}") from exc

        return wrapper

    return decorator


# =============================================================================
# Argument parsing
# =============================================================================
def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return str(value).strip()


def _parse_int(value: Optional[str], name: str) -> int:
    text = _require(value, name)
    # Digits only; int() alone would also take "1_000".
    if not re.fullmatch(r"[+-]?\d+", text):
        raise ValidationError(f"{name} must be a valid integer")
    return int(text)


def _parse_date(value: Optional[str], name: str) -> date:
    text = _require(value, name)
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{name} must be a date in YYYY-MM-DD format, got {text!r}") from None


def _parse_amount(value: str) -> float:
    if not NUMERIC_STRING.fullmatch(value):
        raise ValidationError("amount must be a valid number")
    amount = float(value)
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError(f"amount must be a positive number, got {value!r}")
    return amount


def _parse_bool(value: Optional[str], name: str) -> bool:
    text = (value or "").strip().lower()
    if text in ("", "false"):
        return False
    if text == "true":
        return True
    raise ValidationError(f"{name} must be 'true' or 'false', got {value!r}")


def _to_text(payload) -> str:
    return json.dumps(payload, indent=2, allow_nan=False)


# =============================================================================
# Handlers
# =============================================================================
@_tool_errors("get time-off requests")
def get_time_off_requests(client: BambooHRClient, employee_id: str, start: str = "", end: str = "") -> str:
    """Requests for one employee; the whole current year when a date is missing."""
    employee = _parse_int(employee_id, "employeeId")
    start = start.strip() if start else ""
    end = end.strip() if end else ""
    if start:
        _parse_date(start, "start")
    if end:
        _parse_date(end, "end")

    requests = client.get_time_off_requests(employee, start or None, end or None)
    return _to_text([encode_time_off_request(request) for request in requests])


@_tool_errors("get time-off balance")
def get_time_off_balance(client: BambooHRClient, employee_id: str) -> str:
    employee = _parse_int(employee_id, "employeeId")
    balances = client.get_time_off_balance(employee)
    return _to_text([encode_time_off_balance(balance) for balance in balances])


@_tool_errors("list employees")
def list_employees(client: BambooHRClient) -> str:
    # Passed through untouched; the directory schema is not modeled.
    return client.get_employee_directory()


def build_time_off_request(
    time_off_type_id: str,
    start: str,
    end: str,
    amount: str = "",
    notes: str = "",
    employee_note: str = "",
    skip_manager_approval: str = "",
) -> TimeOffRequestCreate:
    """Validate create_time_off_request arguments into a TimeOffRequestCreate.

    With no amount, the request covers every calendar day from start to end,
    one unit per day.  An explicit amount on a single-day request is also
    recorded for that day; on a multi-day request it is sent as a total only.
    """
    type_id = _parse_int(time_off_type_id, "timeOffTypeId")
    first = _parse_date(start, "start")
    last = _parse_date(end, "end")
    if last < first:
        raise ValidationError(f"end ({last.isoformat()}) must not be before start ({first.isoformat()})")

    days = [first + timedelta(days=offset) for offset in range((last - first).days + 1)]
    if amount and amount.strip():
        total = _parse_amount(amount.strip())
        dates = (DateAmount(ymd=first.isoformat(), amount=total),) if len(days) == 1 else ()
    else:
        total = float(len(days))
        dates = tuple(DateAmount(ymd=day.isoformat(), amount=1) for day in days)

    # employeeNote is the newer spelling of notes; it wins when both are sent.
    text = (employee_note or "").strip() or (notes or "").strip()
    note_list = (Note(from_="employee", note=text),) if text else ()

    return TimeOffRequestCreate(
        start=first.isoformat(),
        end=last.isoformat(),
        time_off_type_id=type_id,
        amount=total,
        notes=note_list,
        dates=dates,
        skip_manager_approval=_parse_bool(skip_manager_approval, "skipManagerApproval"),
    )


@_tool_errors("create time-off request")
def create_time_off_request(
    client: BambooHRClient,
    employee_id: str,
    time_off_type_id: str,
    start: str,
    end: str,
    amount: str = "",
    notes: str = "",
    employee_note: str = "",
    skip_manager_approval: str = "",
) -> str:
    employee = _parse_int(employee_id, "employeeId")
    request = build_time_off_request(
        time_off_type_id,
        start,
        end,
        amount=amount,
        notes=notes,
        employee_note=employee_note,
        skip_manager_approval=skip_manager_approval,
    )
    created = client.create_time_off_request(employee, request)
    return _to_text(encode_time_off_request(created))
