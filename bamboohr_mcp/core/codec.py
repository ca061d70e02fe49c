# =============================================================================
# bamboohr_mcp/core/codec.py  -  JSON <-> Record Mapping
# =============================================================================
#
# Turns parsed BambooHR JSON (dicts and lists from httpx's response.json())
# into the frozen records in core/models.py, and back into plain dicts that
# json.dumps() can serialize for a tool result.
#
# Polymorphic fields are delegated to core/flexible.py.  Everything else is
# decoded leniently: a missing key gets the record's empty default, and a
# scalar id that arrives as a number is turned into a string.  A value of a
# genuinely wrong type (a list where a string belongs) is a DecodeError.
# =============================================================================

from typing import Any

from bamboohr_mcp.core.errors import DecodeError
from bamboohr_mcp.core.flexible import (
    decode_flexible_float,
    decode_flexible_notes,
    encode_flexible_float,
    encode_flexible_notes,
)
from bamboohr_mcp.core.models import (
    TimeOffActions,
    TimeOffAmount,
    TimeOffBalance,
    TimeOffRequest,
    TimeOffStatus,
    TimeOffType,
)


# -----------------------------------------------------------------------------
# Field helpers
# -----------------------------------------------------------------------------
def _object(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"{what} must be a JSON object, got {type(value).__name__}: {value!r}")
    return value


def _as_string(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise DecodeError(f"{key!r} must be a string, got {type(value).__name__}: {value!r}")


def _string(obj: dict, key: str) -> str:
    return _as_string(obj.get(key), key)


def _flag(obj: dict, key: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise DecodeError(f"{key!r} must be a boolean, got {type(value).__name__}: {value!r}")


def _number(obj: dict, key: str) -> float:
    if obj.get(key) is None:
        return 0.0
    return decode_flexible_float(obj[key])


def _dates(value: Any) -> tuple[tuple[str, str], ...]:
    return tuple((day, _as_string(amount, day)) for day, amount in _object(value, "dates").items())


def decode_list(value: Any, decode_item, what: str) -> list:
    """Decode a top-level JSON array with ``decode_item``."""
    if not isinstance(value, list):
        raise DecodeError(f"expected a JSON array of {what}, got {type(value).__name__}")
    return [decode_item(item) for item in value]


# =============================================================================
# TimeOffBalance
# =============================================================================
def decode_time_off_balance(value: Any) -> TimeOffBalance:
    obj = _object(value, "time-off balance")
    return TimeOffBalance(
        time_off_type=_string(obj, "timeOffType"),
        name=_string(obj, "name"),
        units=_string(obj, "units"),
        balance=_number(obj, "balance"),
        end=_string(obj, "end"),
        policy_type=_string(obj, "policyType"),
        used_year_to_date=_number(obj, "usedYearToDate"),
    )


def encode_time_off_balance(balance: TimeOffBalance) -> dict:
    return {
        "timeOffType": balance.time_off_type,
        "name": balance.name,
        "units": balance.units,
        "balance": encode_flexible_float(balance.balance),
        "end": balance.end,
        "policyType": balance.policy_type,
        "usedYearToDate": encode_flexible_float(balance.used_year_to_date),
    }


# =============================================================================
# TimeOffRequest
# =============================================================================
def decode_time_off_request(value: Any) -> TimeOffRequest:
    """Decode one time-off request object.

    Partial objects are fine (create responses often carry only the id and
    status); absent fields take the record defaults.
    """
    obj = _object(value, "time-off request")
    type_ = _object(obj.get("type"), "type")
    amount = _object(obj.get("amount"), "amount")
    status = _object(obj.get("status"), "status")
    actions = _object(obj.get("actions"), "actions")

    return TimeOffRequest(
        id=_string(obj, "id"),
        employee_id=_string(obj, "employeeId"),
        name=_string(obj, "name"),
        start=_string(obj, "start"),
        end=_string(obj, "end"),
        created=_string(obj, "created"),
        type=TimeOffType(
            id=_string(type_, "id"),
            name=_string(type_, "name"),
            icon=_string(type_, "icon"),
        ),
        amount=TimeOffAmount(
            unit=_string(amount, "unit"),
            amount=_number(amount, "amount"),
        ),
        notes=decode_flexible_notes(obj.get("notes")),
        status=TimeOffStatus(
            status=_string(status, "status"),
            last_changed=_string(status, "lastChanged"),
            last_changed_by_user_id=_string(status, "lastChangedByUserId"),
        ),
        actions=TimeOffActions(
            **{name: _flag(actions, name) for name in ("view", "edit", "cancel", "approve", "deny", "bypass")}
        ),
        dates=_dates(obj.get("dates")),
    )


def encode_time_off_request(request: TimeOffRequest) -> dict:
    return {
        "id": request.id,
        "employeeId": request.employee_id,
        "name": request.name,
        "start": request.start,
        "end": request.end,
        "created": request.created,
        "type": {
            "id": request.type.id,
            "name": request.type.name,
            "icon": request.type.icon,
        },
        "amount": {
            "unit": request.amount.unit,
            "amount": encode_flexible_float(request.amount.amount),
        },
        "notes": encode_flexible_notes(request.notes),
        "status": {
            "status": request.status.status,
            "lastChanged": request.status.last_changed,
            "lastChangedByUserId": request.status.last_changed_by_user_id,
        },
        "actions": {
            "view": request.actions.view,
            "edit": request.actions.edit,
            "cancel": request.actions.cancel,
            "approve": request.actions.approve,
            "deny": request.actions.deny,
            "bypass": request.actions.bypass,
        },
        "dates": dict(request.dates),
    }
