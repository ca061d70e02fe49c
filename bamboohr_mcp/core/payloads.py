# =============================================================================
# bamboohr_mcp/core/payloads.py  -  Create-Request Payload Variants
# =============================================================================
#
# BambooHR has accepted more than one body shape for
# PUT /employees/{id}/time_off/request over time:
#
#   "flat"   timeOffTypeId as a string, amount as a float, notes as a
#            {"employee": "..."} object, optional skipManagerApproval.
#   "typed"  timeOffTypeId and amount as integers, notes as a list of
#            {"from", "note"} objects, plus a per-day "dates" list.
#
# Which one to send is picked by configuration (BAMBOOHR_PAYLOAD_VARIANT),
# not hard-coded.  Both builders take the same TimeOffRequestCreate.
# =============================================================================

from typing import Callable

from bamboohr_mcp.core.errors import ValidationError
from bamboohr_mcp.core.flexible import encode_flexible_notes
from bamboohr_mcp.core.models import TimeOffRequestCreate

DEFAULT_PAYLOAD_VARIANT = "typed"


def _whole_number(value: float, what: str) -> int:
    if float(value) != int(value):
        raise ValidationError(
            f"{what} must be a whole number with the 'typed' payload variant, got {value:g}"
        )
    return int(value)


def build_typed_payload(request: TimeOffRequestCreate) -> dict:
    payload = {
        "status": request.status,
        "start": request.start,
        "end": request.end,
        "timeOffTypeId": request.time_off_type_id,
        "amount": _whole_number(request.amount, "amount"),
    }
    if request.notes:
        payload["notes"] = encode_flexible_notes(request.notes)
    if request.dates:
        payload["dates"] = [
            {"ymd": day.ymd, "amount": _whole_number(day.amount, f"amount for {day.ymd}")}
            for day in request.dates
        ]
    if request.skip_manager_approval:
        payload["skipManagerApproval"] = True
    return payload


def build_flat_payload(request: TimeOffRequestCreate) -> dict:
    payload = {
        "status": request.status,
        "start": request.start,
        "end": request.end,
        "timeOffTypeId": str(request.time_off_type_id),
        "amount": float(request.amount),
    }
    if request.notes:
        # The flat shape is a from -> text mapping; unattributed notes are
        # filed as the employee's.
        payload["notes"] = {note.from_ or "employee": note.note for note in request.notes}
    if request.skip_manager_approval:
        payload["skipManagerApproval"] = True
    return payload


PAYLOAD_BUILDERS: dict[str, Callable[[TimeOffRequestCreate], dict]] = {
    "typed": build_typed_payload,
    "flat": build_flat_payload,
}


def build_create_payload(request: TimeOffRequestCreate, variant: str = DEFAULT_PAYLOAD_VARIANT) -> dict:
    """Lay out ``request`` as the JSON body for the given payload variant."""
    try:
        builder = PAYLOAD_BUILDERS[variant]
    except KeyError:
        raise ValueError(
            f"unknown payload variant {variant!r}; expected one of {sorted(PAYLOAD_BUILDERS)}"
        ) from None
    return builder(request)
