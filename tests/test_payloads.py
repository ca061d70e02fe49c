"""Tests for the versioned create-request payload shapes."""

import json

import pytest

from bamboohr_mcp.core.errors import ValidationError
from bamboohr_mcp.core.models import DateAmount, Note, TimeOffRequestCreate
from bamboohr_mcp.core.payloads import build_create_payload


@pytest.fixture
def home_office_day():
    return TimeOffRequestCreate(
        start="2025-09-05",
        end="2025-09-05",
        time_off_type_id=27,
        amount=1,
        notes=(Note(from_="employee", note="Home office day"),),
        dates=(DateAmount(ymd="2025-09-05", amount=1),),
    )


def test_typed_payload(home_office_day):
    payload = build_create_payload(home_office_day, "typed")
    assert payload == {
        "status": "requested",
        "start": "2025-09-05",
        "end": "2025-09-05",
        "timeOffTypeId": 27,
        "amount": 1,
        "notes": [{"from": "employee", "note": "Home office day"}],
        "dates": [{"ymd": "2025-09-05", "amount": 1}],
    }
    body = json.dumps(payload, separators=(",", ":"))
    assert '"timeOffTypeId":27' in body
    assert '"amount":1' in body


def test_typed_payload_omits_empty_optionals():
    payload = build_create_payload(
        TimeOffRequestCreate(start="2025-09-05", end="2025-09-05", time_off_type_id=27, amount=1)
    )
    assert "notes" not in payload
    assert "dates" not in payload
    assert "skipManagerApproval" not in payload


def test_typed_payload_rejects_fractional_amount():
    request = TimeOffRequestCreate(start="2025-09-05", end="2025-09-05", time_off_type_id=27, amount=0.5)
    with pytest.raises(ValidationError):
        build_create_payload(request, "typed")


def test_flat_payload(home_office_day):
    payload = build_create_payload(home_office_day, "flat")
    assert payload == {
        "status": "requested",
        "start": "2025-09-05",
        "end": "2025-09-05",
        "timeOffTypeId": "27",
        "amount": 1.0,
        "notes": {"employee": "Home office day"},
    }


def test_flat_payload_allows_half_days_and_skip_approval():
    request = TimeOffRequestCreate(
        start="2025-09-05",
        end="2025-09-05",
        time_off_type_id=1,
        amount=0.5,
        notes=(Note(note="Afternoon off"),),
        skip_manager_approval=True,
    )
    payload = build_create_payload(request, "flat")
    assert payload["amount"] == 0.5
    assert payload["notes"] == {"employee": "Afternoon off"}
    assert payload["skipManagerApproval"] is True


def test_unknown_variant():
    request = TimeOffRequestCreate(start="2025-09-05", end="2025-09-05", time_off_type_id=1, amount=1)
    with pytest.raises(ValueError):
        build_create_payload(request, "v3")
