"""Tests for decoding BambooHR JSON into records and encoding them back."""

import json

import pytest

from bamboohr_mcp.core.codec import (
    decode_list,
    decode_time_off_balance,
    decode_time_off_request,
    encode_time_off_balance,
    encode_time_off_request,
)
from bamboohr_mcp.core.errors import DecodeError, ParseError
from bamboohr_mcp.core.models import Note, TimeOffBalance


def test_balance_with_string_numbers(balance_payload):
    balance = decode_time_off_balance(balance_payload[0])
    assert balance == TimeOffBalance(
        time_off_type="27",
        name="Home Office days",
        units="days",
        balance=3.42,
        end="2025-09-01",
        policy_type="accruing",
        used_year_to_date=1.0,
    )


def test_balance_with_number_and_empty_string(balance_payload):
    wire = {**balance_payload[0], "balance": 3.42, "usedYearToDate": ""}
    balance = decode_time_off_balance(wire)
    assert balance.balance == 3.42
    assert balance.used_year_to_date == 0.0


def test_balance_with_garbage_number_fails(balance_payload):
    with pytest.raises(ParseError):
        decode_time_off_balance({**balance_payload[0], "balance": "lots"})


def test_encoded_balance_uses_json_numbers(balance_payload):
    encoded = encode_time_off_balance(decode_time_off_balance(balance_payload[0]))
    assert encoded["balance"] == 3.42
    assert encoded["usedYearToDate"] == 1.0
    assert '"balance": 3.42' in json.dumps(encoded)


def test_full_request(request_payload):
    request = decode_time_off_request(request_payload)
    assert request.id == "12345"
    assert request.employee_id == "157"
    assert request.type.name == "Home Office days"
    assert request.amount.unit == "days"
    assert request.amount.amount == 1.0
    assert request.notes == (Note(from_="employee", note="Home office day"),)
    assert request.status.last_changed_by_user_id == "2627"
    assert request.actions.view and request.actions.cancel
    assert not request.actions.approve
    assert request.dates == (("2025-09-05", "1"),)


def test_request_with_object_notes(request_payload):
    wire = {**request_payload, "notes": {"employee": "Working from home today", "reason": "personal"}}
    request = decode_time_off_request(wire)
    assert len(request.notes) == 1
    assert "employee: Working from home today" in request.notes[0].note
    assert "reason: personal" in request.notes[0].note


def test_request_with_string_amount_and_numeric_ids(request_payload):
    wire = {**request_payload, "id": 12345, "employeeId": 157, "amount": {"unit": "hours", "amount": "7.5"}}
    request = decode_time_off_request(wire)
    assert request.id == "12345"
    assert request.employee_id == "157"
    assert request.amount.amount == 7.5


def test_partial_request_uses_defaults():
    request = decode_time_off_request(
        {"id": "22565", "employeeId": "157", "name": "Test User", "status": {"status": "requested"}}
    )
    assert request.id == "22565"
    assert request.status.status == "requested"
    assert request.notes == ()
    assert request.dates == ()
    assert request.actions.view is False


def test_request_with_wrong_nested_type_fails(request_payload):
    with pytest.raises(DecodeError):
        decode_time_off_request({**request_payload, "status": "requested"})


def test_request_must_be_an_object():
    with pytest.raises(DecodeError):
        decode_time_off_request(["12345"])


def test_encode_request_canonicalizes_notes(request_payload):
    wire = {**request_payload, "notes": "Family vacation"}
    encoded = encode_time_off_request(decode_time_off_request(wire))
    assert encoded["notes"] == [{"from": "", "note": "Family vacation"}]
    assert encoded["type"] == {"id": "27", "name": "Home Office days", "icon": ""}
    assert encoded["status"]["lastChangedByUserId"] == "2627"


def test_decode_list_requires_array(balance_payload):
    assert len(decode_list(balance_payload, decode_time_off_balance, "balances")) == 1
    with pytest.raises(DecodeError):
        decode_list(balance_payload[0], decode_time_off_balance, "balances")


def test_decoded_request_is_hashable(request_payload):
    request = decode_time_off_request(request_payload)
    assert hash(request) == hash(decode_time_off_request(request_payload))
    assert len({request, decode_time_off_request(request_payload)}) == 1


def test_encode_request_writes_dates_as_object(request_payload):
    wire = {**request_payload, "dates": {"2025-09-04": "0.5", "2025-09-05": "1"}}
    encoded = encode_time_off_request(decode_time_off_request(wire))
    assert encoded["dates"] == {"2025-09-04": "0.5", "2025-09-05": "1"}
    assert list(encoded["dates"]) == ["2025-09-04", "2025-09-05"]


@pytest.mark.parametrize("balance", ["NaN", "Infinity", "1e400", " 3.42 ", "1_000"])
def test_balance_with_non_finite_or_loose_number_fails(balance_payload, balance):
    with pytest.raises(ParseError):
        decode_time_off_balance({**balance_payload[0], "balance": balance})
