"""
Pytest configuration and shared fixtures.
"""

import json

import httpx
import pytest

from bamboohr_mcp.core.client import BambooHRClient
from bamboohr_mcp.core.config import Settings


@pytest.fixture
def settings():
    """Settings for a fake 'testcompany' account."""
    return Settings(company="testcompany", api_key="testkey")


@pytest.fixture
def make_client(settings):
    """Build a BambooHRClient whose HTTP calls go to ``handler``.

    ``handler`` receives each httpx.Request and returns an httpx.Response.
    Every request the client sends is also appended to ``client.sent``.
    """
    clients = []

    def factory(handler, client_settings=None):
        sent = []

        def record(request):
            sent.append(request)
            return handler(request)

        http = httpx.Client(transport=httpx.MockTransport(record))
        client = BambooHRClient(client_settings or settings, http_client=http)
        client.sent = sent
        clients.append(http)
        return client

    yield factory
    for http in clients:
        http.close()


def json_response(payload, status_code=200):
    return httpx.Response(status_code, content=json.dumps(payload).encode(), headers={"Content-Type": "application/json"})


@pytest.fixture
def balance_payload():
    """Calculator response with the string-typed numbers BambooHR sends."""
    return [
        {
            "timeOffType": "27",
            "name": "Home Office days",
            "units": "days",
            "balance": "3.42",
            "end": "2025-09-01",
            "policyType": "accruing",
            "usedYearToDate": "1",
        }
    ]


@pytest.fixture
def request_payload():
    """A full time-off request object as returned by /time_off/requests."""
    return {
        "id": "12345",
        "employeeId": "157",
        "name": "John Doe",
        "start": "2025-09-05",
        "end": "2025-09-05",
        "created": "2025-09-01",
        "type": {"id": "27", "name": "Home Office days", "icon": ""},
        "amount": {"unit": "days", "amount": 1},
        "notes": [{"from": "employee", "note": "Home office day"}],
        "status": {
            "status": "requested",
            "lastChanged": "2025-09-01 14:23:47",
            "lastChangedByUserId": "2627",
        },
        "actions": {
            "view": True,
            "edit": False,
            "cancel": True,
            "approve": False,
            "deny": False,
            "bypass": False,
        },
        "dates": {"2025-09-05": "1"},
    }
