# =============================================================================
# bamboohr_mcp/core/client.py  -  BambooHR API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the four BambooHR endpoints the MCP tools need:
#
#     GET  {v1}/time_off/requests?start=&end=&employeeId=
#     GET  {gateway}/employees/{id}/time_off/calculator
#     PUT  {v1}/employees/{id}/time_off/request
#     GET  {gateway}/employees/directory
#
#   and turns every outcome into either decoded records or a BambooHRError.
#
# AUTHENTICATION:
#   HTTP Basic auth on every request: the API key is the username and the
#   password is empty.  There is no token exchange or session.
#
# WHAT THIS MODULE DOES NOT DO:
#   - No retries.  A failure goes straight back to the caller.
#   - No caching.  Every call hits BambooHR.
#   - No pagination.  We return whatever the endpoint returns.
#
# THREAD SAFETY:
#   The client holds no per-call state.  httpx.Client is safe to share, so
#   one BambooHRClient can serve concurrent tool calls.
# =============================================================================

import logging
from datetime import date
from typing import Any, Iterable, Optional

import httpx

from bamboohr_mcp.core.codec import decode_list, decode_time_off_balance, decode_time_off_request
from bamboohr_mcp.core.config import Settings
from bamboohr_mcp.core.errors import DecodeError, TransportError, UpstreamError
from bamboohr_mcp.core.models import TimeOffBalance, TimeOffRequest, TimeOffRequestCreate
from bamboohr_mcp.core.payloads import build_create_payload

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Which base URL each operation lives under.  Fixed; never inferred.
# -----------------------------------------------------------------------------
GATEWAY = "gateway"
V1 = "v1"

ENDPOINT_BASES: dict[str, str] = {
    "get_time_off_requests": V1,
    "get_time_off_balance": GATEWAY,
    "create_time_off_request": V1,
    "get_employee_directory": GATEWAY,
}

JSON_MEDIA_TYPE = "application/json"


def current_year_window(today: Optional[date] = None) -> tuple[str, str]:
    """First and last day of the current calendar year, as YYYY-MM-DD."""
    year = (today or date.today()).year
    return f"{year:04d}-01-01", f"{year:04d}-12-31"


class BambooHRClient:
    """Synchronous client for the BambooHR time-off endpoints.

    Args:
        settings: Company, API key, timeout and payload variant.
        http_client: Optional pre-built httpx.Client.  Tests inject one with
            an httpx.MockTransport; production lets us build our own.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        self.settings = settings
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=settings.timeout)
        self._bases = {GATEWAY: settings.gateway_url, V1: settings.v1_url}

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------
    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "BambooHRClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------
    def url_for(self, operation: str, path: str) -> str:
        return self._bases[ENDPOINT_BASES[operation]] + path

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Any = None,
        ok_statuses: Iterable[int] = (200,),
    ) -> httpx.Response:
        url = self.url_for(operation, path)
        headers = {"Accept": JSON_MEDIA_TYPE}
        if json_body is not None:
            headers["Content-Type"] = JSON_MEDIA_TYPE

        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self._http.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                auth=(self.settings.api_key, ""),
                timeout=self.settings.timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out after %ss", method, url, self.settings.timeout)
            raise TransportError(
                f"request to {url} timed out after {self.settings.timeout:g}s"
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"request to {url} failed: {exc}") from exc

        if response.status_code not in tuple(ok_statuses):
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            raise UpstreamError(response.status_code, response.text)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"decoding response: {exc}: {response.text[:200]!r}") from exc

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def get_time_off_requests(
        self,
        employee_id: int,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> list[TimeOffRequest]:
        """Time-off requests for one employee between ``start`` and ``end``.

        If either date is missing, both default to the current calendar year.
        """
        if not start or not end:
            start, end = current_year_window()

        response = self._request(
            "get_time_off_requests",
            "GET",
            "/time_off/requests",
            params={"start": start, "end": end, "employeeId": employee_id},
        )
        return decode_list(self._json(response), decode_time_off_request, "time-off requests")

    def get_time_off_balance(self, employee_id: int) -> list[TimeOffBalance]:
        """Balance per time-off type, from the time-off calculator."""
        response = self._request(
            "get_time_off_balance",
            "GET",
            f"/employees/{employee_id}/time_off/calculator",
        )
        return decode_list(self._json(response), decode_time_off_balance, "time-off balances")

    def create_time_off_request(self, employee_id: int, request: TimeOffRequestCreate) -> TimeOffRequest:
        """File a new time-off request and return what BambooHR echoes back."""
        payload = build_create_payload(request, self.settings.payload_variant)
        response = self._request(
            "create_time_off_request",
            "PUT",
            f"/employees/{employee_id}/time_off/request",
            json_body=payload,
            ok_statuses=(200, 201),
        )
        return decode_time_off_request(self._json(response))

    def get_employee_directory(self) -> str:
        """Raw employee directory JSON.  The directory schema is not modeled."""
        response = self._request(
            "get_employee_directory",
            "GET",
            "/employees/directory",
        )
        return response.text
