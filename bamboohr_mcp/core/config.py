# =============================================================================
# bamboohr_mcp/core/config.py  -  Startup Configuration
# =============================================================================
#
# Everything is read from environment variables, once, at startup.  main.py
# calls load_dotenv() first, so a local .env file works too.
#
#   BAMBOOHR_COMPANY          required  company subdomain ("acme" for acme.bamboohr.com)
#   BAMBOOHR_API_KEY          required  API key, sent as the Basic-auth username
#   BAMBOOHR_PAYLOAD_VARIANT  optional  "typed" (default) or "flat", see core/payloads.py
#   BAMBOOHR_TIMEOUT          optional  request timeout in seconds (default 30)
#   BAMBOOHR_LOG_LEVEL        optional  logging level name (default INFO)
#
# A missing required variable is a ConfigurationError.  That is fatal: the
# server refuses to start rather than failing every tool call later.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from bamboohr_mcp.core.errors import ConfigurationError
from bamboohr_mcp.core.payloads import DEFAULT_PAYLOAD_VARIANT, PAYLOAD_BUILDERS

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Settings:
    """Immutable client configuration shared by every tool call."""

    company: str
    api_key: str
    payload_variant: str = DEFAULT_PAYLOAD_VARIANT
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"

    # BambooHR serves the same data family under two URL shapes depending on
    # the endpoint generation.  Which operation uses which is fixed in
    # core/client.py (ENDPOINT_BASES).
    @property
    def gateway_url(self) -> str:
        return f"https://{self.company}.bamboohr.com/api/gateway.php/{self.company}/v1"

    @property
    def v1_url(self) -> str:
        return f"https://{self.company}.bamboohr.com/api/v1"

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks.
        return (
            f"Settings(company={self.company!r}, api_key='***', "
            f"payload_variant={self.payload_variant!r}, timeout={self.timeout!r})"
        )


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} environment variable is required")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Raises:
        ConfigurationError: a required variable is missing, or an optional
            one holds a value we cannot use.
    """
    if environ is None:
        environ = os.environ

    api_key = _required(environ, "BAMBOOHR_API_KEY")
    company = _required(environ, "BAMBOOHR_COMPANY")

    variant = environ.get("BAMBOOHR_PAYLOAD_VARIANT", DEFAULT_PAYLOAD_VARIANT).strip().lower()
    if variant not in PAYLOAD_BUILDERS:
        raise ConfigurationError(
            f"BAMBOOHR_PAYLOAD_VARIANT must be one of {sorted(PAYLOAD_BUILDERS)}, got {variant!r}"
        )

    raw_timeout = environ.get("BAMBOOHR_TIMEOUT", "").strip()
    timeout = DEFAULT_TIMEOUT_SECONDS
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(f"BAMBOOHR_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ConfigurationError(f"BAMBOOHR_TIMEOUT must be positive, got {raw_timeout!r}")

    log_level = environ.get("BAMBOOHR_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        company=company,
        api_key=api_key,
        payload_variant=variant,
        timeout=timeout,
        log_level=log_level,
    )
