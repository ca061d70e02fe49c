# =============================================================================
# bamboohr_mcp/core/errors.py  -  Error Hierarchy
# =============================================================================
#
# Every failure the core raises is a BambooHRError.  The tools/ layer catches
# that one base class and turns it into a tool-level error result, so a bad
# argument or a 500 from BambooHR never takes the MCP server down.
#
#   BambooHRError
#     ├── ValidationError      bad tool argument
#     ├── UpstreamError        BambooHR answered with a non-success status
#     ├── DecodeError          response body did not match the expected shape
#     │     ├── ParseError     numeric string that is not a number
#     │     └── WireTypeError  JSON value of an unsupported type
#     ├── TransportError       network failure or timeout
#     └── ConfigurationError   missing startup configuration (fatal)
# =============================================================================


class BambooHRError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(BambooHRError):
    """A tool argument is missing or malformed."""


class UpstreamError(BambooHRError):
    """BambooHR returned an unexpected HTTP status.

    The status code and the raw body are kept so callers can show exactly
    what the upstream said.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error {status_code}: {body}")


class DecodeError(BambooHRError):
    """A JSON value could not be decoded into the expected shape."""


class ParseError(DecodeError):
    """A string that should hold a number could not be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"cannot parse {value!r} as a number")


class WireTypeError(DecodeError, TypeError):
    """A JSON value arrived with a type none of the decoders accept."""


class TransportError(BambooHRError):
    """The HTTP call itself failed (connection error, timeout, ...)."""


class ConfigurationError(BambooHRError):
    """Required startup configuration is missing or invalid."""
