# =============================================================================
# bamboohr_mcp/core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses are the canonical shapes of everything we read from or
# send to BambooHR.  They carry no behavior; decoding from the wire lives in
# bamboohr_mcp/core/codec.py and core/flexible.py, outbound payload shapes in
# bamboohr_mcp/core/payloads.py.
#
# WHY FROZEN DATACLASSES?
#   Every record here is a read-only snapshot of upstream state (or, for
#   TimeOffRequestCreate, a payload built once per call).  Nothing mutates
#   them after decoding, and frozen=True makes that a guarantee.
#
# FIELD NAMES:
#   Attributes are snake_case.  The camelCase wire names live in the codec.
#   Note.from_ has a trailing underscore because "from" is a keyword.
# =============================================================================

from dataclasses import dataclass, field


# -----------------------------------------------------------------------------
# Note  -  one entry of a request's notes
# -----------------------------------------------------------------------------
# Upstream sends notes in four different shapes; core/flexible.py folds all
# of them into a tuple of these.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Note:
    """A single note attached to a time-off request."""

    note: str = ""                     # The text itself
    from_: str = ""                    # "employee", "manager", or "" when unknown


# -----------------------------------------------------------------------------
# TimeOffBalance  -  one row of the time-off calculator
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TimeOffBalance:
    """Balance of one time-off type for one employee."""

    time_off_type: str = ""            # Type id, e.g. "27"
    name: str = ""                     # "Home Office days"
    units: str = ""                    # "days" or "hours"
    balance: float = 0.0               # Wire: number, "3.42" or ""
    end: str = ""                      # Period-end date, "2025-12-31"
    policy_type: str = ""              # "accruing", "manual", ...
    used_year_to_date: float = 0.0     # Wire: number, "1" or ""


# -----------------------------------------------------------------------------
# TimeOffRequest and its nested pieces
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TimeOffType:
    id: str = ""
    name: str = ""
    icon: str = ""


@dataclass(frozen=True)
class TimeOffAmount:
    unit: str = ""                     # "days" or "hours"
    amount: float = 0.0


@dataclass(frozen=True)
class TimeOffStatus:
    status: str = ""                   # "requested", "approved", "denied", ...
    last_changed: str = ""             # "2025-09-01 14:23:47"
    last_changed_by_user_id: str = ""


@dataclass(frozen=True)
class TimeOffActions:
    """What the API key's user may do with the request."""

    view: bool = False
    edit: bool = False
    cancel: bool = False
    approve: bool = False
    deny: bool = False
    bypass: bool = False


@dataclass(frozen=True)
class TimeOffRequest:
    """A time-off request as BambooHR reports it.

    Create responses are sometimes partial, so every field has an empty
    default rather than being required.
    """

    id: str = ""
    employee_id: str = ""
    name: str = ""                     # Employee display name
    start: str = ""                    # "2025-09-05"
    end: str = ""
    created: str = ""
    type: TimeOffType = field(default_factory=TimeOffType)
    amount: TimeOffAmount = field(default_factory=TimeOffAmount)
    notes: tuple[Note, ...] = ()
    status: TimeOffStatus = field(default_factory=TimeOffStatus)
    actions: TimeOffActions = field(default_factory=TimeOffActions)
    dates: tuple[tuple[str, str], ...] = ()
    # dates pairs each day with the amount taken that day, in document
    # order: (("2025-09-05", "1"),).  A tuple keeps the record hashable.


# -----------------------------------------------------------------------------
# Outbound: creating a request
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class DateAmount:
    """Amount taken on one specific day of a new request."""

    ymd: str                           # "2025-09-05"
    amount: float


@dataclass(frozen=True)
class TimeOffRequestCreate:
    """Everything needed to file a new time-off request.

    How this is laid out on the wire depends on the payload variant in use;
    see core/payloads.py.
    """

    start: str
    end: str
    time_off_type_id: int
    amount: float
    status: str = "requested"
    notes: tuple[Note, ...] = ()
    dates: tuple[DateAmount, ...] = ()
    skip_manager_approval: bool = False
