# =============================================================================
# bamboohr_mcp/core/flexible.py  -  Tolerant Decoders for Polymorphic BambooHR Fields
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   BambooHR is not consistent about how it spells a value on the wire.
#   The same "balance" field comes back as 3.42 from one account and "3.42"
#   (or "") from another, and a request's "notes" field can be a string, a
#   note object, a list of note objects, or a free-form object.
#
#   The decoders here accept every shape we have seen and produce ONE
#   canonical value, so nothing above this module ever has to care.
#
# HOW DECODING WORKS:
#   Each polymorphic field has an ordered list of shape matchers.  A matcher
#   returns the decoded value when the wire value has its shape, or None
#   when it does not.  The first match wins; if nothing matches we raise a
#   DecodeError instead of silently dropping data.
#
# ENCODING IS CANONICAL, NOT A ROUND-TRIP:
#   Numbers are always written back as JSON numbers, and notes are always
#   written back as a list of {"from", "note"} objects, whatever shape they
#   arrived in.
# =============================================================================

import math
import re
from typing import Any, Callable, Optional

from bamboohr_mcp.core.errors import DecodeError, ParseError, WireTypeError
from bamboohr_mcp.core.models import Note


# =============================================================================
# Numeric fields (balance, usedYearToDate, amount.amount)
# =============================================================================
# Plain decimal or exponent notation only.  No surrounding whitespace, no
# digit-group underscores, no inf/nan spellings.
NUMERIC_STRING = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def decode_flexible_float(value: Any) -> float:
    """Decode a JSON number or numeric string into a float.

    >>> decode_flexible_float(3.42), decode_flexible_float("3.42"), decode_flexible_float("")
    (3.42, 3.42, 0.0)

    Raises:
        ParseError: the value is a string that does not hold a number, or
            the number is not finite ("NaN", "Infinity", "1e400").
        WireTypeError: the value is neither a number nor a string.
    """
    # bool is a subclass of int; true/false on the wire is not a quantity.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
        if not math.isfinite(number):
            raise ParseError(str(value))
        return number
    if isinstance(value, str):
        if value == "":
            return 0.0
        if not NUMERIC_STRING.fullmatch(value):
            raise ParseError(value)
        number = float(value)
        if not math.isfinite(number):
            raise ParseError(value)
        return number
    raise WireTypeError(
        f"expected a number or a numeric string, got {type(value).__name__}: {value!r}"
    )


def encode_flexible_float(value: float) -> float:
    """Encode a decoded number.  Always a plain JSON number, never a string."""
    return float(value)


# =============================================================================
# Notes field
# =============================================================================
def decode_note(value: Any) -> Note:
    """Decode one {"from": ..., "note": ...} object into a Note.

    Missing or null keys become empty strings.  Any other type for either
    key is a DecodeError.
    """
    if not isinstance(value, dict):
        raise DecodeError(f"expected a note object, got {type(value).__name__}: {value!r}")

    fields = {}
    for key in ("from", "note"):
        raw = value.get(key)
        if raw is None:
            raw = ""
        if not isinstance(raw, str):
            raise DecodeError(f"note field {key!r} must be a string, got {raw!r}")
        fields[key] = raw
    return Note(from_=fields["from"], note=fields["note"])


def _match_string(value: Any) -> Optional[tuple[Note, ...]]:
    if isinstance(value, str):
        return (Note(note=value),)
    return None


def _match_note_list(value: Any) -> Optional[tuple[Note, ...]]:
    if isinstance(value, list):
        # One bad element fails the whole list; no partial results.
        return tuple(decode_note(item) for item in value)
    return None


def _match_note_object(value: Any) -> Optional[tuple[Note, ...]]:
    if not isinstance(value, dict):
        return None
    if "from" not in value and value.get("note") is None:
        return None
    try:
        return (decode_note(value),)
    except DecodeError:
        # Looks like a note but isn't one; let the generic object matcher try.
        return None


def _match_scalar_object(value: Any) -> Optional[tuple[Note, ...]]:
    if not isinstance(value, dict):
        return None
    # Keys keep the order the JSON parser saw them in.  Non-string values
    # are skipped.
    parts = [f"{key}: {text}" for key, text in value.items() if isinstance(text, str)]
    return (Note(note="; ".join(parts)),)


def _match_null(value: Any) -> Optional[tuple[Note, ...]]:
    if value is None:
        return ()
    return None


# Order matters: the note-object matcher must run before the generic
# object matcher, since every note object is also a string-keyed object.
NOTES_SHAPE_MATCHERS: tuple[tuple[str, Callable[[Any], Optional[tuple[Note, ...]]]], ...] = (
    ("string", _match_string),
    ("note list", _match_note_list),
    ("note object", _match_note_object),
    ("scalar object", _match_scalar_object),
    ("null", _match_null),
)


def decode_flexible_notes(value: Any) -> tuple[Note, ...]:
    """Decode a notes field of unknown shape into an ordered tuple of Notes.

    Accepted shapes, tried in order:
      - "text"                          → (Note(note="text"),)
      - [{"from": .., "note": ..}, ..]  → one Note per element
      - {"from": .., "note": ..}        → (Note(...),)
      - {"employee": "..", "reason": ..} → (Note(note="employee: ..; reason: .."),)
      - null                            → ()

    An empty string decodes to exactly one Note with empty text.

    Raises:
        DecodeError: no matcher accepted the value, or a list element is
            not a valid note object.
    """
    for _shape, matcher in NOTES_SHAPE_MATCHERS:
        notes = matcher(value)
        if notes is not None:
            return notes
    raise DecodeError(
        f"notes must be a string, a note object, a list of notes or an object, "
        f"got {type(value).__name__}: {value!r}"
    )


def encode_note(note: Note) -> dict[str, str]:
    return {"from": note.from_, "note": note.note}


def encode_flexible_notes(notes: tuple[Note, ...] | list[Note]) -> list[dict[str, str]]:
    """Encode notes in canonical form: a list of {"from", "note"} objects."""
    return [encode_note(note) for note in notes]
