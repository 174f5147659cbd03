"""Input and format grammars for 12-hour clock literals."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any


class Period(enum.Enum):
    AM = "am"
    PM = "pm"
    UNKNOWN = ""


_PERIOD_PATTERN = r"[ap]\.?(?:m\.?)?"

_PERIOD_RE = re.compile(_PERIOD_PATTERN, re.IGNORECASE)

_TIME_RE = re.compile(
    r"(10|11|12|0?[1-9])[:.]?([0-5][0-9])?(" + _PERIOD_PATTERN + r")?",
    re.IGNORECASE,
)

_FORMAT_RE = re.compile(
    r"(h{1,2})([:.])?(mm)?( ?)(" + _PERIOD_PATTERN + r")?",
    re.IGNORECASE,
)

_WHITESPACE_RE = re.compile(r"\s")


@dataclass(frozen=True)
class ParsedTime:
    """Tokens extracted from a time literal."""
    hours: int
    minutes: int
    period: Period


@dataclass(frozen=True)
class FormatSpec:
    """Structural decomposition of a format string like ``hh:mm a.m.``."""
    hour_width: int
    separator: str | None
    show_minutes: bool
    period_space: bool
    period_token: str | None


def sanitize(raw: Any) -> str:
    """Coerce *raw* to text and remove all whitespace."""
    return _WHITESPACE_RE.sub("", str(raw))


def parse_period(token: Any) -> Period:
    """Resolve a period token ('a', 'PM', 'p.m.', ...) to a Period.

    Anything that doesn't start with a period token is UNKNOWN.
    """
    if isinstance(token, Period):
        return token
    if not token:
        return Period.UNKNOWN
    token = str(token)
    if not _PERIOD_RE.match(token):
        return Period.UNKNOWN
    return Period.PM if token[0].lower() == "p" else Period.AM


def parse_literal(raw: Any) -> ParsedTime | None:
    """Parse a time literal such as '7', 1234, '12.14' or '9:05 p.m.'.

    Returns None when the literal doesn't match the grammar.
    """
    m = _TIME_RE.fullmatch(sanitize(raw))
    if not m:
        return None
    hours = int(m.group(1))
    minutes = int(m.group(2)) if m.group(2) else 0
    return ParsedTime(hours, minutes, parse_period(m.group(3)))


def is_valid(raw: Any) -> bool:
    """Whether *raw* is an acceptable time literal."""
    return _TIME_RE.fullmatch(sanitize(raw)) is not None


def parse_format(fmt: str) -> FormatSpec | None:
    """Split a format string into its tokens, or None if it's malformed."""
    m = _FORMAT_RE.fullmatch(fmt)
    if not m:
        return None
    return FormatSpec(
        hour_width=len(m.group(1)),
        separator=m.group(2),
        show_minutes=m.group(3) is not None,
        period_space=bool(m.group(4)),
        period_token=m.group(5),
    )
