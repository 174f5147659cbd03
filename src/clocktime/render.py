"""Render clock times under format patterns.

Examples, for 1:55 pm unless noted::

    h:mm       1:55
    hh:mm      01:55
    h          1          (minutes hidden, no separator requested)
    h.         1.55       (separator given and minutes nonzero)
    hpm        1pm
    h:mm a     1:55 p
    h:mm a     1:55       (period unknown)
    h.mm A     1.55 P
    hh:mm a.m. 01:55 p.m.
    h:mma      1:55p
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clocktime.constants import DEFAULT_TIME_FORMAT, INVALID_FORMAT, INVALID_TIME
from clocktime.grammar import FormatSpec, Period, parse_format

if TYPE_CHECKING:
    from clocktime.clock import ClockTime

logger = logging.getLogger(__name__)


class RenderError(enum.Enum):
    INVALID_TIME = INVALID_TIME
    INVALID_FORMAT = INVALID_FORMAT


@dataclass(frozen=True)
class RenderResult:
    """Either rendered text or the reason rendering was refused."""
    text: str | None = None
    error: RenderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        if self.error is not None:
            return self.error.value
        return self.text or ""


def render_fields(spec: FormatSpec, hours, minutes, period: Period) -> str:
    """Lay out hours/minutes/period according to *spec*. No validity checks."""
    hour_text = f"{hours:02d}" if spec.hour_width == 2 else str(hours)

    # a separator alone reveals nonzero minutes
    if spec.show_minutes or (spec.separator and minutes != 0):
        minute_text = f"{minutes:02d}"
    else:
        minute_text = ""

    separator = spec.separator if minute_text and spec.separator else ""

    period_text = ""
    if spec.period_token and period is not Period.UNKNOWN:
        first = period.value[0]
        if spec.period_token[0].isupper():
            first = first.upper()
        period_text = first + spec.period_token[1:]

    space = " " if period_text and spec.period_space else ""

    return f"{hour_text}{separator}{minute_text}{space}{period_text}"


def render(time: ClockTime, fmt: str | None = None, *, default: str = DEFAULT_TIME_FORMAT) -> RenderResult:
    """Render *time* under *fmt* (or *default* when fmt is empty).

    An invalid time is reported before an invalid format.
    """
    fmt = fmt or default
    if not time.is_valid():
        logger.debug("Refusing to render invalid time %r", time)
        return RenderResult(error=RenderError.INVALID_TIME)
    spec = parse_format(fmt)
    if spec is None:
        logger.debug("Refusing to render with invalid format %r", fmt)
        return RenderResult(error=RenderError.INVALID_FORMAT)
    return RenderResult(text=render_fields(spec, time.hours, time.minutes, time.period))


def format_time(time: ClockTime, fmt: str | None = None, *, default: str = DEFAULT_TIME_FORMAT) -> str:
    """Like render(), but collapse failures to their display text."""
    return str(render(time, fmt, default=default))
