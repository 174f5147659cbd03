"""The ClockTime value: a 12-hour time of day with an optional period."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from clocktime.constants import CANONICAL_FORMAT, DEFAULT_TIME_FORMAT, HALF_DAY_HOURS
from clocktime.grammar import Period, is_valid, parse_format, parse_literal, parse_period
from clocktime.render import RenderResult, format_time, render, render_fields

logger = logging.getLogger(__name__)

_CANONICAL_SPEC = parse_format(CANONICAL_FORMAT)

_HALF_DAY = timedelta(hours=HALF_DAY_HOURS)


class ProjectionError(RuntimeError):
    """The next-occurrence search could not settle on the requested period."""


class ClockTime:
    """A time of day on the 12-hour wheel.

    ``ClockTime()`` reads the current time; ``ClockTime("7:30pm")`` or
    ``ClockTime(1234)`` parses a literal. Construction never fails: input
    that doesn't parse yields a value whose ``is_valid()`` is False.

    Field setters are unconditional. Validity is recomputed on every
    ``is_valid()`` call from the current fields.
    """

    def __init__(self, raw: Any = None, *, now: Optional[Callable[[], datetime]] = None):
        self._now = now or datetime.now
        self._hours: int | None = None
        self._minutes: int | None = None
        self._period = Period.UNKNOWN

        if raw is None:
            current = self._now()
            self._hours = current.hour % 12 or 12
            self._minutes = current.minute
            self._period = Period.PM if current.hour > 11 else Period.AM
            return

        parsed = parse_literal(raw)
        if parsed is None:
            logger.debug("Unparseable time literal %r", raw)
            return
        self._hours = parsed.hours
        self._minutes = parsed.minutes
        self._period = parsed.period

    @staticmethod
    def is_valid_literal(raw: Any) -> bool:
        """Check a literal against the input grammar without building a value."""
        return is_valid(raw)

    @property
    def hours(self) -> int | None:
        return self._hours

    @hours.setter
    def hours(self, value: Any) -> None:
        self._hours = int(value)

    @property
    def minutes(self) -> int | None:
        return self._minutes

    @minutes.setter
    def minutes(self, value: Any) -> None:
        self._minutes = int(value)

    @property
    def period(self) -> Period:
        return self._period

    @period.setter
    def period(self, value: Any) -> None:
        self._period = parse_period(value)

    def is_valid(self) -> bool:
        if self._hours is None or self._minutes is None:
            return False
        literal = render_fields(_CANONICAL_SPEC, self._hours, self._minutes, self._period)
        return is_valid(literal)

    def resolved_hour(self) -> int | None:
        """The 0-23 hour, treating an unknown period as AM. None when invalid."""
        if not self.is_valid():
            return None
        hours = 0 if self._hours == 12 else self._hours
        return hours + (HALF_DAY_HOURS if self._period is Period.PM else 0)

    def shift(self, hours: Optional[int], minutes: Optional[int]) -> bool:
        """Move the time by the given offsets within a single day.

        Minutes carry into (or borrow from) the hour. Returns False without
        touching the value if it is invalid, an offset is missing, or the
        result would leave the day.

        >>> t = ClockTime("11:35 am")
        >>> t.shift(2, 15), str(t)
        (True, '1:50 pm')
        >>> t.shift(-4, -10), str(t)
        (True, '9:40 am')
        """
        if not self.is_valid():
            logger.debug("Cannot shift invalid time %r", self)
            return False
        if hours is None or minutes is None:
            logger.debug("Cannot shift %r without both offsets", self)
            return False

        carry, new_minutes = divmod(self._minutes + int(minutes), 60)
        new_hour = self.resolved_hour() + int(hours) + carry
        if not 0 <= new_hour < 24:
            logger.debug("Shift of %r by %s:%s leaves the day", self, hours, minutes)
            return False

        self._hours = new_hour % HALF_DAY_HOURS or HALF_DAY_HOURS
        self._minutes = new_minutes
        self._period = Period.PM if new_hour > 11 else Period.AM
        return True

    def next_occurrence(self, now: Optional[datetime] = None) -> datetime | None:
        """Find the first datetime strictly after *now* showing this time.

        Assume it's 3:15 pm on Aug 10::

            ClockTime("415").next_occurrence()   # 4:15 pm Aug 10
            ClockTime("2").next_occurrence()     # 2:00 am Aug 11
            ClockTime("2pm").next_occurrence()   # 2:00 pm Aug 11
        """
        if not self.is_valid():
            logger.debug("No next occurrence for invalid time %r", self)
            return None

        current = now if now is not None else self._now()
        candidate = current.replace(
            hour=self.resolved_hour(), minute=self._minutes, second=0, microsecond=0
        )
        while candidate <= current:
            candidate += _HALF_DAY

        if not self._in_period(candidate):
            candidate += _HALF_DAY
            if not self._in_period(candidate):
                raise ProjectionError(
                    f"{candidate.isoformat()} does not fall in {self._period.name} for {self!r}"
                )
        return candidate

    def _in_period(self, moment: datetime) -> bool:
        if self._period is Period.AM:
            return moment.hour < 12
        if self._period is Period.PM:
            return moment.hour >= 12
        return True

    def render(self, fmt: str | None = None, *, default: str = DEFAULT_TIME_FORMAT) -> RenderResult:
        return render(self, fmt, default=default)

    def format(self, fmt: str | None = None, *, default: str = DEFAULT_TIME_FORMAT) -> str:
        """Render to text, or 'invalid time' / 'invalid format' on failure."""
        return format_time(self, fmt, default=default)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"ClockTime(hours={self._hours!r}, minutes={self._minutes!r}, "
            f"period={self._period.name})"
        )
