"""Parse, format, shift and project 12-hour clock times."""

from clocktime.clock import ClockTime, ProjectionError
from clocktime.grammar import FormatSpec, Period, is_valid, parse_format, parse_literal
from clocktime.render import RenderError, RenderResult

__version__ = "0.1.0"

__all__ = [
    "ClockTime",
    "FormatSpec",
    "Period",
    "ProjectionError",
    "RenderError",
    "RenderResult",
    "is_valid",
    "parse_format",
    "parse_literal",
]
