"""Splitting a span of time into weeks, days, hours, minutes and seconds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY


class Precision(Enum):
    """Finest unit kept in a breakdown."""

    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"

    @property
    def unit_seconds(self) -> int:
        return _UNIT_SECONDS[self.value]


# Largest first; partitioning walks this in order.
_UNITS: tuple[tuple[str, int], ...] = (
    ("weeks", SECONDS_PER_WEEK),
    ("days", SECONDS_PER_DAY),
    ("hours", SECONDS_PER_HOUR),
    ("minutes", SECONDS_PER_MINUTE),
    ("seconds", 1),
)
_UNIT_SECONDS = dict(_UNITS)
_UNIT_ORDER = tuple(name for name, _ in _UNITS)


@dataclass(frozen=True)
class DurationBreakdown:
    """A non-negative span split into unit buckets.

    ``weeks`` is unbounded; every other field stays below the size of the next
    larger unit. Units finer than ``precision`` are always zero.
    """

    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    precision: Precision = Precision.SECONDS

    @classmethod
    def from_timedelta(
        cls,
        span: timedelta,
        precision: Precision = Precision.SECONDS,
    ) -> DurationBreakdown:
        return partition(span, precision)

    @property
    def total_seconds(self) -> int:
        return sum(value * _UNIT_SECONDS[name] for name, value in self._all_parts())

    @property
    def is_zero(self) -> bool:
        return self.total_seconds == 0

    def parts(self) -> list[tuple[str, int]]:
        """Ordered ``(unit, value)`` pairs for the units the precision keeps."""
        keep = _UNIT_ORDER.index(self.precision.value) + 1
        return self._all_parts()[:keep]

    def _all_parts(self) -> list[tuple[str, int]]:
        return [
            ("weeks", self.weeks),
            ("days", self.days),
            ("hours", self.hours),
            ("minutes", self.minutes),
            ("seconds", self.seconds),
        ]

    def __str__(self) -> str:
        return format_breakdown(self)


def whole_seconds(span: timedelta | int | float) -> int:
    """Whole seconds in ``span``, truncating sub-second parts and clamping at zero."""
    if isinstance(span, timedelta):
        if span <= timedelta(0):
            return 0
        return span.days * SECONDS_PER_DAY + span.seconds
    return max(0, int(span))


def partition(
    span: timedelta | int | float,
    precision: Precision = Precision.SECONDS,
) -> DurationBreakdown:
    """Greedily extract weeks, days, hours, minutes and seconds from ``span``.

    A negative span (the target has already passed) is clamped to zero.
    Units finer than ``precision`` are discarded, not folded upwards: the span
    is floored to a whole number of precision units before splitting.
    """
    total = whole_seconds(span)
    total -= total % precision.unit_seconds

    values: dict[str, int] = {}
    for name, size in _UNITS:
        values[name], total = divmod(total, size)
    return DurationBreakdown(precision=precision, **values)


def pluralize(value: int, unit: str) -> str:
    """``unit`` is the plural name; the singular is used only for exactly 1."""
    label = unit[:-1] if value == 1 else unit
    return f"{value} {label}"


def join_parts(rendered: list[str]) -> str:
    if len(rendered) <= 1:
        return "".join(rendered)
    if len(rendered) == 2:
        return f"{rendered[0]} and {rendered[1]}"
    return ", ".join(rendered[:-1]) + ", and " + rendered[-1]


def format_breakdown(breakdown: DurationBreakdown, hide_zeros: bool = False) -> str:
    parts = breakdown.parts()
    if hide_zeros:
        parts = [(name, value) for name, value in parts if value != 0]
        if not parts:
            return pluralize(0, breakdown.precision.value)
    return join_parts([pluralize(value, name) for name, value in parts])
