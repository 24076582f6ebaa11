from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from .breakdown import format_breakdown
from .runner import CountdownConfig, breakdown_at


class BreakdownOut(BaseModel):
    target: datetime
    now: datetime
    precision: str
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    total_seconds: int
    text: str
    passed: bool

    @classmethod
    def build(cls, config: CountdownConfig, now: datetime) -> BreakdownOut:
        breakdown = breakdown_at(config, now)
        return cls(
            target=config.target,
            now=now,
            precision=config.precision.value,
            weeks=breakdown.weeks,
            days=breakdown.days,
            hours=breakdown.hours,
            minutes=breakdown.minutes,
            seconds=breakdown.seconds,
            total_seconds=breakdown.total_seconds,
            text=format_breakdown(breakdown, hide_zeros=config.hide_zeros),
            passed=now >= config.target,
        )
