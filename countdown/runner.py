from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .breakdown import DurationBreakdown, Precision, format_breakdown, whole_seconds
from .clock import Clock
from .display import DisplaySink

REFRESH_INTERVAL_SECONDS = 0.5


@dataclass(frozen=True)
class CountdownConfig:
    target: datetime
    precision: Precision = Precision.SECONDS
    hide_zeros: bool = False
    interval_seconds: float = REFRESH_INTERVAL_SECONDS
    exit_at_zero: bool = False


@dataclass(frozen=True)
class RunResult:
    interrupted: bool
    ticks: int
    reached: bool


ProgressCallback = Callable[[str, dict[str, object]], None]


def breakdown_at(config: CountdownConfig, now: datetime) -> DurationBreakdown:
    return DurationBreakdown.from_timedelta(config.target - now, config.precision)


class CountdownRunner:
    def __init__(
        self,
        clock: Clock,
        sink: DisplaySink,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self.clock = clock
        self.sink = sink
        self.progress_callback = progress_callback

    def render(self, config: CountdownConfig, now: datetime) -> str:
        return format_breakdown(breakdown_at(config, now), hide_zeros=config.hide_zeros)

    def run_once(self, config: CountdownConfig) -> str:
        return f"Until event: {self.render(config, self.clock.now())}"

    def run(self, config: CountdownConfig) -> RunResult:
        """Redraw the remaining time on one line until interrupted.

        With ``exit_at_zero`` the loop also stops once the target is reached.
        """
        ticks = 0
        reached = False
        interrupted = False
        self._emit("run_start", target=config.target, precision=config.precision.value)

        try:
            while True:
                now = self.clock.now()
                remaining = whole_seconds(config.target - now)
                text = self.render(config, now)
                self.sink.write(text)
                ticks += 1
                self._emit("tick", text=text, remaining_sec=remaining, now=now)

                if config.exit_at_zero and remaining == 0:
                    reached = True
                    break

                self.clock.sleep(config.interval_seconds)
                self.sink.clear_line()
        except KeyboardInterrupt:
            interrupted = True

        # leave the last drawn line in place for the shell prompt
        self.sink.write("\n")
        self._emit("run_end", interrupted=interrupted, ticks=ticks, reached=reached)
        return RunResult(interrupted=interrupted, ticks=ticks, reached=reached)

    def _emit(self, event: str, **payload: object) -> None:
        if self.progress_callback is None:
            return
        self.progress_callback(event, payload)
