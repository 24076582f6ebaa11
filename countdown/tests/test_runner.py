from __future__ import annotations

from datetime import datetime, timedelta, timezone
import unittest

from countdown.breakdown import Precision
from countdown.clock import FakeClock
from countdown.runner import CountdownConfig, CountdownRunner
from countdown.tests.test_helpers import CapturingSink

START = datetime(2026, 2, 13, 10, 0, tzinfo=timezone.utc)


class TestCountdownRunner(unittest.TestCase):
    def test_run_once(self) -> None:
        runner = CountdownRunner(clock=FakeClock(start=START), sink=CapturingSink())
        config = CountdownConfig(target=START + timedelta(seconds=90061))

        self.assertEqual(
            runner.run_once(config),
            "Until event: 0 weeks, 1 day, 1 hour, 1 minute, and 1 second",
        )

    def test_run_once_after_target_shows_zero(self) -> None:
        runner = CountdownRunner(clock=FakeClock(start=START), sink=CapturingSink())
        config = CountdownConfig(target=START - timedelta(hours=3), hide_zeros=True)

        self.assertEqual(runner.run_once(config), "Until event: 0 seconds")

    def test_render_respects_precision_and_hide_zeros(self) -> None:
        runner = CountdownRunner(clock=FakeClock(start=START), sink=CapturingSink())
        config = CountdownConfig(
            target=START + timedelta(days=8, minutes=30),
            precision=Precision.HOURS,
            hide_zeros=True,
        )

        self.assertEqual(runner.render(config, START), "1 week and 1 day")

    def test_interrupt_ends_loop(self) -> None:
        sink = CapturingSink()
        clock = FakeClock(start=START, interrupt_on_sleep_call=3)
        runner = CountdownRunner(clock=clock, sink=sink)

        result = runner.run(CountdownConfig(target=START + timedelta(minutes=5)))

        self.assertTrue(result.interrupted)
        self.assertFalse(result.reached)
        self.assertEqual(result.ticks, 3)
        self.assertEqual(
            sink.lines,
            [
                "0 weeks, 0 days, 0 hours, 5 minutes, and 0 seconds",
                "0 weeks, 0 days, 0 hours, 4 minutes, and 59 seconds",
                "0 weeks, 0 days, 0 hours, 4 minutes, and 59 seconds",
            ],
        )
        self.assertEqual(sink.calls[-1], ("write", "\n"))

    def test_one_line_per_tick_cleared_between(self) -> None:
        sink = CapturingSink()
        runner = CountdownRunner(clock=FakeClock(start=START, interrupt_on_sleep_call=4), sink=sink)

        runner.run(CountdownConfig(target=START + timedelta(hours=1)))

        kinds = [kind for kind, _ in sink.calls]
        self.assertEqual(
            kinds,
            ["write", "clear", "write", "clear", "write", "clear", "write", "write"],
        )

    def test_exit_at_zero_stops_loop(self) -> None:
        sink = CapturingSink()
        clock = FakeClock(start=START)
        runner = CountdownRunner(clock=clock, sink=sink)

        result = runner.run(
            CountdownConfig(target=START + timedelta(seconds=2), hide_zeros=True, exit_at_zero=True)
        )

        self.assertFalse(result.interrupted)
        self.assertTrue(result.reached)
        self.assertEqual(result.ticks, 4)
        self.assertEqual(sink.lines, ["2 seconds", "1 second", "1 second", "0 seconds"])
        self.assertEqual(clock.sleep_calls, 3)

    def test_progress_events(self) -> None:
        events: list[tuple[str, dict[str, object]]] = []
        runner = CountdownRunner(
            clock=FakeClock(start=START, interrupt_on_sleep_call=2),
            sink=CapturingSink(),
            progress_callback=lambda event, payload: events.append((event, payload)),
        )

        runner.run(CountdownConfig(target=START + timedelta(seconds=10)))

        names = [name for name, _ in events]
        self.assertEqual(names, ["run_start", "tick", "tick", "run_end"])
        self.assertEqual(events[1][1]["remaining_sec"], 10)
        self.assertEqual(events[2][1]["remaining_sec"], 9)
        self.assertTrue(events[-1][1]["interrupted"])


if __name__ == "__main__":
    unittest.main()
