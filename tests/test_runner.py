"""Stream runner loop against the mock display."""
import asyncio
import random
import unittest
from unittest import mock

import numpy as np

from ledtable.graphics.color import rainbow, sky
from ledtable.hardware.display.udp import UDPMatrixDisplay, UDPMatrixDisplayMock
from ledtable.hardware.runner import StreamConfig, StreamRunner
from ledtable.patterns import LissajousPattern, PerlinPattern, RainPattern, WavyPattern
from ledtable.protocol.frame import decode_frame


def quick_config(max_ticks=None) -> StreamConfig:
    return StreamConfig(frame_period=0.0, max_ticks=max_ticks, log_interval=0)


class StopAfter(UDPMatrixDisplayMock):
    """Mock display that stops its runner after a number of frames."""

    def __init__(self, frames: int):
        super().__init__()
        self.limit = frames
        self.runner = None

    def show(self) -> None:
        super().show()
        if len(self.frames) >= self.limit:
            self.runner.stop()


class TestStreamConfig(unittest.TestCase):

    def test_pattern_defaults(self):
        config = StreamConfig.for_pattern(LissajousPattern(freq=1.0))
        self.assertEqual(config.frame_period, 0.010)
        self.assertEqual(config.max_ticks, 10_000)

        config = StreamConfig.for_pattern(RainPattern())
        self.assertEqual(config.frame_period, 0.016)
        self.assertIsNone(config.max_ticks)

    def test_overrides(self):
        config = StreamConfig.for_pattern(
            LissajousPattern(freq=1.0), max_ticks=100, frame_period=None
        )
        self.assertEqual(config.max_ticks, 100)
        self.assertEqual(config.frame_period, 0.010)


class TestStreamRunner(unittest.TestCase):

    def test_bounded_run_sends_one_frame_per_tick(self):
        display = UDPMatrixDisplayMock()
        runner = StreamRunner(WavyPattern(), rainbow, display, quick_config(max_ticks=5))
        asyncio.run(runner.run())

        self.assertEqual(len(display.frames), 5)
        self.assertEqual(runner.tick, 5)
        self.assertFalse(runner.is_running)
        for frame in display.frames:
            self.assertEqual(decode_frame(frame).count, 225)

    def test_frames_follow_ticks(self):
        display = UDPMatrixDisplayMock()
        pattern = WavyPattern()
        runner = StreamRunner(pattern, rainbow, display, quick_config(max_ticks=3))
        asyncio.run(runner.run())

        replay = StreamRunner(WavyPattern(), rainbow, UDPMatrixDisplayMock(), quick_config())
        for tick, frame in enumerate(display.frames):
            np.testing.assert_array_equal(decode_frame(frame).pixels, replay.render(tick))

    def test_stop_ends_unbounded_run(self):
        display = StopAfter(3)
        runner = StreamRunner(RainPattern(rng=random.Random(1)), sky, display, quick_config())
        display.runner = runner
        asyncio.run(runner.run())
        self.assertEqual(len(display.frames), 3)

    def test_sleeps_fixed_period_between_frames(self):
        display = UDPMatrixDisplayMock()
        config = StreamConfig(frame_period=0.016, max_ticks=4, log_interval=0)
        runner = StreamRunner(WavyPattern(), rainbow, display, config)

        with mock.patch("ledtable.hardware.runner.asyncio.sleep", new=mock.AsyncMock()) as sleep:
            asyncio.run(runner.run())

        self.assertEqual(sleep.await_count, 4)
        sleep.assert_awaited_with(0.016)

    def test_running_normalization_stays_in_unit_range(self):
        runner = StreamRunner(
            PerlinPattern(rng=random.Random(2)), sky, UDPMatrixDisplayMock(), quick_config()
        )
        for tick in range(30):
            field = runner.prepare(runner.pattern.generate(tick))
            self.assertGreaterEqual(field.min(), 0.0)
            self.assertLessEqual(field.max(), 1.0)
        self.assertLess(runner.extrema.minimum, runner.extrema.maximum)

    def test_per_frame_normalization(self):
        runner = StreamRunner(
            LissajousPattern(freq=1.7), rainbow, UDPMatrixDisplayMock(), quick_config()
        )
        field = runner.prepare(runner.pattern.generate(0))
        self.assertEqual(field.min(), 0.0)
        self.assertEqual(field.max(), 1.0)

    def test_debug_stats_logged_on_interval(self):
        config = StreamConfig(frame_period=0.0, max_ticks=4, log_interval=2)
        runner = StreamRunner(WavyPattern(), rainbow, UDPMatrixDisplayMock(), config)
        with self.assertLogs("ledtable.hardware.runner", level="DEBUG") as logs:
            asyncio.run(runner.run())
        self.assertEqual(sum("Tick=" in line for line in logs.output), 2)


class TestSendFailures(unittest.TestCase):
    """Transmit errors are swallowed; the stream keeps going."""

    def test_failed_sends_are_counted_not_raised(self):
        display = UDPMatrixDisplay(host="127.0.0.1", port=9)
        self.assertTrue(display.init())
        real_sock = display._sock
        display._sock = mock.Mock()
        display._sock.send.side_effect = OSError("network unreachable")
        try:
            runner = StreamRunner(WavyPattern(), rainbow, display, quick_config(max_ticks=4))
            asyncio.run(runner.run())
        finally:
            real_sock.close()

        self.assertEqual(runner.tick, 4)
        self.assertEqual(display._sock.send.call_count, 4)
        self.assertEqual(display.dropped_frames, 4)
        self.assertEqual(display.frames_sent, 0)


if __name__ == "__main__":
    unittest.main()
