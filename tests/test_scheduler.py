"""Tests for timer schedulers."""

import threading

import pytest

from memory_match.config import Config, TimingConfig
from memory_match.game.engine import GameEngine
from memory_match.game.scheduler import ManualScheduler, ThreadingScheduler


class TestManualScheduler:
    """Tests for ManualScheduler class."""

    def test_nothing_fires_without_advance(self):
        """Test callbacks wait for the clock."""
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(1.0, lambda: calls.append("once"))
        assert calls == []

    def test_call_later_fires_once(self):
        """Test one-shot timers fire at their due time only."""
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(1.0, lambda: calls.append("once"))

        assert scheduler.advance(0.9) == 0
        assert scheduler.advance(0.1) == 1
        scheduler.advance(5)
        assert calls == ["once"]
        assert scheduler.pending == []

    def test_call_every_repeats(self):
        """Test periodic timers fire once per interval."""
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_every(1.0, lambda: calls.append(scheduler.now))

        scheduler.advance(3.5)
        assert calls == [1.0, 2.0, 3.0]
        assert scheduler.now == 3.5

    def test_cancel(self):
        """Test cancelled timers never fire."""
        scheduler = ManualScheduler()
        calls = []
        timer = scheduler.call_every(1.0, lambda: calls.append(1))
        scheduler.advance(1)
        timer.cancel()
        scheduler.advance(5)

        assert calls == [1]
        assert scheduler.pending == []

    def test_cancel_from_callback(self):
        """Test a periodic timer can stop itself."""
        scheduler = ManualScheduler()
        calls = []

        def callback():
            calls.append(1)
            if len(calls) == 2:
                timer.cancel()

        timer = scheduler.call_every(1.0, callback)
        scheduler.advance(10)
        assert len(calls) == 2

    def test_order_by_due_time(self):
        """Test timers fire in due order, ties in creation order."""
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(2.0, lambda: calls.append("late"))
        scheduler.call_later(1.0, lambda: calls.append("first"))
        scheduler.call_later(1.0, lambda: calls.append("second"))

        scheduler.advance(2)
        assert calls == ["first", "second", "late"]

    def test_timer_scheduled_from_callback(self):
        """Test callbacks can schedule new timers within the same advance."""
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(
            1.0,
            lambda: scheduler.call_later(1.0, lambda: calls.append(scheduler.now)),
        )

        scheduler.advance(3)
        assert calls == [2.0]

    def test_invalid_interval(self):
        """Test periodic timers need a positive interval."""
        with pytest.raises(ValueError):
            ManualScheduler().call_every(0, lambda: None)


class TestThreadingScheduler:
    """Tests for ThreadingScheduler class."""

    def test_call_later(self):
        """Test a one-shot timer fires on a background thread."""
        fired = threading.Event()
        ThreadingScheduler().call_later(0.01, fired.set)
        assert fired.wait(2)

    def test_call_later_cancel(self):
        """Test a cancelled one-shot timer never fires."""
        fired = threading.Event()
        timer = ThreadingScheduler().call_later(0.2, fired.set)
        timer.cancel()
        assert not fired.wait(0.4)

    def test_call_every(self):
        """Test a periodic timer fires repeatedly until cancelled."""
        count = 0
        done = threading.Event()

        def callback():
            nonlocal count
            count += 1
            if count >= 3:
                done.set()

        timer = ThreadingScheduler().call_every(0.01, callback)
        assert done.wait(2)
        timer.cancel()
        assert timer.cancelled


class TestEngineOnThreads:
    """Tests for the engine with real-time timers."""

    def test_mismatch_flips_back(self):
        """Test the flip-back happens on a timer thread."""
        config = Config(timing=TimingConfig(tick_interval=60, mismatch_delay=0.05))
        resolved = threading.Event()

        with GameEngine(config) as engine:
            cards = engine.get_cards()
            first = cards[0]
            second = next(c for c in cards if c.value != first.value)

            engine.add_listener(lambda s: resolved.set() if not s.busy else None)
            engine.flip(first.id)
            resolved.clear()
            engine.flip(second.id)
            assert engine.is_busy()

            assert resolved.wait(2)
            assert not engine.is_busy()
            assert not engine.get_cards()[first.id].face_up

    def test_ticks(self):
        """Test the clock advances on its own."""
        config = Config(timing=TimingConfig(tick_interval=0.01))
        ticked = threading.Event()

        with GameEngine(config) as engine:
            engine.add_listener(
                lambda s: ticked.set() if s.elapsed_seconds >= 2 else None
            )
            assert ticked.wait(2)
