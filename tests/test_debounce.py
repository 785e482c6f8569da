"""Tests for the Debouncer."""

import threading

from promptbank.client.debounce import Debouncer


class TestDebouncer:

    def test_burst_produces_single_call(self, timers):
        calls = []
        debouncer = Debouncer(1.0, lambda: calls.append(1), timer_factory=timers)
        for _ in range(5):
            debouncer.trigger()

        assert len(timers.live) == 1
        timers.fire()
        assert calls == [1]
        assert not debouncer.pending

    def test_each_trigger_cancels_previous(self, timers):
        debouncer = Debouncer(1.0, lambda: None, timer_factory=timers)
        debouncer.trigger()
        debouncer.trigger()
        assert timers.created[0].cancelled
        assert timers.created[1].delay == 1.0

    def test_cancel_drops_pending_call(self, timers):
        calls = []
        debouncer = Debouncer(1.0, lambda: calls.append(1), timer_factory=timers)
        debouncer.trigger()
        debouncer.cancel()
        timers.fire()
        assert calls == []

    def test_late_fire_of_replaced_timer_is_ignored(self, timers):
        calls = []
        debouncer = Debouncer(1.0, lambda: calls.append(1), timer_factory=timers)
        debouncer.trigger()
        first = timers.created[0]
        debouncer.trigger()
        second = timers.created[1]

        # The first timer was already running when it got cancelled.
        first.fn()
        assert calls == []
        assert debouncer.pending

        debouncer.cancel()
        assert second.cancelled
        assert not debouncer.pending

    def test_late_fire_after_cancel_is_ignored(self, timers):
        calls = []
        debouncer = Debouncer(1.0, lambda: calls.append(1), timer_factory=timers)
        debouncer.trigger()
        debouncer.cancel()
        timers.created[0].fn()
        assert calls == []

    def test_failing_callback_does_not_propagate(self, timers):
        def boom():
            raise RuntimeError("boom")

        debouncer = Debouncer(1.0, boom, timer_factory=timers)
        debouncer.trigger()
        timers.fire()
        assert not debouncer.pending

    def test_real_timer_fires(self):
        done = threading.Event()
        debouncer = Debouncer(0.01, done.set)
        debouncer.trigger()
        assert done.wait(2.0)
