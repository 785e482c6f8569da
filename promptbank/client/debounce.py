"""Cancellable one-shot scheduling for debounced work."""

import functools
import logging
import threading
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Cancellable(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Cancellable]


def _thread_timer(delay: float, fn: Callable[[], None]) -> Cancellable:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    return timer


class Debouncer:
    """Run ``fn`` once ``delay`` seconds after the last ``trigger()``.

    Each trigger cancels the pending run and arms a new one, so a burst of
    triggers inside the window results in a single call. A timer that was
    already firing when it got replaced or cancelled does nothing.
    """

    def __init__(
        self,
        delay: float,
        fn: Callable[[], None],
        timer_factory: Optional[TimerFactory] = None,
    ):
        self.delay = delay
        self._fn = fn
        self._timer_factory = timer_factory or _thread_timer
        self._timer: Optional[Cancellable] = None
        self._generation = 0
        self._lock = threading.Lock()

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = self._timer_factory(self.delay, functools.partial(self._fire, self._generation))
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        try:
            self._fn()
        except Exception:
            logger.exception("Debounced call failed")
