"""Callback timers run on background threads, and an elapsed-time stopwatch."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Optional


class Timer:
    """Calls a callback after a delay, once or repeatedly until stopped."""

    def __init__(self, repeating: bool = False) -> None:
        self._repeating = repeating
        self._running = False
        self._cancel: Optional[threading.Event] = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_repeating(self) -> bool:
        return self._repeating

    def start(self, delay_ms: float, callback: Callable[[], object]) -> None:
        """Schedule ``callback`` after ``delay_ms`` milliseconds.

        A timer already pending is stopped first.
        """
        if delay_ms < 0:
            raise ValueError("delay must not be negative")
        self.stop()
        cancel = threading.Event()
        with self._lock:
            self._cancel = cancel
            self._running = True
        thread = threading.Thread(
            target=self._run, args=(delay_ms / 1000.0, callback, cancel), daemon=True
        )
        thread.start()

    def _run(self, delay: float, callback: Callable[[], object], cancel: threading.Event) -> None:
        while not cancel.wait(delay):
            with self._lock:
                if cancel.is_set():
                    return
                self._running = self._repeating
            callback()
            if not self._repeating:
                return

    def stop(self) -> None:
        with self._lock:
            self._running = False
            if self._cancel is not None:
                self._cancel.set()
                self._cancel = None

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()


class OneShotTimer(Timer):
    """A timer that fires once."""

    def __init__(self) -> None:
        super().__init__(repeating=False)


class RepeatingTimer(Timer):
    """A timer that fires every interval until stopped."""

    def __init__(self) -> None:
        super().__init__(repeating=True)


def single_shot(delay_ms: float, callback: Callable[[], object]) -> OneShotTimer:
    """Fire ``callback`` once after ``delay_ms``; returns the started timer."""
    timer = OneShotTimer()
    timer.start(delay_ms, callback)
    return timer


class ElapsedTimer:
    """Measures time since it was (re)started, frozen once stopped."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = clock()
        self._end: Optional[float] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._start = self._clock()
        self._end = None
        self._running = True

    def stop(self) -> None:
        self._end = self._clock()
        self._running = False

    def _elapsed(self) -> float:
        end = self._end if self._end is not None else self._clock()
        return end - self._start

    def elapsed_ms(self) -> int:
        return int(self._elapsed() * 1000)

    def elapsed_us(self) -> int:
        return int(self._elapsed() * 1000000)