"""
Cooperative timer scheduling for the frame loop
"""

import itertools
import time
from typing import Callable, List, Optional


class ScheduledTask:
    """
    One-shot or repeating callback owned by a TimerScheduler.

    Created through TimerScheduler.call_later() / call_every(), never directly.
    """

    def __init__(self, deadline: float, callback: Callable[[], None],
                 interval: Optional[float], order: int, name: str = ""):
        self.deadline: float = deadline
        self.callback: Callable[[], None] = callback
        self.interval: Optional[float] = interval  # seconds, None for one-shot
        self.order: int = order
        self.name: str = name
        self.cancelled: bool = False
        self.fired_count: int = 0

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        """Prevent any further firing (idempotent)"""
        self.cancelled = True

    def __str__(self) -> str:
        kind = "every" if self.repeating else "once"
        state = "cancelled" if self.cancelled else f"due@{self.deadline:.3f}"
        return f"ScheduledTask({self.name or 'unnamed'}, {kind}, {state})"


class TimerScheduler:
    """
    Single-threaded scheduler ticked by the frame loop.

    No threads are involved: update() fires every task whose deadline has
    passed, in deadline order (creation order on ties). A callback may cancel
    other tasks or arm new ones; a task cancelled earlier in the same update()
    does not fire, and a newly armed task only fires once its own deadline is due.

    Example:
        scheduler = TimerScheduler()
        task = scheduler.call_later(7000, lambda: print("warning"))

        # In update loop (runs every 20ms):
        scheduler.update()
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        """
        Args:
            clock: Time source in seconds (time.time in production, fake clock in tests)
        """
        self._clock = clock
        self._tasks: List[ScheduledTask] = []
        self._order = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay_ms: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        """
        Fire `callback` once, `delay_ms` from now.

        Returns:
            ScheduledTask handle that can be cancelled
        """
        if delay_ms < 0:
            raise ValueError(f"Delay must not be negative, got {delay_ms}")
        task = ScheduledTask(self.now() + delay_ms / 1000.0, callback, None, next(self._order), name)
        self._tasks.append(task)
        return task

    def call_every(self, interval_ms: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        """
        Fire `callback` every `interval_ms`, first firing one interval from now.

        Returns:
            ScheduledTask handle that can be cancelled
        """
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive, got {interval_ms}")
        interval = interval_ms / 1000.0
        task = ScheduledTask(self.now() + interval, callback, interval, next(self._order), name)
        self._tasks.append(task)
        return task

    def update(self) -> int:
        """
        Fire all due tasks.

        Returns:
            Number of callbacks invoked
        """
        now = self.now()
        fired = 0

        while True:
            self._tasks = [task for task in self._tasks if not task.cancelled]
            due = [task for task in self._tasks if task.deadline <= now]
            if not due:
                break

            task = min(due, key=lambda t: (t.deadline, t.order))
            if task.repeating:
                task.deadline += task.interval
            else:
                task.cancelled = True  # consumed

            task.fired_count += 1
            fired += 1
            task.callback()

        return fired

    def pending_count(self) -> int:
        """Number of tasks that may still fire"""
        return sum(1 for task in self._tasks if not task.cancelled)

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()


class TimerPair:
    """
    Countdown of the active letter: warning deadline, expiry deadline and the
    repeating blink started by the warning.

    cancel() stops all three and may be called any number of times.
    """

    def __init__(self, position: int, warning: ScheduledTask, expiry: ScheduledTask):
        self.position: int = position
        self.warning: ScheduledTask = warning
        self.expiry: ScheduledTask = expiry
        self.blink: Optional[ScheduledTask] = None

    def cancel_blink(self) -> None:
        if self.blink is not None:
            self.blink.cancel()
            self.blink = None

    def cancel(self) -> None:
        self.warning.cancel()
        self.expiry.cancel()
        self.cancel_blink()

    @property
    def active(self) -> bool:
        """True while the expiry may still fire"""
        return not self.expiry.cancelled
