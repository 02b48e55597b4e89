"""A millisecond scheduler for repeating and delayed tasks."""

from __future__ import annotations

import itertools
import threading
import time
from datetime import timedelta
from typing import Callable

from craftserve.funcs import attempt

TaskFunction = Callable[["Task"], object]

_TICK_SECONDS = 0.001


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class Task:
    """A scheduled function; cancelling it stops further runs."""

    def __init__(
        self, tasker: Tasking, uuid: int, function: TaskFunction, period: int, paused: int
    ) -> None:
        self.tasker = tasker
        self.uuid = uuid
        self.period = period
        self.paused = paused
        self.cancelled = False
        self._function = function

    def cancel(self) -> None:
        self.cancelled = True

    def _run(self) -> Exception | None:
        return attempt(lambda: self._function(self))


class Tasking:
    """Runs tasks on a background thread; ``mpt`` is milliseconds per game tick.

    A task that raises is cancelled and its error printed.
    """

    def __init__(self, mpt: int) -> None:
        self.mpt = mpt
        self._tasks: dict[int, Task] = {}
        self._ticks: dict[Task, int] = {}
        self._queue: dict[int, list[Task]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._done = False
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def load(self) -> None:
        """Start the background thread."""
        self._done = False
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._loop, args=(self._stop,), daemon=True)
        self._thread.start()

    def kill(self) -> None:
        """Stop the thread and cancel every task; later calls do nothing."""
        with self._lock:
            if self._done:
                return
            self._done = True
            self._stop.set()
            self._ticks.clear()
            self._queue.clear()
            tasks = list(self._tasks.values())
            self._tasks.clear()
            for task in tasks:
                task.cancel()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _loop(self, stop: threading.Event) -> None:
        while not stop.wait(_TICK_SECONDS):
            now = _now_ms()
            with self._lock:
                if self._done:
                    return
                self._tick_queue(now)
                self._tick_tasks(now)

    def _tick_tasks(self, now: int) -> None:
        for task, last in list(self._ticks.items()):
            if self._done:
                return
            if now - last < task.period:
                continue
            error = task._run()
            if error is not None:
                task.cancel()
                print(error)
            if self._done:
                return
            if task.cancelled or task.period <= 0:
                self._ticks.pop(task, None)
            else:
                self._ticks[task] = now

    def _tick_queue(self, now: int) -> None:
        for when, tasks in list(self._queue.items()):
            if now < when:
                continue
            del self._queue[when]
            for task in tasks:
                self._ticks[task] = 0

    def _new_task(self, period: int, paused: int, function: TaskFunction) -> Task:
        return Task(self, next(self._ids), function, period, paused)

    def _repeats(self, period: int, function: TaskFunction) -> Task:
        with self._lock:
            task = self._new_task(period, 0, function)
            self._ticks[task] = 0
            self._tasks[task.uuid] = task
        return task

    def _delayed(self, paused: int, function: TaskFunction) -> Task:
        with self._lock:
            task = self._new_task(0, paused, function)
            when = _now_ms() + paused
            self._queue.setdefault(when, []).append(task)
            self._tasks[task.uuid] = task
        return task

    def every(self, period: int, function: TaskFunction) -> Task:
        """Run ``function`` now and then every ``period`` ticks."""
        return self._repeats(period * self.mpt, function)

    def after(self, paused: int, function: TaskFunction) -> Task:
        """Run ``function`` once after ``paused`` ticks."""
        return self._delayed(paused * self.mpt, function)

    def every_time(self, period: int, duration: timedelta, function: TaskFunction) -> Task:
        """Run ``function`` now and then every ``period`` times ``duration``."""
        return self._repeats(period * (duration // timedelta(milliseconds=1)), function)

    def after_time(self, paused: int, duration: timedelta, function: TaskFunction) -> Task:
        """Run ``function`` once after ``paused`` times ``duration``."""
        return self._delayed(paused * (duration // timedelta(milliseconds=1)), function)