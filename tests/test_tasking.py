import threading
import time
from datetime import timedelta

from craftserve.tasking import Tasking


def _wait_until(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_repeating_task_cancelled_after_raising():
    tasker = Tasking(1_000 // 20)
    tasker.load()
    runs = []

    def print_current_task(_task):
        runs.append(len(runs))
        if len(runs) >= 2:
            raise RuntimeError("hi")

    try:
        task = tasker.every(20, print_current_task)
        assert task.tasker is tasker
        assert task.period == 1000
        _wait_until(lambda: task.cancelled, timeout=4.0)
        assert task.cancelled is True
        time.sleep(0.1)
        assert runs == [0, 1]
    finally:
        tasker.kill()


def test_every_runs_repeatedly():
    tasker = Tasking(5)
    tasker.load()
    runs = []
    try:
        tasker.every(1, lambda task: runs.append(task.uuid))
        assert _wait_until(lambda: len(runs) >= 3)
    finally:
        tasker.kill()
    count = len(runs)
    time.sleep(0.05)
    assert len(runs) == count


def test_after_runs_once_after_delay():
    tasker = Tasking(1)
    tasker.load()
    fired = threading.Event()
    runs = []

    def job(task):
        runs.append(task)
        fired.set()

    try:
        task = tasker.after(150, job)
        assert runs == []
        assert fired.wait(3.0)
        time.sleep(0.05)
        assert runs == [task]
    finally:
        tasker.kill()


def test_after_time_and_every_time_use_duration():
    tasker = Tasking(1000)
    tasker.load()
    delayed = threading.Event()
    repeated = []
    try:
        tasker.after_time(10, timedelta(milliseconds=1), lambda task: delayed.set())
        task = tasker.every_time(1, timedelta(milliseconds=10), lambda t: repeated.append(t))
        assert task.period == 10
        assert delayed.wait(3.0)
        assert _wait_until(lambda: len(repeated) >= 2)
    finally:
        tasker.kill()


def test_task_ids_increase_and_link_back():
    tasker = Tasking(50)
    first = tasker.every(100, lambda task: None)
    second = tasker.after(100, lambda task: None)
    assert second.uuid == first.uuid + 1
    assert first.tasker is tasker
    assert first.period == 5000
    assert second.paused == 5000


def test_kill_cancels_tasks_and_is_idempotent():
    tasker = Tasking(50)
    tasker.load()
    repeating = tasker.every(100, lambda task: None)
    delayed = tasker.after(100, lambda task: None)
    tasker.kill()
    tasker.kill()
    assert repeating.cancelled is True
    assert delayed.cancelled is True


def test_cancel_stops_repeating_task():
    tasker = Tasking(1)
    tasker.load()
    runs = []

    def job(task):
        runs.append(1)
        if len(runs) == 2:
            task.cancel()

    try:
        task = tasker.every(1, job)
        assert task.cancelled is False
        _wait_until(lambda: len(runs) >= 2)
        time.sleep(0.05)
        assert task.cancelled is True
        assert len(runs) == 2
    finally:
        tasker.kill()