"""A bounded task queue served by a pool of worker threads."""

from __future__ import annotations

import atexit
import logging
import threading
from collections import deque
from collections.abc import Callable, Iterable
from typing import ClassVar

_log = logging.getLogger(__name__)


class Task:
    """A unit of work that can be waited on once it has run."""

    def __init__(self, func: Callable[[], object]) -> None:
        self._func = func
        self._done = threading.Event()

    def execute(self) -> None:
        """Run the work; an exception it raises is swallowed and still counts as done."""
        try:
            self._func()
        except Exception:
            _log.debug("task raised an exception", exc_info=True)
        self._done.set()

    def is_done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the task has run; return whether it has."""
        return self._done.wait(timeout)

    @classmethod
    def run(cls, func: Callable[[], object]) -> Task:
        """Queue ``func`` on the shared scheduler and return its task."""
        task = cls(func)
        TaskScheduler.instance().add_task(task)
        return task


def when_all(tasks: Iterable[Task]) -> None:
    """Block until every task has run."""
    for task in tasks:
        task.wait()


class TaskScheduler:
    """Runs queued tasks on worker threads; the queue holds at most ``task_count`` tasks."""

    _instance: ClassVar[TaskScheduler | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._tasks: deque[Task] = deque()
        self._workers: list[threading.Thread] = []
        self._thread_count = 0
        self._task_count = 0
        self._pending = 0
        self._stop = False
        self._running = False

    @classmethod
    def instance(cls) -> TaskScheduler:
        """The shared scheduler, shut down when the interpreter exits."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                atexit.register(cls._instance.shutdown)
            return cls._instance

    def initialize(self, thread_count: int, task_count: int) -> None:
        """Start ``thread_count`` workers with a queue bounded by ``task_count``."""
        if thread_count < 1:
            raise ValueError("thread_count must be at least 1")
        if task_count < 1:
            raise ValueError("task_count must be at least 1")
        with self._lock:
            self._thread_count = thread_count
            self._task_count = task_count
            self._stop = False
            self._running = True
        for _ in range(thread_count):
            worker = threading.Thread(target=self._work, daemon=True)
            self._workers.append(worker)
            worker.start()

    def _work(self) -> None:
        while True:
            with self._not_empty:
                self._not_empty.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                task = self._tasks.popleft()
            task.execute()
            with self._not_full:
                self._pending -= 1
                self._not_full.notify()

    def thread_count(self) -> int:
        return self._thread_count

    def task_count(self) -> int:
        return self._task_count

    def pending_tasks(self) -> int:
        """Tasks queued or running that have not yet finished."""
        with self._lock:
            return self._pending

    def add_task(self, task: Task) -> None:
        """Queue ``task``, blocking while the queue is full."""
        with self._not_full:
            if not self._running:
                raise RuntimeError("TaskScheduler is not initialized")
            self._not_full.wait_for(lambda: len(self._tasks) < self._task_count)
            self._tasks.append(task)
            self._pending += 1
            self._not_empty.notify()

    def shutdown(self) -> None:
        """Let the workers drain the queue, then stop and join them."""
        with self._not_empty:
            self._stop = True
            self._running = False
            self._not_empty.notify_all()
        workers, self._workers = self._workers, []
        for worker in workers:
            worker.join()