import threading
import time

import pytest

from mengine_core.task_scheduler import Task, TaskScheduler, when_all


@pytest.fixture
def scheduler():
    sched = TaskScheduler()
    yield sched
    sched.shutdown()


@pytest.fixture
def shared_scheduler():
    sched = TaskScheduler.instance()
    sched.initialize(2, 8)
    yield sched
    sched.shutdown()


def test_execute_runs_function_and_marks_done():
    results = []
    task = Task(lambda: results.append(1))
    assert not task.is_done()
    task.execute()
    assert task.is_done()
    assert results == [1]


def test_execute_swallows_exceptions():
    def fail():
        raise ValueError("boom")

    task = Task(fail)
    task.execute()
    assert task.is_done()
    assert task.wait(0)


def test_wait_times_out_when_not_run():
    task = Task(lambda: None)
    assert task.wait(0.01) is False


def test_instance_is_shared(shared_scheduler):
    looked_up = TaskScheduler.instance()
    assert looked_up.thread_count() == 2
    assert looked_up.task_count() == 8
    assert looked_up is shared_scheduler


def test_initialize_records_counts(scheduler):
    scheduler.initialize(2, 4)
    assert scheduler.thread_count() == 2
    assert scheduler.task_count() == 4


@pytest.mark.parametrize("threads, tasks", [(0, 4), (2, 0)])
def test_initialize_rejects_zero_counts(scheduler, threads, tasks):
    with pytest.raises(ValueError):
        scheduler.initialize(threads, tasks)


def test_add_task_before_initialize_raises(scheduler):
    with pytest.raises(RuntimeError, match="not initialized"):
        scheduler.add_task(Task(lambda: None))


def test_scheduler_runs_all_tasks(scheduler):
    scheduler.initialize(2, 4)
    results = []
    lock = threading.Lock()

    def make(value):
        def work():
            with lock:
                results.append(value)

        return work

    tasks = [Task(make(i)) for i in range(10)]
    for task in tasks:
        scheduler.add_task(task)
    when_all(tasks)
    assert all(task.is_done() for task in tasks)
    assert sorted(results) == list(range(10))
    scheduler.shutdown()
    assert scheduler.pending_tasks() == 0


def test_add_task_blocks_while_queue_full(scheduler):
    scheduler.initialize(1, 1)
    started = threading.Event()
    gate = threading.Event()

    def blocker():
        started.set()
        gate.wait()

    first = Task(blocker)
    scheduler.add_task(first)
    assert started.wait(5)
    second = Task(lambda: None)
    scheduler.add_task(second)
    third = Task(lambda: None)
    adder = threading.Thread(target=scheduler.add_task, args=(third,))
    adder.start()
    time.sleep(0.1)
    assert adder.is_alive()
    assert scheduler.pending_tasks() == 2
    gate.set()
    adder.join(5)
    assert not adder.is_alive()
    when_all([first, second, third])
    assert third.is_done()


def test_shutdown_drains_queue(scheduler):
    scheduler.initialize(1, 10)
    gate = threading.Event()
    tasks = [Task(gate.wait)] + [Task(lambda: None) for _ in range(4)]
    for task in tasks:
        scheduler.add_task(task)
    gate.set()
    scheduler.shutdown()
    assert all(task.is_done() for task in tasks)


def test_add_task_after_shutdown_raises(scheduler):
    scheduler.initialize(1, 2)
    scheduler.shutdown()
    with pytest.raises(RuntimeError):
        scheduler.add_task(Task(lambda: None))


def test_task_run_uses_shared_scheduler(shared_scheduler):
    results = []
    task = Task.run(lambda: results.append("ran"))
    assert task.wait(5)
    assert results == ["ran"]


def test_when_all_waits_for_run_tasks(shared_scheduler):
    counter = []
    lock = threading.Lock()

    def bump():
        time.sleep(0.01)
        with lock:
            counter.append(1)

    tasks = [Task.run(bump) for _ in range(6)]
    when_all(tasks)
    assert [task.is_done() for task in tasks] == [True] * 6
    assert len(counter) == 6