import asyncio
import time
import pytest
from underbar.core.errors import ArgumentError, SchedulerError
from underbar.scheduling import AsyncioScheduler, ManualScheduler, Scheduler


@pytest.fixture
def scheduler():
    return ManualScheduler(start_ms=1000)


def test_schedulers_implement_protocol():
    assert isinstance(ManualScheduler(), Scheduler)
    assert isinstance(AsyncioScheduler(), Scheduler)
    with pytest.raises(TypeError):
        Scheduler()


def test_manual_clock_only_moves_on_advance(scheduler):
    assert scheduler.now() == 1000
    scheduler.advance(250)
    assert scheduler.now() == 1250


def test_manual_runs_tasks_in_due_order(scheduler):
    order = []
    scheduler.call_later(30, order.append, "late")
    scheduler.call_later(10, order.append, "early")
    scheduler.call_later(10, order.append, "early-second")
    assert scheduler.pending == 3

    scheduler.advance(30)

    assert order == ["early", "early-second", "late"]
    assert scheduler.pending == 0


def test_manual_task_sees_its_due_time(scheduler):
    seen = []
    scheduler.call_later(40, lambda: seen.append(scheduler.now()))
    scheduler.advance(100)

    assert seen == [1040]
    assert scheduler.now() == 1100


def test_manual_runs_tasks_scheduled_during_advance(scheduler):
    order = []

    def first():
        order.append("first")
        scheduler.call_later(5, order.append, "nested")
        scheduler.call_later(500, order.append, "too-late")

    scheduler.call_later(10, first)
    scheduler.advance(20)

    assert order == ["first", "nested"]
    assert scheduler.pending == 1

    scheduler.run_all()
    assert order == ["first", "nested", "too-late"]
    assert scheduler.now() == 1510


def test_manual_callback_errors_propagate(scheduler):
    def explode():
        raise RuntimeError("task failed")

    scheduler.call_later(5, explode)
    with pytest.raises(RuntimeError, match="task failed"):
        scheduler.advance(10)


def test_manual_rejects_negative_durations(scheduler):
    with pytest.raises(ArgumentError):
        scheduler.call_later(-1, print)
    with pytest.raises(ArgumentError):
        scheduler.advance(-1)


def test_asyncio_scheduler_call_later_requires_loop():
    with pytest.raises(SchedulerError):
        AsyncioScheduler().call_later(10, print)


def test_asyncio_scheduler_clock_without_loop():
    scheduler = AsyncioScheduler()
    before = time.monotonic() * 1000
    reading = scheduler.now()

    assert before <= reading <= time.monotonic() * 1000


def test_asyncio_scheduler_with_explicit_loop():
    loop = asyncio.new_event_loop()
    try:
        scheduler = AsyncioScheduler(loop)
        fired = []
        scheduler.call_later(10, fired.append, "done")
        assert scheduler.now() == pytest.approx(loop.time() * 1000, abs=50)

        loop.run_until_complete(asyncio.sleep(0.05))
        assert fired == ["done"]
    finally:
        loop.close()


def test_asyncio_scheduler_uses_running_loop():
    fired = []

    async def main():
        scheduler = AsyncioScheduler()
        scheduler.call_later(0, fired.append, 1)
        await asyncio.sleep(0.01)

    asyncio.run(main())
    assert fired == [1]
