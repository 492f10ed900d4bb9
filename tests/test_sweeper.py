import asyncio

from lotto_backend.sweeper import RoomSweeper

from .conftest import HOUR


def test_run_once_uses_store_clock(store, clock):
    sweeper = RoomSweeper(store, interval=600, ttl=24 * HOUR)
    store.create_room()
    assert sweeper.run_once() == 0

    clock.advance(25 * HOUR)
    assert sweeper.run_once() == 1
    assert len(store) == 0


def test_run_once_accepts_explicit_time(store, clock):
    sweeper = RoomSweeper(store, ttl=HOUR)
    store.create_room()
    assert sweeper.run_once(now=clock.now + 2 * HOUR) == 1


def test_start_is_idempotent_and_stop_cancels(store):
    sweeper = RoomSweeper(store, interval=600)

    async def scenario():
        sweeper.start()
        task = sweeper._task
        sweeper.start()
        assert sweeper._task is task
        assert sweeper.running
        await sweeper.stop()
        assert not sweeper.running
        assert task.cancelled()

    asyncio.run(scenario())


def test_background_loop_sweeps_periodically(store, clock):
    sweeper = RoomSweeper(store, interval=0.01, ttl=HOUR)
    store.create_room()
    clock.advance(2 * HOUR)

    async def scenario():
        sweeper.start()
        await asyncio.sleep(0.1)
        await sweeper.stop()

    asyncio.run(scenario())
    assert len(store) == 0


def test_failed_sweep_does_not_stop_loop(store, monkeypatch):
    sweeper = RoomSweeper(store, interval=0.01)
    calls = []

    def flaky_sweep(now=None, ttl=None):
        calls.append(now)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return 0

    monkeypatch.setattr(store, "sweep_expired", flaky_sweep)

    async def scenario():
        sweeper.start()
        await asyncio.sleep(0.1)
        await sweeper.stop()

    asyncio.run(scenario())
    assert len(calls) >= 2
