import asyncio

from services.debounce import Debouncer, Throttler


def test_burst_fires_once_with_last_arguments():
    calls = []

    async def downstream(query):
        calls.append(query)

    async def scenario():
        debounced = Debouncer(downstream, 0.1)
        for q in ("P", "Pa", "Par", "Paris"):
            debounced(q)
            await asyncio.sleep(0.01)
        assert debounced.pending
        await debounced.drain()

    asyncio.run(scenario())
    assert calls == ["Paris"]


def test_calls_separated_by_quiet_window_both_fire():
    calls = []

    async def downstream(query):
        calls.append(query)

    async def scenario():
        debounced = Debouncer(downstream, 0.05)
        debounced("Lou")
        await asyncio.sleep(0.15)
        debounced("Louvre")
        await debounced.drain()

    asyncio.run(scenario())
    assert calls == ["Lou", "Louvre"]


def test_cancel_drops_pending_call():
    calls = []

    async def downstream(query):
        calls.append(query)

    async def scenario():
        debounced = Debouncer(downstream, 0.05)
        debounced("Eiffel")
        debounced.cancel()
        assert not debounced.pending
        await asyncio.sleep(0.1)

    asyncio.run(scenario())
    assert calls == []


def test_started_call_is_not_cancelled_by_newer_input():
    finished = []

    async def downstream(query):
        await asyncio.sleep(0.1)
        finished.append(query)

    async def scenario():
        debounced = Debouncer(downstream, 0.02)
        debounced("first")
        await asyncio.sleep(0.05)  # first call is now in flight
        debounced("second")
        await debounced.drain()
        await asyncio.sleep(0.15)

    asyncio.run(scenario())
    assert sorted(finished) == ["first", "second"]


def test_downstream_errors_do_not_escape(caplog):
    async def downstream(query):
        raise RuntimeError("boom")

    async def scenario():
        debounced = Debouncer(downstream, 0.01)
        debounced("x")
        await debounced.drain()

    asyncio.run(scenario())
    assert "Debounced call failed" in caplog.text


def test_throttle_leading_and_trailing_edges():
    calls = []

    async def scenario():
        throttled = Throttler(calls.append, 0.1)
        throttled("a")
        throttled("b")
        throttled("c")
        assert calls == ["a"]
        await asyncio.sleep(0.15)
        assert calls == ["a", "c"]
        await asyncio.sleep(0.15)
        throttled("d")

    asyncio.run(scenario())
    assert calls == ["a", "c", "d"]


def test_throttle_cancel_drops_trailing_call():
    calls = []

    async def scenario():
        throttled = Throttler(calls.append, 0.05)
        throttled("a")
        throttled("b")
        throttled.cancel()
        await asyncio.sleep(0.1)

    asyncio.run(scenario())
    assert calls == ["a"]
