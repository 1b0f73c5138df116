import asyncio

import pytest

from genai_bridge.core.async_utils import bounded_map, safe_asyncio_run


def test_safe_asyncio_run():
    async def _add(a, b):
        await asyncio.sleep(0)
        return a + b

    assert safe_asyncio_run(_add(1, 2)) == 3


def test_safe_asyncio_run_propagates_errors():
    async def _fail():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        safe_asyncio_run(_fail())


@pytest.mark.asyncio
async def test_bounded_map_keeps_input_order():
    async def _delayed_square(x):
        # Later items finish first.
        await asyncio.sleep(0.01 * (5 - x))
        return x * x

    results = await bounded_map(_delayed_square, [1, 2, 3, 4], num_workers=4)

    assert results == [1, 4, 9, 16]


@pytest.mark.asyncio
async def test_bounded_map_limits_concurrency():
    in_flight = 0
    max_in_flight = 0

    async def _track(x):
        nonlocal in_flight, max_in_flight
        in_flight += 1
        max_in_flight = max(max_in_flight, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return x

    results = await bounded_map(_track, list(range(10)), num_workers=3)

    assert results == list(range(10))
    assert max_in_flight == 3


@pytest.mark.asyncio
async def test_bounded_map_stores_exceptions_in_place():
    async def _maybe_fail(x):
        if x == 2:
            raise ValueError("bad item")
        return x

    results = await bounded_map(_maybe_fail, [1, 2, 3], num_workers=2)

    assert results[0] == 1
    assert isinstance(results[1], ValueError)
    assert results[2] == 3


@pytest.mark.asyncio
async def test_bounded_map_invalid_num_workers():
    async def _identity(x):
        return x

    with pytest.raises(ValueError):
        await bounded_map(_identity, [1], num_workers=0)
