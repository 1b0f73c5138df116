# Copyright 2025 - Oumi
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import asyncio
from collections.abc import Awaitable, Coroutine, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


def safe_asyncio_run(main: Coroutine[Any, Any, T]) -> T:
    """Run an Awaitable in a new thread. Blocks until the thread is finished.

    This circumvents the issue of running async functions in the main thread when
    an event loop is already running (Jupyter notebooks, for example).

    Prefer using `safe_asyncio_run` over `asyncio.run` to allow upstream callers to
    ignore our dependency on asyncio.

    Args:
        main: The Coroutine to resolve.

    Returns:
        The result of the Coroutine.
    """
    with ThreadPoolExecutor(max_workers=1) as executor:
        task = executor.submit(asyncio.run, main)
        return task.result()


async def bounded_map(
    fn: Callable[[U], Awaitable[T]],
    items: Sequence[U],
    num_workers: int,
) -> list[Union[T, Exception]]:
    """Applies `fn` to every item with at most `num_workers` calls in flight.

    Results are placed by index, so the output order always matches `items`.
    A failing call doesn't cancel the others: its exception is stored in place
    of the result.

    Args:
        fn: Coroutine function to apply.
        items: Inputs, one call per item.
        num_workers: Maximum number of concurrent calls.

    Returns:
        A list aligned with `items` holding either a result or an exception.
    """
    if num_workers < 1:
        raise ValueError("num_workers must be greater than or equal to 1.")

    semaphore = asyncio.BoundedSemaphore(num_workers)

    async def _run(item: U) -> Union[T, Exception]:
        async with semaphore:
            try:
                return await fn(item)
            except Exception as e:
                return e

    return list(await asyncio.gather(*[_run(item) for item in items]))
