"""Task and queue patterns: completion signals, a prime generator and a multi-queue select."""

from __future__ import annotations

import asyncio
import inspect
import math
from typing import Any, AsyncIterator, Callable, Iterator

_PRIME_QUEUE_SIZE = 100
_MULTI_QUEUE_SIZE = 100
_MULTI_ROUNDS = 10
_END = object()


def primes_below(limit: int = 100_000) -> Iterator[int]:
    """Yield the primes smaller than ``limit`` in ascending order."""
    if limit <= 2:
        return
    yield 2
    for candidate in range(3, limit, 2):
        root = math.isqrt(candidate)
        if not any(candidate % divisor == 0 for divisor in range(3, root + 1, 2)):
            yield candidate


async def prime_channel(limit: int = 100_000) -> AsyncIterator[int]:
    """Yield the primes below ``limit``, produced by a separate task through a bounded queue."""
    queue: asyncio.Queue = asyncio.Queue(maxsize=_PRIME_QUEUE_SIZE)

    async def produce() -> None:
        for prime in primes_below(limit):
            await queue.put(prime)
        await queue.put(_END)

    producer = asyncio.create_task(produce())
    try:
        while (item := await queue.get()) is not _END:
            yield item
    finally:
        producer.cancel()


async def run_and_wait(task: Callable[[], Any]) -> Any:
    """Run ``task`` in a separate asyncio task and wait for its completion signal.

    ``task`` may be a plain or a coroutine function; its result is returned and
    an exception it raises is raised here.
    """
    done: asyncio.Queue = asyncio.Queue(maxsize=1)

    async def worker() -> None:
        try:
            result = task()
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:  # delivered to the waiting side
            await done.put((False, exc))
        else:
            await done.put((True, result))

    runner = asyncio.create_task(worker())
    ok, payload = await done.get()
    await runner
    if not ok:
        raise payload
    return payload


async def multi_channel(
    int_queue: asyncio.Queue,
    str_queue: asyncio.Queue,
    end: asyncio.Future,
    interval: float = 1.0,
) -> None:
    """Send even rounds as integers and odd rounds as ``test<i>`` strings, then resolve ``end``."""
    for i in range(_MULTI_ROUNDS):
        if i % 2 == 0:
            await int_queue.put(i)
        else:
            await str_queue.put(f"test{i}")
        await asyncio.sleep(interval)
    end.set_result(None)


async def collect_multi_channel(interval: float = 1.0) -> list[tuple[str, Any]]:
    """Run ``multi_channel`` and select over its outputs until it signals the end.

    Returns ``("ch1", int)`` and ``("ch2", str)`` pairs in the order received.
    """
    int_queue: asyncio.Queue = asyncio.Queue(maxsize=_MULTI_QUEUE_SIZE)
    str_queue: asyncio.Queue = asyncio.Queue(maxsize=_MULTI_QUEUE_SIZE)
    end: asyncio.Future = asyncio.get_running_loop().create_future()
    sender = asyncio.create_task(multi_channel(int_queue, str_queue, end, interval))

    received: list[tuple[str, Any]] = []
    getters = {
        "ch1": asyncio.create_task(int_queue.get()),
        "ch2": asyncio.create_task(str_queue.get()),
    }
    try:
        while True:
            done, _ = await asyncio.wait(
                [*getters.values(), end], return_when=asyncio.FIRST_COMPLETED
            )
            for name, getter in list(getters.items()):
                if getter in done:
                    received.append((name, getter.result()))
                    queue = int_queue if name == "ch1" else str_queue
                    getters[name] = asyncio.create_task(queue.get())
            if end in done:
                break
    finally:
        for getter in getters.values():
            getter.cancel()
        await asyncio.gather(*getters.values(), return_exceptions=True)
    for name, queue in (("ch1", int_queue), ("ch2", str_queue)):
        while not queue.empty():
            received.append((name, queue.get_nowait()))
    await sender
    return received