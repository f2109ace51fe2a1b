"""Concurrent composition helpers."""

import asyncio
from typing import Any, Awaitable, TypeVar

T = TypeVar("T")


async def gather_or_fail(*awaitables: Awaitable[T]) -> list[T]:
    """Run awaitables concurrently and return their results in order.

    All awaitables run inside one task group. If any of them fails, the
    remaining ones are cancelled and the first failure is re-raised as is,
    so callers never see a partial result.
    """
    tasks: list[asyncio.Task[Any]] = []
    try:
        async with asyncio.TaskGroup() as group:
            for awaitable in awaitables:
                tasks.append(group.create_task(_as_coroutine(awaitable)))
    except ExceptionGroup as group_error:
        raise group_error.exceptions[0] from None
    return [task.result() for task in tasks]


async def _as_coroutine(awaitable: Awaitable[T]) -> T:
    return await awaitable
