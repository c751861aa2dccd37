"""
Sequence helpers over async iterables.

Domain collections such as ``Comments`` expose a single traversal
primitive (``__aiter__``).  Everything else a caller might want (counting,
filtering, mapping, materialising) is built here as free functions so any
async iterable gets them without inheriting from a common base.
"""
from __future__ import annotations

import inspect

from typing import AsyncIterable, AsyncIterator, Awaitable, Callable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


async def to_list(items: AsyncIterable[T]) -> list[T]:
    return [item async for item in items]


async def count(items: AsyncIterable[T]) -> int:
    total = 0
    async for _ in items:
        total += 1
    return total


async def first(items: AsyncIterable[T], default: U | None = None) -> T | U | None:
    """
    Return the first element, or *default* when the iterable is empty.

    Pass a sentinel as *default* when a None element must be told apart
    from an empty iterable.
    """
    async for item in items:
        return item
    return default


async def filter_items(
    items: AsyncIterable[T], predicate: Callable[[T], bool]
) -> AsyncIterator[T]:
    async for item in items:
        if predicate(item):
            yield item


async def map_items(
    items: AsyncIterable[T], func: Callable[[T], U | Awaitable[U]]
) -> AsyncIterator[U]:
    """
    Apply *func* to each element.  Coroutine results are awaited, so
    async presenters can be mapped the same way as plain callables.
    """
    async for item in items:
        result = func(item)
        if inspect.isawaitable(result):
            result = await result
        yield result
