from __future__ import annotations

__all__ = (
    'from_awaitable',
    'status_iter',
)

from typing import AsyncIterable, AsyncIterator, Awaitable, TypeVar

from .status import AsyncStatus, data, error

_T = TypeVar('_T')


async def from_awaitable(aw: Awaitable[_T]) -> AsyncStatus[_T]:
    """Await the awaitable, and return its result as data status, or the
    raised exception as error status."""
    try:
        return data(await aw)
    except Exception as exc:
        return error(exc, exc.__traceback__)


def status_iter(
    iterable: AsyncIterable[_T],
) -> AsyncIterator[AsyncStatus[_T]]:
    """Yields a data status for each item of the async iterable, and an error
    status for each exception it raises.

    Iteration continues after an error, so async iterators that can recover
    keep producing; async generators are done after raising, and end the
    stream. Loading and reloading statuses are never yielded.
    """
    itr = aiter(iterable)

    async def _iterator() -> AsyncIterator[AsyncStatus[_T]]:
        while True:
            try:
                value = await anext(itr)
            except StopAsyncIteration:
                break
            except Exception as exc:
                yield error(exc, exc.__traceback__)
            else:
                yield data(value)

    return _iterator()
