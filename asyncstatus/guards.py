"""Run fallible code, and return the outcome as an AsyncStatus."""

from __future__ import annotations

__all__ = (
    'guard',
    'aguard',
)

import logging
from typing import Awaitable, Callable, cast, Final, TypeVar, Union

from ._typing import awaitable, CapturePredicate
from .status import AsyncStatus, data, error

_T = TypeVar('_T')

logger: Final[logging.Logger] = logging.getLogger('asyncstatus.guards')


def _captures(
    exc: Exception,
    should_capture: CapturePredicate | None,
) -> bool:
    if should_capture is not None and not should_capture(exc):
        logger.debug('passing through %r', exc)
        return False

    logger.debug('captured %r', exc)
    return True


def guard(
    function: Callable[[], _T],
    should_capture: CapturePredicate | None = None,
) -> AsyncStatus[_T]:
    """Call the function, and return its result as data status, or the raised
    exception as error status.

    If ``should_capture`` is passed, only the exceptions for which it returns
    true are captured; the others are re-raised as-is. Base exceptions such as
    KeyboardInterrupt or asyncio.CancelledError are never captured.
    """
    try:
        return data(function())
    except Exception as exc:
        if not _captures(exc, should_capture):
            raise
        return error(exc, exc.__traceback__)


async def aguard(
    function: Union[Callable[[], Awaitable[_T]], Callable[[], _T]],
    should_capture: CapturePredicate | None = None,
) -> AsyncStatus[_T]:
    """Like guard(), but awaits the result of the function if it is
    awaitable. The function can be either sync or async.
    """
    try:
        res = function()
        if awaitable(res):
            res = await res
        return data(cast(_T, res))
    except Exception as exc:
        if not _captures(exc, should_capture):
            raise
        return error(exc, exc.__traceback__)
