from __future__ import annotations

__all__ = (
    'StatusError',
    'StatusCastError',
)


import asyncio


class StatusError(asyncio.InvalidStateError):
    """Base class for status-related errors"""
    pass


class StatusCastError(StatusError, TypeError):
    """The payload of a status is not an instance of the cast target"""
    pass
