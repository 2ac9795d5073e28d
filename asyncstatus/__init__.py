__all__ = (
    'AsyncStatus',
    'AsyncData',
    'AsyncLoading',
    'AsyncReloading',
    'AsyncError',

    'data',
    'loading',
    'reloading',
    'error',

    'guard',
    'aguard',

    'from_awaitable',
    'status_iter',

    'StatusError',
    'StatusCastError',
)

from .adapters import from_awaitable, status_iter
from .exceptions import StatusCastError, StatusError
from .guards import aguard, guard
from .status import (
    AsyncData,
    AsyncError,
    AsyncLoading,
    AsyncReloading,
    AsyncStatus,
    data,
    error,
    loading,
    reloading,
)
