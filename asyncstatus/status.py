from __future__ import annotations

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
)

import abc
from typing import (
    Any,
    Callable,
    ClassVar,
    final,
    Generic,
    NoReturn,
    overload,
    TypeVar,
)

from typing_extensions import assert_never, Self

from ._typing import AnyError, isinstance_of, Maybe, Nothing, Trace
from .exceptions import StatusCastError, StatusError

_T = TypeVar('_T')
_T_co = TypeVar('_T_co', covariant=True)
_R = TypeVar('_R')


class AsyncStatus(abc.ABC, Generic[_T_co]):
    """The state of the result of an asynchronous operation: data, loading,
    reloading, or error.

    The set of variants is closed; use :meth:`match` (or a ``match``
    statement over the variant classes) to read the status, so that none of
    the states can be forgotten.
    """
    __slots__ = ()
    __match_args__: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if cls.__module__ != __name__:
            raise TypeError(
                f'{AsyncStatus.__name__} cannot be subclassed outside of '
                f'{__name__!r}, got {cls.__qualname__!r}'
            )
        super().__init_subclass__(**kwargs)

    @abc.abstractmethod
    def _payload(self) -> tuple[Any, ...]: ...

    @abc.abstractmethod
    def unwrap(self) -> _T_co | NoReturn:
        """Return the value, or raise if there is none."""
        ...

    def match(
        self,
        *,
        data: Callable[[_T_co], _R],
        error: Callable[[AnyError, Trace], _R],
        loading: Callable[[], _R],
        reloading: Callable[[_T_co], _R],
    ) -> _R:
        """Call the handler of the current variant, and return its result.

        All handlers are required, even though only one of them is called.
        """
        if isinstance(self, AsyncData):
            return data(self.value)
        if isinstance(self, AsyncError):
            return error(self.error, self.trace)
        if isinstance(self, AsyncLoading):
            return loading()
        if isinstance(self, AsyncReloading):
            return reloading(self.value)

        assert_never(self)

    @overload
    def cast(self) -> AsyncStatus[Any]: ...
    @overload
    def cast(self, tp: type[_R]) -> AsyncStatus[_R]: ...

    def cast(self, tp: Maybe[Any] = Nothing) -> AsyncStatus[Any]:
        """Change the type argument of the status.

        Returns the status itself. If ``tp`` is passed, the value (if any) is
        checked against it, and a StatusCastError is raised on mismatch.
        Without ``tp`` the value is assumed to be of the new type.
        """
        if tp is not Nothing:
            self._check_cast(tp)
        return self

    def _check_cast(self, tp: Any) -> None:
        pass

    def __setattr__(self, key: str, value: Any) -> None:
        if hasattr(self, key):
            raise AttributeError(f'{self!r}.{key} is read-only')

        super().__setattr__(key, value)

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f'{type(self).__name__}.{key} is read-only')

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), self._payload()

    def __copy__(self) -> Self:
        return self

    def __repr__(self) -> str:
        args = ', '.join(map(repr, self._payload()))
        return f'{type(self).__name__}({args})'

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsyncStatus):
            return NotImplemented

        return type(other) is type(self) and other._payload() == self._payload()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload()))


class _ValueStatus(AsyncStatus[_T_co], Generic[_T_co]):
    __slots__ = ('value', )
    __match_args__: ClassVar[tuple[str, ...]] = ('value', )

    value: _T_co

    def __init__(self, value: _T_co) -> None:
        object.__setattr__(self, 'value', value)

    def _payload(self) -> tuple[Any, ...]:
        return (self.value, )

    def _check_cast(self, tp: Any) -> None:
        if not isinstance_of(self.value, tp):
            raise StatusCastError(
                f'cannot cast {self!r}: {type(self.value).__name__!r} value '
                f'is not an instance of {tp!r}'
            )

    def unwrap(self) -> _T_co:
        return self.value


@final
class AsyncData(_ValueStatus[_T_co], Generic[_T_co]):
    """The operation succeeded with ``value``."""
    __slots__ = ()

    def to_reloading(self) -> AsyncReloading[_T_co]:
        """The value is being refreshed."""
        return AsyncReloading(self.value)


@final
class AsyncLoading(AsyncStatus[_T_co], Generic[_T_co]):
    """The operation is in flight, and no value is known yet."""
    __slots__ = ()

    def _payload(self) -> tuple[Any, ...]:
        return ()

    def unwrap(self) -> NoReturn:
        raise StatusError(f'{self!r} has no value')


@final
class AsyncReloading(_ValueStatus[_T_co], Generic[_T_co]):
    """A previous ``value`` exists and is being refreshed."""
    __slots__ = ()

    def to_data(self) -> AsyncData[_T_co]:
        """The refresh completed with the current value."""
        return AsyncData(self.value)

    def to_error(
        self,
        err: AnyError,
        trace: Trace = None,
    ) -> AsyncError[_T_co]:
        """The refresh failed."""
        return AsyncError(err, trace)


@final
class AsyncError(AsyncStatus[_T_co], Generic[_T_co]):
    """The operation failed with ``error``.

    The ``trace`` is for diagnostics only: it is ignored by ``==`` and
    ``hash()``, and is not kept by copy.deepcopy() and pickle.
    """
    __slots__ = ('error', 'trace')
    __match_args__: ClassVar[tuple[str, ...]] = ('error', 'trace')

    error: AnyError
    trace: Trace

    def __init__(self, error: AnyError, trace: Trace = None) -> None:
        object.__setattr__(self, 'error', error)
        object.__setattr__(self, 'trace', trace)

    def _payload(self) -> tuple[Any, ...]:
        return (self.error, )

    def unwrap(self) -> NoReturn:
        err = self.error
        if isinstance(err, BaseException):
            if self.trace is not None:
                raise err.with_traceback(self.trace)
            raise err

        raise StatusError(err)


# Constructors


def data(value: _T) -> AsyncStatus[_T]:
    return AsyncData(value)


def loading() -> AsyncStatus[Any]:
    return AsyncLoading()


def reloading(value: _T) -> AsyncStatus[_T]:
    return AsyncReloading(value)


def error(err: AnyError, trace: Trace = None) -> AsyncStatus[Any]:
    """Create an error status, e.g. from within an ``except`` block::

        except ValueError as exc:
            status = error(exc, exc.__traceback__)
    """
    return AsyncError(err, trace)
