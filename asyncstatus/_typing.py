from __future__ import annotations

__all__ = (
    'Trace',
    'AnyError',
    'CapturePredicate',

    'Maybe',
    'Nothing',
    'NothingType',

    'awaitable',
    'isinstance_of',
)

import asyncio
import enum
import inspect
import types
from typing import (
    Annotated,
    Any,
    Awaitable,
    Callable,
    final,
    Final,
    get_args,
    get_origin,
    Literal,
    NewType,
    TypeVar,
    Union,
)

from typing_extensions import TypeAlias, TypeGuard

_T = TypeVar('_T')

# Various type aliases

Trace: TypeAlias = Union[types.TracebackType, None]
AnyError: TypeAlias = object
CapturePredicate: TypeAlias = Callable[[Exception], bool]


# Sentinel for missing values, distinguishable from None


@final
class _NothingEnum(enum.Enum):
    NOTHING = object()

    def __repr__(self) -> str:
        return self._name_.title()

    def __str__(self) -> str:
        return '∅'

    def __bool__(self) -> bool:
        return False


NothingType: TypeAlias = Literal[_NothingEnum.NOTHING]
Nothing: Final[NothingType] = _NothingEnum.NOTHING
Maybe: TypeAlias = Union[_T, NothingType]


# Type guards


def awaitable(arg: Any) -> TypeGuard[Awaitable[Any]]:
    """Type guard objects that can be used in an 'await ...' expression."""
    if isinstance(arg, type):
        return False

    if asyncio.isfuture(arg):
        return True

    if callable(getattr(arg, '__await__', None)):
        return True

    return inspect.isawaitable(arg)


def isinstance_of(value: Any, tp: Any) -> bool:
    """Like isinstance(), but also accepts the typing forms that can appear
    as a cast target, e.g. ``int | None``, ``Literal[1, 2]`` or ``list[int]``.

    Parametrized generics are only checked against their origin, and type
    variables match anything.
    """
    if tp is Any or tp is object:
        return True
    if tp is None or tp is type(None):
        return value is None
    if isinstance(tp, TypeVar):
        return True
    if isinstance(tp, NewType):
        return isinstance_of(value, tp.__supertype__)
    if isinstance(tp, tuple):
        return any(isinstance_of(value, arg) for arg in tp)

    origin = get_origin(tp)
    if origin is None:
        if not isinstance(tp, type):
            raise TypeError(f'cannot check against {tp!r}')
        return isinstance(value, tp)

    if origin is Union or origin is types.UnionType:
        return any(isinstance_of(value, arg) for arg in get_args(tp))
    if origin is Literal:
        # Literal[1] admits neither True nor 1.0
        return any(
            type(value) is type(arg) and value == arg
            for arg in get_args(tp)
        )
    if origin is Annotated:
        return isinstance_of(value, get_args(tp)[0])

    return isinstance_of(value, origin)
