import numbers
from typing import Annotated, Any, Literal, NewType, Optional, TypeVar, Union

import anyio
import pytest

# noinspection PyProtectedMember
from asyncstatus._typing import awaitable, isinstance_of, Nothing


pytestmark = pytest.mark.anyio


async def test_awaitable():
    assert not awaitable(object())

    aw = anyio.sleep(0)
    assert awaitable(aw)
    await aw  # to avoid a RuntimeWarning

    class Spam:
        def __await__(self):
            return anyio.sleep(0).__await__()

    assert not awaitable(Spam)
    assert awaitable(Spam())


def test_nothing():
    assert not Nothing
    assert repr(Nothing) == 'Nothing'


def test_isinstance_of_class():
    assert isinstance_of(1, int)
    assert isinstance_of(1, numbers.Number)
    assert isinstance_of(True, int)
    assert not isinstance_of(1.5, int)
    assert isinstance_of(1, (str, int))


def test_isinstance_of_any():
    assert isinstance_of(None, Any)
    assert isinstance_of(None, object)
    assert isinstance_of('spam', TypeVar('T'))


def test_isinstance_of_none():
    assert isinstance_of(None, None)
    assert isinstance_of(None, type(None))
    assert not isinstance_of(0, None)


def test_isinstance_of_union():
    assert isinstance_of(None, Optional[int])
    assert isinstance_of(1, Union[str, int])
    assert isinstance_of(1, str | int)
    assert not isinstance_of(1.5, str | int)


def test_isinstance_of_special_forms():
    assert isinstance_of('a', Literal['a', 'b'])
    assert not isinstance_of('c', Literal['a', 'b'])
    assert isinstance_of(1, Annotated[int, 'spam'])
    assert isinstance_of({'a': 1}, dict[str, int])
    assert not isinstance_of({'a': 1}, list[int])


def test_isinstance_of_invalid():
    with pytest.raises(TypeError):
        isinstance_of(1, 'int')


def test_isinstance_of_literal_exact():
    assert isinstance_of(1, Literal[1])
    assert not isinstance_of(True, Literal[1])
    assert not isinstance_of(1.0, Literal[1])
    assert not isinstance_of(1, Literal[True])


def test_isinstance_of_newtype():
    UserId = NewType('UserId', int)
    assert isinstance_of(1, UserId)
    assert not isinstance_of('1', UserId)


def test_isinstance_of_tuple_of_forms():
    assert isinstance_of(None, (int, None))
    assert isinstance_of(1, (Literal['a'], int))
    assert not isinstance_of('b', (Literal['a'], int))
