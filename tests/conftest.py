import pytest


@pytest.fixture
def anyio_backend():
    """The adapters are tested against asyncio primitives only."""
    return 'asyncio'


@pytest.fixture
def trace():
    """A real traceback, as captured in an except block."""
    try:
        raise ValueError('spam')
    except ValueError as exc:
        return exc.__traceback__
