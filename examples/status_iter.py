import asyncio

from asyncstatus import AsyncData, AsyncError, status_iter


async def temperatures():
    for celsius in (20.5, 21.0, 'n/a', 22.5):
        await asyncio.sleep(0.1)
        if not isinstance(celsius, float):
            raise ValueError(f'invalid reading {celsius!r}')
        yield celsius


async def amain():
    async for status in status_iter(temperatures()):
        match status:
            case AsyncData(celsius):
                print(f'{celsius:.1f} °C')
            case AsyncError(exc):
                print(f'sensor failed: {exc}')


asyncio.run(amain())
