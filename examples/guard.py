import asyncio
import random

from asyncstatus import aguard, AsyncStatus, loading


class NetworkError(Exception):
    pass


async def fetch_answer() -> int:
    await asyncio.sleep(0.25)
    if random.random() < 0.5:
        raise NetworkError('the answer got lost on its way')
    return 42


def render(status: AsyncStatus[int]) -> str:
    return status.match(
        data=lambda value: f'The answer is {value}',
        error=lambda err, trace: f'Failed: {err}',
        loading=lambda: 'Computing...',
        reloading=lambda value: f'The answer was {value}, recomputing...',
    )


async def amain():
    status: AsyncStatus[int] = loading()
    print(render(status))

    status = await aguard(fetch_answer)
    print(render(status))


asyncio.run(amain())
