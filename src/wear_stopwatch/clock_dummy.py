import asyncio

from .clock_interface import ClockInterface

class ManualClock(ClockInterface):
    '''
    Time moves only when told to. Sleepers stay suspended until the
    next `advance()`, regardless of how long they asked to sleep.
    '''

    def __init__(self, start_ms: int = 0) -> None:
        self.now_ms = start_ms
        self.sleepers: list[asyncio.Future[None]] = []

    def nowMillis(self) -> int:
        return self.now_ms

    async def sleep(self, seconds: float) -> None:
        future = asyncio.get_running_loop().create_future()
        self.sleepers.append(future)
        await future

    def step(self, millis: int) -> None:
        '''
        Moves time without waking anyone. Negative `millis` simulates
        a clock adjustment.
        '''
        self.now_ms += millis

    async def advance(self, millis: int = 0) -> None:
        self.step(millis)
        sleepers, self.sleepers = self.sleepers, []
        for future in sleepers:
            if not future.done():
                future.set_result(None)
        await settle()

async def settle(n_yields: int = 5) -> None:
    for _ in range(n_yields):
        await asyncio.sleep(0)
