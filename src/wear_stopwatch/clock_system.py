import asyncio
import time

from .clock_interface import ClockInterface

class SystemClock(ClockInterface):
    def nowMillis(self) -> int:
        return time.time_ns() // 1_000_000

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
