# tests/test_clock.py
# Clock implementations

import asyncio

from wear_stopwatch.clock_dummy import ManualClock, settle
from wear_stopwatch.clock_system import SystemClock


def test_manual_clock_sleeps_until_advanced():
    async def main():
        clock = ManualClock(start_ms=100)
        sleeper = asyncio.create_task(clock.sleep(60.0))
        await settle()
        assert not sleeper.done()
        clock.step(-30)
        await settle()
        assert not sleeper.done()
        assert clock.nowMillis() == 70
        await clock.advance(5)
        assert sleeper.done()
        assert clock.nowMillis() == 75

    asyncio.run(main())


def test_manual_clock_skips_cancelled_sleepers():
    async def main():
        clock = ManualClock()
        sleeper = asyncio.create_task(clock.sleep(1.0))
        await settle()
        sleeper.cancel()
        await settle()
        await clock.advance(1)
        assert sleeper.cancelled()
        assert clock.sleepers == []

    asyncio.run(main())


def test_system_clock_moves_forward_across_sleep():
    async def main():
        clock = SystemClock()
        before = clock.nowMillis()
        await clock.sleep(0.02)
        return before, clock.nowMillis()

    before, after = asyncio.run(main())
    assert after >= before + 10
