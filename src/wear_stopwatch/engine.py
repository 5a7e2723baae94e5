from __future__ import annotations

import asyncio
import logging
import typing as tp
from contextlib import contextmanager

from .shared import TimerState, TimerSnapshot, Millis, TICK_INTERVAL_MS
from .clock_interface import ClockInterface
from .clock_system import SystemClock

log = logging.getLogger(__name__)

Listener = tp.Callable[[TimerSnapshot], None]

class TimerEngine:
    '''
    One stopwatch. Intents are plain synchronous calls, but starting
    the accumulation loop needs a running event loop, so call them
    from the thread that runs it.
    '''

    def __init__(
        self,
        clock: ClockInterface | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        if tick_interval_ms <= 0:
            raise ValueError(f'tick_interval_ms must be positive, got {tick_interval_ms}')
        self.clock = clock if clock is not None else SystemClock()
        self.tick_interval_ms = tick_interval_ms

        self.__state = TimerState.RESET
        self.__elapsed_ms: Millis = 0
        self.__tick_ref_ms: Millis = 0
        self.__published = TimerSnapshot.Initial()
        self.__listeners: list[Listener] = []
        self.__streams: list[asyncio.Queue[TimerSnapshot | None]] = []
        self.loopTask: asyncio.Task | None = None
        self.is_disposed = False

    @property
    def state(self) -> TimerState:
        return self.__state

    @property
    def elapsed_ms(self) -> Millis:
        return self.__elapsed_ms

    @property
    def display_text(self) -> str:
        return self.snapshot.text

    @property
    def snapshot(self) -> TimerSnapshot:
        return self.__published

    def toggleRunning(self) -> None:
        if self.__refuseWhenDisposed('toggleRunning'):
            return
        match self.__state:
            case TimerState.RUNNING:
                self.__tick()
                self.__stopLoop()
                self.__transition(TimerState.PAUSED)
            case TimerState.PAUSED | TimerState.RESET:
                self.__startLoop()
                self.__transition(TimerState.RUNNING)

    def resetTimer(self) -> None:
        if self.__refuseWhenDisposed('resetTimer'):
            return
        self.__stopLoop()
        if self.__state == TimerState.RESET and self.__elapsed_ms == 0:
            return
        self.__elapsed_ms = 0
        self.__transition(TimerState.RESET)

    def subscribe(self, listener: Listener) -> tp.Callable[[], None]:
        '''
        `listener` is called right away with the current snapshot, then
        again whenever the snapshot changes.
        Returns a function that unsubscribes it.
        '''
        self.__listeners.append(listener)
        self.__notify(listener, self.__published)

        def unsubscribe() -> None:
            try:
                self.__listeners.remove(listener)
            except ValueError:  # already gone, e.g. after dispose()
                pass
        return unsubscribe

    async def snapshots(self) -> tp.AsyncIterator[TimerSnapshot]:
        '''
        Conflated: a slow consumer only sees the latest snapshot.
        Ends when the engine is disposed.
        '''
        if self.is_disposed:
            return
        queue: asyncio.Queue[TimerSnapshot | None] = asyncio.Queue(maxsize=1)

        def offer(snapshot: TimerSnapshot) -> None:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(snapshot)

        self.__streams.append(queue)
        unsubscribe = self.subscribe(offer)
        try:
            while True:
                snapshot = await queue.get()
                if snapshot is None:
                    return
                yield snapshot
        finally:
            unsubscribe()
            if queue in self.__streams:
                self.__streams.remove(queue)

    def dispose(self) -> None:
        if self.is_disposed:
            return
        self.__stopLoop()
        self.is_disposed = True
        self.__listeners.clear()
        for queue in self.__streams:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(None)
        self.__streams.clear()
        log.debug('Engine disposed at %d ms.', self.__elapsed_ms)

    @contextmanager
    def Context(self) -> tp.Generator[TimerEngine, None, None]:
        try:
            yield self
        finally:
            self.dispose()

    def __refuseWhenDisposed(self, intent: str) -> bool:
        if self.is_disposed:
            log.warning('Ignoring %s() on a disposed engine.', intent)
        return self.is_disposed

    def __transition(self, new_state: TimerState) -> None:
        log.debug('%s -> %s at %d ms', self.__state.name, new_state.name, self.__elapsed_ms)
        self.__state = new_state
        self.__publish()

    def __startLoop(self) -> None:
        loop = asyncio.get_running_loop()
        self.__stopLoop()
        self.__tick_ref_ms = self.clock.nowMillis()
        self.loopTask = loop.create_task(self.__accumulate())

    def __stopLoop(self) -> None:
        if self.loopTask is not None:
            self.loopTask.cancel()
            self.loopTask = None

    async def __accumulate(self) -> None:
        interval = self.tick_interval_ms / 1000
        try:
            while True:
                self.__tick()
                await self.clock.sleep(interval)
        except asyncio.CancelledError:
            return

    def __tick(self) -> None:
        now = self.clock.nowMillis()
        delta = now - self.__tick_ref_ms
        self.__tick_ref_ms = now
        if delta <= 0:  # idle, or the clock stepped backward
            return
        self.__elapsed_ms += delta
        self.__publish()

    def __publish(self) -> None:
        snapshot = TimerSnapshot(
            state=self.__state, elapsed_ms=self.__elapsed_ms,
        )
        if snapshot == self.__published:
            return
        self.__published = snapshot
        for listener in [*self.__listeners]:
            self.__notify(listener, snapshot)

    def __notify(self, listener: Listener, snapshot: TimerSnapshot) -> None:
        try:
            listener(snapshot)
        except Exception:
            log.exception('Snapshot listener %r failed.', listener)
