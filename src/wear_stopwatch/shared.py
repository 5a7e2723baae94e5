from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from textual.widget import Widget

TICK_INTERVAL_MS = 10
ZERO_TEXT = '00:00:00:000'

Millis = int

class TimerState(Enum):
    RESET = 'reset'
    RUNNING = 'running'
    PAUSED = 'paused'

def formatElapsed(millis: Millis) -> str:
    '''
    `HH:mm:ss:SSS`. Hours do not wrap at 24.
    '''
    if millis < 0:
        raise ValueError(f'Elapsed time cannot be negative: {millis}')
    seconds, ms = divmod(millis, 1000)
    minutes, s = divmod(seconds, 60)
    h, m = divmod(minutes, 60)
    return f'{h:02d}:{m:02d}:{s:02d}:{ms:03d}'

class TimerSnapshot(BaseModel):
    state: TimerState
    elapsed_ms: Millis

    model_config = ConfigDict(
        frozen=True,
    )

    @property
    def text(self) -> str:
        return formatElapsed(self.elapsed_ms)

    @classmethod
    def Initial(cls) -> TimerSnapshot:
        return TimerSnapshot(state=TimerState.RESET, elapsed_ms=0)

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
