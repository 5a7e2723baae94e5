from .UI import UI as StopwatchUI
from .engine import TimerEngine
from .shared import TimerState, TimerSnapshot, formatElapsed
from .clock_system import SystemClock
from .clock_dummy import ManualClock
from .config import StopwatchConfig

__all__ = [
    "StopwatchUI", "TimerEngine", "TimerState", "TimerSnapshot",
    "formatElapsed", "SystemClock", "ManualClock", "StopwatchConfig",
]
