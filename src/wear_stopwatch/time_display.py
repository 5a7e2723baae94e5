from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

from .shared import TimerState, ZERO_TEXT

STATE_COLORS = {
    TimerState.RESET: '#999',
    TimerState.RUNNING: '#0f0',
    TimerState.PAUSED: '#fc0',
}

class TimeDisplay(Widget):
    text: reactive[str] = reactive(ZERO_TEXT)
    state: reactive[TimerState] = reactive(TimerState.RESET)

    def render(self) -> RenderResult:
        hms, _, millis = self.text.rpartition(':')
        color = STATE_COLORS[self.state]
        return f'[bold {color}]{hms}[/]:[dim]{millis}[/]'
