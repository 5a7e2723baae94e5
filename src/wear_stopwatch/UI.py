import typing as tp

from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Button, Footer, Header

from .shared import TimerState, TimerSnapshot, titled
from .time_display import TimeDisplay
from .engine import TimerEngine

TOGGLE_LABELS = {
    TimerState.RESET: '▶ Start',
    TimerState.RUNNING: '⏸ Pause',
    TimerState.PAUSED: '▶ Resume',
}

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("s", "toggle_running", "Start/Pause."),
        Binding("r", "reset_timer", "Reset."),
        Binding("q", "quit", "Quit."),
    ]

    timer_state: reactive[TimerState] = reactive(TimerState.RESET)

    def __init__(
        self,
        engine: TimerEngine | None = None,
        refresh_hz: float = 30.0,
    ) -> None:
        '''
        `refresh_hz`: how often the time text is redrawn. The engine
        ticks much faster than a terminal needs to repaint.
        '''
        super().__init__()

        self.engine = engine if engine is not None else TimerEngine()
        self.refresh_hz = refresh_hz
        self.unsubscribe: tp.Callable[[], None] | None = None

        self.title = "Stopwatch"

    def run(self, **kw: tp.Any) -> tp.Any | None:
        with self.engine.Context():
            return super().run(**kw)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="face"):
            yield titled(
                TimeDisplay(id="time-display"), 'Elapsed', skip_bottom=False,
            )
            with Horizontal(id="controls"):
                yield Button(
                    TOGGLE_LABELS[TimerState.RESET],
                    id="toggle-btn", variant="primary",
                )
                yield Button("■ Reset", id="reset-btn", disabled=True)
        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.unsubscribe = self.engine.subscribe(self.onSnapshot)
        self.set_interval(1.0 / self.refresh_hz, self.myUpdate)
        self.updateControls()
        self.myUpdate()
        self.query_one('#toggle-btn', Button).focus()

    def onSnapshot(self, snapshot: TimerSnapshot) -> None:
        # Only state is pushed; the text is pulled by `myUpdate`.
        self.timer_state = snapshot.state

    @on(Button.Pressed, '#toggle-btn')
    def action_toggle_running(self) -> None:
        self.engine.toggleRunning()

    @on(Button.Pressed, '#reset-btn')
    def action_reset_timer(self) -> None:
        self.engine.resetTimer()

    def watch_timer_state(self, _, __) -> None:
        self.updateControls()
        self.myUpdate()

    def updateControls(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        bToggle: Button = self.query_one('#toggle-btn', Button)
        bToggle.label = TOGGLE_LABELS[self.timer_state]
        bReset: Button = self.query_one('#reset-btn', Button)
        bReset.disabled = self.timer_state == TimerState.RESET
        display: TimeDisplay = self.query_one('#time-display', TimeDisplay)
        display.state = self.timer_state

    def myUpdate(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        display: TimeDisplay = self.query_one('#time-display', TimeDisplay)
        display.text = self.engine.display_text

    def exit(self, result=None, return_code=0, message=None) -> None:
        if self.unsubscribe is not None:
            self.unsubscribe()
            self.unsubscribe = None
        self.engine.dispose()
        return super().exit(result, return_code, message)
