import logging

from textual.logging import TextualHandler

from .config import StopwatchConfig
from .engine import TimerEngine
from .UI import UI

def main() -> None:
    config = StopwatchConfig.fromEnv()
    # stdout belongs to the terminal UI; see `textual console`.
    logging.basicConfig(level=config.log_level, handlers=[TextualHandler()])
    engine = TimerEngine(tick_interval_ms=config.tick_interval_ms)
    UI(engine, refresh_hz=config.refresh_hz).run()

if __name__ == '__main__':
    main()
