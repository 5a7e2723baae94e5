from __future__ import annotations

import os
import logging

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .shared import TICK_INTERVAL_MS

ENV_PREFIX = 'STOPWATCH_'

class StopwatchConfig(BaseModel):
    tick_interval_ms: int = Field(default=TICK_INTERVAL_MS, gt=0)
    refresh_hz: float = Field(default=30.0, gt=0)  # UI redraws per second
    log_level: str = 'INFO'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unknown log level: {v}')
        return level

    @classmethod
    def fromEnv(cls, dotenv_path: str | None = None) -> StopwatchConfig:
        '''
        Reads `STOPWATCH_<FIELD>` variables, after loading `.env`.
        Variables already set in the environment win over `.env`.
        '''
        dotenv.load_dotenv(dotenv_path)
        raw = {}
        for name in cls.model_fields:
            value = os.getenv(ENV_PREFIX + name.upper())
            if value is not None:
                raw[name] = value
        return cls.model_validate(raw)
