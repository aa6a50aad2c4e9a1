"""Data types shared by the store and the controller"""
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field


class PersistedState(BaseModel):
    """What survives between runs. 0 means nothing to resume."""
    seconds_remaining: int = Field(default=0, ge=0, strict=True)


@dataclass(frozen=True)
class TimerConfig:
    # positive = minutes, zero or negative = literal seconds
    requested_minutes: int = 25
    force_restart: bool = False


@dataclass(frozen=True)
class RunResult:
    completed_naturally: bool
    remaining_seconds: int
    effective_seconds: int
    continued: bool
    ended_at: datetime
