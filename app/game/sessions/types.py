from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DailyPhase(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    FINAL_ROUND = "FINAL_ROUND"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in {DailyPhase.COMPLETED, DailyPhase.FAILED}


@dataclass(slots=True)
class DailyStartResult:
    round: int
    total_rounds: int
    lives: int
    score: int
    streak: int
    current_image_id: int


@dataclass(slots=True)
class DailyAnswerResult:
    is_correct: bool
    image_type: str
    phase: DailyPhase
    round: int
    total_rounds: int
    score: int
    lives: int
    streak: int
    game_over: bool
    next_image_id: int | None = None


@dataclass(slots=True)
class FinalRoundSetup:
    left_image_id: int
    right_image_id: int
    score: int
    lives: int


@dataclass(slots=True)
class FinalAnswerResult:
    is_correct: bool
    phase: DailyPhase
    score: int
    lives: int
    left_is_real: bool


@dataclass(slots=True)
class BonusGameSetup:
    image_ids: list[int]


@dataclass(slots=True)
class BonusAnswerResult:
    is_correct: bool
    correct_index: int
    selected_index: int
    avatar: str | None = None
    new_streak: int | None = None
