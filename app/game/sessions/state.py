"""Server-side session document for one player.

The whole document is stored as JSON under the player's session id. Game
handlers never poke at raw keys; they go through the typed parts below and
the ``require_*`` helpers in ``app.game.sessions.rules``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ImageType(str, Enum):
    REAL = "real"
    AI = "ai"


class SessionUser(BaseModel):
    id: int
    username: str = Field(min_length=1)
    is_admin: bool = False


class FinalRoundState(BaseModel):
    real_image_id: int
    ai_image_id: int
    left_is_real: bool

    @property
    def left_image_id(self) -> int:
        return self.real_image_id if self.left_is_real else self.ai_image_id

    @property
    def right_image_id(self) -> int:
        return self.ai_image_id if self.left_is_real else self.real_image_id


class DailyChallengeState(BaseModel):
    round: int = Field(ge=1)
    current_image_index: int = Field(default=0, ge=0)
    lives: int
    score: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    total_rounds: int = Field(ge=1)
    game_over: bool = False
    game_images: list[int] = Field(default_factory=list)
    final_round: FinalRoundState | None = None
    final_round_played: bool = False

    @property
    def current_image_id(self) -> int | None:
        if self.current_image_index >= len(self.game_images):
            return None
        return self.game_images[self.current_image_index]


class BonusImage(BaseModel):
    id: int
    type: ImageType


class BonusGameState(BaseModel):
    images: list[BonusImage] = Field(min_length=1)
    correct_index: int = Field(ge=0)


class PlayerSession(BaseModel):
    user: SessionUser | None = None
    csrf_token: str | None = None
    csrf_issued_at: float | None = None
    daily: DailyChallengeState | None = None
    bonus: BonusGameState | None = None

    def present_fields(self) -> list[str]:
        return sorted(name for name, value in self if value is not None)
