from __future__ import annotations

from app.game.sessions.errors import (
    GameAlreadyOverError,
    InvalidAnswerError,
    InvalidSelectionError,
    MissingSessionDataError,
    UnauthenticatedError,
)
from app.game.sessions.state import (
    BonusGameState,
    DailyChallengeState,
    FinalRoundState,
    PlayerSession,
    SessionUser,
)
from app.game.sessions.types import DailyPhase

REGULAR_ANSWERS = frozenset({"real", "ai"})
FINAL_ANSWERS = frozenset({"left_real", "right_real"})
REGULAR_CORRECT_POINTS = 10
FINAL_CORRECT_POINTS = 20


def evaluate_regular_answer(answer: str, *, image_type: str) -> bool:
    if answer not in REGULAR_ANSWERS:
        raise InvalidAnswerError
    return answer == image_type


def evaluate_final_answer(answer: str, *, left_is_real: bool) -> bool:
    if answer not in FINAL_ANSWERS:
        raise InvalidAnswerError
    return (answer == "left_real") == left_is_real


def evaluate_bonus_selection(selected_index: int, *, bonus: BonusGameState) -> bool:
    if selected_index < 0 or selected_index >= len(bonus.images):
        raise InvalidSelectionError
    return selected_index == bonus.correct_index


def classify_daily_phase(state: DailyChallengeState) -> DailyPhase:
    if state.lives <= 0:
        return DailyPhase.FAILED
    if state.final_round_played:
        return DailyPhase.COMPLETED
    if state.round > state.total_rounds:
        return DailyPhase.FINAL_ROUND
    return DailyPhase.IN_PROGRESS


def apply_regular_answer(state: DailyChallengeState, *, is_correct: bool) -> DailyChallengeState:
    if classify_daily_phase(state) != DailyPhase.IN_PROGRESS:
        raise GameAlreadyOverError

    if is_correct:
        changes = {"score": state.score + REGULAR_CORRECT_POINTS, "streak": state.streak + 1}
    else:
        changes = {"lives": state.lives - 1, "streak": 0}
    changes["round"] = state.round + 1
    changes["current_image_index"] = state.current_image_index + 1

    updated = state.model_copy(update=changes)
    if classify_daily_phase(updated) != DailyPhase.IN_PROGRESS:
        updated.game_over = True
    return updated


def apply_final_answer(state: DailyChallengeState, *, is_correct: bool) -> DailyChallengeState:
    if classify_daily_phase(state) != DailyPhase.FINAL_ROUND:
        raise GameAlreadyOverError

    if is_correct:
        changes = {"score": state.score + FINAL_CORRECT_POINTS}
    else:
        changes = {"lives": state.lives - 1}
    changes.update(game_over=True, final_round=None, final_round_played=True)
    return state.model_copy(update=changes)


def require_user(player: PlayerSession, *, message: str | None = None) -> SessionUser:
    if player.user is None:
        raise UnauthenticatedError(message)
    return player.user


def require_daily_state(player: PlayerSession) -> DailyChallengeState:
    if player.daily is None:
        raise MissingSessionDataError
    return player.daily


def require_final_round(state: DailyChallengeState) -> FinalRoundState:
    if state.final_round is None:
        raise MissingSessionDataError("Final round data not found. Please restart the game.")
    return state.final_round


def require_bonus_state(player: PlayerSession) -> BonusGameState:
    if player.bonus is None:
        raise MissingSessionDataError("Bonus game data not found. Please restart the game.")
    return player.bonus


def seen_image_ids(state: DailyChallengeState) -> list[int]:
    return state.game_images[: state.current_image_index]


def join_image_ids(image_ids: list[int]) -> str:
    return ",".join(str(image_id) for image_id in image_ids)
