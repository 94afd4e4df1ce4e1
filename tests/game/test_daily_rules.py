from __future__ import annotations

import pytest

from app.game.sessions.errors import (
    GameAlreadyOverError,
    InvalidAnswerError,
    InvalidSelectionError,
    MissingSessionDataError,
    UnauthenticatedError,
)
from app.game.sessions.rules import (
    apply_final_answer,
    apply_regular_answer,
    classify_daily_phase,
    evaluate_bonus_selection,
    evaluate_final_answer,
    evaluate_regular_answer,
    join_image_ids,
    require_bonus_state,
    require_daily_state,
    require_final_round,
    require_user,
    seen_image_ids,
)
from app.game.sessions.state import (
    BonusGameState,
    BonusImage,
    DailyChallengeState,
    FinalRoundState,
    ImageType,
    PlayerSession,
    SessionUser,
)
from app.game.sessions.types import DailyPhase


def daily_state(**overrides) -> DailyChallengeState:
    values = {
        "round": 1,
        "current_image_index": 0,
        "lives": 3,
        "score": 0,
        "streak": 0,
        "total_rounds": 10,
        "game_images": list(range(100, 110)),
    }
    values.update(overrides)
    return DailyChallengeState(**values)


def bonus_state(correct_index: int = 2) -> BonusGameState:
    images = [BonusImage(id=index + 1, type=ImageType.AI) for index in range(4)]
    images[correct_index] = BonusImage(id=correct_index + 1, type=ImageType.REAL)
    return BonusGameState(images=images, correct_index=correct_index)


@pytest.mark.parametrize(
    ("answer", "image_type", "expected"),
    [
        ("real", "real", True),
        ("ai", "ai", True),
        ("ai", "real", False),
        ("real", "ai", False),
    ],
)
def test_evaluate_regular_answer(answer: str, image_type: str, expected: bool) -> None:
    assert evaluate_regular_answer(answer, image_type=image_type) is expected


@pytest.mark.parametrize("answer", ["", "REAL", "fake", "left_real"])
def test_evaluate_regular_answer_rejects_unknown_tokens(answer: str) -> None:
    with pytest.raises(InvalidAnswerError) as exc_info:
        evaluate_regular_answer(answer, image_type="real")
    assert exc_info.value.message == "Invalid answer"


def test_evaluate_final_answer_matches_left_right_flag() -> None:
    assert evaluate_final_answer("left_real", left_is_real=True) is True
    assert evaluate_final_answer("right_real", left_is_real=True) is False
    assert evaluate_final_answer("right_real", left_is_real=False) is True
    with pytest.raises(InvalidAnswerError):
        evaluate_final_answer("real", left_is_real=True)


def test_evaluate_bonus_selection_bounds() -> None:
    bonus = bonus_state(correct_index=2)

    assert evaluate_bonus_selection(2, bonus=bonus) is True
    assert evaluate_bonus_selection(0, bonus=bonus) is False
    for selected_index in (-1, 4):
        with pytest.raises(InvalidSelectionError) as exc_info:
            evaluate_bonus_selection(selected_index, bonus=bonus)
        assert exc_info.value.message == "Invalid selection"


def test_correct_regular_answer_adds_points_and_keeps_lives() -> None:
    updated = apply_regular_answer(daily_state(), is_correct=True)

    assert updated.score == 10
    assert updated.streak == 1
    assert updated.lives == 3
    assert updated.round == 2
    assert updated.current_image_index == 1
    assert updated.game_over is False
    assert classify_daily_phase(updated) == DailyPhase.IN_PROGRESS


def test_incorrect_regular_answer_costs_a_life_and_resets_streak() -> None:
    updated = apply_regular_answer(daily_state(score=30, streak=3), is_correct=False)

    assert updated.score == 30
    assert updated.streak == 0
    assert updated.lives == 2
    assert updated.round == 2
    assert updated.current_image_index == 1


def test_apply_regular_answer_does_not_mutate_input() -> None:
    state = daily_state()
    apply_regular_answer(state, is_correct=True)

    assert state.score == 0
    assert state.round == 1


def test_last_life_lost_ends_the_run() -> None:
    updated = apply_regular_answer(daily_state(lives=1, round=4, current_image_index=3), is_correct=False)

    assert updated.lives == 0
    assert updated.game_over is True
    assert classify_daily_phase(updated) == DailyPhase.FAILED
    with pytest.raises(GameAlreadyOverError):
        apply_regular_answer(updated, is_correct=True)


def test_last_regular_round_opens_the_final_round() -> None:
    updated = apply_regular_answer(daily_state(round=10, current_image_index=9, score=90), is_correct=True)

    assert updated.round == 11
    assert updated.game_over is True
    assert classify_daily_phase(updated) == DailyPhase.FINAL_ROUND
    assert updated.current_image_id is None


def test_final_answer_correct_adds_twenty_points() -> None:
    state = daily_state(
        round=11,
        current_image_index=10,
        score=80,
        lives=2,
        final_round=FinalRoundState(real_image_id=1, ai_image_id=2, left_is_real=True),
    )

    updated = apply_final_answer(state, is_correct=True)

    assert updated.score == 100
    assert updated.lives == 2
    assert updated.final_round is None
    assert updated.final_round_played is True
    assert classify_daily_phase(updated) == DailyPhase.COMPLETED


@pytest.mark.parametrize(("lives", "expected_phase"), [(2, DailyPhase.COMPLETED), (1, DailyPhase.FAILED)])
def test_final_answer_wrong_depends_on_remaining_lives(lives: int, expected_phase: DailyPhase) -> None:
    state = daily_state(round=11, current_image_index=10, score=50, lives=lives)

    updated = apply_final_answer(state, is_correct=False)

    assert updated.score == 50
    assert updated.lives == lives - 1
    assert updated.game_over is True
    assert classify_daily_phase(updated) == expected_phase
    assert expected_phase.is_terminal


def test_final_answer_before_regular_rounds_finish_is_rejected() -> None:
    with pytest.raises(GameAlreadyOverError):
        apply_final_answer(daily_state(round=5, current_image_index=4), is_correct=True)


def test_require_helpers_raise_typed_errors() -> None:
    player = PlayerSession()

    with pytest.raises(UnauthenticatedError):
        require_user(player)
    with pytest.raises(UnauthenticatedError) as exc_info:
        require_user(player, message="You must be logged in to play the bonus game.")
    assert exc_info.value.message == "You must be logged in to play the bonus game."
    with pytest.raises(MissingSessionDataError):
        require_daily_state(player)
    with pytest.raises(MissingSessionDataError, match="Bonus game data not found"):
        require_bonus_state(player)
    with pytest.raises(MissingSessionDataError, match="Final round data not found"):
        require_final_round(daily_state())

    player.user = SessionUser(id=1, username="alice")
    assert require_user(player).username == "alice"


def test_seen_image_ids_follow_current_index() -> None:
    state = daily_state(current_image_index=3, round=4)

    assert seen_image_ids(state) == [100, 101, 102]
    assert join_image_ids(seen_image_ids(state)) == "100,101,102"
    assert join_image_ids([]) == ""
