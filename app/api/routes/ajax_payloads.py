from __future__ import annotations

from typing import Any

from app.game.sessions.types import (
    BonusAnswerResult,
    BonusGameSetup,
    DailyAnswerResult,
    DailyPhase,
    DailyStartResult,
    FinalAnswerResult,
    FinalRoundSetup,
)

IMAGE_TYPE_LABELS = {"real": "a Real", "ai": "an AI"}


def failure_payload(message: str) -> dict[str, Any]:
    return {"success": False, "message": message}


def daily_start_payload(result: DailyStartResult) -> dict[str, Any]:
    return {
        "success": True,
        "round": result.round,
        "total_rounds": result.total_rounds,
        "lives": result.lives,
        "score": result.score,
        "streak": result.streak,
        "current_image_id": result.current_image_id,
    }


def daily_answer_payload(result: DailyAnswerResult) -> dict[str, Any]:
    label = IMAGE_TYPE_LABELS.get(result.image_type, result.image_type)
    prefix = "Correct!" if result.is_correct else "Incorrect!"
    message = f"{prefix} This is {label} image."
    if result.phase == DailyPhase.FAILED:
        message += " Game over - you ran out of lives!"
    elif result.phase == DailyPhase.FINAL_ROUND:
        message += " You completed all rounds!"

    return {
        "success": True,
        "correct": result.is_correct,
        "message": message,
        "score": result.score,
        "lives": result.lives,
        "streak": result.streak,
        "round": result.round,
        "total_rounds": result.total_rounds,
        "game_over": result.game_over,
        "final_round_available": result.phase == DailyPhase.FINAL_ROUND,
        "next_image_id": result.next_image_id,
    }


def final_round_setup_payload(result: FinalRoundSetup) -> dict[str, Any]:
    return {
        "success": True,
        "left_image_id": result.left_image_id,
        "right_image_id": result.right_image_id,
        "score": result.score,
        "lives": result.lives,
    }


def final_answer_payload(result: FinalAnswerResult) -> dict[str, Any]:
    if result.is_correct:
        message = "Correct! You identified the real image!"
    else:
        message = "Incorrect! You misidentified the real image."
    return {
        "success": True,
        "correct": result.is_correct,
        "message": message,
        "score": result.score,
        "lives": result.lives,
        "game_over": True,
        "completed": result.phase == DailyPhase.COMPLETED,
        "left_is_real": result.left_is_real,
    }


def bonus_setup_payload(result: BonusGameSetup) -> dict[str, Any]:
    return {"success": True, "image_ids": result.image_ids}


def bonus_answer_payload(result: BonusAnswerResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "success": True,
        "correct": result.is_correct,
        "correct_index": result.correct_index,
        "selected_index": result.selected_index,
    }
    if result.is_correct:
        if result.avatar is None:
            payload["message"] = "Correct! You already own every avatar, so there are no new avatars available."
        else:
            payload["avatar"] = result.avatar
            payload["message"] = f"Correct! You earned a new avatar: {result.avatar}"
    else:
        payload["new_streak"] = result.new_streak
        payload["message"] = (
            f"Incorrect! The real image was image {chr(65 + result.correct_index)}. "
            "Your daily streak has been reset."
        )
    return payload


def bot_names_payload(names: list[str]) -> dict[str, Any]:
    return {
        "success": True,
        "message": "Sample bot names generated successfully",
        "bot_names": names,
    }


def csrf_token_payload(token: str) -> dict[str, Any]:
    return {"success": True, "csrf_token": token}
