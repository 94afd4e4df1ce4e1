from __future__ import annotations

from .avatars import AVATAR_CATALOG, award_random_avatar
from .bonus import start_bonus_game, submit_bonus_answer
from .daily_final import start_daily_final_round, submit_daily_final_answer
from .daily_records import can_play_daily_challenge, update_daily_challenge_record
from .daily_start import start_daily_challenge
from .daily_submit import submit_daily_answer
from .image_selection import select_bonus_images, select_daily_images, select_final_round_pair

__all__ = [
    "AVATAR_CATALOG",
    "award_random_avatar",
    "can_play_daily_challenge",
    "select_bonus_images",
    "select_daily_images",
    "select_final_round_pair",
    "start_bonus_game",
    "start_daily_challenge",
    "start_daily_final_round",
    "submit_bonus_answer",
    "submit_daily_answer",
    "submit_daily_final_answer",
    "update_daily_challenge_record",
]
