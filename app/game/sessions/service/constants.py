from __future__ import annotations

DAILY_RECENT_POOL_SIZE = 20
BONUS_AI_IMAGE_COUNT = 3
FINAL_ROUND_DIFFICULTY = "hard"
