from app.db.models.avatar_rewards import AvatarReward
from app.db.models.base import Base
from app.db.models.bot_names import BotNamePart, BotUsername
from app.db.models.daily_challenge_completions import DailyChallengeCompletion
from app.db.models.daily_challenge_progress import DailyChallengeProgress
from app.db.models.daily_challenge_records import DailyChallengeRecord
from app.db.models.images import Image
from app.db.models.seen_images import SeenImage

__all__ = [
    "AvatarReward",
    "Base",
    "BotNamePart",
    "BotUsername",
    "DailyChallengeCompletion",
    "DailyChallengeProgress",
    "DailyChallengeRecord",
    "Image",
    "SeenImage",
]
