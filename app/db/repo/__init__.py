from app.db.repo.avatar_rewards_repo import AvatarRewardsRepo
from app.db.repo.bot_names_repo import BotNamesRepo
from app.db.repo.daily_challenge_repo import DailyChallengeRepo
from app.db.repo.images_repo import ImagesRepo
from app.db.repo.seen_images_repo import SeenImagesRepo

__all__ = [
    "AvatarRewardsRepo",
    "BotNamesRepo",
    "DailyChallengeRepo",
    "ImagesRepo",
    "SeenImagesRepo",
]
