"""Repository package — expose all concrete repositories from one import."""
from .user_repository import UserRepository, SQLUserRepository
from .model_repository import AiModelRepository, SQLAiModelRepository
from .review_repository import ReviewRepository, SQLReviewRepository
from .news_repository import NewsRepository, SQLNewsRepository
from .reward_repository import RewardRepository, SQLRewardRepository

__all__ = [
    'UserRepository',
    'AiModelRepository',
    'ReviewRepository',
    'NewsRepository',
    'RewardRepository',
    'SQLUserRepository',
    'SQLAiModelRepository',
    'SQLReviewRepository',
    'SQLNewsRepository',
    'SQLRewardRepository',
]
