"""Services package — expose all concrete services from one import."""
from .aggregation_service import AggregationService
from .review_service import ReviewService
from .user_service import UserService
from .model_service import ModelService
from .news_service import NewsService
from .reward_service import RewardService
from .stats_service import StatsService

__all__ = [
    'AggregationService',
    'ReviewService',
    'UserService',
    'ModelService',
    'NewsService',
    'RewardService',
    'StatsService',
]
