"""
Wiring for the review platform: config, logging, repositories and services.
"""

import logging
from typing import Dict, Optional

from . import database
from .config import load_config, validate_config
from .log import setup_logging
from .repositories import (
    UserRepository, AiModelRepository, ReviewRepository, NewsRepository,
    RewardRepository, SQLUserRepository, SQLAiModelRepository,
    SQLReviewRepository, SQLNewsRepository, SQLRewardRepository,
)
from .repositories.base import Clock
from .seed import seed_demo_data
from .services import (
    AggregationService, ReviewService, UserService, ModelService,
    NewsService, RewardService, StatsService,
)

BACKEND_MEMORY = 'memory'
BACKEND_SQL = 'sql'


class ReviewPlatform:
    """Creates the repositories for the configured backend and the services
    on top of them.

    Services are public attributes (``platform.review_service`` etc.) so an
    HTTP layer can call them directly.  Repositories are available as
    ``platform.users``, ``platform.models``, ``platform.reviews``,
    ``platform.news`` and ``platform.rewards``.
    """

    def __init__(self, config_path: Optional[str] = None,
                 config: Optional[Dict] = None,
                 clock: Optional[Clock] = None) -> None:
        self._log = logging.getLogger('airate.platform')
        self.config = load_config(config_path)
        if config:
            self.config.update(config)
            validate_config(self.config)

        setup_logging(self.config.get('log_level', 'WARNING'))

        self.engine = None
        backend = self.config.get('storage_backend', BACKEND_MEMORY)
        if backend == BACKEND_MEMORY:
            self.users = UserRepository(clock)
            self.models = AiModelRepository(clock)
            self.reviews = ReviewRepository(clock)
            self.news = NewsRepository(clock)
            self.rewards = RewardRepository(clock)
        elif backend == BACKEND_SQL:
            self.engine = database.make_engine(self.config['database_url'])
            database.init_db(self.engine)
            sessions = database.make_session_factory(self.engine)
            self.users = SQLUserRepository(sessions, clock)
            self.models = SQLAiModelRepository(sessions, clock)
            self.reviews = SQLReviewRepository(sessions, clock)
            self.news = SQLNewsRepository(sessions, clock)
            self.rewards = SQLRewardRepository(sessions, clock)
        else:
            raise ValueError(f"Unknown storage_backend: {backend!r}")
        self.backend = backend
        self._log.info("Using %s storage backend", backend)

        self.aggregation_service = AggregationService(
            self.users, self.models, self.reviews,
            points_per_review=self.config.get('points_per_review'),
            points_per_media=self.config.get('points_per_media'),
            points_per_helpful_vote=self.config.get('points_per_helpful_vote'),
        )
        self.user_service = UserService(self.users)
        self.model_service = ModelService(self.models)
        self.review_service = ReviewService(
            self.reviews, self.models, self.users, self.aggregation_service)
        self.news_service = NewsService(self.news)
        self.reward_service = RewardService(self.rewards)
        self.stats_service = StatsService(
            self.users, self.models, self.reviews,
            rewards_claimed=self.config.get(
                'rewards_claimed', StatsService.DEFAULT_REWARDS_CLAIMED),
        )

        if self.config.get('seed_demo_data'):
            seed_demo_data(self)

    def close(self) -> None:
        """Release the database engine, if any."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
