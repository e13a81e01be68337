"""Site-wide statistics derived from the store."""
from typing import Dict


class StatsService:
    """Computes headline counts from repository reads.

    Nothing here is stored; every call reads the current state.
    ``rewards_claimed`` is a fixed placeholder figure.
    """

    DEFAULT_REWARDS_CLAIMED = 9845

    def __init__(self, users, models, reviews,
                 rewards_claimed: int = DEFAULT_REWARDS_CLAIMED) -> None:
        self._users = users
        self._models = models
        self._reviews = reviews
        self._rewards_claimed = rewards_claimed

    def get_stats(self) -> Dict[str, int]:
        """Return ``model_count``, ``review_count``, ``user_count`` and
        ``rewards_claimed``."""
        return {
            'model_count': len(self._models.list()),
            'review_count': len(self._reviews.list(limit=None)),
            'user_count': len(self._users.all()),
            'rewards_claimed': self._rewards_claimed,
        }
