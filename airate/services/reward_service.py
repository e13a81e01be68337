"""Business logic for the rewards catalog."""
from typing import Dict, List, Optional

from ..exceptions import ValidationError
from .validation import missing_fields


class RewardService:
    """Manages the rewards users can spend points on.

    Rules
    -----
    * ``name`` and ``description`` are required.
    * ``points_cost`` must be a non-negative integer.
    * ``is_available`` defaults to ``True``.
    """

    REQUIRED_FIELDS = ('name', 'description')

    def __init__(self, rewards) -> None:
        self._repo = rewards

    def create(self, data: Dict) -> Dict:
        errors = missing_fields(data, self.REQUIRED_FIELDS)
        cost = data.get('points_cost')
        if isinstance(cost, bool) or not isinstance(cost, int) or cost < 0:
            errors.append("points_cost must be a non-negative integer")
        if errors:
            raise ValidationError(errors)
        return self._repo.create(data)

    def get(self, reward_id: int) -> Optional[Dict]:
        return self._repo.find(reward_id)

    def list(self) -> List[Dict]:
        return self._repo.list()
