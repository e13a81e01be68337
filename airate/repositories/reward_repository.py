"""Repositories for redeemable rewards."""
from typing import Dict, List

from .. import database
from .base import BaseRepository, SQLRepository, _EntityShape


class _RewardShape(_EntityShape):
    """Schema::

        {
            "id":           <int>,
            "name":         <str>,
            "description":  <str>,
            "points_cost":  <int>,
            "image_url":    <str|null>,
            "is_available": <bool>
        }
    """

    entity_name = 'reward'
    fields = {
        'name': None,
        'description': None,
        'points_cost': None,
        'image_url': None,
        'is_available': True,
    }
    timestamped = False

    def list(self) -> List[Dict]:
        return self.all()


class RewardRepository(_RewardShape, BaseRepository):
    pass


class SQLRewardRepository(_RewardShape, SQLRepository):
    model = database.Reward
