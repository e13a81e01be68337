"""Repositories for platform users."""
from typing import Dict, Optional

from .. import database
from .base import BaseRepository, SQLRepository, _EntityShape


class _UserShape(_EntityShape):
    """Schema::

        {
            "id":         <int>,
            "username":   <str>,
            "password":   <str>,
            "name":       <str>,
            "email":      <str>,
            "avatar":     <str|null>,
            "points":     <int, starts at 0>,
            "created_at": <datetime>
        }
    """

    entity_name = 'user'
    fields = {
        'username': None,
        'password': None,
        'name': None,
        'email': None,
        'avatar': None,
    }
    defaults = {'points': 0}

    def add_points(self, user_id: int, amount: int) -> Optional[Dict]:
        """Add *amount* to the user's balance.  Returns ``None`` if the user
        does not exist."""
        return self._update(user_id, lambda u: {'points': u['points'] + amount})


class UserRepository(_UserShape, BaseRepository):
    """In-memory user store.  Username uniqueness is the caller's job."""

    def find_by_username(self, username: str) -> Optional[Dict]:
        for user in self.data.values():
            if user['username'] == username:
                return self.find(user['id'])
        return None


class SQLUserRepository(_UserShape, SQLRepository):
    model = database.User

    def find_by_username(self, username: str) -> Optional[Dict]:
        with self._session() as db:
            row = (db.query(database.User)
                   .filter(database.User.username == username)
                   .order_by(database.User.id.asc())
                   .first())
            return self._to_dict(row) if row is not None else None
