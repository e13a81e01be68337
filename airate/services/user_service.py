"""Business logic for user registration and lookup."""
import logging
from typing import Dict, List, Optional

from ..exceptions import DuplicateUsernameError, ValidationError
from .validation import missing_fields


class UserService:
    """Registers users and exposes read access to them.

    The user repository does not enforce unique usernames; :meth:`register`
    performs that check before creating the account.
    """

    REQUIRED_FIELDS = ('username', 'password', 'name', 'email')

    def __init__(self, users) -> None:
        self._repo = users
        self._log = logging.getLogger('airate.service.users')

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register(self, data: Dict) -> Dict:
        """Create a new user with a zero point balance.

        Raises:
            ValidationError:        a required field is missing.
            DuplicateUsernameError: the username is already taken.
        """
        errors = missing_fields(data, self.REQUIRED_FIELDS)
        if errors:
            raise ValidationError(errors)
        if self._repo.find_by_username(data['username']) is not None:
            raise DuplicateUsernameError(data['username'])
        user = self._repo.create(data)
        self._log.info("Registered user %s (%s)", user['id'], user['username'])
        return user

    def get(self, user_id: int) -> Optional[Dict]:
        """Return the user dict for *user_id*, or ``None``."""
        return self._repo.find(user_id)

    def get_by_username(self, username: str) -> Optional[Dict]:
        return self._repo.find_by_username(username)

    def get_all(self) -> List[Dict]:
        return self._repo.all()

    def get_count(self) -> int:
        return self._repo.count()
