"""Exceptions raised by the AIRate services."""
from typing import Iterable


class AIRateError(Exception):
    """Base class for every error raised by this package."""


class NotFoundError(AIRateError):
    """An id did not resolve to an entity the operation needs."""

    def __init__(self, entity: str, entity_id) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationError(AIRateError):
    """Input data failed validation.

    ``errors`` holds one human-readable message per failed check.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__('; '.join(self.errors) or 'invalid input')


class DuplicateUsernameError(AIRateError):
    """Registration attempted with a username that is already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already exists: {username}")
