"""Business logic for the AI model catalog."""
import logging
from typing import Dict, List, Optional

from ..exceptions import ValidationError
from .validation import missing_fields


class ModelService:
    """Adds models to the catalog and lists them.

    Score fields are never taken from the caller; a new model starts at zero
    and is only rescored by the aggregation service.
    """

    REQUIRED_FIELDS = ('name', 'description', 'category')

    def __init__(self, models) -> None:
        self._repo = models
        self._log = logging.getLogger('airate.service.models')

    def create(self, data: Dict) -> Dict:
        """Add a model to the catalog.

        Raises:
            ValidationError: a required field is missing.
        """
        errors = missing_fields(data, self.REQUIRED_FIELDS)
        if errors:
            raise ValidationError(errors)
        model = self._repo.create(data)
        self._log.info("Added model %s (%s)", model['id'], model['name'])
        return model

    def get(self, model_id: int) -> Optional[Dict]:
        return self._repo.find(model_id)

    def list(self, category: Optional[str] = None,
             sort_by: Optional[str] = None) -> List[Dict]:
        """Return models filtered by *category* and sorted by *sort_by*.

        Args:
            category: Exact category name; ``None``, ``""`` or
                      ``"All Categories"`` disable the filter.
            sort_by:  ``'avg_rating'`` (default), ``'review_count'`` or
                      ``'newest'``.  All orders are descending.
        """
        return self._repo.list(category=category, sort_by=sort_by)

    def categories(self) -> List[str]:
        """Return the distinct categories in first-seen order."""
        seen = []
        for model in self._repo.all():
            if model['category'] not in seen:
                seen.append(model['category'])
        return seen
