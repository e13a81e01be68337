"""Repositories for the AI model catalog."""
import logging
from typing import Dict, List, Optional

from .. import database
from .base import BaseRepository, SQLRepository, _EntityShape

logger = logging.getLogger('airate.repository')

SORT_AVG_RATING = 'avg_rating'
SORT_REVIEW_COUNT = 'review_count'
SORT_NEWEST = 'newest'
SORT_KEYS = (SORT_AVG_RATING, SORT_REVIEW_COUNT, SORT_NEWEST)
# camelCase keys used by the web client
SORT_ALIASES = {'avgRating': SORT_AVG_RATING, 'reviewCount': SORT_REVIEW_COUNT}

ALL_CATEGORIES = 'All Categories'

SCORE_FIELDS = (
    'avg_rating',
    'review_count',
    'accuracy_score',
    'ease_of_use_score',
    'innovation_score',
)


def normalize_sort(sort_by: Optional[str]) -> str:
    """Map *sort_by* onto one of :data:`SORT_KEYS`; unknown keys fall back to
    average rating."""
    if sort_by is None:
        return SORT_AVG_RATING
    key = SORT_ALIASES.get(sort_by, sort_by)
    if key not in SORT_KEYS:
        logger.debug("Unknown sort key %r, using %s", sort_by, SORT_AVG_RATING)
        return SORT_AVG_RATING
    return key


def is_category_filter(category: Optional[str]) -> bool:
    return bool(category) and category != ALL_CATEGORIES


class _AiModelShape(_EntityShape):
    """Schema::

        {
            "id":                <int>,
            "name":              <str>,
            "description":       <str>,
            "category":          <str>,
            "image_url":         <str|null>,
            "avg_rating":        <float>,   # derived
            "review_count":      <int>,     # derived
            "accuracy_score":    <float>,   # derived
            "ease_of_use_score": <float>,   # derived
            "innovation_score":  <float>,   # derived
            "created_at":        <datetime>
        }
    """

    entity_name = 'model'
    fields = {
        'name': None,
        'description': None,
        'category': None,
        'image_url': None,
    }
    defaults = {
        'avg_rating': 0.0,
        'review_count': 0,
        'accuracy_score': 0.0,
        'ease_of_use_score': 0.0,
        'innovation_score': 0.0,
    }

    def update_scores(self, model_id: int, scores: Dict) -> Optional[Dict]:
        """Overwrite the derived score fields present in *scores*; any other
        key is ignored.  Returns ``None`` if the model does not exist."""
        changes = {k: v for k, v in scores.items() if k in SCORE_FIELDS}
        return self._update(model_id, lambda _m: changes)


class AiModelRepository(_AiModelShape, BaseRepository):
    """In-memory model catalog."""

    def list(self, category: Optional[str] = None,
             sort_by: Optional[str] = None) -> List[Dict]:
        """Return models, optionally filtered by *category*, sorted
        descending by *sort_by*."""
        models = self.all()
        if is_category_filter(category):
            models = [m for m in models if m['category'] == category]

        key = normalize_sort(sort_by)
        if key == SORT_NEWEST:
            return self._newest_first(models)
        return sorted(models, key=lambda m: m[key], reverse=True)


class SQLAiModelRepository(_AiModelShape, SQLRepository):
    model = database.AiModel

    def list(self, category: Optional[str] = None,
             sort_by: Optional[str] = None) -> List[Dict]:
        with self._session() as db:
            query = db.query(database.AiModel)
            if is_category_filter(category):
                query = query.filter(database.AiModel.category == category)

            key = normalize_sort(sort_by)
            if key == SORT_NEWEST:
                query = self._newest_first(query)
            else:
                column = getattr(database.AiModel, key)
                query = query.order_by(column.desc(), database.AiModel.id.asc())
            return [self._to_dict(r) for r in query.all()]
