"""Repositories for model reviews."""
from typing import Dict, List, Optional

from .. import database
from .base import BaseRepository, SQLRepository, _EntityShape


class _ReviewShape(_EntityShape):
    """Schema::

        {
            "id":                 <int>,
            "user_id":            <int>,
            "model_id":           <int>,
            "title":              <str>,
            "content":            <str>,
            "rating":             <int 1-5>,
            "accuracy_rating":    <int 1-5>,
            "ease_of_use_rating": <int 1-5>,
            "innovation_rating":  <int 1-5>,
            "media_urls":         [<str>, ...],
            "helpful_votes":      <int>,
            "comment_count":      <int>,
            "created_at":         <datetime>
        }
    """

    entity_name = 'review'
    fields = {
        'user_id': None,
        'model_id': None,
        'title': None,
        'content': None,
        'rating': None,
        'accuracy_rating': None,
        'ease_of_use_rating': None,
        'innovation_rating': None,
        'media_urls': [],
    }
    defaults = {'helpful_votes': 0, 'comment_count': 0}

    def _build(self, data: Dict) -> Dict:
        entity = super()._build(data)
        if entity['media_urls'] is None:
            entity['media_urls'] = []
        return entity

    def increment_helpful_votes(self, review_id: int,
                                increment: int = 1) -> Optional[Dict]:
        """Add *increment* to ``helpful_votes``.  Returns ``None`` if the
        review does not exist."""
        return self._update(
            review_id,
            lambda r: {'helpful_votes': r['helpful_votes'] + increment},
        )


class ReviewRepository(_ReviewShape, BaseRepository):
    """In-memory review store."""

    def for_model(self, model_id: int) -> List[Dict]:
        """Return every review of *model_id* in insertion order."""
        return [r for r in self.all() if r['model_id'] == model_id]

    def list(self, model_id: Optional[int] = None,
             limit: Optional[int] = None) -> List[Dict]:
        """Return reviews newest-first, optionally for one model and capped
        at *limit*."""
        reviews = self.for_model(model_id) if model_id is not None else self.all()
        return self._cap(self._newest_first(reviews), limit)


class SQLReviewRepository(_ReviewShape, SQLRepository):
    model = database.Review

    def for_model(self, model_id: int) -> List[Dict]:
        with self._session() as db:
            rows = (db.query(database.Review)
                    .filter(database.Review.model_id == model_id)
                    .order_by(database.Review.id.asc())
                    .all())
            return [self._to_dict(r) for r in rows]

    def list(self, model_id: Optional[int] = None,
             limit: Optional[int] = None) -> List[Dict]:
        with self._session() as db:
            query = db.query(database.Review)
            if model_id is not None:
                query = query.filter(database.Review.model_id == model_id)
            query = self._cap(self._newest_first(query), limit)
            return [self._to_dict(r) for r in query.all()]
