"""Repositories for news articles."""
from typing import Dict, List, Optional

from .. import database
from .base import BaseRepository, SQLRepository, _EntityShape


class _NewsShape(_EntityShape):
    """Schema::

        {
            "id":         <int>,
            "title":      <str>,
            "content":    <str>,
            "category":   <str>,
            "image_url":  <str|null>,
            "summary":    <str>,
            "created_at": <datetime>
        }
    """

    entity_name = 'news article'
    fields = {
        'title': None,
        'content': None,
        'category': None,
        'image_url': None,
        'summary': None,
    }


class NewsRepository(_NewsShape, BaseRepository):

    def list(self, limit: Optional[int] = None) -> List[Dict]:
        """Return articles newest-first, capped at *limit*."""
        return self._cap(self._newest_first(self.all()), limit)


class SQLNewsRepository(_NewsShape, SQLRepository):
    model = database.NewsArticle

    def list(self, limit: Optional[int] = None) -> List[Dict]:
        with self._session() as db:
            query = self._cap(self._newest_first(db.query(database.NewsArticle)), limit)
            return [self._to_dict(r) for r in query.all()]
