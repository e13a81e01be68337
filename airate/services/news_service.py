"""Business logic for news articles."""
from typing import Dict, List, Optional

from ..exceptions import ValidationError
from .validation import missing_fields


class NewsService:
    """Publishes and lists news articles (newest first)."""

    REQUIRED_FIELDS = ('title', 'content', 'category', 'summary')
    DEFAULT_LIMIT = 10

    def __init__(self, news) -> None:
        self._repo = news

    def create(self, data: Dict) -> Dict:
        errors = missing_fields(data, self.REQUIRED_FIELDS)
        if errors:
            raise ValidationError(errors)
        return self._repo.create(data)

    def get(self, article_id: int) -> Optional[Dict]:
        return self._repo.find(article_id)

    def list(self, limit: Optional[int] = DEFAULT_LIMIT) -> List[Dict]:
        return self._repo.list(limit=limit)
