"""Business logic for model reviews."""
import logging
from typing import Dict, List, Optional

from ..exceptions import NotFoundError, ValidationError
from .aggregation_service import AggregationService
from .validation import int_in_range, missing_fields


class ReviewService:
    """Validates and stores reviews, delegating persistence to the review
    repository and score/point bookkeeping to
    :class:`~airate.services.aggregation_service.AggregationService`.

    Rules
    -----
    * ``title`` and ``content`` are required.
    * ``rating``, ``accuracy_rating``, ``ease_of_use_rating`` and
      ``innovation_rating`` must each be an integer in the range **1–5**.
    * ``media_urls`` is optional (defaults to ``[]``).
    * The referenced model and user must exist.
    * Model scores and author points are updated before :meth:`create`
      returns.
    """

    RATING_FIELDS = ('rating', 'accuracy_rating', 'ease_of_use_rating',
                     'innovation_rating')
    MIN_RATING = 1
    MAX_RATING = 5
    DEFAULT_LIMIT = 10

    def __init__(self, reviews, models, users,
                 aggregation: AggregationService) -> None:
        self._repo = reviews
        self._models = models
        self._users = users
        self._aggregation = aggregation
        self._log = logging.getLogger('airate.service.reviews')

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, data: Dict) -> Dict:
        """Store a new review and run aggregation for it.

        Raises:
            ValidationError: malformed input.
            NotFoundError:   the model or the user does not exist.
        """
        errors = missing_fields(data, ('user_id', 'model_id', 'title', 'content'))
        for name in self.RATING_FIELDS:
            errors.extend(int_in_range(data, name, self.MIN_RATING, self.MAX_RATING))
        media = data.get('media_urls')
        if media is not None and not isinstance(media, (list, tuple)):
            errors.append("media_urls must be a list")
        if errors:
            raise ValidationError(errors)

        if self._models.find(data['model_id']) is None:
            raise NotFoundError('model', data['model_id'])
        if self._users.find(data['user_id']) is None:
            raise NotFoundError('user', data['user_id'])

        review = self._repo.create(dict(data, media_urls=list(media or [])))
        points = self._aggregation.apply_review_created(review)
        self._log.info("User %s reviewed model %s (review %s, +%d points)",
                       review['user_id'], review['model_id'], review['id'], points)
        return review

    def get(self, review_id: int) -> Optional[Dict]:
        """Return the review dict for *review_id*, or ``None``."""
        return self._repo.find(review_id)

    def list(self, model_id: Optional[int] = None,
             limit: Optional[int] = DEFAULT_LIMIT) -> List[Dict]:
        """Return reviews newest-first, optionally for one model.

        Pass ``limit=None`` for no cap.
        """
        return self._repo.list(model_id=model_id, limit=limit)

    def mark_helpful(self, review_id: int) -> Dict:
        """Record one helpful vote.

        Raises:
            NotFoundError: if the review does not exist.
        """
        return self._aggregation.record_helpful_vote(review_id)
