"""Rating aggregation and point accrual."""
import logging
from typing import Dict, Optional

from ..exceptions import NotFoundError


class AggregationService:
    """Keeps model scores consistent with their reviews and user point
    balances consistent with point-earning events.

    Rules
    -----
    * A model's ``avg_rating``, ``accuracy_score``, ``ease_of_use_score`` and
      ``innovation_score`` are the plain mean of its reviews' ``rating``,
      ``accuracy_rating``, ``ease_of_use_rating`` and ``innovation_rating``;
      ``review_count`` is the number of reviews.  A model with no reviews is
      left untouched.
    * Every new review earns its author ``points_per_review``, plus
      ``points_per_media`` when it has media attached.
    * Every helpful vote earns the review's *author* ``points_per_helpful_vote``.
    * Crediting a user that does not exist is a silent no-op.

    Only the repository interface is used, so any storage backend works.
    """

    DEFAULT_POINTS_PER_REVIEW = 50
    DEFAULT_POINTS_PER_MEDIA = 20
    DEFAULT_POINTS_PER_HELPFUL_VOTE = 5

    # review field -> model field
    SCORE_MAP = (
        ('rating', 'avg_rating'),
        ('accuracy_rating', 'accuracy_score'),
        ('ease_of_use_rating', 'ease_of_use_score'),
        ('innovation_rating', 'innovation_score'),
    )

    def __init__(self, users, models, reviews,
                 points_per_review: int = None,
                 points_per_media: int = None,
                 points_per_helpful_vote: int = None) -> None:
        self._users = users
        self._models = models
        self._reviews = reviews
        self.points_per_review = (self.DEFAULT_POINTS_PER_REVIEW
                                  if points_per_review is None else points_per_review)
        self.points_per_media = (self.DEFAULT_POINTS_PER_MEDIA
                                 if points_per_media is None else points_per_media)
        self.points_per_helpful_vote = (self.DEFAULT_POINTS_PER_HELPFUL_VOTE
                                        if points_per_helpful_vote is None
                                        else points_per_helpful_vote)
        self._log = logging.getLogger('airate.aggregation')

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def recompute_model_scores(self, model_id: int) -> Optional[Dict]:
        """Recompute the derived scores of *model_id* from its reviews.

        Returns:
            The updated model; the unchanged model when it has no reviews;
            ``None`` when the model does not exist.
        """
        model = self._models.find(model_id)
        if model is None:
            self._log.debug("Recompute skipped: model %s not found", model_id)
            return None

        reviews = self._reviews.for_model(model_id)
        if not reviews:
            return model

        count = len(reviews)
        scores = {'review_count': count}
        for review_field, model_field in self.SCORE_MAP:
            scores[model_field] = sum(r[review_field] for r in reviews) / count

        updated = self._models.update_scores(model_id, scores)
        self._log.debug("Model %s rescored: avg %.3f over %d reviews",
                        model_id, scores['avg_rating'], count)
        return updated

    def credit_points(self, user_id: int, amount: int) -> Optional[Dict]:
        """Add *amount* points to *user_id*.

        Returns:
            The updated user, or ``None`` if the user does not exist.  No
            error is raised in that case; callers must not assume the
            credit happened.
        """
        user = self._users.add_points(user_id, amount)
        if user is None:
            self._log.debug("Point credit of %s skipped: user %s not found",
                            amount, user_id)
        return user

    def points_for_review(self, review: Dict) -> int:
        points = self.points_per_review
        if review.get('media_urls'):
            points += self.points_per_media
        return points

    def apply_review_created(self, review: Dict) -> int:
        """Run the aggregation triggered by a newly stored *review*.

        Returns:
            Number of points credited to the author (``0`` if the author
            does not exist).
        """
        self.recompute_model_scores(review['model_id'])
        points = self.points_for_review(review)
        if self.credit_points(review['user_id'], points) is None:
            return 0
        return points

    def record_helpful_vote(self, review_id: int) -> Dict:
        """Add one helpful vote to *review_id* and credit its author.

        Raises:
            NotFoundError: if the review does not exist; nothing is changed.
        """
        review = self._reviews.increment_helpful_votes(review_id, 1)
        if review is None:
            raise NotFoundError('review', review_id)
        self.credit_points(review['user_id'], self.points_per_helpful_vote)
        self._log.info("Review %s marked helpful (%d votes)",
                       review_id, review['helpful_votes'])
        return review
