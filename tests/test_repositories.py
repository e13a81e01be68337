#!/usr/bin/env python3
"""
Unit tests for the repository layer.  Every test runs against both the
in-memory store and the SQLAlchemy store (in-memory SQLite).

Run with:
    python -m pytest tests/test_repositories.py
"""
import datetime
import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from airate import database
from airate.repositories import (
    UserRepository, AiModelRepository, ReviewRepository, NewsRepository,
    RewardRepository, SQLUserRepository, SQLAiModelRepository,
    SQLReviewRepository, SQLNewsRepository, SQLRewardRepository,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FakeClock:
    """Returns a strictly increasing timestamp on every call."""

    def __init__(self):
        self.now = datetime.datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self):
        self.now += datetime.timedelta(minutes=1)
        return self.now


def user_data(username='alice', **extra):
    data = {'username': username, 'password': 'pw', 'name': username.title(),
            'email': f'{username}@example.com'}
    data.update(extra)
    return data


def model_data(name='GPT-4', category='Text Generation', **extra):
    data = {'name': name, 'description': f'{name} model', 'category': category}
    data.update(extra)
    return data


def review_data(user_id=1, model_id=1, rating=5, **extra):
    data = {'user_id': user_id, 'model_id': model_id, 'title': 'Title',
            'content': 'Body', 'rating': rating, 'accuracy_rating': rating,
            'ease_of_use_rating': rating, 'innovation_rating': rating}
    data.update(extra)
    return data


def news_data(title='Headline', **extra):
    data = {'title': title, 'content': 'Body', 'category': 'RESEARCH',
            'summary': 'Short'}
    data.update(extra)
    return data


# ===========================================================================
# Shared contract
# ===========================================================================

class RepositoryContract:
    """Tests mixed into one TestCase per backend.  Sub-classes implement
    :meth:`build` and assign the five repositories, and
    :meth:`unclocked_models`, which returns a model repository on the
    default UTC clock."""

    def setUp(self):
        self.clock = FakeClock()
        self.build()

    # -- ids / create ---------------------------------------------------

    def test_ids_start_at_one_and_increase(self):
        first = self.users.create(user_data('alice'))
        second = self.users.create(user_data('bob'))
        self.assertEqual(first['id'], 1)
        self.assertEqual(second['id'], 2)

    def test_ids_are_per_entity_kind(self):
        self.users.create(user_data())
        model = self.models.create(model_data())
        self.assertEqual(model['id'], 1)

    def test_user_points_start_at_zero(self):
        user = self.users.create(user_data(points=750))
        self.assertEqual(user['points'], 0)
        self.assertIsNotNone(user['created_at'])

    def test_default_clock_timestamp_survives_reload(self):
        models = self.unclocked_models()
        created = models.create(model_data())
        found = models.find(created['id'])
        self.assertEqual(created['created_at'], found['created_at'])
        self.assertEqual(found['created_at'].utcoffset(), datetime.timedelta(0))
        self.assertEqual(models.list()[0]['created_at'], created['created_at'])

    def test_naive_clock_is_read_as_utc(self):
        user = self.users.create(user_data())
        expected = datetime.datetime(2024, 1, 1, 12, 1, tzinfo=datetime.timezone.utc)
        self.assertEqual(user['created_at'], expected)
        self.assertEqual(self.users.find(user['id'])['created_at'], expected)

    def test_model_derived_fields_are_not_settable(self):
        model = self.models.create(model_data(avg_rating=4.9, review_count=2341))
        self.assertEqual(model['avg_rating'], 0)
        self.assertEqual(model['review_count'], 0)
        self.assertEqual(model['accuracy_score'], 0)
        self.assertEqual(model['ease_of_use_score'], 0)
        self.assertEqual(model['innovation_score'], 0)

    def test_review_counters_start_at_zero(self):
        review = self.reviews.create(review_data(helpful_votes=42, comment_count=12))
        self.assertEqual(review['helpful_votes'], 0)
        self.assertEqual(review['comment_count'], 0)
        self.assertEqual(review['media_urls'], [])

    def test_review_keeps_media_urls(self):
        review = self.reviews.create(review_data(media_urls=['https://x/a.png']))
        self.assertEqual(self.reviews.find(review['id'])['media_urls'],
                         ['https://x/a.png'])

    def test_unknown_input_keys_are_dropped(self):
        model = self.models.create(model_data(provider='OpenAI'))
        self.assertNotIn('provider', model)

    # -- find / all -----------------------------------------------------

    def test_find_missing_returns_none(self):
        self.assertIsNone(self.users.find(99))
        self.assertIsNone(self.models.find(99))
        self.assertIsNone(self.reviews.find(99))
        self.assertIsNone(self.news.find(99))
        self.assertIsNone(self.rewards.find(99))

    def test_returned_entities_are_copies(self):
        model = self.models.create(model_data())
        model['avg_rating'] = 5.0
        self.assertEqual(self.models.find(model['id'])['avg_rating'], 0)

    def test_count(self):
        self.assertEqual(self.users.count(), 0)
        self.users.create(user_data('alice'))
        self.users.create(user_data('bob'))
        self.assertEqual(self.users.count(), 2)

    # -- users ----------------------------------------------------------

    def test_find_by_username(self):
        self.users.create(user_data('alice'))
        bob = self.users.create(user_data('bob'))
        self.assertEqual(self.users.find_by_username('bob')['id'], bob['id'])
        self.assertIsNone(self.users.find_by_username('carol'))

    def test_store_does_not_enforce_unique_usernames(self):
        self.users.create(user_data('alice'))
        self.users.create(user_data('alice'))
        self.assertEqual(self.users.count(), 2)

    def test_add_points(self):
        user = self.users.create(user_data())
        self.users.add_points(user['id'], 50)
        updated = self.users.add_points(user['id'], 20)
        self.assertEqual(updated['points'], 70)
        self.assertEqual(self.users.find(user['id'])['points'], 70)

    def test_add_points_missing_user_returns_none(self):
        self.assertIsNone(self.users.add_points(9999, 50))

    # -- models ---------------------------------------------------------

    def _scored(self, name, category='Text Generation', **scores):
        model = self.models.create(model_data(name, category))
        return self.models.update_scores(model['id'], scores)

    def test_update_scores_only_touches_score_fields(self):
        model = self.models.create(model_data())
        updated = self.models.update_scores(
            model['id'], {'avg_rating': 4.5, 'review_count': 2, 'name': 'Other'})
        self.assertEqual(updated['avg_rating'], 4.5)
        self.assertEqual(updated['review_count'], 2)
        self.assertEqual(updated['name'], 'GPT-4')

    def test_update_scores_missing_model_returns_none(self):
        self.assertIsNone(self.models.update_scores(5, {'avg_rating': 3.0}))

    def test_list_models_defaults_to_avg_rating_desc(self):
        self._scored('Low', avg_rating=3.0)
        self._scored('High', avg_rating=4.8)
        self._scored('Mid', avg_rating=4.0)
        self.assertEqual([m['name'] for m in self.models.list()],
                         ['High', 'Mid', 'Low'])

    def test_list_models_by_review_count(self):
        self._scored('Three', review_count=3)
        self._scored('Five', review_count=5)
        self.assertEqual(self.models.list(sort_by='review_count')[0]['name'], 'Five')

    def test_list_models_accepts_camel_case_sort(self):
        self._scored('Three', review_count=3)
        self._scored('Five', review_count=5)
        self.assertEqual(self.models.list(sort_by='reviewCount')[0]['name'], 'Five')

    def test_list_models_newest_first(self):
        self.models.create(model_data('Old'))
        self.models.create(model_data('New'))
        self.assertEqual([m['name'] for m in self.models.list(sort_by='newest')],
                         ['New', 'Old'])

    def test_unknown_sort_falls_back_to_avg_rating(self):
        self._scored('Low', avg_rating=1.0)
        self._scored('High', avg_rating=5.0)
        self.assertEqual(self.models.list(sort_by='bogus')[0]['name'], 'High')

    def test_sort_ties_keep_insertion_order(self):
        self._scored('First', avg_rating=4.0)
        self._scored('Second', avg_rating=4.0)
        self._scored('Third', avg_rating=4.0)
        self.assertEqual([m['name'] for m in self.models.list()],
                         ['First', 'Second', 'Third'])

    def test_list_models_category_filter(self):
        self.models.create(model_data('GPT-4', 'Text Generation'))
        self.models.create(model_data('Midjourney', 'Image Generation'))
        names = [m['name'] for m in self.models.list(category='Image Generation')]
        self.assertEqual(names, ['Midjourney'])

    def test_all_categories_means_no_filter(self):
        self.models.create(model_data('GPT-4', 'Text Generation'))
        self.models.create(model_data('Midjourney', 'Image Generation'))
        self.assertEqual(len(self.models.list(category='All Categories')), 2)
        self.assertEqual(len(self.models.list(category='')), 2)

    # -- reviews --------------------------------------------------------

    def test_list_reviews_newest_first(self):
        first = self.reviews.create(review_data())
        second = self.reviews.create(review_data())
        self.assertEqual([r['id'] for r in self.reviews.list()],
                         [second['id'], first['id']])

    def test_list_reviews_filters_by_model_and_caps(self):
        for model_id in (1, 2, 1, 1):
            self.reviews.create(review_data(model_id=model_id))
        self.assertEqual(len(self.reviews.list(model_id=1)), 3)
        self.assertEqual(len(self.reviews.list(model_id=1, limit=2)), 2)
        self.assertEqual(len(self.reviews.list(limit=0)), 0)

    def test_negative_limit_returns_nothing(self):
        self.reviews.create(review_data())
        self.news.create(news_data('one'))
        self.assertEqual(self.reviews.list(limit=-1), [])
        self.assertEqual(self.news.list(limit=-3), [])

    def test_for_model_returns_all_in_insertion_order(self):
        ids = [self.reviews.create(review_data(model_id=7))['id'] for _ in range(12)]
        self.reviews.create(review_data(model_id=8))
        self.assertEqual([r['id'] for r in self.reviews.for_model(7)], ids)

    def test_increment_helpful_votes(self):
        review = self.reviews.create(review_data())
        self.reviews.increment_helpful_votes(review['id'])
        updated = self.reviews.increment_helpful_votes(review['id'])
        self.assertEqual(updated['helpful_votes'], 2)

    def test_increment_helpful_votes_missing_returns_none(self):
        self.assertIsNone(self.reviews.increment_helpful_votes(42))

    # -- news / rewards -------------------------------------------------

    def test_news_newest_first_with_limit(self):
        for title in ('one', 'two', 'three'):
            self.news.create(news_data(title))
        self.assertEqual([a['title'] for a in self.news.list()],
                         ['three', 'two', 'one'])
        self.assertEqual([a['title'] for a in self.news.list(limit=2)],
                         ['three', 'two'])

    def test_rewards_in_insertion_order(self):
        self.rewards.create({'name': 'A', 'description': 'a', 'points_cost': 1000})
        self.rewards.create({'name': 'B', 'description': 'b', 'points_cost': 750})
        rewards = self.rewards.list()
        self.assertEqual([r['name'] for r in rewards], ['A', 'B'])
        self.assertTrue(rewards[0]['is_available'])
        self.assertNotIn('created_at', rewards[0])


# ===========================================================================
# Backends
# ===========================================================================

class TestMemoryRepositories(RepositoryContract, unittest.TestCase):

    def build(self):
        self.users = UserRepository(self.clock)
        self.models = AiModelRepository(self.clock)
        self.reviews = ReviewRepository(self.clock)
        self.news = NewsRepository(self.clock)
        self.rewards = RewardRepository(self.clock)

    def unclocked_models(self):
        return AiModelRepository()

    def test_input_dict_is_not_aliased(self):
        media = ['https://x/a.png']
        review = self.reviews.create(review_data(media_urls=media))
        media.append('https://x/b.png')
        self.assertEqual(self.reviews.find(review['id'])['media_urls'],
                         ['https://x/a.png'])


class TestSQLRepositories(RepositoryContract, unittest.TestCase):

    def build(self):
        self.engine = database.make_engine('sqlite://')
        database.init_db(self.engine)
        sessions = database.make_session_factory(self.engine)
        self.users = SQLUserRepository(sessions, self.clock)
        self.models = SQLAiModelRepository(sessions, self.clock)
        self.reviews = SQLReviewRepository(sessions, self.clock)
        self.news = SQLNewsRepository(sessions, self.clock)
        self.rewards = SQLRewardRepository(sessions, self.clock)
        self.sessions = sessions

    def unclocked_models(self):
        return SQLAiModelRepository(self.sessions)

    def tearDown(self):
        self.engine.dispose()

    def test_tables_created(self):
        from sqlalchemy import inspect
        tables = set(inspect(self.engine).get_table_names())
        self.assertEqual(tables, {'users', 'ai_models', 'reviews',
                                  'news_articles', 'rewards'})


if __name__ == '__main__':
    unittest.main()
