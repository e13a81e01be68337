"""
Database models and engine helpers for the SQL storage backend.
Column shapes follow the platform's relational schema: users, ai_models,
reviews, news_articles and rewards.
"""

import logging

from sqlalchemy import (create_engine, Column, Integer, String, Boolean,
                        DateTime, Text, Float, JSON)
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger('airate.database')

Base = declarative_base()


class User(Base):
    """Platform member with a point balance."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), index=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    avatar = Column(Text, nullable=True)
    points = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime)


class AiModel(Base):
    """Catalog entry; the score columns are written only by aggregation."""
    __tablename__ = "ai_models"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(255), index=True, nullable=False)
    image_url = Column(Text, nullable=True)
    avg_rating = Column(Float, default=0.0)
    review_count = Column(Integer, default=0)
    accuracy_score = Column(Float, default=0.0)
    ease_of_use_score = Column(Float, default=0.0)
    innovation_score = Column(Float, default=0.0)
    created_at = Column(DateTime)


class Review(Base):
    """A user's structured review of one model."""
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, index=True, nullable=False)
    model_id = Column(Integer, index=True, nullable=False)
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    accuracy_rating = Column(Integer, nullable=False)
    ease_of_use_rating = Column(Integer, nullable=False)
    innovation_rating = Column(Integer, nullable=False)
    media_urls = Column(JSON, default=list)
    helpful_votes = Column(Integer, default=0)
    comment_count = Column(Integer, default=0)
    created_at = Column(DateTime)


class NewsArticle(Base):
    __tablename__ = "news_articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=True)
    summary = Column(Text, nullable=False)
    created_at = Column(DateTime)


class Reward(Base):
    __tablename__ = "rewards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    points_cost = Column(Integer, nullable=False)
    image_url = Column(Text, nullable=True)
    is_available = Column(Boolean, default=True)


def make_engine(database_url: str = 'sqlite://'):
    """Create an engine for *database_url*.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    if database_url in ('sqlite://', 'sqlite:///:memory:'):
        return create_engine(
            database_url,
            echo=False,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=False)


def make_session_factory(engine):
    """Return a configured ``sessionmaker`` bound to *engine*."""
    return sessionmaker(autocommit=False, autoflush=False,
                        expire_on_commit=False, bind=engine)


def init_db(engine) -> None:
    """Initialize database tables."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully")
