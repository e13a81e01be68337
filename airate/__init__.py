"""
AIRate application package.

Layered architecture for an AI-model review platform:

  airate/repositories/  — storage: in-memory or SQLAlchemy-backed entity stores.
  airate/services/      — business logic: validation, aggregation, point credits.

``ReviewPlatform`` (in ``airate.platform``) is the integration point: it
creates repository and service instances in ``__init__`` and exposes them as
public attributes (e.g. ``platform.review_service``).  An HTTP layer can use
these services directly, giving a clean separation between the transport and
the domain.
"""

__version__ = '0.1.0'
