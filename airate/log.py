"""Logging setup for AIRate.

Every module logs under the ``airate`` logger, so one handler on that
logger covers the whole package:

- ``airate.platform``: backend selection and wiring
- ``airate.config``: ignored config files and rejected values
- ``airate.database``: table creation
- ``airate.repository.<Class>``: entity creation, one logger per repository
- ``airate.aggregation``: score recomputes and point credits
- ``airate.service.<name>``: validation failures in the services
- ``airate.seed``: demo data loading
"""
import logging

ROOT_LOGGER = 'airate'
LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'

_handler = None


def setup_logging(level: str = 'WARNING') -> logging.Logger:
    """Attach a stream handler to the ``airate`` logger and set its level.

    Safe to call more than once: each :class:`~airate.platform.ReviewPlatform`
    calls it, but the handler is only added the first time.  Unknown level
    names fall back to WARNING.
    """
    global _handler
    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    numeric = logging.getLevelName(str(level).upper())
    logger.setLevel(numeric if isinstance(numeric, int) else logging.WARNING)
    return logger
