"""Repository base classes used by all concrete repositories."""
import copy
import datetime
import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional

Clock = Callable[[], datetime.datetime]
# Receives a copy of the current entity, returns the fields to overwrite.
Changes = Callable[[Dict], Dict]


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Return *value* as an aware UTC datetime.

    SQLite hands ``DateTime`` columns back without tzinfo even when an aware
    value was written, so naive values are taken to already be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


class _EntityShape:
    """Field layout shared by the memory and SQL variant of a repository.

    ``fields`` maps every caller-settable field to its default; ``defaults``
    maps derived/counter fields to the value they start at.  Caller-supplied
    values for ``id``, ``created_at`` or anything in ``defaults`` are ignored.
    """

    entity_name = 'entity'
    fields: Dict[str, Any] = {}
    defaults: Dict[str, Any] = {}
    timestamped = True

    def _build(self, data: Dict) -> Dict:
        entity = {
            name: copy.deepcopy(data.get(name, default))
            for name, default in self.fields.items()
        }
        entity.update(copy.deepcopy(self.defaults))
        if self.timestamped:
            entity['created_at'] = as_utc(self._clock())
        return entity


class BaseRepository(_EntityShape):
    """Keeps one entity kind in an in-memory ``{id: entity_dict}`` map.

    Ids are assigned sequentially starting at 1 and are never reused.  Every
    value handed out is a deep copy, so callers cannot change stored state
    except through the repository's own mutation methods.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.data: Dict[int, Dict] = {}
        self._next_id = 1
        self._clock = clock or utcnow
        self._log = logging.getLogger(f'airate.repository.{type(self).__name__}')

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, data: Dict) -> Dict:
        """Assign the next id, fill defaults, store and return the entity."""
        entity = self._build(data)
        entity['id'] = self._next_id
        self._next_id += 1
        self.data[entity['id']] = entity
        self._log.info("Created %s %s", self.entity_name, entity['id'])
        return copy.deepcopy(entity)

    def find(self, entity_id: int) -> Optional[Dict]:
        """Return the entity for *entity_id*, or ``None``."""
        entity = self.data.get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    def all(self) -> List[Dict]:
        """Return every entity in insertion order."""
        return [copy.deepcopy(e) for e in self.data.values()]

    def count(self) -> int:
        return len(self.data)

    def _update(self, entity_id: int, compute: Changes) -> Optional[Dict]:
        entity = self.data.get(entity_id)
        if entity is None:
            return None
        entity.update(compute(copy.deepcopy(entity)))
        return copy.deepcopy(entity)

    @staticmethod
    def _newest_first(entities: List[Dict]) -> List[Dict]:
        # list.sort is stable with reverse=True: ties keep insertion order
        return sorted(entities, key=lambda e: e['created_at'], reverse=True)

    @staticmethod
    def _cap(entities: List[Dict], limit: Optional[int]) -> List[Dict]:
        """Keep the first *limit* entities; ``None`` keeps all, a negative limit none."""
        if limit is None:
            return entities
        return entities[:max(int(limit), 0)]


class SQLRepository(_EntityShape):
    """SQLAlchemy-backed counterpart of :class:`BaseRepository`.

    Sub-classes set ``model`` to the ORM class from :mod:`airate.database`.
    Ids come from the table's autoincrement primary key.  Each public call
    runs in its own session; on error the session is rolled back and the
    exception re-raised.
    """

    model = None

    def __init__(self, session_factory, clock: Optional[Clock] = None) -> None:
        self._session_factory = session_factory
        self._clock = clock or utcnow
        self._log = logging.getLogger(f'airate.repository.{type(self).__name__}')

    @contextmanager
    def _session(self):
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def _to_dict(self, row) -> Dict:
        entity = {col.name: getattr(row, col.name) for col in row.__table__.columns}
        if entity.get('created_at') is not None:
            entity['created_at'] = as_utc(entity['created_at'])
        return copy.deepcopy(entity)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, data: Dict) -> Dict:
        """Insert a row built from *data* and return it as a dict."""
        with self._session() as db:
            row = self.model(**self._build(data))
            db.add(row)
            db.flush()
            entity = self._to_dict(row)
        self._log.info("Created %s %s", self.entity_name, entity['id'])
        return entity

    def find(self, entity_id: int) -> Optional[Dict]:
        with self._session() as db:
            row = db.get(self.model, entity_id)
            return self._to_dict(row) if row is not None else None

    def all(self) -> List[Dict]:
        with self._session() as db:
            rows = db.query(self.model).order_by(self.model.id.asc()).all()
            return [self._to_dict(r) for r in rows]

    def count(self) -> int:
        with self._session() as db:
            return db.query(self.model).count()

    def _update(self, entity_id: int, compute: Changes) -> Optional[Dict]:
        with self._session() as db:
            row = db.get(self.model, entity_id)
            if row is None:
                return None
            for name, value in compute(self._to_dict(row)).items():
                setattr(row, name, value)
            db.flush()
            return self._to_dict(row)

    def _newest_first(self, query):
        return query.order_by(self.model.created_at.desc(), self.model.id.asc())

    @staticmethod
    def _cap(query, limit: Optional[int]):
        """Apply *limit* to *query*.

        ``None`` leaves the query unbounded; a negative limit returns no rows.
        """
        if limit is None:
            return query
        return query.limit(max(int(limit), 0))
