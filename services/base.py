import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from utils.errors import Conflict, NotFound, Unexpected
from utils.validation import fits_sql_integer, parse_id

logger = logging.getLogger(__name__)


def persistence_guard(action: str, plural: bool = False):
    """
    Usage: @persistence_guard("create")

    Rolls the session back on a store failure and reports it as Unexpected
    without leaking the driver message to the client.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except SQLAlchemyError:
                self.session.rollback()
                noun = self.plural if plural else self.label.lower()
                logger.exception("Failed to %s %s", action, noun)
                raise Unexpected(f"Failed to {action} {noun}")
        return wrapper
    return decorator


class CrudService:
    model = None
    schema = None
    label = ""
    plural = ""
    # relationships loaded with list/get
    include = ()
    # payload field -> (parent model, parent label)
    parents = {}
    unique_fields = ()
    conflict_message = ""
    recheck_unique_on_update = False
    empty_list_not_found = False

    def __init__(self, session):
        self.session = session

    # ---------- hooks ----------
    def prepare(self, data: dict) -> dict:
        """Last chance to transform validated values before they are stored."""
        return data

    def check_rules(self, record: dict):
        """Cross-field rules on the full candidate record."""

    def check_changes(self, row, changes: dict):
        """Update-only rules comparing the stored row with the supplied fields."""

    # ---------- operations ----------
    @persistence_guard("fetch", plural=True)
    def list(self):
        rows = self._query().order_by(self.model.id).all()
        if not rows and self.empty_list_not_found:
            raise NotFound(f"No {self.plural} found")
        return [row.to_dict(include=self.include) for row in rows]

    @persistence_guard("fetch")
    def get(self, raw_id):
        row = self._fetch(parse_id(raw_id))
        return row.to_dict(include=self.include)

    @persistence_guard("create")
    def create(self, payload: dict):
        data = self.schema.validate_create(payload)
        self.check_rules(data)
        self._check_parents(data)
        if self.unique_fields:
            self._check_unique(data)

        row = self.model(**self.prepare(data))
        self.session.add(row)
        self._commit()

        logger.info("Created %s %s", self.label.lower(), row.id)
        return row.to_dict()

    @persistence_guard("update")
    def update(self, raw_id, payload: dict):
        row_id = parse_id(raw_id)
        changes = self.schema.validate_update(payload)
        row = self._fetch(row_id, with_related=False)

        self._check_parents(changes)
        self.check_changes(row, changes)

        merged = {name: getattr(row, name) for name in self.schema.fields}
        merged.update(changes)
        self.check_rules(merged)
        if self.unique_fields and self.recheck_unique_on_update:
            self._check_unique(merged, exclude_id=row_id)

        for name, value in self.prepare(changes).items():
            setattr(row, name, value)
        self._commit()

        logger.info("Updated %s %s", self.label.lower(), row_id)
        return row.to_dict()

    @persistence_guard("delete")
    def delete(self, raw_id):
        row_id = parse_id(raw_id)
        row = self._fetch(row_id, with_related=False)
        self.session.delete(row)
        self._commit()
        logger.info("Deleted %s %s", self.label.lower(), row_id)

    # ---------- helpers ----------
    def _query(self):
        q = self.session.query(self.model)
        if self.include:
            q = q.options(*[selectinload(getattr(self.model, name)) for name in self.include])
        return q

    def _fetch(self, row_id: int, with_related: bool = True):
        if not fits_sql_integer(row_id):
            raise NotFound(f"{self.label} not found")
        q = self._query() if with_related else self.session.query(self.model)
        row = q.filter(self.model.id == row_id).first()
        if row is None:
            raise NotFound(f"{self.label} not found")
        return row

    def _check_parents(self, data: dict):
        for field, (parent_model, parent_label) in self.parents.items():
            if field not in data:
                continue
            value = data[field]
            if not fits_sql_integer(value) or self.session.get(parent_model, value) is None:
                raise NotFound(f"{parent_label} not found")

    def _check_unique(self, record: dict, exclude_id: int = None):
        q = self.session.query(self.model).filter(
            *[getattr(self.model, name) == record[name] for name in self.unique_fields]
        )
        if exclude_id is not None:
            q = q.filter(self.model.id != exclude_id)
        if q.first() is not None:
            raise Conflict(self.conflict_message)

    def _commit(self):
        try:
            self.session.commit()
        except IntegrityError:
            # the store's constraint wins a check-then-insert race
            self.session.rollback()
            logger.warning("Integrity error while saving %s", self.label.lower())
            raise Conflict(self.conflict_message or f"{self.label} conflicts with existing data")
