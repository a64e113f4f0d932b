# workforce_api/store.py
"""
Thin persistence layer the dispatch handlers talk to.

Every write commits on success and rolls the session back before
re-raising, so a failed request never leaves a dirty session behind for
the next one.
"""
from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import asc, desc

from workforce_api.extensions import db

log = logging.getLogger(__name__)


class RecordNotFound(LookupError):
    """update/delete addressed an id that does not exist."""
    def __init__(self, message: str, model=None, ident=None):
        super().__init__(message)
        self.model = model
        self.ident = ident


def _not_found(model, ident) -> RecordNotFound:
    name = getattr(model, "__label__", model.__name__)
    return RecordNotFound(f"{name} not found", model=model, ident=ident)


def find_one(model, ident):
    return db.session.get(model, ident)


def find_first(model, **filters):
    return model.query.filter_by(**filters).first()


def find_many(model, where: dict | None = None,
              order_by: Iterable[tuple[str, bool]] | None = None,
              limit: int | None = None, offset: int | None = None):
    """
    where:    {column_name: value} equality filters
    order_by: [(column_name, ascending), ...]
    """
    q = model.query
    if where:
        q = q.filter_by(**where)
    for col, ascending in (order_by or ()):
        column = getattr(model, col)
        q = q.order_by(asc(column) if ascending else desc(column))
    if offset:
        q = q.offset(offset)
    if limit:
        q = q.limit(limit)
    return q.all()


def count(model) -> int:
    return db.session.query(model).count()


def _commit():
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def create(model, values: dict):
    obj = model(**values)
    db.session.add(obj)
    _commit()
    log.debug("created %s id=%s", model.__name__, obj.id)
    return obj


def update(model, ident, values: dict):
    obj = db.session.get(model, ident)
    if obj is None:
        raise _not_found(model, ident)
    for key, val in values.items():
        setattr(obj, key, val)
    _commit()
    return obj


def delete(model, ident):
    obj = db.session.get(model, ident)
    if obj is None:
        raise _not_found(model, ident)
    db.session.delete(obj)
    _commit()
    log.debug("deleted %s id=%s", model.__name__, ident)
