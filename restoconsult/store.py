"""Query client over the relational store.

Every table is reached through a small request builder::

    result = client.table('inquiries').select('*').order('created_at', ascending=False).execute()
    data, error = result

Calls never raise for store failures. They return a ``QueryResult`` whose
``error`` carries the message and whose ``data`` is ``None``.
"""

from enum import Enum
from flask import current_app
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from restoconsult.extensions import db


class StoreError(Exception):
    """Failure reported by the store. Only the message is meaningful."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class QueryResult:
    """``(data, error)`` pair returned by every executed query."""

    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __iter__(self):
        return iter((self.data, self.error))

    def __repr__(self):
        return f'<QueryResult data={self.data!r} error={self.error!r}>'


class TableQuery:
    """Request builder for one table. Call ``execute()`` to run it."""

    def __init__(self, session, name, model):
        self.session = session
        self.name = name
        self.model = model
        self._action = 'select'
        self._columns = None
        self._values = None
        self._filters = []
        self._order = []
        self._single = False

    # --- Actions ---
    def select(self, columns='*'):
        """Pick the returned columns, e.g. ``'*'`` or ``'id, status'``."""
        if columns and columns.strip() != '*':
            self._columns = [c.strip() for c in columns.split(',') if c.strip()]
        return self

    def insert(self, rows):
        self._action = 'insert'
        self._values = rows if isinstance(rows, list) else [rows]
        return self

    def update(self, patch):
        self._action = 'update'
        self._values = patch
        return self

    def delete(self):
        self._action = 'delete'
        return self

    # --- Modifiers ---
    def eq(self, field, value):
        self._filters.append((field, _coerce(value)))
        return self

    def order(self, field, ascending=True):
        self._order.append((field, ascending))
        return self

    def single(self):
        """Return one row instead of a list; zero or many rows is an error."""
        self._single = True
        return self

    def execute(self):
        try:
            if self._action == 'select':
                rows = self._run_select()
            elif self._action == 'insert':
                rows = self._run_insert()
            elif self._action == 'update':
                rows = self._run_update()
            else:
                rows = self._run_delete()
        except SQLAlchemyError as e:
            self.session.rollback()
            message = str(getattr(e, 'orig', None) or e)
            current_app.logger.error('%s on %s failed: %s', self._action, self.name, message)
            return QueryResult(error=StoreError(message))
        except StoreError as e:
            current_app.logger.error('%s on %s rejected: %s', self._action, self.name, e.message)
            return QueryResult(error=e)

        if self._single:
            if len(rows) != 1:
                return QueryResult(error=StoreError(
                    f'JSON object requested, multiple (or no) rows returned ({len(rows)} rows)'
                ))
            return QueryResult(data=rows[0])
        return QueryResult(data=rows)

    # --- Internals ---
    def _column_names(self):
        return [attr.key for attr in inspect(self.model).column_attrs]

    def _check_columns(self, names):
        known = set(self._column_names())
        for name in names:
            if name not in known:
                raise StoreError(f'column {self.name}.{name} does not exist')

    def _filtered(self):
        self._check_columns(field for field, _ in self._filters)
        query = self.session.query(self.model)
        for field, value in self._filters:
            query = query.filter(getattr(self.model, field) == value)
        return query

    def _project(self, obj):
        names = self._columns or self._column_names()
        return {name: getattr(obj, name) for name in names}

    def _run_select(self):
        if self._columns:
            self._check_columns(self._columns)
        query = self._filtered()
        self._check_columns(field for field, _ in self._order)
        for field, ascending in self._order:
            column = getattr(self.model, field)
            query = query.order_by(column.asc() if ascending else column.desc())
        return [self._project(obj) for obj in query.all()]

    def _run_insert(self):
        objs = []
        for row in self._values:
            self._check_columns(row)
            objs.append(self.model(**{k: _coerce(v) for k, v in row.items()}))
        self.session.add_all(objs)
        self.session.commit()
        return [self._project(obj) for obj in objs]

    def _run_update(self):
        if not self._filters:
            raise StoreError('UPDATE requires a WHERE clause')
        self._check_columns(self._values)
        objs = self._filtered().all()
        for obj in objs:
            for key, value in self._values.items():
                setattr(obj, key, _coerce(value))
        self.session.commit()
        return [self._project(obj) for obj in objs]

    def _run_delete(self):
        if not self._filters:
            raise StoreError('DELETE requires a WHERE clause')
        objs = self._filtered().all()
        rows = [self._project(obj) for obj in objs]
        for obj in objs:
            self.session.delete(obj)
        self.session.commit()
        return rows


class QueryClient:
    """Entry point handing out ``TableQuery`` builders per table."""

    def __init__(self, session, tables):
        self.session = session
        self.tables = tables

    def table(self, name):
        if name not in self.tables:
            raise KeyError(f'Unknown table: {name}')
        return TableQuery(self.session, name, self.tables[name])


def _coerce(value):
    """Store enum members by value."""
    if isinstance(value, Enum):
        return value.value
    return value


def get_client():
    """Query client bound to the current app's database session."""
    from restoconsult.models import TABLES
    return QueryClient(db.session, TABLES)
