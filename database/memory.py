import copy
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Iterator

from database.schema import SCHEMA, TableSpec

logger = logging.getLogger(__name__)


class UniqueViolationError(Exception):
    """Raised when a write would duplicate a value in a unique column."""

    def __init__(self, table: str, field: str, value):
        self.table = table
        self.field = field
        self.value = value
        super().__init__(f"{table}.{field} already holds {value!r}")


class UnknownTableError(KeyError):
    pass


class _Table:

    def __init__(self, spec: TableSpec):
        self.spec = spec
        self.rows: dict[int, dict] = {}
        self.next_id = 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryDatabase:
    """Process-local table store keyed by auto-incrementing integer ids.

    Every public method takes the store lock, so a uniqueness check and the
    write it guards happen as one step. Rows are copied on the way in and
    out; callers never hold a reference into the store.
    """

    def __init__(self, schema: tuple[TableSpec, ...] = SCHEMA):
        self._lock = threading.RLock()
        self._tables = {spec.name: _Table(spec) for spec in schema}

    def _table(self, name: str) -> _Table:
        try:
            return self._tables[name]
        except KeyError:
            raise UnknownTableError(name) from None

    @contextmanager
    def transaction(self) -> Iterator["MemoryDatabase"]:
        """Hold the store lock across several operations.

        Nothing is rolled back on error; callers validate before writing.
        """
        with self._lock:
            yield self

    def _check_unique(self, table: _Table, row: dict, exclude_id: int | None = None) -> None:
        for column in table.spec.unique:
            value = row.get(column)
            if value is None:
                continue
            for row_id, existing in table.rows.items():
                if row_id != exclude_id and existing.get(column) == value:
                    raise UniqueViolationError(table.spec.name, column, value)

    def insert(self, table_name: str, data: dict) -> dict:
        """Insert a row and return the stored copy, id and timestamps included."""
        with self._lock:
            table = self._table(table_name)
            row = copy.deepcopy(table.spec.defaults)
            row.update({k: copy.deepcopy(v) for k, v in data.items() if v is not None or k not in row})
            self._check_unique(table, row)

            now = utcnow()
            for column in table.spec.created:
                row[column] = now

            row_id = table.next_id
            table.next_id += 1
            row["id"] = row_id
            table.rows[row_id] = row
            return copy.deepcopy(row)

    def get(self, table_name: str, row_id: int) -> dict | None:
        with self._lock:
            row = self._table(table_name).rows.get(row_id)
            return copy.deepcopy(row) if row is not None else None

    def find_one(self, table_name: str, **filters) -> dict | None:
        """Return the first row (in insertion order) matching every filter."""
        with self._lock:
            for row in self._table(table_name).rows.values():
                if all(row.get(k) == v for k, v in filters.items()):
                    return copy.deepcopy(row)
            return None

    def select(self, table_name: str, **filters) -> list[dict]:
        """Return all rows matching the filters, in insertion order."""
        with self._lock:
            return [
                copy.deepcopy(row)
                for row in self._table(table_name).rows.values()
                if all(row.get(k) == v for k, v in filters.items())
            ]

    def update(self, table_name: str, row_id: int, data: dict) -> dict | None:
        """Merge data over an existing row; returns None if the row is absent."""
        with self._lock:
            table = self._table(table_name)
            existing = table.rows.get(row_id)
            if existing is None:
                return None

            changes = {k: copy.deepcopy(v) for k, v in data.items() if k != "id"}
            updated = {**existing, **changes}
            self._check_unique(table, updated, exclude_id=row_id)

            now = utcnow()
            for column in table.spec.touched:
                previous = existing.get(column)
                # timestamps strictly increase per row
                if previous is not None and now <= previous:
                    now = previous + timedelta(microseconds=1)
                updated[column] = now

            table.rows[row_id] = updated
            return copy.deepcopy(updated)

    def delete(self, table_name: str, row_id: int) -> bool:
        with self._lock:
            return self._table(table_name).rows.pop(row_id, None) is not None

    def count(self, table_name: str) -> int:
        with self._lock:
            return len(self._table(table_name).rows)
