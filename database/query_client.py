"""Generic table-query client.

The rest of the app talks to storage only through this builder:

    client.table("transactions").select("kind, amount") \\
          .gte("occurred_at", start).lte("occurred_at", end).execute()

Every call ends in ``execute()``, which returns a ``QueryResult`` carrying
either ``data`` (a list of row dicts) or an ``error``. Table and column names
are checked against the live schema before any SQL is built, so only values
ever reach the driver as parameters.
"""
import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Iterable

from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)

_OPERATORS = {"eq": "=", "gte": ">=", "lte": "<="}


class DataServiceError(Exception):
    """A data-service call came back with an error."""

    def __init__(self, message: str, code: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass
class QueryError:
    message: str
    code: str = ""


@dataclass
class QueryResult:
    data: list[dict] | None
    error: QueryError | None = None

    def raise_for_error(self) -> list[dict]:
        """Return data, or raise DataServiceError if the call failed."""
        if self.error is not None:
            raise DataServiceError(self.error.message, self.error.code)
        return self.data or []


class QueryClient:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def table(self, name: str) -> "TableQuery":
        return TableQuery(self._db, name)


class TableQuery:
    def __init__(self, db: DatabaseManager, table: str):
        self._db = db
        self._table = table
        self._action = "select"
        self._columns: list[str] = ["*"]
        self._rows: list[dict] = []
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, bool]] = []

    # ── Actions ──────────────────────────────────────────────────────────────

    def select(self, columns: str = "*") -> "TableQuery":
        self._action = "select"
        self._columns = [c.strip() for c in columns.split(",") if c.strip()] or ["*"]
        return self

    def insert(self, rows: dict | Iterable[dict]) -> "TableQuery":
        self._action = "insert"
        self._rows = [rows] if isinstance(rows, dict) else list(rows)
        return self

    def delete(self) -> "TableQuery":
        self._action = "delete"
        return self

    # ── Filters & ordering ───────────────────────────────────────────────────

    def eq(self, column: str, value) -> "TableQuery":
        self._filters.append((column, "eq", value))
        return self

    def gte(self, column: str, value) -> "TableQuery":
        self._filters.append((column, "gte", value))
        return self

    def lte(self, column: str, value) -> "TableQuery":
        self._filters.append((column, "lte", value))
        return self

    def order(self, column: str, ascending: bool = True) -> "TableQuery":
        self._orders.append((column, ascending))
        return self

    # ── Execution ────────────────────────────────────────────────────────────

    def execute(self) -> QueryResult:
        known = self._db.table_columns(self._table)
        if not known:
            return self._fail(f'relation "{self._table}" does not exist', "42P01")

        referenced = [c for c in self._columns if c != "*"]
        referenced += [col for col, _, _ in self._filters]
        referenced += [col for col, _ in self._orders]
        for row in self._rows:
            referenced += list(row.keys())
        unknown = sorted({c for c in referenced if c not in known})
        if unknown:
            return self._fail(
                f'column "{unknown[0]}" does not exist on "{self._table}"', "42703"
            )

        conn = self._db.get_connection()
        try:
            if self._action == "insert":
                data = self._run_insert(conn)
            elif self._action == "delete":
                if not self._filters:
                    return self._fail("DELETE requires a filter", "21000")
                data = self._run_delete(conn)
            else:
                data = self._run_select(conn)
        except sqlite3.Error as e:
            if conn.in_transaction:
                conn.rollback()
            return self._fail(str(e), type(e).__name__)
        return QueryResult(data=data)

    def _where(self) -> tuple[str, list]:
        if not self._filters:
            return "", []
        clauses = [f"{col} {_OPERATORS[op]} ?" for col, op, _ in self._filters]
        return " WHERE " + " AND ".join(clauses), [v for _, _, v in self._filters]

    def _order_by(self) -> str:
        if not self._orders:
            return ""
        parts = [f"{col} {'ASC' if asc else 'DESC'}" for col, asc in self._orders]
        return " ORDER BY " + ", ".join(parts)

    def _run_select(self, conn: sqlite3.Connection) -> list[dict]:
        where, params = self._where()
        sql = f"SELECT {', '.join(self._columns)} FROM {self._table}{where}{self._order_by()}"
        rows = conn.execute(sql, params).fetchall()
        logger.debug("select %s -> %d row(s)", self._table, len(rows))
        return [dict(r) for r in rows]

    def _run_insert(self, conn: sqlite3.Connection) -> list[dict]:
        inserted = []
        for row in self._rows:
            cols = list(row.keys())
            placeholders = ", ".join("?" * len(cols))
            cursor = conn.execute(
                f"INSERT INTO {self._table} ({', '.join(cols)}) VALUES ({placeholders})",
                [row[c] for c in cols],
            )
            created = conn.execute(
                f"SELECT * FROM {self._table} WHERE rowid = ?", (cursor.lastrowid,)
            ).fetchone()
            inserted.append(dict(created))
        conn.commit()
        return inserted

    def _run_delete(self, conn: sqlite3.Connection) -> list[dict]:
        where, params = self._where()
        doomed = conn.execute(f"SELECT * FROM {self._table}{where}", params).fetchall()
        conn.execute(f"DELETE FROM {self._table}{where}", params)
        conn.commit()
        return [dict(r) for r in doomed]

    def _fail(self, message: str, code: str) -> QueryResult:
        logger.error("%s on %s failed: %s", self._action, self._table, message)
        return QueryResult(data=None, error=QueryError(message, code))
