import logging

from database.query_client import QueryClient
from models.transaction import Transaction
from utils.constants import TRANSACTIONS_TABLE

logger = logging.getLogger(__name__)


class TransactionDAO:
    def __init__(self, client: QueryClient):
        self._client = client

    def _table(self):
        return self._client.table(TRANSACTIONS_TABLE)

    def _row_to_model(self, row: dict) -> Transaction:
        return Transaction(
            id=row["id"],
            kind=row["kind"],
            amount=float(row["amount"]),
            category=row.get("category"),
            note=row.get("note"),
            occurred_at=row["occurred_at"],
            created_at=row.get("created_at") or "",
        )

    def get_all(self) -> list[Transaction]:
        """Newest first: occurred_at DESC, then created_at DESC."""
        rows = (
            self._table()
            .select("*")
            .order("occurred_at", ascending=False)
            .order("created_at", ascending=False)
            .execute()
            .raise_for_error()
        )
        return [self._row_to_model(r) for r in rows]

    def get_all_by_date(self) -> list[Transaction]:
        """All rows ordered by occurred_at DESC only (export order)."""
        rows = (
            self._table()
            .select("*")
            .order("occurred_at", ascending=False)
            .execute()
            .raise_for_error()
        )
        return [self._row_to_model(r) for r in rows]

    def get_amounts_between(
        self, start: str, end: str, kind: str | None = None
    ) -> list[dict]:
        """Raw {kind, category, amount} rows with start <= occurred_at <= end."""
        query = self._table().select("kind, category, amount")
        if kind:
            query = query.eq("kind", kind)
        rows = (
            query.gte("occurred_at", start)
            .lte("occurred_at", end)
            .execute()
            .raise_for_error()
        )
        return rows

    def create(
        self,
        kind: str,
        amount: float,
        occurred_at: str,
        category: str | None = None,
        note: str | None = None,
    ) -> Transaction:
        rows = (
            self._table()
            .insert([{
                "kind": kind,
                "amount": amount,
                "category": category,
                "note": note,
                "occurred_at": occurred_at,
            }])
            .execute()
            .raise_for_error()
        )
        tx = self._row_to_model(rows[0])
        logger.info("Inserted %s #%s of %.2f", tx.kind, tx.id, tx.amount)
        return tx

    def delete(self, tx_id: int) -> int:
        """Delete one row by id; returns the number of rows removed."""
        rows = self._table().delete().eq("id", tx_id).execute().raise_for_error()
        logger.info("Deleted transaction #%s (%d row(s))", tx_id, len(rows))
        return len(rows)
