"""Export every transaction as CSV text or a JSON document.

Both formats are built in memory; the caller decides where the file goes.
"""
import json
import logging
from dataclasses import asdict
from datetime import date

from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from utils.constants import EXPORT_PREFIX
from utils.date_helpers import format_date, now_iso, today

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Date", "Type", "Amount", "Category", "Note", "Created At"]


class EmptyExportError(Exception):
    """Raised when there is nothing to export."""


class ExportService:
    def __init__(self, tx_dao: TransactionDAO):
        self._tx_dao = tx_dao

    # ── Export ────────────────────────────────────────────────────────────────

    def export_csv(self) -> str:
        transactions = self._fetch()
        lines = [",".join(CSV_HEADERS)]
        lines.extend(_csv_line(tx) for tx in transactions)
        return "\n".join(lines)

    def export_json(self) -> dict:
        """Return the export document (caller serialises it with to_json)."""
        transactions = self._fetch()
        return {
            "exported_at": now_iso(),
            "total_transactions": len(transactions),
            "transactions": [asdict(tx) for tx in transactions],
        }

    def write(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.info("Exported transactions to %s", path)

    # ── Private ───────────────────────────────────────────────────────────────

    def _fetch(self) -> list[Transaction]:
        transactions = self._tx_dao.get_all_by_date()
        if not transactions:
            raise EmptyExportError("No transactions to export")
        return transactions


def to_json(data: dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_filename(ext: str, on: date | None = None) -> str:
    """e.g. 'porket-transactions-2026-10-18.csv'."""
    return f"{EXPORT_PREFIX}-{format_date(on or today())}.{ext}"


def _csv_line(tx: Transaction) -> str:
    note = (tx.note or "").replace('"', '""')
    return ",".join([
        tx.occurred_at,
        tx.kind,
        _format_number(tx.amount),
        tx.category or "",
        f'"{note}"',
        tx.created_at,
    ])


def _format_number(value: float) -> str:
    """12.0 -> '12', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
