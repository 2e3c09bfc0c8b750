import math

from models.transaction import Transaction
from database.transaction_dao import TransactionDAO
from utils.constants import TRANSACTION_KINDS
from utils.date_helpers import parse_date, format_date


class TransactionService:
    def __init__(self, tx_dao: TransactionDAO):
        self._dao = tx_dao

    def list_all(self) -> list[Transaction]:
        return self._dao.get_all()

    def create(
        self,
        kind: str,
        amount: float,
        occurred_at: str,
        category: str | None = None,
        note: str | None = None,
    ) -> Transaction:
        self._validate(kind, amount, occurred_at)
        return self._dao.create(
            kind=kind,
            amount=float(amount),
            occurred_at=format_date(parse_date(occurred_at)),
            category=_blank_to_none(category),
            note=_blank_to_none(note),
        )

    def delete(self, tx_id: int):
        self._dao.delete(tx_id)

    def _validate(self, kind: str, amount: float, occurred_at: str):
        if kind not in TRANSACTION_KINDS:
            raise ValueError(f"Invalid kind: {kind}")
        if not math.isfinite(amount):
            raise ValueError("Amount must be a finite number.")
        if amount < 0:
            raise ValueError("Amount cannot be negative.")
        if not parse_date(occurred_at):
            raise ValueError("Invalid date format. Use YYYY-MM-DD.")


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
