from datetime import date

from database.transaction_dao import TransactionDAO
from models.summary import MonthlySummary
from utils.date_helpers import month_bounds


class SummaryService:
    def __init__(self, tx_dao: TransactionDAO):
        self._dao = tx_dao

    def get_monthly_summary(self, ref: date | None = None) -> MonthlySummary:
        """Income, expense, net and count for the calendar month containing ref (default today)."""
        start, end = month_bounds(ref)
        return summarize(self._dao.get_amounts_between(start, end))


def summarize(rows: list[dict]) -> MonthlySummary:
    income = sum(float(r["amount"]) for r in rows if r["kind"] == "income")
    expense = sum(float(r["amount"]) for r in rows if r["kind"] == "expense")
    return MonthlySummary(
        total_income=income,
        total_expense=expense,
        net_balance=income - expense,
        transaction_count=len(rows),
    )
