from datetime import date

from database.transaction_dao import TransactionDAO
from models.summary import CategorySlice
from utils.constants import CHART_COLORS, UNCATEGORIZED
from utils.date_helpers import month_bounds


class ReportService:
    def __init__(self, tx_dao: TransactionDAO):
        self._tx_dao = tx_dao

    def get_expense_breakdown(self, ref: date | None = None) -> list[CategorySlice]:
        """Return this month's expense slices, largest first, for the pie chart."""
        start, end = month_bounds(ref)
        rows = self._tx_dao.get_amounts_between(start, end, kind="expense")
        return group_by_category(rows)


def group_by_category(rows: list[dict]) -> list[CategorySlice]:
    totals: dict[str, float] = {}
    for row in rows:
        name = (row.get("category") or "").strip() or UNCATEGORIZED
        totals[name] = totals.get(name, 0.0) + float(row["amount"])

    grand_total = sum(totals.values())
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategorySlice(
            name=name,
            value=value,
            color=CHART_COLORS[i % len(CHART_COLORS)],
            percentage=(value / grand_total * 100) if grand_total > 0 else 0.0,
        )
        for i, (name, value) in enumerate(ordered)
    ]
