import pytest

from utils.currency import format_amount
from utils.date_helpers import today_str


def test_new_expense_flows_to_list_summary_and_chart(
    tx_service, summary_service, report_service
):
    tx_service.create("income", 2000, today_str(), category="Salary")
    tx_service.create("expense", 40, today_str(), category="Food")
    expense_before = summary_service.get_monthly_summary().total_expense
    food_before = next(s.value for s in report_service.get_expense_breakdown() if s.name == "Food")

    added = tx_service.create("expense", 12.50, today_str(), category="Food")

    first = tx_service.list_all()[0]
    assert first.id == added.id
    assert format_amount(first.amount, first.kind) == "-$12.50"
    assert first.category == "Food"

    assert summary_service.get_monthly_summary().total_expense == pytest.approx(expense_before + 12.50)
    food_after = next(s.value for s in report_service.get_expense_breakdown() if s.name == "Food")
    assert food_after == pytest.approx(food_before + 12.50)


def test_first_food_expense_creates_slice(tx_service, report_service):
    tx_service.create("expense", 12.50, today_str(), category="Food")

    slices = report_service.get_expense_breakdown()

    assert [(s.name, s.value, s.percentage) for s in slices] == [("Food", 12.5, 100.0)]


def test_delete_updates_every_view(tx_service, summary_service, report_service):
    tx = tx_service.create("expense", 9, today_str(), category="Fun")

    tx_service.delete(tx.id)

    assert tx_service.list_all() == []
    assert summary_service.get_monthly_summary().transaction_count == 0
    assert report_service.get_expense_breakdown() == []
