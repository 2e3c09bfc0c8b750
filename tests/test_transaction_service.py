import pytest

from database.query_client import DataServiceError, QueryClient
from database.transaction_dao import TransactionDAO
from services.transaction_service import TransactionService


def test_create_stores_one_row_and_normalises_blanks(tx_service):
    tx = tx_service.create("expense", 12.50, "2026-10-18", category="  ", note="")

    assert tx.id
    assert tx.kind == "expense"
    assert tx.amount == 12.5
    assert tx.category is None
    assert tx.note is None
    assert tx.occurred_at == "2026-10-18"
    assert tx.created_at
    assert tx_service.list_all() == [tx]


def test_create_normalises_date_separators(tx_service):
    tx = tx_service.create("income", 3, "2026/10/05")

    assert tx.occurred_at == "2026-10-05"


def test_zero_amount_is_allowed(tx_service):
    assert tx_service.create("income", 0, "2026-10-01").amount == 0


@pytest.mark.parametrize(
    "kind, amount, occurred_at, message",
    [
        ("transfer", 10, "2026-10-01", "Invalid kind"),
        ("expense", -0.01, "2026-10-01", "negative"),
        ("expense", float("nan"), "2026-10-01", "finite"),
        ("income", float("inf"), "2026-10-01", "finite"),
        ("expense", 10, "18/10/2026", "Invalid date"),
        ("expense", 10, "", "Invalid date"),
    ],
)
def test_create_rejects_invalid_input(tx_service, kind, amount, occurred_at, message):
    with pytest.raises(ValueError, match=message):
        tx_service.create(kind, amount, occurred_at)
    assert tx_service.list_all() == []


def test_list_is_newest_first_with_created_at_tiebreak(tx_service):
    older = tx_service.create("expense", 1, "2026-10-01")
    same_day_first = tx_service.create("expense", 2, "2026-10-05")
    same_day_second = tx_service.create("income", 3, "2026-10-05")
    newest = tx_service.create("expense", 4, "2026-10-09")

    ids = [t.id for t in tx_service.list_all()]

    assert ids[0] == newest.id
    assert ids[-1] == older.id
    assert set(ids[1:3]) == {same_day_first.id, same_day_second.id}


def test_delete_removes_only_that_row(tx_service):
    a = tx_service.create("expense", 1, "2026-10-01")
    b = tx_service.create("expense", 2, "2026-10-02")

    tx_service.delete(a.id)

    assert [t.id for t in tx_service.list_all()] == [b.id]


def test_service_errors_surface_as_data_service_error(db):
    db.get_connection().execute("DROP TABLE transactions")
    service = TransactionService(TransactionDAO(QueryClient(db)))

    with pytest.raises(DataServiceError):
        service.list_all()
    with pytest.raises(DataServiceError):
        service.create("expense", 1, "2026-10-01")
    with pytest.raises(DataServiceError):
        service.delete(1)
