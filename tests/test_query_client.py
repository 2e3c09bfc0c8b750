import pytest

from database.query_client import DataServiceError, QueryResult, QueryError


def _insert(client, **row):
    row.setdefault("kind", "expense")
    row.setdefault("amount", 1.0)
    row.setdefault("occurred_at", "2026-10-01")
    return client.table("transactions").insert([row]).execute()


def test_insert_returns_created_row_with_storage_fields(client):
    result = _insert(client, amount=12.5, category="Food")

    assert result.error is None
    assert len(result.data) == 1
    row = result.data[0]
    assert row["id"] > 0
    assert row["amount"] == 12.5
    assert row["category"] == "Food"
    assert row["created_at"]


def test_insert_accepts_a_single_dict(client):
    result = client.table("transactions").insert(
        {"kind": "income", "amount": 5, "occurred_at": "2026-10-02"}
    ).execute()

    assert result.error is None
    assert result.data[0]["kind"] == "income"


def test_select_columns_and_range_filters(client):
    _insert(client, occurred_at="2026-09-30", amount=1)
    _insert(client, occurred_at="2026-10-01", amount=2)
    _insert(client, occurred_at="2026-10-31", amount=3)
    _insert(client, occurred_at="2026-11-01", amount=4)

    result = (
        client.table("transactions")
        .select("kind, amount")
        .gte("occurred_at", "2026-10-01")
        .lte("occurred_at", "2026-10-31")
        .order("amount")
        .execute()
    )

    assert result.error is None
    assert [r["amount"] for r in result.data] == [2, 3]
    assert set(result.data[0].keys()) == {"kind", "amount"}


def test_eq_filter(client):
    _insert(client, kind="income", amount=100)
    _insert(client, kind="expense", amount=7)

    result = client.table("transactions").select("*").eq("kind", "income").execute()

    assert [r["amount"] for r in result.data] == [100]


def test_chained_orders_apply_in_call_order(client):
    _insert(client, occurred_at="2026-10-01", amount=1)
    _insert(client, occurred_at="2026-10-03", amount=2)
    _insert(client, occurred_at="2026-10-03", amount=3)

    result = (
        client.table("transactions")
        .select("amount")
        .order("occurred_at", ascending=False)
        .order("amount", ascending=False)
        .execute()
    )

    assert [r["amount"] for r in result.data] == [3, 2, 1]


def test_delete_by_id_returns_deleted_rows(client):
    keep = _insert(client, amount=1).data[0]
    doomed = _insert(client, amount=2).data[0]

    result = client.table("transactions").delete().eq("id", doomed["id"]).execute()

    assert result.error is None
    assert [r["id"] for r in result.data] == [doomed["id"]]
    remaining = client.table("transactions").select("id").execute().data
    assert [r["id"] for r in remaining] == [keep["id"]]


def test_delete_without_filter_is_refused(client):
    _insert(client)

    result = client.table("transactions").delete().execute()

    assert result.data is None
    assert "filter" in result.error.message
    assert len(client.table("transactions").select("*").execute().data) == 1


def test_unknown_table_is_an_error_result(client):
    result = client.table("nope").select("*").execute()

    assert result.data is None
    assert result.error.code == "42P01"


def test_unknown_column_is_rejected_before_sql(client):
    result = client.table("transactions").select("*").eq("id; DROP TABLE transactions", 1).execute()

    assert result.error.code == "42703"
    assert client.table("transactions").select("*").execute().error is None


def test_constraint_violation_is_an_error_result(client):
    result = _insert(client, amount=-1)

    assert result.data is None
    assert result.error is not None
    assert result.error.code == "IntegrityError"
    assert client.table("transactions").select("*").execute().data == []


def test_raise_for_error():
    assert QueryResult(data=[{"a": 1}]).raise_for_error() == [{"a": 1}]
    assert QueryResult(data=None).raise_for_error() == []

    with pytest.raises(DataServiceError) as exc_info:
        QueryResult(data=None, error=QueryError("boom", "X1")).raise_for_error()
    assert exc_info.value.code == "X1"
    assert str(exc_info.value) == "boom"
