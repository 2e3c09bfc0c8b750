import csv
import io
import json
from datetime import date

import pytest

from services.export_service import (
    CSV_HEADERS, EmptyExportError, export_filename, to_json,
)


def test_csv_header_and_field_order(tx_service, export_service):
    tx = tx_service.create("expense", 12.5, "2026-10-18", category="Food", note="lunch")

    lines = export_service.export_csv().split("\n")

    assert lines[0] == "Date,Type,Amount,Category,Note,Created At"
    assert lines[1] == f'2026-10-18,expense,12.5,Food,"lunch",{tx.created_at}'


def test_csv_defaults_missing_category_and_note_to_empty(tx_service, export_service):
    tx_service.create("income", 1000, "2026-10-01")

    line = export_service.export_csv().split("\n")[1]

    assert line.startswith('2026-10-01,income,1000,,"",')


def test_csv_escapes_quotes_in_note_and_round_trips(tx_service, export_service):
    tx_service.create("expense", 3, "2026-10-02", note='say "hi"')

    text = export_service.export_csv()

    assert '"say ""hi"""' in text
    rows = list(csv.DictReader(io.StringIO(text)))
    assert rows[0]["Note"] == 'say "hi"'
    assert list(rows[0].keys()) == CSV_HEADERS


def test_csv_orders_by_occurred_at_descending(tx_service, export_service):
    tx_service.create("expense", 1, "2026-10-01")
    tx_service.create("expense", 2, "2026-10-20")
    tx_service.create("expense", 3, "2026-10-10")

    rows = list(csv.DictReader(io.StringIO(export_service.export_csv())))

    assert [r["Date"] for r in rows] == ["2026-10-20", "2026-10-10", "2026-10-01"]


def test_json_document(tx_service, export_service):
    tx_service.create("expense", 12.5, "2026-10-18", category="Food")
    tx_service.create("income", 100, "2026-10-01", note="pay")

    doc = json.loads(to_json(export_service.export_json()))

    assert doc["total_transactions"] == 2
    assert doc["exported_at"].endswith("Z")
    assert [t["occurred_at"] for t in doc["transactions"]] == ["2026-10-18", "2026-10-01"]
    first = doc["transactions"][0]
    assert set(first) == {"id", "kind", "amount", "category", "note", "occurred_at", "created_at"}
    assert first["category"] == "Food"
    assert first["note"] is None


def test_empty_export_raises_and_writes_nothing(export_service, tmp_path):
    with pytest.raises(EmptyExportError, match="No transactions to export"):
        export_service.export_csv()
    with pytest.raises(EmptyExportError):
        export_service.export_json()
    assert list(tmp_path.glob("porket-transactions-*")) == []


def test_write_saves_content(tx_service, export_service, tmp_path):
    tx_service.create("expense", 1, "2026-10-01", note="a,b")
    path = tmp_path / export_filename("csv", date(2026, 10, 18))

    export_service.write(str(path), export_service.export_csv())

    assert path.name == "porket-transactions-2026-10-18.csv"
    assert '"a,b"' in path.read_text(encoding="utf-8")


def test_export_filename_defaults_to_today():
    assert export_filename("json") == f"porket-transactions-{date.today():%Y-%m-%d}.json"
