from datetime import datetime

import pytest
from bson import ObjectId

from evidenca.db import FINANCNA_POROCILA, serialize
from evidenca.errors import ReportValidationError
from evidenca.validation import parse_employee, parse_financial_report


def test_serialize_converts_ids_and_dates():
    oid = ObjectId()
    when = datetime(2024, 5, 1, 12, 30)

    out = serialize({"_id": oid, "datum": when, "naslov": "Q1"})

    assert out == {"_id": str(oid), "datum": "2024-05-01T12:30:00", "naslov": "Q1"}


def test_financial_report_defaults_datum():
    report = parse_financial_report({"naslov": "Q1", "vsebina": "Povzetek"})

    assert report.datum is not None
    assert report.datum.tzinfo is not None
    assert report.avtor is None


def test_financial_report_with_author(store):
    author = store.create_employee(parse_employee(
        {"ime": "Ana", "priimek": "Kos", "email": "ana@x.si", "polozaj": "Direktorica"}))

    created = store.create_financial_report(parse_financial_report(
        {"naslov": "Letno poročilo", "vsebina": "...", "avtor": author["_id"]}))

    assert created["avtor"] == author["_id"]
    stored = store.db[FINANCNA_POROCILA].find_one({"_id": ObjectId(created["_id"])})
    assert stored["avtor"] == ObjectId(author["_id"])
    assert [r["_id"] for r in store.list_financial_reports()] == [created["_id"]]


@pytest.mark.parametrize("data", [
    {"vsebina": "x"},
    {"naslov": "x"},
    {"naslov": "x", "vsebina": "y", "avtor": "ni-objectid"},
    None,
])
def test_financial_report_invalid(data):
    with pytest.raises(ReportValidationError):
        parse_financial_report(data)
