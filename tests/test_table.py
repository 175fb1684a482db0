"""Display rows built from record-type column sets."""
import pytest

from cdms_console.records.registry import CHARGEBACKS, DELINQUENCIES, RECORD_TYPES, get_record_type
from cdms_console.records.table import build_rows, selected_record


def test_rows_follow_column_order_and_formatters():
    record = {
        "id": 1,
        "current_status": "Open",
        "bd_doc_num": "BD-1",
        "customer_name": "Acme   Corp\n",
        "chargeback_amount": 1234.5,
        "not_a_column": "hidden",
    }

    rows = build_rows(CHARGEBACKS.columns, [record])

    assert list(rows[0].keys()) == [column.label for column in CHARGEBACKS.columns]
    assert rows[0]["Customer Name"] == "Acme Corp"
    assert rows[0]["Chargeback Amount"] == "$1,234.50"
    assert rows[0]["Region"] is None
    assert "not_a_column" not in rows[0]


def test_delinquency_amounts_are_currency():
    rows = build_rows(DELINQUENCIES.columns, [{"debit_outstanding_amount": "-12", "credit_outstanding_amount": None}])
    assert rows[0]["Debit Outstanding Amount"] == "-$12.00"
    assert rows[0]["Credit Outstanding Amount"] == ""


def test_one_row_per_record_in_order():
    rows = build_rows(CHARGEBACKS.columns, [{"bd_doc_num": "B"}, {"bd_doc_num": "A"}])
    assert [row["Document Number"] for row in rows] == ["B", "A"]


def test_registry_lookup():
    assert set(RECORD_TYPES) == {"chargebacks", "delinquencies", "uploads"}
    assert get_record_type("chargebacks").item_path(5) == "/api/chargebacks/5"
    assert get_record_type("delinquencies").history_path(5) == "/api/delinquencies/history/5"
    with pytest.raises(KeyError, match="expected one of"):
        get_record_type("invoices")


def test_manifests_use_known_sections():
    for record_type in RECORD_TYPES.values():
        assert set(record_type.manifest) <= {"main", "status", "comments"}


def test_chargeback_editable_fields():
    keys = [spec.key for spec in CHARGEBACKS.editable_fields]
    assert keys == ["chargeback_amount", "current_status", "gsa_poc", "pfs_poc", "special_instruction"]


def test_selected_row_maps_to_the_full_record():
    records = [{"id": 10, "bd_doc_num": "BD-10", "internal_note": "kept"}, {"id": 11, "bd_doc_num": "BD-11"}]

    record = selected_record(records, [0])

    assert record is records[0]
    assert record["internal_note"] == "kept"
    assert selected_record(records, [1])["id"] == 11


@pytest.mark.parametrize("rows", [[], [2], [-1]])
def test_missing_or_stale_selection_maps_to_nothing(rows):
    assert selected_record([{"id": 1}, {"id": 2}], rows) is None
