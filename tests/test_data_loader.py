"""Tests for purchase CSV loading."""

from __future__ import annotations

from datetime import date

import pytest

from core.data_loader import PurchaseDataError, load_purchase_frame, load_purchases


def _write(tmp_path, body: str):
    csv_path = tmp_path / "coffee.csv"
    csv_path.write_text("Date,Cost,Store,Name,Size\n" + body, encoding="utf-8")
    return csv_path


def test_load_purchases_normalises_values(sample_csv):
    purchases = load_purchases(sample_csv)

    assert len(purchases) == 2
    first, second = purchases
    assert first.date == date(2025, 1, 1)
    assert first.cost == pytest.approx(10.0)
    assert first.quantity == pytest.approx(8.0)
    assert first.store == "Blue Bottle"
    assert first.name == "Hayes Valley"
    assert second.name == ""
    assert second.store == ""


def test_rows_are_sorted_stably_by_date(tmp_path):
    csv_path = _write(
        tmp_path,
        "2025-01-05,$1,,first,12oz\n"
        "2025/01/01,$2,,early,12oz\n"
        "2025-01-05,$3,,second,12oz\n",
    )

    frame = load_purchase_frame(csv_path)

    assert frame["name"].tolist() == ["early", "first", "second"]


def test_blank_rows_are_skipped(tmp_path):
    csv_path = _write(tmp_path, "2025/01/01,$2,,a,12oz\n,,,,\n\n2025/01/08,$3,,b,12oz\n")

    frame = load_purchase_frame(csv_path)

    assert len(frame) == 2


def test_unparseable_date_reports_row(tmp_path):
    csv_path = _write(tmp_path, "2025/01/01,$2,,a,12oz\nsoon,$3,,b,12oz\n")

    with pytest.raises(PurchaseDataError) as excinfo:
        load_purchase_frame(csv_path)

    assert excinfo.value.row == 3
    assert "date" in str(excinfo.value)


def test_blank_lines_count_toward_reported_row(tmp_path):
    csv_path = _write(tmp_path, "2025/01/01,$2,,a,12oz\n\n\nsoon,$3,,b,12oz\n")

    with pytest.raises(PurchaseDataError) as excinfo:
        load_purchase_frame(csv_path)

    assert excinfo.value.row == 5


def test_missing_size_is_rejected(tmp_path):
    csv_path = _write(tmp_path, "2025/01/01,$2,,a,\n")

    with pytest.raises(PurchaseDataError):
        load_purchase_frame(csv_path)


def test_missing_required_column(tmp_path):
    csv_path = tmp_path / "coffee.csv"
    csv_path.write_text("Date,Cost\n2025/01/01,$2\n", encoding="utf-8")

    with pytest.raises(PurchaseDataError, match="Size"):
        load_purchase_frame(csv_path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_purchase_frame(tmp_path / "absent.csv")


def test_optional_columns_default_to_empty(tmp_path):
    csv_path = tmp_path / "coffee.csv"
    csv_path.write_text("Date,Cost,Size\n2025/02/01,18.5,12\n", encoding="utf-8")

    purchases = load_purchases(csv_path)

    assert purchases[0].store == ""
    assert purchases[0].quantity == pytest.approx(12.0)
    assert purchases[0].cost == pytest.approx(18.5)
