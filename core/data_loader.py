"""Data loading utilities for BeanLedger's purchase log."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Final

import pandas as pd

from core.models import PurchaseRecord

__all__ = ["PurchaseDataError", "load_purchase_frame", "load_purchases", "purchases_from_frame"]

logger = logging.getLogger(__name__)

_CACHE_SIZE: Final[int] = 8
REQUIRED_COLUMNS: Final[tuple[str, ...]] = ("Date", "Cost", "Size")
_NON_NUMERIC = r"[^0-9.]"


class PurchaseDataError(ValueError):
    """Raised when a purchase row cannot be parsed."""

    def __init__(self, message: str, row: int | None = None) -> None:
        super().__init__(message if row is None else f"Row {row}: {message}")
        self.row = row


def load_purchase_frame(csv_path: str | Path) -> pd.DataFrame:
    """Return a normalised purchase frame with ``date, cost, size, store, name`` columns.

    Dates may use ``/`` or ``-`` separators. Cost and size keep only digits and
    the decimal point, so values such as ``$18.99`` or ``12oz`` are accepted.
    Fully blank rows are dropped; anything else that fails to parse raises
    :class:`PurchaseDataError`. Rows are stably sorted by date.
    """

    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    raw = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=False).fillna("")
    missing = [column for column in REQUIRED_COLUMNS if column not in raw.columns]
    if missing:
        raise PurchaseDataError(f"Missing required columns: {', '.join(missing)}")

    for column in ("Store", "Name"):
        if column not in raw.columns:
            raw[column] = ""

    raw = raw.apply(lambda col: col.str.strip())
    blank = (raw[list(REQUIRED_COLUMNS)] == "").all(axis=1)
    if blank.any():
        logger.debug("Skipping %d blank rows in %s", int(blank.sum()), path)
    raw = raw[~blank]

    df = pd.DataFrame(
        {
            "date": pd.to_datetime(
                raw["Date"].str.replace("/", "-", regex=False), format="mixed", errors="coerce"
            ),
            "cost": pd.to_numeric(raw["Cost"].str.replace(_NON_NUMERIC, "", regex=True), errors="coerce"),
            "size": pd.to_numeric(raw["Size"].str.replace(_NON_NUMERIC, "", regex=True), errors="coerce"),
            "store": raw["Store"],
            "name": raw["Name"],
        },
        index=raw.index,
    )

    for column in ("date", "cost", "size"):
        invalid = df[column].isna()
        if invalid.any():
            # header is line 1 of the file
            row_number = int(invalid.idxmax()) + 2
            raise PurchaseDataError(f"Unparseable {column!r} value", row=row_number)

    df = df.sort_values("date", kind="stable").reset_index(drop=True)
    df["date"] = df["date"].dt.normalize()
    logger.info("Loaded %d purchases from %s", len(df), path)
    return df


def purchases_from_frame(df: pd.DataFrame) -> tuple[PurchaseRecord, ...]:
    """Convert a normalised purchase frame into immutable records."""

    records = []
    for row in df.itertuples(index=False):
        records.append(
            PurchaseRecord(
                date=pd.Timestamp(row.date).date(),
                quantity=float(row.size),
                cost=float(row.cost),
                name=str(row.name),
                store=str(row.store),
            )
        )
    return tuple(records)


@lru_cache(maxsize=_CACHE_SIZE)
def load_purchases(csv_path: str | Path) -> tuple[PurchaseRecord, ...]:
    """Return purchase records for the given CSV path.

    Results are cached to avoid redundant disk reads when the dashboard
    recomputes for the same source file during a session.
    """

    return purchases_from_frame(load_purchase_frame(csv_path))
