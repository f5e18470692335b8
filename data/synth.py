"""Synthetic coffee purchase log generator for BeanLedger.

Produces purchase logs in the same column layout as a hand-kept coffee
spreadsheet (``Date, Cost, Store, Name, Size``). Bags are bought when the
previous one is nearly finished, with the occasional second bag opened early
so that simultaneous consumption periods show up in the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence, Tuple, TypeVar

import numpy as np
import pandas as pd

T = TypeVar("T")


FIELDS: Tuple[str, ...] = ("Date", "Cost", "Store", "Name", "Size")


@dataclass(frozen=True)
class RoasterProfile:
    """Metadata describing a roaster used in synthetic purchase logs."""

    store: str
    names: Tuple[str, ...]
    sizes_oz: Tuple[float, ...]
    price_per_oz: float


ROASTERS: Sequence[RoasterProfile] = (
    RoasterProfile(
        store="Blue Bottle",
        names=("Hayes Valley Espresso", "Bella Donovan", "Three Africas"),
        sizes_oz=(12.0,),
        price_per_oz=1.83,
    ),
    RoasterProfile(
        store="Trader Joe's",
        names=("Joe's Medium Roast", "Bay Blend"),
        sizes_oz=(13.0, 14.0),
        price_per_oz=0.62,
    ),
    RoasterProfile(
        store="Counter Culture",
        names=("Hologram", "Big Trouble", "Fast Forward"),
        sizes_oz=(12.0, 32.0),
        price_per_oz=1.45,
    ),
    RoasterProfile(
        store="",
        names=("",),
        sizes_oz=(16.0,),
        price_per_oz=0.95,
    ),
)


def generate_synthetic_purchases(
    start_date: date | datetime | str,
    months: int,
    *,
    ounces_per_day: float = 1.1,
    early_open_probability: float = 0.12,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Generate a synthetic coffee purchase log covering ``months`` months.

    Consumption drifts around ``ounces_per_day``. With probability
    ``early_open_probability`` a bag is bought within a couple of days of the
    previous one, which the aggregator should treat as a simultaneous period.
    """

    if months <= 0:
        raise ValueError("months must be a positive integer")
    if ounces_per_day <= 0:
        raise ValueError("ounces_per_day must be positive")

    rng = np.random.default_rng(seed)
    start = _normalize_date(start_date)
    end = _add_months(start, months)

    records: List[dict] = []
    purchase_date = start
    while purchase_date < end:
        roaster = _rng_choice(ROASTERS, rng)
        size = _rng_choice(roaster.sizes_oz, rng)
        cost = size * roaster.price_per_oz * (1 + rng.normal(0, 0.05))
        records.append(
            {
                "Date": purchase_date.strftime("%Y/%m/%d"),
                "Cost": f"${max(cost, 0.0):.2f}",
                "Store": roaster.store,
                "Name": _rng_choice(roaster.names, rng),
                "Size": f"{size:g}oz",
            }
        )

        if rng.random() < early_open_probability:
            gap_days = int(rng.integers(0, 3))
        else:
            daily_rate = max(ounces_per_day * (1 + rng.normal(0, 0.15)), 0.2)
            gap_days = max(1, int(round(size / daily_rate)))
        purchase_date += timedelta(days=gap_days)

    return pd.DataFrame.from_records(records, columns=FIELDS)


def write_purchases_csv(
    path: str,
    start_date: date | datetime | str,
    months: int,
    *,
    seed: Optional[int] = None,
    **kwargs,
) -> pd.DataFrame:
    """Generate synthetic data and persist it to ``path``.

    Additional keyword arguments are forwarded to
    :func:`generate_synthetic_purchases`.
    """

    df = generate_synthetic_purchases(start_date, months, seed=seed, **kwargs)
    df.to_csv(path, index=False)
    return df


def _normalize_date(value: date | datetime | str) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value)
        return parsed.date()
    raise TypeError(f"Unsupported date value: {value!r}")


def _add_months(anchor: date, months: int) -> date:
    period = pd.Period(anchor, freq="M") + months
    return period.to_timestamp(how="start").date()


def _rng_choice(options: Sequence[T], rng: np.random.Generator) -> T:
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    idx = int(rng.integers(0, len(options)))
    return options[idx]
