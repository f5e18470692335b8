"""Shared data model definitions for BeanLedger."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, TypedDict

import pandas as pd


@dataclass(frozen=True)
class PurchaseRecord:
    """A single bag purchase. ``quantity`` is in size units (ounces)."""

    date: date
    quantity: float
    cost: float
    name: str = ""
    store: str = ""


@dataclass(frozen=True)
class ConsumptionPeriod:
    """One or more purchases modelled as being consumed over ``[start, end)``."""

    members: tuple[PurchaseRecord, ...]
    end: date
    is_projected: bool = False

    @property
    def start(self) -> date:
        return self.members[0].date

    @property
    def days(self) -> int:
        return max(1, (self.end - self.start).days)

    @property
    def total_quantity(self) -> float:
        return sum(member.quantity for member in self.members)

    @property
    def total_cost(self) -> float:
        return sum(member.cost for member in self.members)

    @property
    def quantity_per_day(self) -> float:
        return self.total_quantity / self.days

    @property
    def cost_per_day(self) -> float:
        return self.total_cost / self.days

    @property
    def is_simultaneous(self) -> bool:
        return len(self.members) > 1


@dataclass(frozen=True)
class CalendarBucket:
    """Day-weighted totals for one calendar month (``YYYY-MM``) or year."""

    key: str | int
    quantity: float = 0.0
    cost: float = 0.0
    days_covered: int = 0

    @property
    def quantity_per_day(self) -> float:
        if self.days_covered == 0:
            return 0.0
        return self.quantity / self.days_covered

    @property
    def cost_per_day(self) -> float:
        if self.days_covered == 0:
            return 0.0
        return self.cost / self.days_covered


@dataclass(frozen=True)
class ConsumptionSummary:
    total_purchases: int = 0
    total_quantity: float = 0.0
    total_cost: float = 0.0
    days_tracked: int = 0
    quantity_per_day: float = 0.0
    cost_per_day: float = 0.0
    first_purchase: date | None = None


@dataclass(frozen=True)
class ConsumptionReport:
    """Result of a full aggregation run for a fixed ``today``."""

    today: date
    periods: tuple[ConsumptionPeriod, ...] = ()
    months: Mapping[str, CalendarBucket] = field(default_factory=dict)
    years: Mapping[int, CalendarBucket] = field(default_factory=dict)
    summary: ConsumptionSummary = field(default_factory=ConsumptionSummary)


class PeriodRow(TypedDict):
    start: date
    end: date
    end_label: str
    is_projected: bool
    is_simultaneous: bool
    members: int
    bag_names: str
    days: int
    total_quantity: float
    total_grams: float
    total_cost: float
    quantity_per_day: float
    grams_per_day: float
    cost_per_day: float


class OverviewSummary(TypedDict):
    total_purchases: int
    total_cost: float
    total_quantity: float
    total_grams: float
    quantity_per_day: float
    grams_per_day: float
    cost_per_day: float
    days_tracked: int
    first_purchase: date | None
    today: date


class DashboardData(TypedDict):
    period_rows: list[PeriodRow]
    monthly_df: pd.DataFrame
    yearly_df: pd.DataFrame
    purchases_df: pd.DataFrame
    summary: OverviewSummary
    insights: list[str]


__all__ = [
    "PurchaseRecord",
    "ConsumptionPeriod",
    "CalendarBucket",
    "ConsumptionSummary",
    "ConsumptionReport",
    "PeriodRow",
    "OverviewSummary",
    "DashboardData",
]
