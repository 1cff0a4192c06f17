"""Expense aggregator for totals and per-city summaries.

This module derives the read-only figures shown under the record table:
the total distance travelled and the mileage allowance it earns at a fixed
rate per kilometre. No rounding is applied here; amounts are rounded only
when they are displayed.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

import pandas as pd

from kilometraje.models.expense import ExpenseRecord

logger = logging.getLogger(__name__)

# Allowance paid per kilometre, in euros
RATE_PER_KM = Decimal("0.23")

SUMMARY_COLUMNS = ["city", "trips", "distance_km", "amount"]


def total_distance(records: Iterable[ExpenseRecord]) -> Decimal:
    """Sum the distance of all records.

    Example:
        >>> total_distance([])
        Decimal('0')
    """
    return sum((record.distance_km for record in records), Decimal("0"))


def total_amount(
    records: Iterable[ExpenseRecord], rate_per_km: Decimal = RATE_PER_KM
) -> Decimal:
    """Compute the allowance for all records at ``rate_per_km``.

    Args:
        records: Expense records
        rate_per_km: Allowance per kilometre

    Returns:
        ``total_distance(records) * rate_per_km``, unrounded

    Example:
        >>> records = [ExpenseRecord(date="01/01/2024", city="A", distance_km=10),
        ...            ExpenseRecord(date="02/01/2024", city="B", distance_km=5)]
        >>> total_amount(records)
        Decimal('3.45')
    """
    return total_distance(records) * Decimal(str(rate_per_km))


@dataclass(frozen=True)
class ExpenseTotals:
    """Totals for a record collection.

    Attributes:
        record_count: Number of records
        distance_km: Total distance in kilometres
        amount: Total allowance (unrounded)
    """

    record_count: int
    distance_km: Decimal
    amount: Decimal


class ExpenseAggregator:
    """Aggregates expense records into totals and summaries.

    Example:
        >>> aggregator = ExpenseAggregator()
        >>> totals = aggregator.calculate_totals(records)
        >>> totals.amount
        Decimal('9.20')
    """

    def __init__(self, rate_per_km: Decimal = RATE_PER_KM):
        """Initialize the aggregator.

        Args:
            rate_per_km: Allowance per kilometre (default: 0.23)
        """
        self.rate_per_km = Decimal(str(rate_per_km))

    def calculate_totals(self, records: Iterable[ExpenseRecord]) -> ExpenseTotals:
        """Calculate count, distance and amount for the given records."""
        records = list(records)
        distance = total_distance(records)
        return ExpenseTotals(
            record_count=len(records),
            distance_km=distance,
            amount=distance * self.rate_per_km,
        )

    def summarize_by_city(self, records: Iterable[ExpenseRecord]) -> pd.DataFrame:
        """Group records by destination city.

        Cities are listed in order of first appearance.

        Args:
            records: Expense records

        Returns:
            DataFrame with columns city, trips, distance_km and amount.
            Empty (with the same columns) when there are no records.
        """
        rows: List[dict] = [
            {"city": record.city, "distance_km": record.distance_km}
            for record in records
        ]
        if not rows:
            return pd.DataFrame(columns=SUMMARY_COLUMNS)

        df = pd.DataFrame(rows)
        summary = (
            df.groupby("city", sort=False)
            .agg(
                trips=("distance_km", "size"),
                distance_km=("distance_km", lambda values: sum(values, Decimal("0"))),
            )
            .reset_index()
        )
        summary["amount"] = summary["distance_km"].apply(
            lambda distance: distance * self.rate_per_km
        )

        logger.debug(f"Summarized {len(rows)} record(s) into {len(summary)} city row(s)")
        return summary[SUMMARY_COLUMNS]
