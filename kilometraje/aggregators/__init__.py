"""Aggregators module for deriving totals from expense records."""

from kilometraje.aggregators.expense_aggregator import (
    RATE_PER_KM,
    ExpenseAggregator,
    ExpenseTotals,
    total_amount,
    total_distance,
)

__all__ = [
    "RATE_PER_KM",
    "ExpenseAggregator",
    "ExpenseTotals",
    "total_amount",
    "total_distance",
]
