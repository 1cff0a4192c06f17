"""Expense record data model.

This module defines the ExpenseRecord model which represents one trip
entered through the expense form: the day, the destination city and the
distance that the mileage allowance is paid on.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from pydantic import (
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)

from kilometraje.models.base import BaseDataModel, to_decimal

DATE_FORMAT = "%d/%m/%Y"

# Distances are kept to the cent of a kilometre so the stored JSON number
# reads back to the same Decimal
DISTANCE_QUANTUM = Decimal("0.01")
MAX_DISTANCE_KM = Decimal("100000")


def to_distance(v: Union[str, int, float, Decimal]) -> Decimal:
    """Convert a distance to Decimal rounded half-up to DISTANCE_QUANTUM.

    Raises:
        ValueError: If the value is not a finite number up to MAX_DISTANCE_KM
    """
    value = to_decimal(v)
    if not value.is_finite():
        raise ValueError(f"Distance {v} is not a finite number")
    # Checked before quantize, which overflows on huge exponents
    if abs(value) > MAX_DISTANCE_KM:
        raise ValueError(f"Distance must be at most {MAX_DISTANCE_KM} km")
    return value.quantize(DISTANCE_QUANTUM, rounding=ROUND_HALF_UP)


def parse_record_date(value: Union[str, dt.date]) -> dt.date:
    """Parse a record date given as ``DD/MM/YYYY`` or ISO ``YYYY-MM-DD``.

    Args:
        value: Date string or date object

    Returns:
        The parsed date

    Raises:
        ValueError: If the string matches neither format

    Example:
        >>> parse_record_date("01/01/2024")
        datetime.date(2024, 1, 1)
        >>> parse_record_date("2024-01-01")
        datetime.date(2024, 1, 1)
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value

    text = str(value).strip()
    try:
        return dt.datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Date '{value}' must be DD/MM/YYYY or YYYY-MM-DD")


class ExpenseRecord(BaseDataModel):
    """Represents a single expense entry.

    Records are immutable once created; the only way to change the record
    list is to append a new record or delete one by position.

    Attributes:
        date: Day of the trip
        city: Destination city name
        distance_km: Distance the allowance is computed on, between 0 and
            MAX_DISTANCE_KM, rounded half-up to two decimals

    Example:
        >>> record = ExpenseRecord(date="01/01/2024", city="Madrid", distance_km=40)
        >>> record.model_dump(mode="json", by_alias=True)
        {'date': '01/01/2024', 'city': 'Madrid', 'distanceKm': 40.0}
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Day of the trip")
    city: str = Field(..., min_length=1, description="Destination city")
    distance_km: Decimal = Field(
        ...,
        ge=0,
        le=MAX_DISTANCE_KM,
        alias="distanceKm",
        description="Distance in kilometres",
    )

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        """Accept both the form format and ISO dates."""
        return parse_record_date(v)

    @field_validator("city")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that the city is not empty or whitespace only.

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()

    @field_validator("distance_km", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Union[str, int, float, Decimal]) -> Decimal:
        return to_distance(v)

    @field_serializer("date", when_used="json")
    def serialize_date(self, value: dt.date) -> str:
        return value.strftime(DATE_FORMAT)

    @field_serializer("distance_km", when_used="json")
    def serialize_distance(self, value: Decimal) -> float:
        return float(value)
