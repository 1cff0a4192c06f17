"""Base model for all data models in kilometraje.

This module provides a base Pydantic model with the common configuration
shared by expense records, reference cities and the user profile.
"""

from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries using camelCase aliases
    - Arbitrary types support for dates and decimals

    Example:
        >>> class Place(BaseDataModel):
        ...     name: str
        >>> Place(name="Madrid").model_dump()
        {'name': 'Madrid'}
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        strict=False,
        extra="forbid",
        # Accept both field names and aliases ("distance_km" / "distanceKm")
        populate_by_name=True,
        frozen=False,
    )


def to_decimal(v: Union[str, int, float, Decimal]) -> Decimal:
    """Convert a numeric value to Decimal for precision.

    Args:
        v: The value to convert

    Returns:
        The value as a Decimal

    Raises:
        ValueError: If the value cannot be converted to Decimal
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Cannot convert {v} to Decimal")
    try:
        return Decimal(str(v))
    except (ArithmeticError, ValueError, TypeError) as e:
        raise ValueError(f"Cannot convert {v} to Decimal: {e}")
