"""Reference city data model.

Cities come from a static list loaded once at startup. Each one carries the
fixed distance tariff used to fill in an expense record.
"""

from decimal import Decimal
from typing import Union

from pydantic import ConfigDict, Field, field_validator

from kilometraje.models.base import BaseDataModel
from kilometraje.models.expense import MAX_DISTANCE_KM, to_distance


class City(BaseDataModel):
    """A destination with its fixed distance tariff.

    Attributes:
        name: Unique display label (``city`` in the reference file)
        distance_km: Distance tariff in kilometres (``distanceKm``)

    Example:
        >>> City.model_validate({"city": "Madrid", "distanceKm": 40}).distance_km
        Decimal('40.00')
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, alias="city", description="City name")
    distance_km: Decimal = Field(
        ...,
        ge=0,
        le=MAX_DISTANCE_KM,
        alias="distanceKm",
        description="Distance tariff in km",
    )

    @field_validator("name")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()

    @field_validator("distance_km", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Union[str, int, float, Decimal]) -> Decimal:
        return to_distance(v)
