"""Calculator modules for kilometraje."""

from kilometraje.calculators.time_utils import (
    compute_elapsed_hours,
    convert_time_to_minutes,
    parse_clock_time,
)

__all__ = [
    "compute_elapsed_hours",
    "convert_time_to_minutes",
    "parse_clock_time",
]
