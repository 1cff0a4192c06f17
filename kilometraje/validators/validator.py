"""Main validator orchestrator for the expense form.

This module provides the ExpenseFormValidator class that combines the
required-field checks with the individual field validators and produces
one ValidationReport for the whole form.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Collection, Optional, Union

from kilometraje.models.expense import DISTANCE_QUANTUM, MAX_DISTANCE_KM
from kilometraje.validators.field_validators import (
    validate_clock_time,
    validate_date_not_future,
    validate_national_id,
    validate_time_range,
)
from kilometraje.validators.validation_report import ValidationReport

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


@dataclass
class ExpenseFormData:
    """Raw values of the expense form, as typed by the user.

    Attributes:
        name: User's name
        national_id: DNI/NIE
        start_time: Start of the working day (``HH:MM``)
        end_time: End of the working day (``HH:MM``)
        date: Trip date (``DD/MM/YYYY``)
        city: Destination city
        distance_km: Distance, usually filled in from the city list
    """

    name: str = ""
    national_id: str = ""
    start_time: str = ""
    end_time: str = ""
    date: str = ""
    city: str = ""
    distance_km: Optional[Union[Decimal, float, int, str]] = None


class ExpenseFormValidator:
    """Validator for a complete expense form submission.

    Example:
        >>> validator = ExpenseFormValidator(known_cities={"Madrid"})
        >>> data = ExpenseFormData(name="Ana", national_id="12345678Z",
        ...     start_time="09:00", end_time="17:00", date="01/01/2024",
        ...     city="Madrid", distance_km=40)
        >>> validator.validate(data).is_valid()
        True
    """

    def __init__(self, known_cities: Optional[Collection[str]] = None) -> None:
        """Initialize the validator.

        Args:
            known_cities: Names of the reference cities. When empty or None
                any non-empty city is accepted with a warning.
        """
        self.known_cities = set(known_cities or ())

    def validate(
        self, data: ExpenseFormData, today: Optional[dt.date] = None
    ) -> ValidationReport:
        """Validate every field of the form.

        Args:
            data: The form values
            today: Reference day for the future-date check

        Returns:
            ValidationReport with any issues found
        """
        report = ValidationReport()

        self._validate_profile_fields(data, report)

        if self._require(data.date, "date", "Date is required", report):
            report.add_result(
                "date", validate_date_not_future(data.date, today=today), data.date
            )

        self._validate_destination(data, report)

        return report

    def validate_profile(self, data: ExpenseFormData) -> ValidationReport:
        """Validate only the fields remembered between sessions."""
        report = ValidationReport()
        self._validate_profile_fields(data, report)
        return report

    def _validate_profile_fields(
        self, data: ExpenseFormData, report: ValidationReport
    ) -> None:
        if self._require(data.name, "name", "Name is required", report):
            length = len(data.name.strip())
            if length < NAME_MIN_LENGTH:
                report.add_error(
                    "name",
                    f"Name must be at least {NAME_MIN_LENGTH} characters",
                    data.name,
                )
            elif length > NAME_MAX_LENGTH:
                report.add_error(
                    "name",
                    f"Name must be at most {NAME_MAX_LENGTH} characters",
                    data.name,
                )

        if self._require(
            data.national_id, "national_id", "National ID is required", report
        ):
            report.add_result(
                "national_id", validate_national_id(data.national_id), data.national_id
            )

        start_ok = self._require(
            data.start_time, "start_time", "Start time is required", report
        )
        end_ok = self._require(data.end_time, "end_time", "End time is required", report)
        if start_ok:
            report.add_result(
                "start_time", validate_clock_time(data.start_time), data.start_time
            )
        if end_ok:
            report.add_result(
                "end_time", validate_clock_time(data.end_time), data.end_time
            )

        # Range check only once both times parse
        times_parse = not (
            report.errors_for("start_time") or report.errors_for("end_time")
        )
        if start_ok and end_ok and times_parse:
            report.add_result(
                "end_time",
                validate_time_range(data.start_time, data.end_time),
                data.end_time,
            )

    def _validate_destination(
        self, data: ExpenseFormData, report: ValidationReport
    ) -> None:
        if self._require(data.city, "city", "City is required", report):
            if not self.known_cities:
                report.add_warning(
                    "city", "Reference city list is not available", data.city
                )
            elif data.city.strip() not in self.known_cities:
                report.add_error("city", f"Unknown city '{data.city}'", data.city)

        if data.distance_km is None or data.distance_km == "":
            report.add_error("distance_km", "Distance is required", data.distance_km)
            return

        try:
            distance = Decimal(str(data.distance_km))
        except InvalidOperation:
            report.add_error(
                "distance_km", "Distance must be a number", data.distance_km
            )
            return

        if not distance.is_finite():
            report.add_error(
                "distance_km", "Distance must be a number", data.distance_km
            )
        elif distance < 0:
            report.add_error(
                "distance_km", "Distance cannot be negative", data.distance_km
            )
        elif distance > MAX_DISTANCE_KM:
            report.add_error(
                "distance_km",
                f"Distance cannot exceed {MAX_DISTANCE_KM} km",
                data.distance_km,
            )
        elif distance != distance.quantize(DISTANCE_QUANTUM):
            report.add_error(
                "distance_km",
                "Distance can have at most 2 decimals",
                data.distance_km,
            )

    @staticmethod
    def _require(
        value: Optional[str], field: str, message: str, report: ValidationReport
    ) -> bool:
        if value is None or not str(value).strip():
            report.add_error(field, message, value)
            return False
        return True
