"""Expense form state and field-commit handlers.

ExpenseForm holds the values of the entry form between user actions. The
presentation layer calls one handler per committed field; each handler
applies the field's side effects explicitly:

- name, national ID and times are saved to the profile immediately
- the national ID is normalized to uppercase
- changing a time recomputes the elapsed hours
- selecting a known city fills in its distance

submit() validates the whole form and, when it passes, appends a record to
the RecordStore and clears the per-trip fields.
"""

import datetime as dt
import logging
from decimal import Decimal
from typing import Optional

from kilometraje.calculators.time_utils import compute_elapsed_hours
from kilometraje.models.expense import ExpenseRecord
from kilometraje.readers.city_catalog import CityCatalog
from kilometraje.storage.profile_store import ProfileStore
from kilometraje.storage.record_store import RecordStore
from kilometraje.validators.field_validators import normalize_national_id
from kilometraje.validators.validation_report import ValidationReport
from kilometraje.validators.validator import ExpenseFormData, ExpenseFormValidator

logger = logging.getLogger(__name__)


class ExpenseForm:
    """Entry form for expense records.

    Attributes:
        data: Current field values
        elapsed_hours: Hours between start and end time (0.0 if unknown)

    Example:
        >>> form = ExpenseForm(record_store, profile_store, catalog)
        >>> form.set_date("01/01/2024")
        >>> form.select_city("Madrid")
        >>> form.submit()
        ExpenseRecord(date=datetime.date(2024, 1, 1), city='Madrid', ...)
    """

    def __init__(
        self,
        record_store: RecordStore,
        profile_store: ProfileStore,
        catalog: Optional[CityCatalog] = None,
    ):
        self.record_store = record_store
        self.profile_store = profile_store
        self.catalog = catalog or CityCatalog()
        self.elapsed_hours = 0.0

        profile = profile_store.load()
        self.data = ExpenseFormData(
            name=profile.name,
            national_id=profile.national_id,
            start_time=profile.start_time,
            end_time=profile.end_time,
        )
        if profile.start_time and profile.end_time:
            self._recompute_hours()

    # Field commit handlers

    def set_name(self, value: Optional[str]) -> None:
        self.data.name = value or ""
        self.profile_store.save_field("name", self.data.name)

    def set_national_id(self, value: Optional[str]) -> str:
        """Store the ID uppercased and save it to the profile.

        Returns:
            The normalized value, for the presentation layer to display
        """
        self.data.national_id = normalize_national_id(value)
        self.profile_store.save_field("national_id", self.data.national_id)
        return self.data.national_id

    def set_start_time(self, value: Optional[str]) -> None:
        self.data.start_time = value or ""
        self.profile_store.save_field("start_time", self.data.start_time)
        self._recompute_hours()

    def set_end_time(self, value: Optional[str]) -> None:
        self.data.end_time = value or ""
        self.profile_store.save_field("end_time", self.data.end_time)
        self._recompute_hours()

    def set_date(self, value: Optional[str]) -> None:
        self.data.date = (value or "").strip()

    def select_city(self, name: Optional[str]) -> None:
        """Select a destination; a known city fills in its distance.

        Unknown names are stored as typed and leave the distance untouched.
        """
        self.data.city = (name or "").strip()
        city = self.catalog.lookup(self.data.city)
        if city is not None:
            self.data.distance_km = city.distance_km

    def set_distance(self, value) -> None:
        """Set the distance by hand (used when the city list is unavailable)."""
        self.data.distance_km = value

    # Form actions

    def validate(self, today: Optional[dt.date] = None) -> ValidationReport:
        validator = ExpenseFormValidator(known_cities=self.catalog.names())
        return validator.validate(self.data, today=today)

    def submit(self, today: Optional[dt.date] = None) -> Optional[ExpenseRecord]:
        """Validate and, if valid, add the record to the store.

        Returns:
            The stored record, or None when validation failed
        """
        report = self.validate(today=today)
        if not report.is_valid():
            logger.info(f"Submission rejected: {report.summary()}")
            logger.debug(report.format())
            return None

        record = ExpenseRecord(
            date=self.data.date,
            city=self.data.city,
            distance_km=Decimal(str(self.data.distance_km)),
        )
        self.record_store.append(record)

        self.data.date = ""
        self.data.city = ""
        self.data.distance_km = None
        return record

    def reset(self) -> None:
        """Forget the saved profile and clear every field."""
        self.profile_store.clear()
        self.data = ExpenseFormData()
        self.elapsed_hours = 0.0

    def _recompute_hours(self) -> None:
        try:
            self.elapsed_hours = compute_elapsed_hours(
                self.data.start_time, self.data.end_time
            )
        except ValueError:
            # Incomplete or malformed time; validation reports it
            self.elapsed_hours = 0.0
