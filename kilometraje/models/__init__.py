"""Data models for kilometraje.

This package contains Pydantic models for all business entities:
- BaseDataModel: Base class with common configuration
- ExpenseRecord: One trip entry (date, city, distance)
- City: Reference destination with its distance tariff
- UserProfile: Form fields remembered between sessions
"""

from kilometraje.models.base import BaseDataModel
from kilometraje.models.city import City
from kilometraje.models.expense import ExpenseRecord, parse_record_date
from kilometraje.models.profile import UserProfile

__all__ = [
    "BaseDataModel",
    "City",
    "ExpenseRecord",
    "UserProfile",
    "parse_record_date",
]
