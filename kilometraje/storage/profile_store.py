"""Persistence of the remembered form fields.

Each profile field lives under its own key so that it can be saved the
moment the user changes it, independently of the others.
"""

import logging
from typing import Dict

from kilometraje.models.profile import UserProfile
from kilometraje.storage.key_value import KeyValueStore, StorageError
from kilometraje.utils.logging_utils import sanitize_sensitive_data

logger = logging.getLogger(__name__)

PROFILE_KEYS: Dict[str, str] = {
    "name": "nombreUsuario",
    "national_id": "dniUsuario",
    "start_time": "horaInicioUsuario",
    "end_time": "horaFinalUsuario",
}


class ProfileStore:
    """Reads and writes the UserProfile fields in a key-value store.

    Example:
        >>> profiles = ProfileStore(InMemoryKeyValueStore())
        >>> profiles.save_field("name", "Ana")
        >>> profiles.load().name
        'Ana'
    """

    def __init__(self, storage: KeyValueStore):
        self.storage = storage

    def load(self) -> UserProfile:
        """Read every profile field; missing keys read as empty strings."""
        values = {
            field: self.storage.get(key) or "" for field, key in PROFILE_KEYS.items()
        }
        logger.debug(f"Loaded profile: {sanitize_sensitive_data(values)}")
        return UserProfile(**values)

    def save_field(self, field: str, value: str) -> None:
        """Persist a single profile field.

        Write failures are logged and otherwise ignored.

        Raises:
            KeyError: If ``field`` is not a profile field
        """
        key = PROFILE_KEYS[field]
        try:
            self.storage.set(key, value or "")
        except StorageError as e:
            logger.error(f"Failed to save profile field '{field}': {e}")

    def save(self, profile: UserProfile) -> None:
        for field in PROFILE_KEYS:
            self.save_field(field, getattr(profile, field))

    def clear(self) -> None:
        """Delete all profile keys."""
        for field, key in PROFILE_KEYS.items():
            try:
                self.storage.remove(key)
            except StorageError as e:
                logger.error(f"Failed to remove profile field '{field}': {e}")
        logger.info("Cleared saved profile")
