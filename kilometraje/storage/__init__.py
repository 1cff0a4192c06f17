"""Persistence layer: key-value backends and the stores built on them."""

from kilometraje.storage.key_value import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    StorageError,
)
from kilometraje.storage.profile_store import PROFILE_KEYS, ProfileStore
from kilometraje.storage.record_store import (
    RECORDS_KEY,
    RecordCollection,
    RecordStore,
    deserialize_records,
    serialize_records,
)

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "PROFILE_KEYS",
    "ProfileStore",
    "RECORDS_KEY",
    "RecordCollection",
    "RecordStore",
    "StorageError",
    "deserialize_records",
    "serialize_records",
]
