"""Record store for expense records.

RecordStore owns the list of expense records entered so far and keeps a
copy of it in a key-value store, so the list survives restarts. Readers
never get the live list: they receive tuples, either by calling
current_list() or by subscribing to change notifications.
"""

import json
import logging
from typing import Callable, List, Tuple

from pydantic import TypeAdapter, ValidationError

from kilometraje.models.expense import ExpenseRecord
from kilometraje.storage.key_value import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

RECORDS_KEY = "kilometraje_dietas_registros"

RecordCollection = Tuple[ExpenseRecord, ...]
RecordListener = Callable[[RecordCollection], None]

_records_adapter = TypeAdapter(List[ExpenseRecord])


def serialize_records(records: RecordCollection) -> str:
    """Encode records as a JSON array of ``{date, city, distanceKm}`` objects."""
    return _records_adapter.dump_json(list(records), by_alias=True).decode("utf-8")


def deserialize_records(payload: str) -> RecordCollection:
    """Decode a JSON array produced by serialize_records.

    Raises:
        ValueError: If the payload is not valid JSON
        ValidationError: If an entry does not match the record schema
    """
    return tuple(_records_adapter.validate_python(json.loads(payload)))


class RecordStore:
    """Authoritative in-memory record list with a persisted mirror.

    Mutations are applied in memory first, then written to storage, then
    broadcast to every subscriber in subscription order. A failed write is
    logged and the in-memory change is kept.

    Attributes:
        storage: Key-value store holding the serialized list
        storage_key: Key the list is stored under

    Example:
        >>> store = RecordStore(InMemoryKeyValueStore())
        >>> store.initialize()
        ()
        >>> store.append(ExpenseRecord(date="01/01/2024", city="Madrid", distance_km=40))
        >>> len(store.current_list())
        1
    """

    def __init__(self, storage: KeyValueStore, storage_key: str = RECORDS_KEY):
        self.storage = storage
        self.storage_key = storage_key
        self._records: List[ExpenseRecord] = []
        self._listeners: List[RecordListener] = []

    def initialize(self) -> RecordCollection:
        """Load the persisted list, falling back to an empty list.

        A missing slot yields an empty list. Unparseable content is logged
        and discarded.

        Returns:
            The loaded records
        """
        payload = self.storage.get(self.storage_key)
        records: RecordCollection = ()

        if payload:
            try:
                records = deserialize_records(payload)
            except (ValueError, ValidationError) as e:
                logger.warning(
                    f"Discarding unreadable records under '{self.storage_key}': {e}"
                )
                records = ()

        self._records = list(records)
        logger.info(f"Loaded {len(self._records)} expense record(s)")
        self._emit()
        return self.current_list()

    def append(self, record: ExpenseRecord) -> None:
        """Add a record at the end of the list, persist and notify."""
        self._records.append(record)
        logger.debug(f"Appended record for {record.city} on {record.date}")
        self._persist()
        self._emit()

    def remove_at(self, index: int) -> None:
        """Remove the record at ``index``.

        An index outside ``0 <= index < len`` is ignored: nothing is
        persisted and no notification is sent.
        """
        if not 0 <= index < len(self._records):
            logger.debug(f"Ignoring removal of out-of-range index {index}")
            return

        removed = self._records.pop(index)
        logger.debug(f"Removed record {index} ({removed.city} on {removed.date})")
        self._persist()
        self._emit()

    def clear(self) -> None:
        """Empty the list and delete the persisted slot."""
        self._records = []
        try:
            self.storage.remove(self.storage_key)
        except StorageError as e:
            logger.error(f"Failed to remove persisted records: {e}")
        logger.info("Cleared all expense records")
        self._emit()

    def current_list(self) -> RecordCollection:
        """Snapshot of the current records, without touching storage."""
        return tuple(self._records)

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        """Register a listener for list changes.

        The listener is called immediately with the current list, then after
        every mutation.

        Args:
            listener: Callable receiving the full record tuple

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)
        listener(self.current_list())

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _persist(self) -> None:
        try:
            self.storage.set(self.storage_key, serialize_records(self.current_list()))
        except StorageError as e:
            logger.error(f"Failed to persist expense records: {e}")

    def _emit(self) -> None:
        snapshot = self.current_list()
        for listener in list(self._listeners):
            listener(snapshot)
