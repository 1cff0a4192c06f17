"""Shared objects for CLI commands."""

import logging
from dataclasses import dataclass

from kilometraje.aggregators.expense_aggregator import ExpenseAggregator
from kilometraje.config.settings import KilometrajeConfig
from kilometraje.forms.expense_form import ExpenseForm
from kilometraje.readers.city_catalog import CityCatalog
from kilometraje.storage.key_value import JsonFileKeyValueStore
from kilometraje.storage.profile_store import ProfileStore
from kilometraje.storage.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Services wired from the configuration, passed to commands as ``obj``."""

    config: KilometrajeConfig
    record_store: RecordStore
    profile_store: ProfileStore
    catalog: CityCatalog
    aggregator: ExpenseAggregator
    debug: bool = False

    def new_form(self) -> ExpenseForm:
        return ExpenseForm(self.record_store, self.profile_store, self.catalog)


def build_app_context(config: KilometrajeConfig, debug: bool = False) -> AppContext:
    """Create the stores, load persisted records and the city list."""
    storage = JsonFileKeyValueStore(config.storage_file)

    record_store = RecordStore(storage)
    record_store.initialize()

    catalog = CityCatalog(config.cities_source, timeout=config.http_timeout)
    catalog.load()

    logger.debug(f"Using storage file {config.storage_file}")
    return AppContext(
        config=config,
        record_store=record_store,
        profile_store=ProfileStore(storage),
        catalog=catalog,
        aggregator=ExpenseAggregator(rate_per_km=config.rate_per_km),
        debug=debug,
    )
