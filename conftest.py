"""
Global pytest configuration and fixtures.
"""
import json
import os
import pytest
from typing import Dict
from click.testing import CliRunner
from kilometraje.config import KilometrajeConfig, reload_config
from kilometraje.config.logging_config import reset_logging
from kilometraje.models import City, ExpenseRecord
from kilometraje.readers import CityCatalog
from kilometraje.storage import InMemoryKeyValueStore, ProfileStore, RecordStore


@pytest.fixture
def sample_cities_document():
    """Reference city list in the on-disk format."""
    return {
        "cities": [
            {"city": "Madrid", "distanceKm": 40},
            {"city": "Toledo", "distanceKm": 72},
            {"city": "Segovia", "distanceKm": 92.5},
        ]
    }


@pytest.fixture
def cities_file(tmp_path, sample_cities_document):
    """City list written to a temporary JSON file."""
    path = tmp_path / "cities.json"
    path.write_text(json.dumps(sample_cities_document), encoding="utf-8")
    return path


@pytest.fixture
def test_env_vars(tmp_path, cities_file) -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'STORAGE_FILE': str(tmp_path / 'storage.json'),
        'CITIES_SOURCE': str(cities_file),
        'ENVIRONMENT': 'testing',
        'DEBUG': 'false',
        'LOG_LEVEL': 'DEBUG',
        'LOG_CONSOLE': 'false',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv('LOG_FILE', raising=False)

    # Clear the global config to force reload with test values
    import kilometraje.config.settings
    kilometraje.config.settings._config = None

    yield test_env_vars

    # Clean up
    kilometraje.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> KilometrajeConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def key_value_store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def record_store(key_value_store):
    """Initialized record store over the in-memory key-value store."""
    store = RecordStore(key_value_store)
    store.initialize()
    return store


@pytest.fixture
def profile_store(key_value_store):
    """Profile store sharing the in-memory key-value store."""
    return ProfileStore(key_value_store)


@pytest.fixture
def city_catalog():
    """Loaded catalog with a few reference cities."""
    return CityCatalog.from_cities(
        [
            City(name="Madrid", distance_km=40),
            City(name="Toledo", distance_km=72),
            City(name="Segovia", distance_km="92.5"),
        ]
    )


@pytest.fixture
def sample_records():
    """Three records in entry order."""
    return [
        ExpenseRecord(date="01/01/2024", city="Madrid", distance_km=40),
        ExpenseRecord(date="03/01/2024", city="Toledo", distance_km=72),
        ExpenseRecord(date="02/01/2024", city="Madrid", distance_km=40),
    ]


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # CLI invocations reconfigure the root logger
    reset_logging()

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)
