"""Tests for the city catalog reader."""

import json
from decimal import Decimal
from unittest.mock import Mock, patch

import pytest
import requests

from kilometraje.models import City
from kilometraje.readers import CityCatalog


class TestCityCatalogLoad:
    """Tests for loading the reference list."""

    def test_load_from_file(self, cities_file):
        """Test loading the wrapped document format."""
        catalog = CityCatalog(str(cities_file))
        catalog.load()

        assert catalog.names() == ["Madrid", "Toledo", "Segovia"]
        assert catalog.distance_for("Segovia") == Decimal("92.5")

    def test_load_bare_list(self, tmp_path):
        path = tmp_path / "cities.json"
        path.write_text(
            json.dumps([{"city": "Cuenca", "distanceKm": 165}]), encoding="utf-8"
        )

        catalog = CityCatalog(path)
        catalog.load()

        assert catalog.distance_for("Cuenca") == Decimal("165")

    def test_missing_file_leaves_catalog_empty(self, tmp_path, caplog):
        catalog = CityCatalog(str(tmp_path / "missing.json"))
        catalog.load()

        assert len(catalog) == 0
        assert "Failed to read city list" in caplog.text

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '{"towns": []}',
            '{"cities": [{"city": "Madrid"}]}',
            '{"cities": [{"city": "Madrid", "distanceKm": -4}]}',
            '{"cities": [{"city": "Madrid", "distanceKm": 1e400}]}',
            '{"cities": [{"city": "Madrid", "distanceKm": Infinity}]}',
            '"Madrid"',
        ],
    )
    def test_invalid_document_leaves_catalog_empty(self, tmp_path, content):
        """Test that malformed content is logged, not raised."""
        path = tmp_path / "cities.json"
        path.write_text(content, encoding="utf-8")

        catalog = CityCatalog(str(path))
        catalog.load()

        assert catalog.cities() == []

    def test_no_source(self):
        catalog = CityCatalog()
        catalog.load()

        assert len(catalog) == 0

    def test_load_runs_once(self, cities_file):
        """Test that a second load does not re-read the source."""
        catalog = CityCatalog(str(cities_file))
        catalog.load()
        cities_file.write_text('{"cities": []}', encoding="utf-8")

        catalog.load()

        assert len(catalog) == 3

    @patch("kilometraje.readers.city_catalog.requests.get")
    def test_load_from_url(self, mock_get, sample_cities_document):
        """Test fetching the list over HTTP."""
        response = Mock()
        response.json.return_value = sample_cities_document
        mock_get.return_value = response

        catalog = CityCatalog("https://example.com/cities.json", timeout=2.5)
        catalog.load()

        mock_get.assert_called_once_with("https://example.com/cities.json", timeout=2.5)
        response.raise_for_status.assert_called_once()
        assert len(catalog) == 3

    @patch("kilometraje.readers.city_catalog.requests.get")
    def test_http_error_leaves_catalog_empty(self, mock_get, caplog):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        mock_get.return_value = response

        catalog = CityCatalog("https://example.com/cities.json")
        catalog.load()

        assert len(catalog) == 0
        assert "Failed to fetch city list" in caplog.text

    @patch("kilometraje.readers.city_catalog.requests.get")
    def test_connection_error_leaves_catalog_empty(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("offline")

        catalog = CityCatalog("http://example.com/cities.json")
        catalog.load()

        assert len(catalog) == 0


class TestCityCatalogLookup:
    """Tests for lookups on a loaded catalog."""

    def test_lookup_exact(self, city_catalog):
        city = city_catalog.lookup("Toledo")

        assert city == City(name="Toledo", distance_km=72)

    def test_lookup_strips_whitespace(self, city_catalog):
        assert city_catalog.distance_for(" Madrid ") == Decimal("40")

    def test_lookup_is_case_sensitive(self, city_catalog):
        assert city_catalog.lookup("madrid") is None

    @pytest.mark.parametrize("name", ["", None, "Cuenca"])
    def test_lookup_missing(self, city_catalog, name):
        assert city_catalog.lookup(name) is None
        assert city_catalog.distance_for(name) is None

    def test_contains(self, city_catalog):
        assert "Madrid" in city_catalog
        assert "Cuenca" not in city_catalog
        assert 40 not in city_catalog

    def test_from_cities_is_loaded(self, city_catalog):
        """Test that load() on a prebuilt catalog keeps its cities."""
        city_catalog.load()

        assert len(city_catalog) == 3
