"""City catalog reader for the static reference distances.

This module loads the list of destination cities and their distance
tariffs once at startup. The source is a JSON document, either a local file
or an http(s) URL:

```
{"cities": [{"city": "Madrid", "distanceKm": 40}, ...]}
```

A bare list of city objects is accepted as well. Loading never raises: any
failure is logged and leaves the catalog empty, so city lookups simply find
nothing.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from kilometraje.models.city import City
from kilometraje.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


class CityCatalog:
    """Lookup table of reference cities keyed by name.

    Attributes:
        source: Local path or http(s) URL of the city list
        timeout: HTTP timeout in seconds

    Example:
        >>> catalog = CityCatalog("data/cities.json")
        >>> catalog.load()
        >>> catalog.distance_for("Madrid")
        Decimal('40.00')
    """

    def __init__(self, source: Optional[str] = None, timeout: float = 5.0):
        self.source = source
        self.timeout = timeout
        self._cities: Dict[str, City] = {}
        self._loaded = False

    @classmethod
    def from_cities(cls, cities: List[City]) -> "CityCatalog":
        """Build an already-loaded catalog from City objects."""
        catalog = cls()
        catalog._cities = {city.name: city for city in cities}
        catalog._loaded = True
        return catalog

    @log_function_call
    def load(self) -> None:
        """Read the city list once. Later calls are no-ops."""
        if self._loaded:
            return
        self._loaded = True

        if not self.source:
            logger.warning("No city source configured, city list is empty")
            return

        try:
            document = self._fetch()
            cities = self._parse(document)
        except requests.RequestException as e:
            logger.error(f"Failed to fetch city list from {self.source}: {e}")
            return
        except OSError as e:
            logger.error(f"Failed to read city list from {self.source}: {e}")
            return
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid city list in {self.source}: {e}")
            return

        self._cities = {city.name: city for city in cities}
        logger.info(f"Loaded {len(self._cities)} cities from {self.source}")

    def cities(self) -> List[City]:
        """All cities in source order."""
        return list(self._cities.values())

    def names(self) -> List[str]:
        return list(self._cities)

    def lookup(self, name: Optional[str]) -> Optional[City]:
        """Find a city by exact name, or None."""
        if not name:
            return None
        return self._cities.get(name.strip())

    def distance_for(self, name: Optional[str]) -> Optional[Decimal]:
        city = self.lookup(name)
        return city.distance_km if city else None

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._cities

    def _fetch(self) -> Any:
        source = str(self.source)
        if source.startswith(("http://", "https://")):
            response = requests.get(source, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        with open(Path(source), "r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _parse(document: Any) -> List[City]:
        if isinstance(document, dict):
            document = document.get("cities")
        if not isinstance(document, list):
            raise ValueError("expected a list of cities or a 'cities' key")
        return [City.model_validate(item) for item in document]
