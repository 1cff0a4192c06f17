from kilometraje.readers.city_catalog import CityCatalog

__all__ = ["CityCatalog"]
