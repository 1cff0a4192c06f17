"""
Configuration module for kilometraje.
"""
from .settings import (
    KilometrajeConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'KilometrajeConfig',
    'get_config',
    'load_config',
    'reload_config'
]
