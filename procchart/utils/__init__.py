"""Utilities for procchart."""

from .config_manager import ConfigManager, dump_descriptor, load_document

__all__ = [
    'ConfigManager',
    'dump_descriptor',
    'load_document',
]
