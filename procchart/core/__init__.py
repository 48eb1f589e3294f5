"""Core functionality for procchart."""

from .builder import new_process, build_process, process_overlays, is_routable
from .port_source import PortSource, FilePortSource
from .ports import port_env_variables
from .scoping import can_be_applied, apply_metadata, select_bucket

__all__ = [
    'new_process',
    'build_process',
    'process_overlays',
    'is_routable',
    'PortSource',
    'FilePortSource',
    'port_env_variables',
    'can_be_applied',
    'apply_metadata',
    'select_bucket',
]
