"""Error types shared by the builder, loaders and CLI."""

from .exceptions import (
    ProcChartError,
    BuildError,
    MissingPortsError,
    InvalidMetadataItemError,
    PortSourceError,
    ConfigError,
    FileExistsExportError,
)

__all__ = [
    "ProcChartError",
    "BuildError",
    "MissingPortsError",
    "InvalidMetadataItemError",
    "PortSourceError",
    "ConfigError",
    "FileExistsExportError",
]
