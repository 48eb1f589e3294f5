"""Models for procchart."""

from .process import (
    ProcessDescriptor,
    ExtraMetadata,
    Env,
    ContainerPort,
    ServicePort,
    Probes,
)
from .metadata import MetadataItem, Target
from .config import AppConfig, ProcessConfig
from .port_config import PortConfig, ProcessPortConfig, HealthcheckConfig

__all__ = [
    'ProcessDescriptor',
    'ExtraMetadata',
    'Env',
    'ContainerPort',
    'ServicePort',
    'Probes',
    'MetadataItem',
    'Target',
    'AppConfig',
    'ProcessConfig',
    'PortConfig',
    'ProcessPortConfig',
    'HealthcheckConfig',
]
