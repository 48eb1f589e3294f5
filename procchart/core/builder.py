"""Process descriptor builder."""

import logging
from typing import Iterable, List, Optional

from ..models.config import AppConfig, ProcessConfig
from ..models.process import ProcessDescriptor
from ..services.exceptions import BuildError, MissingPortsError
from .constants import DEFAULT_NUMBER_OF_UNITS, DEFAULT_ROUTABLE_PROCESS
from .overlays import (
    Overlay,
    WithAnnotations,
    WithCmd,
    WithEnvs,
    WithLabels,
    WithLifecycle,
    WithNodeSelector,
    WithPortsAndProbes,
    WithResourceRequirements,
    WithSecurityContext,
    WithUnits,
    WithVolumeMounts,
    WithVolumes,
)
from .port_source import PortSource
from .ports import port_env_variables

logger = logging.getLogger(__name__)


def new_process(name: str, routable: bool, overlays: Iterable[Overlay] = ()) -> ProcessDescriptor:
    """Build a process descriptor by applying overlays in order.

    Args:
        name: Process name
        routable: Whether the process receives network traffic
        overlays: Stages applied in the given order

    Returns:
        The finished descriptor, with port environment variables appended

    Raises:
        BuildError: If any overlay fails, or a routable process has no ports
    """
    process = ProcessDescriptor(
        name=name,
        routable=routable,
        instance_count=DEFAULT_NUMBER_OF_UNITS,
    )

    for overlay in overlays:
        logger.debug("Applying %s to process %r", overlay, name)
        overlay.apply(process)

    process.environment.extend(port_env_variables(process))
    if not process.routable:
        logger.info("Built process %r", name)
        return process

    # only a routable process must have ports
    if not process.has_open_port():
        raise MissingPortsError(name)
    logger.info("Built routable process %r on port %s", name, process.public_service_port)
    return process


def is_routable(name: str, process_config: ProcessConfig) -> bool:
    """Return the configured routability, defaulting to True for the web process."""
    if process_config.routable is not None:
        return process_config.routable
    return name == DEFAULT_ROUTABLE_PROCESS


def process_overlays(
    app_config: AppConfig,
    name: str,
    port_source: PortSource,
    deployment_version: Optional[int] = None,
) -> List[Overlay]:
    """Assemble the overlay stages for one process of an application."""
    process_config = app_config.processes[name]
    if deployment_version is None:
        deployment_version = app_config.deployment_version

    return [
        WithCmd(tuple(process_config.cmd)),
        WithUnits(process_config.units),
        WithPortsAndProbes(port_source),
        WithLabels(tuple(app_config.labels), deployment_version),
        WithAnnotations(tuple(app_config.annotations), deployment_version),
        WithSecurityContext(process_config.security_context),
        WithResourceRequirements(process_config.resources),
        WithNodeSelector(_as_tuple(process_config.node_selector_terms)),
        WithVolumes(_as_tuple(process_config.volumes)),
        WithVolumeMounts(_as_tuple(process_config.volume_mounts)),
        WithEnvs(tuple(process_config.env)),
        WithLifecycle(process_config.lifecycle),
    ]


def build_process(
    app_config: AppConfig,
    name: str,
    port_source: PortSource,
    deployment_version: Optional[int] = None,
) -> ProcessDescriptor:
    """Build the descriptor of one configured process.

    Raises:
        BuildError: If the process is not configured or cannot be built
    """
    if name not in app_config.processes:
        raise BuildError(f"process '{name}' is not configured")

    overlays = process_overlays(app_config, name, port_source, deployment_version)
    return new_process(name, is_routable(name, app_config.processes[name]), overlays)


def _as_tuple(values):
    if values is None:
        return None
    return tuple(values)
