"""Overlay stages that fill in a process descriptor.

Each stage carries its own configuration and mutates the descriptor in
``apply``. A stage signals failure by raising a ``BuildError``.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..models.metadata import MetadataItem
from ..models.process import Env, ProcessDescriptor
from ..services.exceptions import BuildError
from .port_source import PortSource
from .scoping import apply_metadata

logger = logging.getLogger(__name__)


class Overlay:
    """Base class for overlay stages."""

    def apply(self, process: ProcessDescriptor) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class WithUnits(Overlay):
    units: Optional[int]

    def apply(self, process: ProcessDescriptor) -> None:
        if self.units is None:
            return
        if self.units < 1:
            raise BuildError(f"units of process '{process.name}' must be positive, got {self.units}")
        process.instance_count = self.units


@dataclass(frozen=True)
class WithCmd(Overlay):
    cmd: Tuple[str, ...]

    def apply(self, process: ProcessDescriptor) -> None:
        process.command = list(self.cmd)


@dataclass(frozen=True)
class WithEnvs(Overlay):
    """Set the explicit environment. Port variables are appended later by the builder."""
    envs: Tuple[Env, ...]

    def apply(self, process: ProcessDescriptor) -> None:
        process.environment = [env.model_copy() for env in self.envs]


@dataclass(frozen=True)
class WithPortsAndProbes(Overlay):
    """Ask a port source for ports and, when a process has both kinds, probes."""
    port_source: PortSource = field(compare=False)

    def apply(self, process: ProcessDescriptor) -> None:
        service_ports = self.port_source.service_ports_for_process(process.name)
        container_ports = self.port_source.container_ports_for_process(process.name)
        process.service_ports = [port.model_copy() for port in service_ports]
        process.container_ports = [port.model_copy() for port in container_ports]
        if not process.has_open_port():
            logger.debug("Process %r has no open port, probes left unset", process.name)
            return

        probes = self.port_source.probes()
        process.public_service_port = process.service_ports[0].port
        process.readiness_probe = copy.deepcopy(probes.readiness)
        process.liveness_probe = copy.deepcopy(probes.liveness)
        process.startup_probe = copy.deepcopy(probes.startup)


@dataclass(frozen=True)
class WithSecurityContext(Overlay):
    security_context: Optional[Dict[str, Any]]

    def apply(self, process: ProcessDescriptor) -> None:
        process.security_context = copy.deepcopy(self.security_context)


@dataclass(frozen=True)
class WithResourceRequirements(Overlay):
    resource_requirements: Optional[Dict[str, Any]]

    def apply(self, process: ProcessDescriptor) -> None:
        process.resource_requirements = copy.deepcopy(self.resource_requirements)


@dataclass(frozen=True)
class WithNodeSelector(Overlay):
    node_selector_terms: Optional[Tuple[Dict[str, Any], ...]]

    def apply(self, process: ProcessDescriptor) -> None:
        process.node_selector = _as_list(self.node_selector_terms)


@dataclass(frozen=True)
class WithVolumes(Overlay):
    volumes: Optional[Tuple[Dict[str, Any], ...]]

    def apply(self, process: ProcessDescriptor) -> None:
        process.volumes = _as_list(self.volumes)


@dataclass(frozen=True)
class WithVolumeMounts(Overlay):
    volume_mounts: Optional[Tuple[Dict[str, Any], ...]]

    def apply(self, process: ProcessDescriptor) -> None:
        process.volume_mounts = _as_list(self.volume_mounts)


@dataclass(frozen=True)
class WithLifecycle(Overlay):
    lifecycle: Optional[Dict[str, Any]]

    def apply(self, process: ProcessDescriptor) -> None:
        process.lifecycle_hooks = copy.deepcopy(self.lifecycle)


@dataclass(frozen=True)
class WithLabels(Overlay):
    labels: Tuple[MetadataItem, ...]
    deployment_version: int = 0

    def apply(self, process: ProcessDescriptor) -> None:
        apply_metadata(process, self.labels, self.deployment_version, is_label=True)


@dataclass(frozen=True)
class WithAnnotations(Overlay):
    annotations: Tuple[MetadataItem, ...]
    deployment_version: int = 0

    def apply(self, process: ProcessDescriptor) -> None:
        apply_metadata(process, self.annotations, self.deployment_version, is_label=False)


def _as_list(values) -> Optional[List[Dict[str, Any]]]:
    if values is None:
        return None
    return copy.deepcopy(list(values))
