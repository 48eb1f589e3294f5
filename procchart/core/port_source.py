"""Port sources supply container ports, service ports and probes for a process."""

import copy
import logging
from typing import Any, Dict, List, Optional, Protocol

from ..models.port_config import PortConfig
from ..models.process import ContainerPort, Probes, ServicePort
from ..services.exceptions import PortSourceError
from .constants import DEFAULT_ROUTABLE_PROCESS, DEFAULT_SERVICE_PORT_NAME, PROBE_HANDLERS

logger = logging.getLogger(__name__)


class PortSource(Protocol):
    """Anything that can describe the ports and health checks of a process."""

    def container_ports_for_process(self, process: str) -> List[ContainerPort]:
        ...

    def service_ports_for_process(self, process: str) -> List[ServicePort]:
        ...

    def probes(self) -> Probes:
        ...


def probe_errors(kind: str, probe: Optional[Dict[str, Any]]) -> List[str]:
    """Check that a probe definition has exactly one handler."""
    if probe is None:
        return []
    handlers = [handler for handler in PROBE_HANDLERS if handler in probe]
    if len(handlers) != 1:
        return [f"{kind} probe must define exactly one of {', '.join(PROBE_HANDLERS)}, found {len(handlers)}"]
    return []


class FilePortSource:
    """Port source backed by a port configuration file.

    Processes listed under ``kubernetes.processes`` use their configured
    ports. The default process falls back to the ports exposed by the image.
    """

    def __init__(self, config: PortConfig, default_process: str = DEFAULT_ROUTABLE_PROCESS):
        """Initialize port source with a parsed port configuration."""
        self.config = config
        self.default_process = default_process

    def container_ports_for_process(self, process: str) -> List[ContainerPort]:
        """Get container ports for a process, in configuration order."""
        process_config = self.config.kubernetes.processes.get(process)
        if process_config is not None:
            return [
                ContainerPort(
                    container_port=port.target_port or port.port,
                    name=port.name,
                    protocol=port.protocol,
                )
                for port in process_config.ports
            ]
        if process == self.default_process:
            logger.debug("No ports configured for %r, using exposed ports %s", process, self.config.exposed_ports)
            return [ContainerPort(container_port=port) for port in self.config.exposed_ports]
        return []

    def service_ports_for_process(self, process: str) -> List[ServicePort]:
        """Get service ports for a process, in configuration order."""
        process_config = self.config.kubernetes.processes.get(process)
        if process_config is not None:
            return [
                ServicePort(
                    port=port.port,
                    target_port=port.target_port or port.port,
                    name=port.name,
                    protocol=port.protocol,
                )
                for port in process_config.ports
            ]
        if process == self.default_process:
            return [
                ServicePort(
                    port=port,
                    target_port=port,
                    name=DEFAULT_SERVICE_PORT_NAME.format(index=index),
                )
                for index, port in enumerate(self.config.exposed_ports, start=1)
            ]
        return []

    def probes(self) -> Probes:
        """Get readiness, liveness and startup probes.

        Raises:
            PortSourceError: If a configured probe is malformed
        """
        healthcheck = self.config.healthcheck
        if healthcheck is None:
            return Probes()

        errors = []
        errors.extend(probe_errors("readiness", healthcheck.readiness))
        errors.extend(probe_errors("liveness", healthcheck.liveness))
        errors.extend(probe_errors("startup", healthcheck.startup))
        if errors:
            raise PortSourceError(f"invalid healthcheck configuration: {'; '.join(errors)}")

        return Probes(
            readiness=copy.deepcopy(healthcheck.readiness),
            liveness=copy.deepcopy(healthcheck.liveness),
            startup=copy.deepcopy(healthcheck.startup),
        )
