"""Port and health-check configuration models."""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field

from .process import CamelModel


class ProcessPortConfig(CamelModel):
    """One port of a process: ``port`` on the service, ``target_port`` in the container."""
    port: int = Field(..., ge=1, le=65535)
    target_port: Optional[int] = Field(None, ge=1, le=65535)
    name: Optional[str] = None
    protocol: str = "TCP"


class ProcessPortsConfig(CamelModel):
    ports: List[ProcessPortConfig] = Field(default_factory=list)


class KubernetesConfig(CamelModel):
    processes: Dict[str, ProcessPortsConfig] = Field(default_factory=dict)


class HealthcheckConfig(CamelModel):
    readiness: Optional[Dict[str, Any]] = None
    liveness: Optional[Dict[str, Any]] = None
    startup: Optional[Dict[str, Any]] = None


class PortConfig(CamelModel):
    """Ports, health checks and image-exposed ports of an application."""
    kubernetes: KubernetesConfig = Field(default_factory=KubernetesConfig)
    healthcheck: Optional[HealthcheckConfig] = None
    exposed_ports: List[Annotated[int, Field(ge=1, le=65535)]] = Field(default_factory=list)
