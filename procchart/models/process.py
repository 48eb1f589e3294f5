"""Process descriptor models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Env(CamelModel):
    """A single environment variable."""
    name: str
    value: str = ""


class ContainerPort(CamelModel):
    """A port the running container listens on."""
    container_port: int = Field(..., ge=1, le=65535)
    name: Optional[str] = None
    protocol: str = "TCP"


class ServicePort(CamelModel):
    """A port exposed by the service in front of the process."""
    port: int = Field(..., ge=1, le=65535)
    target_port: Optional[int] = Field(None, ge=1, le=65535)
    name: Optional[str] = None
    protocol: str = "TCP"


class Probes(CamelModel):
    """Health-check probes returned by a port source."""
    readiness: Optional[Dict[str, Any]] = None
    liveness: Optional[Dict[str, Any]] = None
    startup: Optional[Dict[str, Any]] = None


class ExtraMetadata(CamelModel):
    """Labels and annotations added to one kind of generated resource."""
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)


class ProcessDescriptor(CamelModel):
    """Everything a manifest renderer needs to know about one process.

    A descriptor is created with only ``name`` and ``routable`` set and is
    filled in by the overlay stages of a single build. Both of those fields
    are frozen; every other field is written by exactly one stage.
    """

    name: str = Field(..., frozen=True)
    routable: bool = Field(False, frozen=True)
    command: List[str] = Field(default_factory=list)
    instance_count: int = Field(1, ge=1)

    container_ports: List[ContainerPort] = Field(default_factory=list)
    service_ports: List[ServicePort] = Field(default_factory=list)
    public_service_port: Optional[int] = None
    environment: List[Env] = Field(default_factory=list)

    security_context: Optional[Dict[str, Any]] = None
    resource_requirements: Optional[Dict[str, Any]] = None
    node_selector: Optional[List[Dict[str, Any]]] = None
    volumes: Optional[List[Dict[str, Any]]] = None
    volume_mounts: Optional[List[Dict[str, Any]]] = None
    readiness_probe: Optional[Dict[str, Any]] = None
    liveness_probe: Optional[Dict[str, Any]] = None
    startup_probe: Optional[Dict[str, Any]] = None
    lifecycle_hooks: Optional[Dict[str, Any]] = None

    # Labels and annotations for the Deployment, Service and Pod of this process.
    deployment_metadata: ExtraMetadata = Field(default_factory=ExtraMetadata)
    service_metadata: ExtraMetadata = Field(default_factory=ExtraMetadata)
    pod_metadata: ExtraMetadata = Field(default_factory=ExtraMetadata)

    def has_open_port(self) -> bool:
        """Return True if the process has both container and service ports."""
        return bool(self.container_ports) and bool(self.service_ports)

    def resolved_env(self) -> Dict[str, str]:
        """Collapse the environment list; the last value for a name wins."""
        return {env.name: env.value for env in self.environment}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary suitable for manifest templates."""
        return self.model_dump(by_alias=True, exclude_none=True)
