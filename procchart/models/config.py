"""Application configuration models (overlay inputs)."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .metadata import MetadataItem
from .process import CamelModel, Env


class ProcessConfig(CamelModel):
    """Configuration for a single process of an application."""
    cmd: List[str] = Field(default_factory=list)
    units: Optional[int] = Field(None, ge=1)
    routable: Optional[bool] = None
    env: List[Env] = Field(default_factory=list)
    security_context: Optional[Dict[str, Any]] = None
    resources: Optional[Dict[str, Any]] = None
    node_selector_terms: Optional[List[Dict[str, Any]]] = None
    volumes: Optional[List[Dict[str, Any]]] = None
    volume_mounts: Optional[List[Dict[str, Any]]] = None
    lifecycle: Optional[Dict[str, Any]] = None


class AppConfig(CamelModel):
    """Configuration for an application and all of its processes."""
    deployment_version: int = Field(0, ge=0)
    labels: List[MetadataItem] = Field(default_factory=list)
    annotations: List[MetadataItem] = Field(default_factory=list)
    processes: Dict[str, ProcessConfig] = Field(default_factory=dict)

    def process_names(self) -> List[str]:
        """Get list of all process names."""
        return list(self.processes.keys())
