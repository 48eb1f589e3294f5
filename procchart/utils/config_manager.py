"""Configuration loading and descriptor export utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..core.constants import APP_CONFIG_FILE_NAME, PORT_CONFIG_FILE_NAME, YAML_SUFFIXES
from ..models.config import AppConfig
from ..models.port_config import PortConfig
from ..models.process import ProcessDescriptor
from ..services.exceptions import ConfigError, FileExistsExportError

logger = logging.getLogger(__name__)


def is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def load_document(path: Path) -> Dict[str, Any]:
    """Load a YAML or JSON mapping, chosen by file extension."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Configuration file {path} is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(text) if is_yaml(path) else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration file {path}: expected a mapping at top level")
    return data


def dump_descriptor(descriptor: ProcessDescriptor, as_json: bool = False) -> str:
    """Serialize a descriptor to YAML, or JSON if requested."""
    data = descriptor.to_dict()
    if as_json:
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False)


class ConfigManager:
    """Loads application and port configuration for a project."""

    def __init__(
        self,
        project_root: Path,
        app_config_file: Optional[Path] = None,
        port_config_file: Optional[Path] = None,
    ):
        """Initialize config manager with project root and optional file overrides."""
        self.project_root = project_root
        self.app_config_file = app_config_file or project_root / APP_CONFIG_FILE_NAME
        self.port_config_file = port_config_file or project_root / PORT_CONFIG_FILE_NAME

    def load_app_config(self) -> AppConfig:
        """Load application configuration.

        Raises:
            ConfigError: If the file is missing or invalid
        """
        if not self.app_config_file.exists():
            raise ConfigError(f"Application configuration not found: {self.app_config_file}")
        data = load_document(self.app_config_file)
        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid application configuration {self.app_config_file}: {e}") from e

    def load_port_config(self) -> PortConfig:
        """Load port configuration; a missing file means no ports are configured."""
        if not self.port_config_file.exists():
            logger.debug("Port configuration %s not found, using empty configuration", self.port_config_file)
            return PortConfig()
        data = load_document(self.port_config_file)
        try:
            return PortConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid port configuration {self.port_config_file}: {e}") from e

    def save_app_config(self, config: AppConfig) -> None:
        """Save application configuration."""
        data = config.model_dump(by_alias=True, exclude_none=True)
        if is_yaml(self.app_config_file):
            self.app_config_file.write_text(yaml.safe_dump(data, sort_keys=False))
        else:
            self.app_config_file.write_text(json.dumps(data, indent=2))

    def export_descriptor(self, descriptor: ProcessDescriptor, path: Path, as_json: bool = False) -> None:
        """Write a descriptor to a new file.

        Raises:
            FileExistsExportError: If the file already exists
        """
        content = dump_descriptor(descriptor, as_json=as_json)
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise FileExistsExportError(f"file already exists: {path}") from e
        logger.info("Exported process %r to %s", descriptor.name, path)
