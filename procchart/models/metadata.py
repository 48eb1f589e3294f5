"""Label and annotation overlay models."""

import re
from typing import Dict, List, Optional

from pydantic import Field

from .process import CamelModel

DEPLOYMENT_API_VERSION = "apps/v1"
CORE_API_VERSION = "v1"

_NAME_PART = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]$")
_DNS_SUBDOMAIN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$")
MAX_NAME_LENGTH = 63
MAX_PREFIX_LENGTH = 253


def qualified_name_errors(key: str) -> List[str]:
    """Check a label/annotation key such as ``example.com/tier``."""
    parts = key.split("/")
    if len(parts) == 1:
        name = parts[0]
    elif len(parts) == 2:
        prefix, name = parts
        if not prefix:
            return [f"key {key!r}: prefix part must be non-empty"]
        if len(prefix) > MAX_PREFIX_LENGTH or not _DNS_SUBDOMAIN.match(prefix):
            return [f"key {key!r}: prefix part must be a DNS-1123 subdomain"]
    else:
        return [f"key {key!r}: a qualified name must have at most one '/'"]

    if not name:
        return [f"key {key!r}: name part must be non-empty"]
    if len(name) > MAX_NAME_LENGTH:
        return [f"key {key!r}: name part must be no more than {MAX_NAME_LENGTH} characters"]
    if not _NAME_PART.match(name):
        return [
            f"key {key!r}: name part must consist of alphanumeric characters, "
            "'-', '_' or '.', and must start and end with an alphanumeric character"
        ]
    return []


def label_value_errors(value: str) -> List[str]:
    """Check a label value; empty values are allowed."""
    if not value:
        return []
    if len(value) > MAX_NAME_LENGTH:
        return [f"value {value!r}: must be no more than {MAX_NAME_LENGTH} characters"]
    if not _NAME_PART.match(value):
        return [
            f"value {value!r}: must consist of alphanumeric characters, "
            "'-', '_' or '.', and must start and end with an alphanumeric character"
        ]
    return []


class Target(CamelModel):
    """The kind of generated resource an item is applied to."""
    kind: str
    api_version: Optional[str] = None

    def _matches(self, kind: str, api_version: str) -> bool:
        return self.kind == kind and self.api_version in (None, api_version)

    def is_deployment(self) -> bool:
        return self._matches("Deployment", DEPLOYMENT_API_VERSION)

    def is_service(self) -> bool:
        return self._matches("Service", CORE_API_VERSION)

    def is_pod(self) -> bool:
        return self._matches("Pod", CORE_API_VERSION)


class MetadataItem(CamelModel):
    """A scoped set of labels or annotations.

    ``process_name`` and ``deployment_version`` narrow the item to one
    process and one deployment version; left empty they match everything.
    Whether ``apply`` holds labels or annotations depends on which list the
    item was configured in.
    """

    target: Target
    apply: Dict[str, str] = Field(default_factory=dict)
    process_name: str = ""
    deployment_version: int = 0

    def validation_errors(self, is_label: bool) -> List[str]:
        """Return a list of problems, empty if the item can be merged."""
        errors = []
        if not (self.target.is_deployment() or self.target.is_service() or self.target.is_pod()):
            version = self.target.api_version or "<default>"
            errors.append(f"unsupported target {self.target.kind} ({version})")
        if self.deployment_version < 0:
            errors.append("deploymentVersion must not be negative")
        if not self.apply:
            errors.append("apply must contain at least one key")
        for key, value in self.apply.items():
            errors.extend(qualified_name_errors(key))
            if is_label:
                errors.extend(label_value_errors(value))
        return errors
