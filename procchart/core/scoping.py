"""Decide which labels and annotations apply to a process and where they go."""

import logging
from typing import Dict, Iterable, Optional

from ..models.metadata import MetadataItem, Target
from ..models.process import ExtraMetadata, ProcessDescriptor
from ..services.exceptions import InvalidMetadataItemError

logger = logging.getLogger(__name__)


def can_be_applied(item: MetadataItem, process_name: str, deployment_version: int) -> bool:
    """Return True if the item matches the process being built.

    An item matches when its deployment version is unset (zero) or equals
    ``deployment_version``, and its process name is unset or equals
    ``process_name``.
    """
    if item.deployment_version > 0 and item.deployment_version != deployment_version:
        return False
    if item.process_name and item.process_name != process_name:
        return False
    return True


def select_bucket(process: ProcessDescriptor, target: Target) -> Optional[ExtraMetadata]:
    """Return the metadata bucket of ``process`` that ``target`` refers to."""
    if target.is_deployment():
        return process.deployment_metadata
    if target.is_service():
        return process.service_metadata
    if target.is_pod():
        return process.pod_metadata
    return None


def apply_metadata(
    process: ProcessDescriptor,
    items: Iterable[MetadataItem],
    deployment_version: int,
    is_label: bool,
) -> None:
    """Merge matching items into the label or annotation maps of ``process``.

    Items are merged in order, so a later item overrides an earlier one on
    the same key.

    Raises:
        InvalidMetadataItemError: If a matching item fails validation
    """
    kind = "label" if is_label else "annotation"
    for item in items:
        if not can_be_applied(item, process.name, deployment_version):
            logger.debug(
                "Skipping %s item for process %r (version %s): item targets process %r version %s",
                kind, process.name, deployment_version, item.process_name, item.deployment_version,
            )
            continue

        errors = item.validation_errors(is_label=is_label)
        if errors:
            raise InvalidMetadataItemError(item, errors)

        bucket = select_bucket(process, item.target)
        values: Dict[str, str] = bucket.labels if is_label else bucket.annotations
        for key, value in item.apply.items():
            values[key] = value
        logger.debug("Applied %d %s(s) to %s of process %r", len(item.apply), kind, item.target.kind, process.name)
