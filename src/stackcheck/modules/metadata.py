"""Construction of tagged descriptors from files, mappings and module objects."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from stackcheck.errors import DescriptorLoadError
from stackcheck.modules.types import ExecutableModule, PlainDescriptor

logger = logging.getLogger(__name__)

__all__ = [
    "DESCRIPTOR_ATTRIBUTES",
    "load_descriptor",
    "descriptor_from_mapping",
    "descriptor_from_object",
]

# Python attribute name -> descriptor key
DESCRIPTOR_ATTRIBUTES: dict[str, str] = {
    "name": "name",
    "display_name": "displayName",
    "version": "version",
    "description": "description",
    "category": "category",
    "tags": "tags",
    "author": "author",
    "repository": "repository",
    "homepage": "homepage",
    "dependencies": "dependencies",
    "peer_dependencies": "peerDependencies",
    "compatible": "compatible",
    "incompatible": "incompatible",
    "recommended": "recommended",
    "experimental": "experimental",
    "deprecated": "deprecated",
}


def load_descriptor(path: str | Path) -> PlainDescriptor:
    """Load a module descriptor from a ``.json`` or YAML file.

    The parsed content is not validated here; an empty file yields an empty
    mapping so that validation reports the missing fields.
    """
    descriptor_path = Path(path)
    if not descriptor_path.exists():
        raise DescriptorLoadError(path=str(descriptor_path), reason="file does not exist")

    content = descriptor_path.read_text(encoding="utf-8")
    try:
        if descriptor_path.suffix == ".json":
            parsed = json.loads(content)
        else:
            parsed = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DescriptorLoadError(path=str(descriptor_path), reason=str(e), cause=e) from e

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise DescriptorLoadError(
            path=str(descriptor_path), reason="descriptor must be a mapping"
        )
    logger.debug("Loaded descriptor '%s' from %s", parsed.get("name"), descriptor_path)
    return PlainDescriptor(data=parsed)


def descriptor_from_mapping(data: Mapping[str, Any]) -> PlainDescriptor:
    """Wrap declarative descriptor data."""
    return PlainDescriptor(data=dict(data))


def descriptor_from_object(
    implementation: Any, data: Mapping[str, Any] | None = None
) -> ExecutableModule:
    """Wrap a module object that exposes accessor methods.

    When ``data`` is not given, descriptor fields are read from the object's
    attributes (``display_name`` becomes ``displayName`` and so on). Attributes
    that are missing or None are left out.
    """
    if data is None:
        collected: dict[str, Any] = {}
        for attr, key in DESCRIPTOR_ATTRIBUTES.items():
            value = getattr(implementation, attr, None)
            if value is not None and not callable(value):
                collected[key] = value
        data = collected
    return ExecutableModule(data=dict(data), implementation=implementation)
