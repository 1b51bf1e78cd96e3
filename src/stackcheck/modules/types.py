"""Descriptor variants: PlainDescriptor and ExecutableModule."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

__all__ = [
    "ModuleKind",
    "PlainDescriptor",
    "ExecutableModule",
    "ModuleDescriptor",
    "REQUIRED_METHODS",
    "CONFIG_SCHEMA_METHOD",
]

REQUIRED_METHODS: tuple[str, ...] = ("get_name", "get_description", "get_file_templates")
CONFIG_SCHEMA_METHOD = "get_config_schema"


class ModuleKind(str, Enum):
    """Which variant a descriptor is. Decided once by the loader."""

    PLAIN = "plain"
    EXECUTABLE = "executable"


@dataclass(frozen=True)
class PlainDescriptor:
    """A purely declarative module descriptor (e.g. parsed from module.yaml)."""

    data: Any
    kind: ModuleKind = field(default=ModuleKind.PLAIN, init=False)

    @property
    def name(self) -> Any:
        return self.data.get("name") if isinstance(self.data, Mapping) else None


@dataclass(frozen=True)
class ExecutableModule:
    """A descriptor backed by an implementation object with accessor methods.

    ``implementation`` is expected to expose ``get_name()``,
    ``get_description()``, ``get_file_templates()`` and optionally
    ``get_config_schema()``. Whether it actually does is checked during
    validation, not at construction.
    """

    data: Any
    implementation: Any
    kind: ModuleKind = field(default=ModuleKind.EXECUTABLE, init=False)

    @property
    def name(self) -> Any:
        return self.data.get("name") if isinstance(self.data, Mapping) else None


ModuleDescriptor = Union[PlainDescriptor, ExecutableModule]
