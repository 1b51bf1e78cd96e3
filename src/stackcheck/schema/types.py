"""Schema validation data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["SchemaErrorDetail"]


@dataclass(frozen=True)
class SchemaErrorDetail:
    """One structural defect found in a descriptor."""

    path: str
    message: str
    constraint: str | None = None
    actual: Any = None

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
