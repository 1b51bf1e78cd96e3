"""Error hierarchy for stackcheck."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ModuleError",
    "ConfigNotFoundError",
    "ConfigError",
    "DescriptorLoadError",
    "ModuleValidationError",
    "CircularDependencyError",
    "EmptyBatchError",
    "ErrorCodes",
]


class ModuleError(Exception):
    """Base error for all stackcheck errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ModuleError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ModuleError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class DescriptorLoadError(ModuleError):
    """Raised when a module descriptor file cannot be read or parsed."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DESCRIPTOR_LOAD_ERROR",
            message=f"Failed to load module descriptor {path}: {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )


class ModuleValidationError(ModuleError):
    """Raised when a caller asks an invalid validation result to fail loudly."""

    def __init__(
        self,
        module_name: str | None,
        errors: list[str],
        warnings: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        label = module_name or "<unnamed>"
        super().__init__(
            code="MODULE_VALIDATION_ERROR",
            message=f"Module '{label}' failed validation with {len(errors)} error(s)",
            details={
                "module_name": module_name,
                "errors": list(errors),
                "warnings": list(warnings or []),
            },
            **kwargs,
        )

    @property
    def errors(self) -> list[str]:
        """The blocking errors that made the module invalid."""
        return self.details["errors"]


class CircularDependencyError(ModuleError):
    """Raised when circular dependencies prevent an install order."""

    def __init__(self, cycle_path: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CIRCULAR_DEPENDENCY",
            message=f"Circular dependency detected: {' -> '.join(cycle_path)}",
            details={"cycle_path": cycle_path},
            **kwargs,
        )


class EmptyBatchError(ModuleError):
    """Raised when a report is requested for zero validation results."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            code="EMPTY_BATCH",
            message="Cannot build a validation report from an empty batch",
            **kwargs,
        )


class ErrorCodes:
    """All stackcheck error codes as constants.

    Example:
        if error.code == ErrorCodes.CIRCULAR_DEPENDENCY:
            show_cycle(error.details["cycle_path"])
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    DESCRIPTOR_LOAD_ERROR = "DESCRIPTOR_LOAD_ERROR"
    MODULE_VALIDATION_ERROR = "MODULE_VALIDATION_ERROR"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"
    EMPTY_BATCH = "EMPTY_BATCH"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
