"""stackcheck - Validation and compatibility engine for scaffolding modules."""

from __future__ import annotations

# Core
from stackcheck.validator import ModuleValidator
from stackcheck.module import ValidationResult
from stackcheck.report import BatchReport, aggregate

# Descriptors
from stackcheck.modules import (
    ExecutableModule,
    ModuleDescriptor,
    ModuleKind,
    PlainDescriptor,
    descriptor_from_mapping,
    descriptor_from_object,
    load_descriptor,
    resolve_install_order,
)

# Config
from stackcheck.config import Config

# Errors
from stackcheck.errors import (
    CircularDependencyError,
    ConfigError,
    ConfigNotFoundError,
    DescriptorLoadError,
    EmptyBatchError,
    ErrorCodes,
    ModuleError,
    ModuleValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ModuleValidator",
    "ValidationResult",
    "BatchReport",
    "aggregate",
    # Descriptors
    "ExecutableModule",
    "ModuleDescriptor",
    "ModuleKind",
    "PlainDescriptor",
    "descriptor_from_mapping",
    "descriptor_from_object",
    "load_descriptor",
    "resolve_install_order",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ModuleError",
    "CircularDependencyError",
    "ConfigError",
    "ConfigNotFoundError",
    "DescriptorLoadError",
    "EmptyBatchError",
    "ModuleValidationError",
]
