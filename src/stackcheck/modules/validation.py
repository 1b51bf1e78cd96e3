"""Capability check for executable modules."""

from __future__ import annotations

from stackcheck.modules.types import REQUIRED_METHODS, ExecutableModule, ModuleDescriptor

__all__ = ["check_methods"]


def check_methods(descriptor: ModuleDescriptor) -> list[str]:
    """Validate that an executable module implements the required accessors.

    Plain descriptors claim no capability, so nothing is required of them.
    Returns a list of validation error strings. Empty list means valid.
    """
    if not isinstance(descriptor, ExecutableModule):
        return []

    errors: list[str] = []
    for method in REQUIRED_METHODS:
        if not callable(getattr(descriptor.implementation, method, None)):
            errors.append(f"Missing required method: {method}")
    return errors
