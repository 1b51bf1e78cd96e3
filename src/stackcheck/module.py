"""Validation result type shared by every validation stage."""

from __future__ import annotations

from dataclasses import dataclass, field

from stackcheck.errors import ModuleValidationError

__all__ = ["ValidationResult"]


@dataclass
class ValidationResult:
    """Outcome of validating one module descriptor.

    Attributes:
        valid: True iff ``errors`` is empty.
        errors: Blocking findings. Any entry keeps the module out of a project.
        warnings: Advisory findings surfaced to the operator.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_findings(cls, errors: list[str], warnings: list[str]) -> ValidationResult:
        """Build a result whose ``valid`` flag is derived from ``errors``."""
        return cls(valid=not errors, errors=list(errors), warnings=list(warnings))

    def raise_for_errors(self, module_name: str | None = None) -> None:
        """Raise ModuleValidationError if this result carries blocking errors."""
        if self.errors:
            raise ModuleValidationError(
                module_name=module_name, errors=self.errors, warnings=self.warnings
            )
