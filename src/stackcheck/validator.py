"""ModuleValidator -- runs every validation stage for module descriptors."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from stackcheck.config import Config
from stackcheck.module import ValidationResult
from stackcheck.modules.dependencies import check_compatibility, find_category_conflicts
from stackcheck.modules.types import ModuleDescriptor
from stackcheck.modules.validation import check_methods
from stackcheck.modules.versions import check_version_specs
from stackcheck.schema.config_schema import check_config_schema
from stackcheck.schema.validator import SchemaValidator
from stackcheck.security import SecurityScanner

logger = logging.getLogger(__name__)

__all__ = ["ModuleValidator"]


class ModuleValidator:
    """Validates module descriptors and the compatibility of module selections.

    Build one instance at startup and share it: it holds only read-only state,
    so concurrent ``validate`` calls need no locking.

    Args:
        config: Optional configuration. See ``stackcheck.config.DEFAULTS``.
        schema_validator: Structural validator; defaults to the descriptor contract.
    """

    def __init__(
        self,
        config: Config | None = None,
        schema_validator: SchemaValidator | None = None,
    ) -> None:
        self._config = config or Config()
        self._schema = schema_validator or SchemaValidator()
        self._scanner = SecurityScanner(
            suspicious_names=self._config.get("security.suspicious_names"),
            scan_templates=bool(self._config.get("security.scan_templates", True)),
        )
        self._check_peer = bool(self._config.get("dependencies.check_peer", True))
        self._exclusive_categories = tuple(
            self._config.get("compatibility.exclusive_categories") or ()
        )

    def validate(self, descriptor: ModuleDescriptor) -> ValidationResult:
        """Validate one descriptor. Never raises for bad input or misbehaving modules."""
        errors: list[str] = []
        warnings: list[str] = []

        errors.extend(self._schema.validate(descriptor.data))
        errors.extend(check_methods(descriptor))
        warnings.extend(check_version_specs(descriptor.data, check_peer=self._check_peer))
        warnings.extend(check_config_schema(descriptor))
        errors.extend(self._scanner.scan(descriptor))

        logger.debug(
            "Validated module '%s' (%s): %d error(s), %d warning(s)",
            descriptor.name, descriptor.kind.value, len(errors), len(warnings),
        )
        return ValidationResult.from_findings(errors, warnings)

    def validate_all(
        self, descriptors: Sequence[ModuleDescriptor]
    ) -> dict[str, ValidationResult]:
        """Validate a batch, keyed by module name, logging each invalid module."""
        results: dict[str, ValidationResult] = {}
        for position, descriptor in enumerate(descriptors):
            name = descriptor.name if isinstance(descriptor.name, str) else f"#{position}"
            if name in results:
                logger.warning("Duplicate module name '%s' in batch", name)
                name = f"{name}#{position}"
            result = self.validate(descriptor)
            if not result.valid:
                logger.warning("Validation issues for %s:", name)
                for error in result.errors:
                    logger.warning("  - %s", error)
            results[name] = result
        return results

    def validate_compatibility(
        self,
        module: ModuleDescriptor | Mapping[str, Any],
        candidates: Sequence[ModuleDescriptor | Mapping[str, Any]],
    ) -> list[str]:
        """Report dependency cycles and declared incompatibilities among ``candidates``."""
        return check_compatibility(module, candidates)

    def validate_selection(
        self,
        module: ModuleDescriptor | Mapping[str, Any],
        candidates: Sequence[ModuleDescriptor | Mapping[str, Any]],
    ) -> list[str]:
        """``validate_compatibility`` plus conflicts over exclusive categories.

        Two frontend frameworks in one selection is a conflict even when neither
        lists the other as incompatible.
        """
        return check_compatibility(module, candidates) + find_category_conflicts(
            module, candidates, self._exclusive_categories
        )
