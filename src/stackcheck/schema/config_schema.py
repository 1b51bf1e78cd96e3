"""Self-check for configuration schemas supplied by executable modules."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jsonschema.exceptions import SchemaError
from jsonschema.validators import Draft7Validator, validator_for

from stackcheck.modules.types import CONFIG_SCHEMA_METHOD, ExecutableModule, ModuleDescriptor

logger = logging.getLogger(__name__)

__all__ = ["is_valid_json_schema", "check_config_schema"]

INVALID_SCHEMA_WARNING = "Module configuration schema is invalid"


def is_valid_json_schema(schema: Any) -> bool:
    """Return True if ``schema`` compiles as a JSON Schema (Draft 7 unless ``$schema`` says otherwise)."""
    if isinstance(schema, bool):
        return True
    if not isinstance(schema, Mapping):
        return False
    schema = dict(schema)
    try:
        validator_cls = validator_for(schema, default=Draft7Validator)
        validator_cls.check_schema(schema)
    except (SchemaError, TypeError) as e:
        logger.debug("Configuration schema failed to compile: %s", e)
        return False
    return True


def check_config_schema(descriptor: ModuleDescriptor) -> list[str]:
    """Invoke the module's config schema accessor, if any, and return warnings."""
    if not isinstance(descriptor, ExecutableModule):
        return []

    accessor = getattr(descriptor.implementation, CONFIG_SCHEMA_METHOD, None)
    if accessor is None or not callable(accessor):
        return []

    try:
        schema = accessor()
    except Exception as e:
        logger.warning(
            "Config schema accessor failed for module '%s': %s", descriptor.name, e
        )
        return [f"Error getting config schema: {e}"]

    if not is_valid_json_schema(schema):
        return [INVALID_SCHEMA_WARNING]
    return []
