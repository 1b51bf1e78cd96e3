"""stackcheck schema system -- public API.

Example usage::

    from stackcheck.schema import SchemaValidator

    errors = SchemaValidator().validate({"name": "vue3"})
"""

from __future__ import annotations

from stackcheck.schema.config_schema import check_config_schema, is_valid_json_schema
from stackcheck.schema.descriptor import CATEGORIES, AuthorInfo, ModuleDescriptorModel
from stackcheck.schema.types import SchemaErrorDetail
from stackcheck.schema.validator import SchemaValidator, format_path

__all__ = [
    "CATEGORIES",
    "AuthorInfo",
    "ModuleDescriptorModel",
    "SchemaErrorDetail",
    "SchemaValidator",
    "check_config_schema",
    "format_path",
    "is_valid_json_schema",
]
