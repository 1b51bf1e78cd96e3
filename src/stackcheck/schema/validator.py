"""SchemaValidator -- checks descriptors against the module descriptor contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError as PydanticValidationError

from stackcheck.schema.descriptor import ModuleDescriptorModel
from stackcheck.schema.types import SchemaErrorDetail

__all__ = ["SchemaValidator", "format_path"]

_PYDANTIC_TO_CONSTRAINT: dict[str, str] = {
    "missing": "required",
    "string_type": "type",
    "bool_type": "type",
    "list_type": "type",
    "dict_type": "type",
    "model_type": "type",
    "string_too_short": "minLength",
    "string_too_long": "maxLength",
    "string_pattern_mismatch": "pattern",
    "literal_error": "enum",
    "value_error": "format",
    "author_type": "oneOf",
    "dependencies_type": "oneOf",
}

# Branch tags pydantic inserts after a tagged-union field; not part of the data path.
_UNION_TAGS: dict[str, frozenset[str]] = {
    "author": frozenset({"name", "record"}),
    "dependencies": frozenset({"list", "mapping"}),
}


def _strip_union_tags(loc: tuple[str | int, ...]) -> tuple[str | int, ...]:
    if len(loc) >= 2 and loc[1] in _UNION_TAGS.get(str(loc[0]), ()):
        return loc[:1] + loc[2:]
    return loc


def format_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``a.b[0].c``, or ``root`` when empty."""
    if not loc:
        return "root"
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


class SchemaValidator:
    """Validates descriptor data against a Pydantic model, reporting every defect.

    The model's core schema is compiled by Pydantic when the class is defined;
    the validator holds no per-call state and may be shared between threads.
    """

    def __init__(self, model: type[BaseModel] = ModuleDescriptorModel) -> None:
        self._model = model

    def validate(self, data: Any) -> list[str]:
        """Return ``"<path>: <message>"`` strings, empty when the data conforms."""
        return [str(detail) for detail in self.details(data)]

    def details(self, data: Any) -> list[SchemaErrorDetail]:
        """Return structured error details for ``data``."""
        if isinstance(data, Mapping) and not isinstance(data, dict):
            data = dict(data)
        try:
            self._model.model_validate(data)
        except PydanticValidationError as e:
            return self._pydantic_error_to_details(e)
        return []

    def _pydantic_error_to_details(
        self, error: PydanticValidationError
    ) -> list[SchemaErrorDetail]:
        details: list[SchemaErrorDetail] = []
        for err in error.errors(include_url=False):
            pydantic_type = err.get("type", "")
            details.append(
                SchemaErrorDetail(
                    path=format_path(_strip_union_tags(tuple(err.get("loc", ())))),
                    message=err.get("msg", ""),
                    constraint=_PYDANTIC_TO_CONSTRAINT.get(pydantic_type, pydantic_type),
                    actual=err.get("input"),
                )
            )
        return details
