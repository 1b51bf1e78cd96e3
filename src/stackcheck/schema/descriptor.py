"""Structural contract for module descriptors, expressed as Pydantic models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StringConstraints,
    Tag,
    TypeAdapter,
    ValidationError,
)
from pydantic.functional_validators import AfterValidator

__all__ = [
    "CATEGORIES",
    "NAME_PATTERN",
    "VERSION_PATTERN",
    "EMAIL_PATTERN",
    "AuthorInfo",
    "ModuleDescriptorModel",
]

CATEGORIES: tuple[str, ...] = (
    "frontend-framework",
    "ui-library",
    "backend-service",
    "auth-provider",
    "backend-framework",
    "database",
    "state-management",
    "deployment",
    "testing",
    "other",
)

NAME_PATTERN = r"^[a-z0-9-]+$"
VERSION_PATTERN = r"^\d+\.\d+\.\d+$"
# Syntactic check only, the usual JSON Schema "email" format. No DNS or deliverability lookup.
EMAIL_PATTERN = (
    r"(?i)^[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$"
)

_URL = TypeAdapter(AnyUrl)


def _check_uri(v: str) -> str:
    # Parsed for checking only; the descriptor keeps the string as written.
    try:
        _URL.validate_python(v)
    except ValidationError:
        raise ValueError("must be a valid URI") from None
    return v


Uri = Annotated[str, AfterValidator(_check_uri)]
TagName = Annotated[str, StringConstraints(min_length=2, max_length=30)]


def _author_shape(value: Any) -> str | None:
    if isinstance(value, str):
        return "name"
    if isinstance(value, dict):
        return "record"
    return None


def _dependencies_shape(value: Any) -> str | None:
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "mapping"
    return None


class AuthorInfo(BaseModel):
    """Structured author record."""

    model_config = ConfigDict(extra="allow", strict=True)

    name: str | None = None
    email: Annotated[str, StringConstraints(pattern=EMAIL_PATTERN)] | None = None
    url: Uri | None = None


Author = Annotated[
    Union[Annotated[str, Tag("name")], Annotated[AuthorInfo, Tag("record")]],
    Discriminator(
        _author_shape,
        custom_error_type="author_type",
        custom_error_message="Input should be a string or an author record",
    ),
]

Dependencies = Annotated[
    Union[Annotated[list[str], Tag("list")], Annotated[dict[str, str], Tag("mapping")]],
    Discriminator(
        _dependencies_shape,
        custom_error_type="dependencies_type",
        custom_error_message="Input should be a list of module names or a mapping of names to versions",
    ),
]


class ModuleDescriptorModel(BaseModel):
    """Every field a module descriptor may carry. Unknown fields are allowed."""

    model_config = ConfigDict(extra="allow", strict=True, populate_by_name=True)

    name: str = Field(pattern=NAME_PATTERN, min_length=2, max_length=50)
    display_name: str | None = Field(default=None, alias="displayName", min_length=2, max_length=100)
    version: str = Field(pattern=VERSION_PATTERN)
    description: str = Field(min_length=10, max_length=500)
    category: Literal[CATEGORIES]  # type: ignore[valid-type]
    tags: list[TagName] | None = None
    author: Author | None = None
    repository: Uri | None = None
    homepage: Uri | None = None
    dependencies: Dependencies | None = None
    peer_dependencies: dict[str, str] | None = Field(default=None, alias="peerDependencies")
    compatible: list[str] | None = None
    incompatible: list[str] | None = None
    recommended: bool | None = None
    experimental: bool | None = None
    deprecated: bool | None = None
