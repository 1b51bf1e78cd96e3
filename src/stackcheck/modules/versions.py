"""Dependency version specifier checks."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

__all__ = ["VERSION_SPEC_PATTERNS", "is_valid_version_spec", "check_version_specs"]

_SEMVER = r"[0-9]+\.[0-9]+\.[0-9]+"

VERSION_SPEC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(_SEMVER),                    # exact
    re.compile(rf"\^{_SEMVER}"),            # caret range
    re.compile(rf"~{_SEMVER}"),             # tilde range
    re.compile(rf">=?{_SEMVER}"),           # greater than
    re.compile(rf"<=?{_SEMVER}"),           # less than
    re.compile(r"[0-9]+\.x"),               # any minor
    re.compile(r"[0-9]+\.[0-9]+\.x"),       # any patch
    re.compile(r"\*"),                      # any version
)


def is_valid_version_spec(spec: Any) -> bool:
    """Return True if ``spec`` matches one of the recognised specifier forms."""
    if not isinstance(spec, str):
        return False
    return any(pattern.fullmatch(spec) for pattern in VERSION_SPEC_PATTERNS)


def check_version_specs(data: Any, *, check_peer: bool = True) -> list[str]:
    """Return advisory warnings for malformed dependency version specifiers.

    Only the mapping form of ``dependencies`` carries versions; the list form is
    skipped. ``peerDependencies`` is checked too unless ``check_peer`` is False.
    """
    if not isinstance(data, Mapping):
        return []

    warnings: list[str] = []
    dependencies = data.get("dependencies")
    if isinstance(dependencies, Mapping):
        for dep_name, dep_version in dependencies.items():
            if not is_valid_version_spec(dep_version):
                warnings.append(
                    f"Invalid version specification for dependency {dep_name}: {dep_version}"
                )

    peers = data.get("peerDependencies")
    if check_peer and isinstance(peers, Mapping):
        for dep_name, dep_version in peers.items():
            if not is_valid_version_spec(dep_version):
                warnings.append(
                    f"Invalid version specification for peer dependency {dep_name}: {dep_version}"
                )
    return warnings
