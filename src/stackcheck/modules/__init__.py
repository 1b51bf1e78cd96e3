"""Module descriptors, capability and version checks, and dependency analysis.

Usage::

    from stackcheck.modules import check_compatibility, load_descriptor

    vue = load_descriptor("modules/vue3/module.yaml")
    issues = check_compatibility(vue, selected)
"""

from __future__ import annotations

from stackcheck.modules.dependencies import (
    EXCLUSIVE_CATEGORIES,
    check_compatibility,
    dependency_names,
    find_category_conflicts,
    find_cycles,
    find_incompatibilities,
    resolve_install_order,
)
from stackcheck.modules.metadata import (
    descriptor_from_mapping,
    descriptor_from_object,
    load_descriptor,
)
from stackcheck.modules.types import (
    ExecutableModule,
    ModuleDescriptor,
    ModuleKind,
    PlainDescriptor,
)
from stackcheck.modules.validation import check_methods
from stackcheck.modules.versions import check_version_specs, is_valid_version_spec

__all__ = [
    "EXCLUSIVE_CATEGORIES",
    "ExecutableModule",
    "ModuleDescriptor",
    "ModuleKind",
    "PlainDescriptor",
    "check_compatibility",
    "check_methods",
    "check_version_specs",
    "dependency_names",
    "descriptor_from_mapping",
    "descriptor_from_object",
    "find_category_conflicts",
    "find_cycles",
    "find_incompatibilities",
    "is_valid_version_spec",
    "load_descriptor",
    "resolve_install_order",
]
