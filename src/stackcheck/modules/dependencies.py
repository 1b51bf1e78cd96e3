"""Compatibility analysis over the module dependency graph.

Edges run from a module to every module it names in ``dependencies`` (the list
form, or the keys of the mapping form). Names that are not in the candidate set
are simply not part of the graph.
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from stackcheck.errors import CircularDependencyError
from stackcheck.modules.types import ExecutableModule, ModuleDescriptor, PlainDescriptor

logger = logging.getLogger(__name__)

__all__ = [
    "dependency_names",
    "find_cycles",
    "find_incompatibilities",
    "find_category_conflicts",
    "EXCLUSIVE_CATEGORIES",
    "check_compatibility",
    "resolve_install_order",
]

_ROOT = -1

# A project holds at most one module from each of these categories.
EXCLUSIVE_CATEGORIES: tuple[str, ...] = ("frontend-framework", "backend-framework")


def _data_of(module: ModuleDescriptor | Mapping[str, Any]) -> Any:
    if isinstance(module, (PlainDescriptor, ExecutableModule)):
        return module.data
    return module


def _name_of(module: ModuleDescriptor | Mapping[str, Any]) -> str:
    data = _data_of(module)
    name = data.get("name") if isinstance(data, Mapping) else None
    return name if isinstance(name, str) else repr(name)


def dependency_names(module: ModuleDescriptor | Mapping[str, Any]) -> list[str]:
    """Names a module depends on, in declaration order."""
    data = _data_of(module)
    if not isinstance(data, Mapping):
        return []
    deps = data.get("dependencies")
    if isinstance(deps, Mapping):
        return [name for name in deps if isinstance(name, str)]
    if isinstance(deps, (list, tuple)):
        return [name for name in deps if isinstance(name, str)]
    return []


def _index_by_name(
    candidates: Iterable[ModuleDescriptor | Mapping[str, Any]],
) -> dict[str, ModuleDescriptor | Mapping[str, Any]]:
    index: dict[str, ModuleDescriptor | Mapping[str, Any]] = {}
    for candidate in candidates:
        index.setdefault(_name_of(candidate), candidate)
    return index


def _path_to(segments: list[tuple[str, int]], tip: int) -> list[str]:
    path: list[str] = []
    while tip != _ROOT:
        name, tip = segments[tip]
        path.append(name)
    path.reverse()
    return path


def find_cycles(
    module: ModuleDescriptor | Mapping[str, Any],
    candidates: Sequence[ModuleDescriptor | Mapping[str, Any]],
) -> list[str]:
    """Depth-first search from ``module`` reporting every back edge as a cycle.

    Uses an explicit stack of ``(module, parent segment)`` frames. Path segments
    live in an arena list so each frame stores one index instead of a copy of
    its path. Each module is expanded at most once per call.
    """
    index = _index_by_name(candidates)
    issues: list[str] = []
    visited: set[str] = set()
    segments: list[tuple[str, int]] = []
    stack: list[tuple[ModuleDescriptor | Mapping[str, Any], int]] = [(module, _ROOT)]

    while stack:
        current, parent = stack.pop()
        name = _name_of(current)

        if name in visited:
            path = _path_to(segments, parent)
            if name in path:
                issues.append(
                    f"Circular dependency detected: {' -> '.join(path)} -> {name}"
                )
            continue

        visited.add(name)
        segments.append((name, parent))
        here = len(segments) - 1

        children = [index[dep] for dep in dependency_names(current) if dep in index]
        # Reversed so the first declared dependency is explored first.
        for child in reversed(children):
            stack.append((child, here))

    return issues


def find_incompatibilities(
    module: ModuleDescriptor | Mapping[str, Any],
    candidates: Sequence[ModuleDescriptor | Mapping[str, Any]],
) -> list[str]:
    """Report every name in ``module``'s ``incompatible`` list present in ``candidates``."""
    data = _data_of(module)
    incompatible = data.get("incompatible") if isinstance(data, Mapping) else None
    if not isinstance(incompatible, (list, tuple)):
        return []

    present = {_name_of(candidate) for candidate in candidates}
    return [
        f"Module is incompatible with {name}"
        for name in incompatible
        if isinstance(name, str) and name in present
    ]


def find_category_conflicts(
    module: ModuleDescriptor | Mapping[str, Any],
    candidates: Sequence[ModuleDescriptor | Mapping[str, Any]],
    exclusive_categories: Iterable[str] = EXCLUSIVE_CATEGORIES,
) -> list[str]:
    """Report other candidates sharing ``module``'s category when that category is exclusive."""
    data = _data_of(module)
    category = data.get("category") if isinstance(data, Mapping) else None
    if not isinstance(category, str) or category not in set(exclusive_categories):
        return []

    own_name = _name_of(module)
    issues: list[str] = []
    for name, candidate in _index_by_name(candidates).items():
        if name == own_name:
            continue
        other = _data_of(candidate)
        if isinstance(other, Mapping) and other.get("category") == category:
            issues.append(f"Cannot use multiple {category} modules (conflicts with {name})")
    return issues


def check_compatibility(
    module: ModuleDescriptor | Mapping[str, Any],
    candidates: Sequence[ModuleDescriptor | Mapping[str, Any]],
) -> list[str]:
    """Cycle issues followed by incompatibility issues. Empty means no conflicts."""
    return find_cycles(module, candidates) + find_incompatibilities(module, candidates)


def resolve_install_order(
    modules: Sequence[ModuleDescriptor | Mapping[str, Any]],
) -> list[str]:
    """Resolve install order using Kahn's topological sort.

    Returns:
        Module names in dependency-first order.

    Raises:
        CircularDependencyError: If the selected modules depend on each other in a cycle.
    """
    if not modules:
        return []

    names = list(_index_by_name(modules))
    known = set(names)
    dep_map: dict[str, list[str]] = {}
    graph: dict[str, set[str]] = defaultdict(set)
    in_degree: dict[str, int] = {name: 0 for name in names}

    for name, module in _index_by_name(modules).items():
        deps: list[str] = []
        for dep in dependency_names(module):
            if dep not in known:
                logger.debug(
                    "Dependency '%s' of module '%s' is not selected, skipping", dep, name
                )
                continue
            if dep in deps:
                continue
            deps.append(dep)
            graph[dep].add(name)
            in_degree[name] += 1
        dep_map[name] = deps

    queue: deque[str] = deque(sorted(name for name in names if in_degree[name] == 0))

    order: list[str] = []
    while queue:
        name = queue.popleft()
        order.append(name)
        for dependent in sorted(graph.get(name, set())):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(order) < len(names):
        ordered = set(order)
        remaining = [name for name in names if name not in ordered]
        raise CircularDependencyError(cycle_path=_extract_cycle(dep_map, remaining))

    return order


def _extract_cycle(dep_map: dict[str, list[str]], remaining: list[str]) -> list[str]:
    """Follow edges among unresolved modules until one repeats."""
    pending = set(remaining)
    start = remaining[0]
    walked: list[str] = [start]
    current = start

    while True:
        nexts = [dep for dep in dep_map.get(current, []) if dep in pending]
        if not nexts:
            break
        nxt = nexts[0]
        if nxt in walked:
            idx = walked.index(nxt)
            return walked[idx:] + [nxt]
        walked.append(nxt)
        current = nxt

    return remaining + [start]
