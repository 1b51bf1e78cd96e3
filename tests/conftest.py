"""Shared fixtures for the stackcheck test suite."""

from __future__ import annotations

from typing import Any

import pytest

from descriptor_helpers import VueModule, make_data
from stackcheck.modules.types import ExecutableModule, PlainDescriptor
from stackcheck.validator import ModuleValidator


@pytest.fixture
def valid_data() -> dict[str, Any]:
    return make_data()


@pytest.fixture
def plain(valid_data: dict[str, Any]) -> PlainDescriptor:
    return PlainDescriptor(data=valid_data)


@pytest.fixture
def executable(valid_data: dict[str, Any]) -> ExecutableModule:
    return ExecutableModule(data=valid_data, implementation=VueModule())


@pytest.fixture
def validator() -> ModuleValidator:
    return ModuleValidator()
