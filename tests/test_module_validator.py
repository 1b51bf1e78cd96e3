"""Tests for ModuleValidator, the per-module and cross-module entry point."""

from __future__ import annotations

import logging
import threading
from typing import Any

import pytest

from descriptor_helpers import BrokenTemplatesModule, TemplateModule, VueModule, make_data
from stackcheck.config import Config
from stackcheck.errors import ModuleValidationError
from stackcheck.modules.types import ExecutableModule, PlainDescriptor
from stackcheck.validator import ModuleValidator


class _BadSchemaModule(VueModule):
    def get_config_schema(self) -> Any:
        return {"type": "no-such-type"}


class _NoAccessors:
    pass


class TestValidate:
    def test_valid_plain(self, validator: ModuleValidator, plain: PlainDescriptor) -> None:
        result = validator.validate(plain)
        assert result.valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_valid_executable(
        self, validator: ModuleValidator, executable: ExecutableModule
    ) -> None:
        result = validator.validate(executable)
        assert result.valid is True
        assert result.errors == []

    @pytest.mark.parametrize("field", ["name", "version", "description", "category"])
    def test_missing_required_field(self, validator: ModuleValidator, field: str) -> None:
        data = make_data()
        del data[field]
        result = validator.validate(PlainDescriptor(data=data))
        assert result.valid is False
        assert any(field in error for error in result.errors)

    def test_bad_name_invalid(self, validator: ModuleValidator) -> None:
        result = validator.validate(PlainDescriptor(data=make_data(name="My Module")))
        assert result.valid is False
        assert any(error.startswith("name: ") for error in result.errors)

    def test_bad_version_invalid(self, validator: ModuleValidator) -> None:
        result = validator.validate(PlainDescriptor(data=make_data(version="1.2")))
        assert result.valid is False
        assert any(error.startswith("version: ") for error in result.errors)

    def test_bad_version_spec_is_only_a_warning(self, validator: ModuleValidator) -> None:
        data = make_data(dependencies={"vue": "^3.0.0", "pinia": "latest"})
        result = validator.validate(PlainDescriptor(data=data))
        assert result.valid is True
        assert result.warnings == ["Invalid version specification for dependency pinia: latest"]

    def test_eval_template_invalid(self, validator: ModuleValidator) -> None:
        module = ExecutableModule(
            data=make_data(),
            implementation=TemplateModule({"malicious.js": {"content": "eval(userInput)"}}),
        )
        result = validator.validate(module)
        assert result.valid is False
        assert result.errors == ["Potentially dangerous pattern found in template malicious.js"]

    def test_suspicious_name_invalid(self, validator: ModuleValidator) -> None:
        result = validator.validate(PlainDescriptor(data=make_data(name="backdoor-auth")))
        assert result.valid is False
        assert result.errors == ["Module name 'backdoor-auth' contains suspicious keywords"]

    def test_missing_methods_only_for_executable(self, validator: ModuleValidator) -> None:
        module = ExecutableModule(data=make_data(), implementation=_NoAccessors())
        result = validator.validate(module)
        assert result.valid is False
        assert result.errors == [
            "Missing required method: get_name",
            "Missing required method: get_description",
            "Missing required method: get_file_templates",
        ]
        assert validator.validate(PlainDescriptor(data=make_data())).valid is True

    def test_invalid_config_schema_warns(self, validator: ModuleValidator) -> None:
        result = validator.validate(ExecutableModule(data=make_data(), implementation=_BadSchemaModule()))
        assert result.valid is True
        assert result.warnings == ["Module configuration schema is invalid"]

    def test_template_accessor_failure_does_not_crash(self, validator: ModuleValidator) -> None:
        module = ExecutableModule(data=make_data(), implementation=BrokenTemplatesModule())
        result = validator.validate(module)
        assert result.valid is True
        assert result.errors == []

    def test_stage_order(self, validator: ModuleValidator) -> None:
        module = ExecutableModule(
            data={"name": "exec-tool", "version": "1.0"},
            implementation=TemplateModule({"a.js": "eval(x)"}),
        )
        errors = validator.validate(module).errors
        schema_errors = [e for e in errors if e.split(":", 1)[0] in {"version", "description", "category"}]
        assert errors[: len(schema_errors)] == schema_errors
        assert errors[-2:] == [
            "Potentially dangerous pattern found in template a.js",
            "Module name 'exec-tool' contains suspicious keywords",
        ]

    def test_non_mapping_data(self, validator: ModuleValidator) -> None:
        result = validator.validate(PlainDescriptor(data="not a descriptor"))
        assert result.valid is False
        assert result.errors[0].startswith("root: ")

    def test_valid_flag_matches_errors(self, validator: ModuleValidator) -> None:
        for data in (make_data(), {}, make_data(name="cmd"), make_data(tags="x")):
            result = validator.validate(PlainDescriptor(data=data))
            assert result.valid == (not result.errors)

    def test_idempotent(self, validator: ModuleValidator) -> None:
        descriptor = PlainDescriptor(
            data=make_data(name="Bad Name", dependencies={"vue": "next"})
        )
        assert validator.validate(descriptor) == validator.validate(descriptor)

    def test_shared_across_threads(self, validator: ModuleValidator) -> None:
        descriptors = [
            PlainDescriptor(data=make_data()),
            PlainDescriptor(data=make_data(version="1.2")),
        ] * 20
        expected = [validator.validate(d) for d in descriptors]
        results: list[Any] = [None] * len(descriptors)

        def work(i: int) -> None:
            results[i] = validator.validate(descriptors[i])

        threads = [threading.Thread(target=work, args=(i,)) for i in range(len(descriptors))]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == expected


class TestConfigured:
    def test_custom_suspicious_names(self) -> None:
        validator = ModuleValidator(Config({"security": {"suspicious_names": ["miner"]}}))
        assert validator.validate(PlainDescriptor(data=make_data(name="shell"))).valid is True
        assert validator.validate(PlainDescriptor(data=make_data(name="miner"))).valid is False

    def test_peer_check_disabled(self) -> None:
        validator = ModuleValidator(Config({"dependencies": {"check_peer": False}}))
        data = make_data(peerDependencies={"vue": "next"})
        assert validator.validate(PlainDescriptor(data=data)).warnings == []

    def test_template_scan_disabled(self) -> None:
        validator = ModuleValidator(Config({"security": {"scan_templates": False}}))
        module = ExecutableModule(data=make_data(), implementation=TemplateModule({"a.js": "eval(1)"}))
        assert validator.validate(module).valid is True


class TestValidateAll:
    def test_keyed_by_name(self, validator: ModuleValidator) -> None:
        results = validator.validate_all(
            [
                PlainDescriptor(data=make_data(name="vue-base")),
                PlainDescriptor(data=make_data(name="vuetify", version="3")),
            ]
        )
        assert list(results) == ["vue-base", "vuetify"]
        assert results["vue-base"].valid is True
        assert results["vuetify"].valid is False

    def test_invalid_modules_logged(
        self, validator: ModuleValidator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="stackcheck.validator"):
            validator.validate_all([PlainDescriptor(data=make_data(name="vuetify", version="3"))])
        assert "Validation issues for vuetify" in caplog.text
        assert "version: " in caplog.text

    def test_unnamed_and_duplicate_modules(self, validator: ModuleValidator) -> None:
        results = validator.validate_all(
            [
                PlainDescriptor(data={}),
                PlainDescriptor(data=make_data()),
                PlainDescriptor(data=make_data()),
            ]
        )
        assert list(results) == ["#0", "vue-base", "vue-base#2"]


class TestValidateCompatibility:
    def test_cycle(self, validator: ModuleValidator) -> None:
        a = PlainDescriptor(data={"name": "A", "dependencies": ["B"]})
        b = PlainDescriptor(data={"name": "B", "dependencies": ["A"]})
        issues = validator.validate_compatibility(a, [a, b])
        assert any("A -> B -> A" in issue for issue in issues)

    def test_incompatible(self, validator: ModuleValidator) -> None:
        x = PlainDescriptor(data={"name": "X", "incompatible": ["Y"]})
        y = PlainDescriptor(data={"name": "Y"})
        assert validator.validate_compatibility(x, [x, y]) == ["Module is incompatible with Y"]

    def test_selection_adds_category_conflicts(self, validator: ModuleValidator) -> None:
        x = PlainDescriptor(data={"name": "X", "category": "frontend-framework", "incompatible": ["Y"]})
        y = PlainDescriptor(data={"name": "Y", "category": "frontend-framework"})
        assert validator.validate_selection(x, [x, y]) == [
            "Module is incompatible with Y",
            "Cannot use multiple frontend-framework modules (conflicts with Y)",
        ]

    def test_selection_categories_from_config(self) -> None:
        validator = ModuleValidator(Config({"compatibility": {"exclusive_categories": []}}))
        x = PlainDescriptor(data={"name": "X", "category": "frontend-framework"})
        y = PlainDescriptor(data={"name": "Y", "category": "frontend-framework"})
        assert validator.validate_selection(x, [x, y]) == []


class TestRaiseForErrors:
    def test_invalid_result_raises(self, validator: ModuleValidator) -> None:
        result = validator.validate(PlainDescriptor(data=make_data(version="1.2")))
        with pytest.raises(ModuleValidationError) as exc_info:
            result.raise_for_errors("vue-base")
        assert exc_info.value.errors == result.errors
        assert "vue-base" in str(exc_info.value)

    def test_valid_result_does_not_raise(self, validator: ModuleValidator, plain: PlainDescriptor) -> None:
        validator.validate(plain).raise_for_errors()
