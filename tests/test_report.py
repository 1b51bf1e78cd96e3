"""Tests for batch report aggregation."""

from __future__ import annotations

import pytest

from stackcheck.errors import EmptyBatchError
from stackcheck.module import ValidationResult
from stackcheck.report import BatchReport, aggregate


def _ok(warnings: int = 0) -> ValidationResult:
    return ValidationResult(valid=True, warnings=["w"] * warnings)


def _bad(errors: int = 1, warnings: int = 0) -> ValidationResult:
    return ValidationResult(valid=False, errors=["e"] * errors, warnings=["w"] * warnings)


class TestAggregate:
    def test_two_of_three(self) -> None:
        report = aggregate([_ok(), _ok(warnings=2), _bad(errors=3, warnings=1)])
        assert report == BatchReport(
            total=3, valid=2, invalid=1, warnings=3, errors=3, success_rate="66.7%"
        )

    def test_all_valid(self) -> None:
        assert aggregate([_ok(), _ok()]).success_rate == "100.0%"

    def test_none_valid(self) -> None:
        assert aggregate([_bad()]).success_rate == "0.0%"

    def test_one_decimal_rounding(self) -> None:
        assert aggregate([_ok(), _bad(), _bad()]).success_rate == "33.3%"

    @pytest.mark.parametrize(
        ("valid", "total", "expected"),
        [(1, 16, "6.3%"), (3, 16, "18.8%"), (1, 8, "12.5%"), (1, 32, "3.1%")],
    )
    def test_ties_round_half_up(self, valid: int, total: int, expected: str) -> None:
        results = [_ok()] * valid + [_bad()] * (total - valid)
        assert aggregate(results).success_rate == expected

    def test_empty_batch_raises(self) -> None:
        with pytest.raises(EmptyBatchError) as exc_info:
            aggregate([])
        assert exc_info.value.code == "EMPTY_BATCH"

    def test_to_dict(self) -> None:
        assert aggregate([_ok(), _bad()]).to_dict() == {
            "total": 2,
            "valid": 1,
            "invalid": 1,
            "warnings": 0,
            "errors": 1,
            "successRate": "50.0%",
        }


class TestValidationResult:
    def test_from_findings_derives_valid(self) -> None:
        assert ValidationResult.from_findings([], ["w"]).valid is True
        assert ValidationResult.from_findings(["e"], []).valid is False

    def test_from_findings_copies_lists(self) -> None:
        errors = ["e"]
        result = ValidationResult.from_findings(errors, [])
        errors.append("later")
        assert result.errors == ["e"]
