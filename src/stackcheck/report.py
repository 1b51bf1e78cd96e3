"""Batch summaries of validation results."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from stackcheck.errors import EmptyBatchError
from stackcheck.module import ValidationResult

__all__ = ["BatchReport", "aggregate"]


@dataclass(frozen=True)
class BatchReport:
    """Totals over a batch of validation results.

    Attributes:
        total: Number of results.
        valid: Results with ``valid=True``.
        invalid: Results with ``valid=False``.
        warnings: Sum of warning counts.
        errors: Sum of error counts.
        success_rate: ``valid / total`` as a percentage with one decimal, e.g. ``"66.7%"``.
    """

    total: int
    valid: int
    invalid: int
    warnings: int
    errors: int
    success_rate: str

    def to_dict(self) -> dict[str, Any]:
        """Render with the camelCase keys display layers expect."""
        return {
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "warnings": self.warnings,
            "errors": self.errors,
            "successRate": self.success_rate,
        }


def aggregate(results: Sequence[ValidationResult]) -> BatchReport:
    """Summarize ``results``.

    Raises:
        EmptyBatchError: If ``results`` is empty; there is no success rate to report.
    """
    total = len(results)
    if total == 0:
        raise EmptyBatchError()

    valid = sum(1 for r in results if r.valid)
    return BatchReport(
        total=total,
        valid=valid,
        invalid=total - valid,
        warnings=sum(len(r.warnings) for r in results),
        errors=sum(len(r.errors) for r in results),
        success_rate=f"{_percent(valid, total)}%",
    )


def _percent(part: int, whole: int) -> Decimal:
    # Ties round up: 1 of 16 is 6.3%.
    return Decimal(part / whole * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
