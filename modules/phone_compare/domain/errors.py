from __future__ import annotations


class ComparisonError(ValueError):
    code = "comparison_failed"

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingOperandError(ComparisonError):
    code = "missing_operand"


class SelfComparisonError(ComparisonError):
    code = "self_comparison"


class InsufficientOperandsError(ComparisonError):
    code = "insufficient_operands"


class PhoneNotFoundError(ComparisonError):
    code = "phone_not_found"


class CatalogUnavailableError(ComparisonError):
    code = "catalog_unavailable"
