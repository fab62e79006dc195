"""
Error taxonomy for the calculation core.

Every error carries a machine-readable ``code`` and the HTTP status the web layer
should answer with. The API turns them into ``{success: false, error, code}`` bodies.
"""

from typing import List, Optional


class CalculationError(Exception):
    """Base class for errors raised by the calculation services."""

    code = "CALCULATION_ERROR"
    status_code = 500

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationError(CalculationError):
    """Input failed a hard validation rule. Nothing was computed or stored."""

    code = "VALIDATION_FAILED"
    status_code = 400

    def __init__(
        self,
        errors: List[str],
        warnings: Optional[List[str]] = None,
        message: str = "Input validation failed",
        code: Optional[str] = None,
    ):
        super().__init__(message, code)
        self.errors = list(errors)
        self.warnings = list(warnings or [])


class DomainComputationError(CalculationError):
    """The caller asked for a computation its inputs cannot support."""

    code = "COMPUTATION_ERROR"
    status_code = 422


class MissingInputError(DomainComputationError):
    """A formula needs an input that was not supplied (e.g. body fat for Katch-McArdle)."""

    code = "MISSING_INPUT"


class UnknownCategoryError(CalculationError):
    """A category code has no entry in the classification table."""

    code = "UNKNOWN_CATEGORY"
    status_code = 500


class PersistenceError(CalculationError):
    """The record store failed. Raised by repositories, never interpreted by the core."""

    code = "PERSISTENCE_ERROR"
    status_code = 500


class RecordNotFoundError(CalculationError):
    """Record does not exist or belongs to another user."""

    code = "RECORD_NOT_FOUND"
    status_code = 404
