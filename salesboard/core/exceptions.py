"""Custom exception hierarchy for Salesboard.

Error codes follow pattern: [CATEGORY][NUMBER]
- RPT: Report/aggregation input errors (100-199)
- DEP: Department errors (200-299)
- REC: Generic record errors (300-399)

Aggregation code never raises for malformed row data (amounts are coerced,
ratios short-circuit to 0). These exceptions are reserved for invalid caller
input and for persistence-level invariants.
"""

from __future__ import annotations

from typing import Any


class SalesboardException(Exception):
    """Base exception for all Salesboard application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with a readable message and metadata.

        Args:
            message: Human readable error message
            code: Unique error code (e.g., "RPT100")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# REPORT ERRORS (RPT100-199)
# ============================================================================

class ReportError(SalesboardException):
    """Base class for report/aggregation errors."""
    pass


class InvalidArgumentError(ReportError, ValueError):
    """A year, month or series passed to an aggregator is unusable."""

    def __init__(self, argument: str, value: Any, reason: str | None = None):
        message = f"Invalid {argument}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            code="RPT100",
            status_code=400,
            details={"argument": argument, "value": str(value), "reason": reason},
        )


# ============================================================================
# DEPARTMENT ERRORS (DEP200-299)
# ============================================================================

class DepartmentError(SalesboardException):
    """Base class for department errors."""
    pass


class DepartmentNotFoundError(DepartmentError):
    """Department does not exist."""

    def __init__(self, department_id: int | None = None):
        message = "Department not found" if department_id is None else f"Department {department_id} not found"
        super().__init__(
            message=message,
            code="DEP200",
            status_code=404,
            details={"department_id": department_id} if department_id is not None else {},
        )


class DepartmentInUseError(DepartmentError):
    """Department still has sales recorded against it."""

    def __init__(self, department_id: int, sale_count: int):
        super().__init__(
            message=f"Department {department_id} has {sale_count} sales and cannot be deleted",
            code="DEP201",
            status_code=409,
            details={"department_id": department_id, "sale_count": sale_count},
        )


class DuplicateDepartmentError(DepartmentError):
    """Department name is already taken."""

    def __init__(self, name: str):
        super().__init__(
            message=f"A department named '{name}' already exists",
            code="DEP202",
            status_code=409,
            details={"name": name},
        )


# ============================================================================
# RECORD ERRORS (REC300-399)
# ============================================================================

class RecordNotFoundError(SalesboardException):
    """Sale, expense, target or projection row does not exist."""

    def __init__(self, kind: str, record_id: int):
        super().__init__(
            message=f"{kind} {record_id} not found",
            code="REC300",
            status_code=404,
            details={"kind": kind, "id": record_id},
        )
