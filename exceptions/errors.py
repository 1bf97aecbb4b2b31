"""
Custom exception classes for task sheet extraction.

Missing or malformed fields are never errors. These exceptions cover
contract violations at the edges (bad input type, unreadable PDF,
strict callers rejecting a non task sheet).
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "PDF_PARSE_ERROR")
        message: Human-readable message
        status_code: HTTP-style status code for callers that expose one
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to error payload format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


# ===================
# TASK SHEET ERRORS
# ===================

class InvalidLineSequenceError(ValidationError):
    """Line sequence is missing or is not a sequence of strings."""

    def __init__(self, received_type: str, index: Optional[int] = None):
        details = {"received_type": received_type}
        if index is not None:
            details["index"] = index
        super().__init__(
            code="INVALID_LINE_SEQUENCE",
            message="Lines must be a sequence of strings",
            details=details
        )


class NotTaskSheetError(ValidationError):
    """Document is not a task sheet."""

    def __init__(self, labels_found: int, labels_required: int):
        super().__init__(
            code="NOT_TASK_SHEET",
            message="Document is not a recognized task sheet",
            details={
                "labels_found": labels_found,
                "labels_required": labels_required,
            }
        )


class PDFParseError(ValidationError):
    """PDF could not be read or contained no usable text."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="PDF_PARSE_ERROR",
            message=message,
            details=details
        )
