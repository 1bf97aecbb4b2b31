"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,

    # Task sheet
    InvalidLineSequenceError,
    NotTaskSheetError,

    # PDF adapter
    PDFParseError,
)

__all__ = [
    "AppError",
    "ValidationError",
    "InvalidLineSequenceError",
    "NotTaskSheetError",
    "PDFParseError",
]
