"""
Custom exceptions for PDF Text.

Every error carries a stable ``code`` alongside its human readable message so
that transports can report ``{code, message}`` pairs verbatim.
"""

from __future__ import annotations

from typing import Dict


class PdfTextException(Exception):
    """Base exception for all PDF Text errors."""

    code = "PDF_TEXT_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF text error occurred."

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "message": self.message}


class InvalidArgumentsError(PdfTextException):
    """Raised when a request is missing required fields or has the wrong shape."""

    code = "INVALID_ARGUMENTS"

    @property
    def default_message(self) -> str:
        return "Invalid method arguments"


class InvalidPathError(PdfTextException):
    """Raised when a path does not point to a readable, parseable PDF."""

    code = "INVALID_PATH"

    @property
    def default_message(self) -> str:
        return "File path is invalid"


class InvalidPasswordError(PdfTextException):
    """Raised when the supplied password does not unlock the document."""

    code = "INVALID_PASSWORD"

    @property
    def default_message(self) -> str:
        return "The password is invalid"


class PageNotFoundError(PdfTextException):
    """Raised when a requested page number does not exist in the document."""

    code = "PAGE_NOT_FOUND"

    def __init__(self, page_number: int, message: str = "") -> None:
        self.page_number = page_number
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return f"Page not found at index {self.page_number}"
