"""
PDF Text - Password-aware PDF inspection and page text extraction.

Every call opens the document afresh, unlocks it with the supplied password,
runs a single read-only operation and discards the document again.

Quick Start:
    >>> from pdf_text import init_doc, get_doc_page_text, get_doc_text
    >>> init_doc('input.pdf').page_count
    3
    >>> get_doc_text('input.pdf', '', [1, 5, 2])
    ['first page', '', 'second page']

Main Classes:
    - PdfTextDocument: An opened and unlocked document
    - PdfTextChannel: Dispatches method calls to background workers

Exceptions:
    - PdfTextException: Base exception
    - InvalidArgumentsError: Malformed request
    - InvalidPathError: Missing or unparseable PDF
    - InvalidPasswordError: Password does not unlock the PDF
    - PageNotFoundError: Page number outside the document

For CLI usage, use the 'pdf-text' command after installation.
"""

__version__ = "1.0.0"

# Core operations
from pdf_text.document import PdfTextDocument, open_document
from pdf_text.metadata import read_metadata
from pdf_text.extraction import extract_page_text, extract_pages_text

# Data types
from pdf_text.config import ChannelConfig
from pdf_text.types import DocumentInfo, DocumentMetadata

# Exceptions
from pdf_text.exceptions import (
    PdfTextException,
    InvalidArgumentsError,
    InvalidPathError,
    InvalidPasswordError,
    PageNotFoundError,
)

# Request helpers
from pdf_text.utils import init_doc, get_doc_page_text, get_doc_text

# Method channel
from pdf_text.channel import MethodNotImplementedError, MethodResult, PdfTextChannel

__all__ = [
    # Core operations
    "PdfTextDocument",
    "open_document",
    "read_metadata",
    "extract_page_text",
    "extract_pages_text",
    # Data types
    "ChannelConfig",
    "DocumentInfo",
    "DocumentMetadata",
    # Exceptions
    "PdfTextException",
    "InvalidArgumentsError",
    "InvalidPathError",
    "InvalidPasswordError",
    "PageNotFoundError",
    # Request helpers
    "init_doc",
    "get_doc_page_text",
    "get_doc_text",
    # Method channel
    "MethodNotImplementedError",
    "MethodResult",
    "PdfTextChannel",
    # Version info
    "__version__",
]
