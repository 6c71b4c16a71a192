"""Request-level helpers and shared utilities for PDF Text.

Each helper opens the document, runs one operation against it and discards
the handle. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .backends.base import PDFBackend
from .config import DEFAULT_DATE_FORMAT
from .document import open_document
from .extraction import extract_page_text, extract_pages_text
from .metadata import read_metadata
from .types import DocumentMetadata

PathLike = Union[str, Path]


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def init_doc(
    path: PathLike,
    password: str = "",
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
    backend: Optional[PDFBackend] = None,
) -> DocumentMetadata:
    """Return the page count and descriptive attributes of the PDF at ``path``."""
    with open_document(path, password, backend=backend) as document:
        return read_metadata(document, date_format)


def get_doc_page_text(
    path: PathLike,
    password: str,
    number: int,
    *,
    backend: Optional[PDFBackend] = None,
) -> str:
    """Return the text of the 1-based page ``number``."""
    with open_document(path, password, backend=backend) as document:
        return extract_page_text(document, number)


def get_doc_text(
    path: PathLike,
    password: str,
    missing_pages_numbers: Sequence[int],
    *,
    backend: Optional[PDFBackend] = None,
) -> List[str]:
    """Return texts for the requested pages, empty for pages that do not exist."""
    with open_document(path, password, backend=backend) as document:
        return extract_pages_text(document, missing_pages_numbers)


def parse_page_numbers(value: str) -> List[int]:
    """Parse a comma separated list of 1-based page numbers, keeping order and repeats."""
    items = [item.strip() for item in value.split(",") if item.strip()]
    try:
        return [int(item) for item in items]
    except ValueError as exc:
        raise ValueError(f"Page numbers must be integers: {value!r}") from exc
