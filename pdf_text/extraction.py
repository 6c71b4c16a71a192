"""Page text extraction helpers."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .document import PdfTextDocument
from .exceptions import PageNotFoundError

LOGGER = logging.getLogger(__name__)


def extract_page_text(document: PdfTextDocument, page_number: int) -> str:
    """Return the text of the 1-based ``page_number``.

    Pages without a text layer give an empty string.

    Raises:
        PageNotFoundError: ``page_number`` is outside ``1..page_count``.
    """
    page = document.get_page(page_number - 1)
    if page is None:
        raise PageNotFoundError(page_number)
    LOGGER.debug("Extracting text from page %d of %s", page_number, document.path)
    return document.page_text(page)


def extract_pages_text(document: PdfTextDocument, page_numbers: Iterable[int]) -> List[str]:
    """Return texts for ``page_numbers`` in request order.

    Pages that do not exist contribute an empty string instead of failing the
    whole call. Repeated numbers are returned repeatedly.
    """
    texts: List[str] = []
    for page_number in page_numbers:
        try:
            texts.append(extract_page_text(document, page_number))
        except PageNotFoundError:
            LOGGER.debug("Page %d not found in %s, returning empty text", page_number, document.path)
            texts.append("")
    return texts


__all__ = ["extract_page_text", "extract_pages_text"]
