"""Opening PDF documents for a single request."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .backends import BackendDocument, PypdfBackend
from .backends.base import PDFBackend
from .exceptions import InvalidPathError

LOGGER = logging.getLogger(__name__)


class PdfTextDocument:
    """An opened and unlocked PDF owned by exactly one request.

    Instances are produced by :func:`open_document` only, after the password
    check has passed. Use it as a context manager so the in-memory copy of
    the file is released once the request completes.
    """

    def __init__(self, path: Path, document: BackendDocument) -> None:
        self.path = path
        self._document = document

    @property
    def page_count(self) -> int:
        return self._document.num_pages

    @property
    def file_size(self) -> int:
        return self._document.file_size

    def get_page(self, index: int) -> Optional[Any]:
        return self._document.get_page(index)

    def page_text(self, page: Any) -> str:
        return self._document.page_text(page)

    def info(self) -> Dict[str, str]:
        return dict(self._document.info())

    def close(self) -> None:
        self._document.close()

    def __enter__(self) -> "PdfTextDocument":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"PdfTextDocument(path={str(self.path)!r}, pages={self.page_count})"


def open_document(
    path: Union[str, Path],
    password: str = "",
    *,
    backend: Optional[PDFBackend] = None,
) -> PdfTextDocument:
    """Open ``path`` and unlock it with ``password``.

    Raises:
        InvalidPathError: The path is missing, not a file, or not a parseable PDF.
        InvalidPasswordError: The document is encrypted and ``password`` does not unlock it.
    """
    try:
        resolved = Path(path).expanduser().resolve()
    except (OSError, ValueError) as exc:
        raise InvalidPathError(f"File path is invalid: {path!r}. Error: {exc}") from exc
    backend = backend or PypdfBackend()
    document = backend.load(str(resolved), password=password)
    LOGGER.info("Opened %s (%d pages)", resolved, document.num_pages)
    return PdfTextDocument(resolved, document)


__all__ = ["PdfTextDocument", "open_document"]
