"""pypdf backend implementation for PDF Text."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from pypdf import PageObject, PasswordType, PdfReader
from pypdf.errors import DependencyError, PdfReadError

from ..exceptions import InvalidPasswordError, InvalidPathError
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger(__name__)


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader
    stream: io.BytesIO

    def get_page(self, index: int) -> PageObject | None:
        if index < 0 or index >= self.num_pages:
            return None
        return self.reader.pages[index]

    def page_text(self, page: PageObject) -> str:
        try:
            return page.extract_text() or ""
        except PdfReadError as exc:
            LOGGER.warning("Unable to extract text from page: %s", exc)
            return ""

    def info(self) -> Dict[str, str]:
        try:
            metadata = self.reader.metadata
        except Exception as exc:  # pragma: no cover - broken trailers
            LOGGER.warning("Unable to read document information: %s", exc)
            return {}
        if not metadata:
            return {}

        cleaned: Dict[str, str] = {}
        for key, value in metadata.items():
            if hasattr(value, "get_object"):
                value = value.get_object()
            if value is None:
                continue
            normalized_key = key[1:] if key.startswith("/") else key
            cleaned[normalized_key] = str(value)
        return cleaned

    def close(self) -> None:
        self.stream.close()


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str, password: str = "") -> PypdfDocument:
        path = Path(pdf_path).expanduser()
        if not path.exists() or not path.is_file():
            raise InvalidPathError(f"File path is invalid: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPathError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        stream = io.BytesIO(raw_bytes)
        try:
            reader = PdfReader(stream)
        except DependencyError as exc:
            raise InvalidPasswordError(f"Unable to decrypt PDF: {exc}") from exc
        except PdfReadError as exc:
            raise InvalidPathError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPathError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            try:
                status = reader.decrypt(password)
            except (DependencyError, PdfReadError, ValueError) as exc:
                raise InvalidPasswordError(f"Unable to decrypt PDF: {exc}") from exc
            if status == PasswordType.NOT_DECRYPTED:
                raise InvalidPasswordError("The password is invalid")

        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise InvalidPathError(f"Unable to read the page tree of {pdf_path}. Error: {exc}") from exc

        return PypdfDocument(
            num_pages=num_pages,
            file_size=len(raw_bytes),
            reader=reader,
            stream=stream,
        )
