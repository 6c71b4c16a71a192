"""Backend protocol for read-only PDF access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass
class BackendDocument:
    """Represents an opened, unlocked PDF document with backend-specific helpers."""

    num_pages: int
    file_size: int

    def get_page(self, index: int) -> object | None:
        """Return the page at the 0-based ``index`` or ``None`` when absent."""
        raise NotImplementedError

    def page_text(self, page: object) -> str:
        raise NotImplementedError

    def info(self) -> Mapping[str, str]:
        """Return the raw document information dictionary keyed without ``/``."""
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining how a backend opens and unlocks a PDF file."""

    def load(self, pdf_path: str, password: str = "") -> BackendDocument:
        """Load and unlock a PDF file and return a backend document wrapper."""
