from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import DictionaryObject, NameObject, NumberObject, StreamObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PdfFactory = Callable[..., Path]


def _add_text_page(writer: PdfWriter, text: Optional[str]) -> None:
    page = writer.add_blank_page(width=200, height=200)
    if text is None:
        return
    font_dict = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
        }
    )
    font_ref = writer._add_object(font_dict)
    page[NameObject("/Resources")] = DictionaryObject(
        {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font_ref})}
    )
    content_bytes = f"BT /F1 12 Tf 20 100 Td ({text}) Tj ET".encode("utf-8")
    stream = StreamObject()
    stream[NameObject("/Length")] = NumberObject(len(content_bytes))
    stream._data = content_bytes
    page[NameObject("/Contents")] = writer._add_object(stream)


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> PdfFactory:
    """Build a PDF whose pages carry the given texts (``None`` for a page without text)."""

    def _create(
        filename: str,
        texts: Sequence[Optional[str]],
        *,
        metadata: Optional[dict[str, str]] = None,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None,
        algorithm: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for text in texts:
            _add_text_page(writer, text)
        if metadata:
            writer.add_metadata(metadata)
        if user_password is not None or owner_password is not None:
            writer.encrypt(
                user_password=user_password or "",
                owner_password=owner_password or user_password,
                algorithm=algorithm,
            )
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def three_page_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory(
        "three.pdf",
        ["Hello page one", "Hello page two", None],
        metadata={
            "/Title": "Test Document",
            "/Author": "Jane Doe",
            "/Subject": "Testing",
            "/Keywords": "pdf,text",
            "/Creator": "pytest",
            "/Producer": "pdf-text-tests",
            "/CreationDate": "D:20230501120000+01'00'",
            "/ModDate": "D:20230502130000Z",
        },
    )


@pytest.fixture()
def protected_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory("protected.pdf", ["Secret page one", "Secret page two"], user_password="secret")


@pytest.fixture()
def aes_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory(
        "aes.pdf",
        ["Sealed page one", "Sealed page two"],
        metadata={"/Title": "Sealed"},
        user_password="secret",
        algorithm="AES-256",
    )


@pytest.fixture()
def owner_only_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory("owner_only.pdf", ["Open page"], owner_password="owner")


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def not_a_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "notes.pdf"
    path.write_text("this is not a pdf document", encoding="utf-8")
    return path
