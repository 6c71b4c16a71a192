from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from pdf_text.document import open_document
from pdf_text.metadata import build_document_info, format_pdf_date, parse_pdf_date, read_metadata
from pdf_text.types import DocumentInfo, DocumentMetadata
from pdf_text.utils import init_doc

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


def _local(value: datetime) -> str:
    return value.astimezone().strftime("%Y-%m-%d %I:%M:%S")


def test_read_metadata(three_page_pdf: Path) -> None:
    with open_document(three_page_pdf, "") as document:
        metadata = read_metadata(document)

    assert isinstance(metadata, DocumentMetadata)
    assert metadata.page_count == 3
    info = metadata.info
    assert info.title == "Test Document"
    assert info.author == "Jane Doe"
    assert info.subject == "Testing"
    assert info.keywords == "pdf,text"
    assert info.creator == "pytest"
    assert info.producer == "pdf-text-tests"
    assert info.creation_date == _local(datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=1))))
    assert info.modification_date == _local(datetime(2023, 5, 2, 13, 0, 0, tzinfo=timezone.utc))
    assert DATE_PATTERN.match(info.creation_date)


def test_missing_dates_are_absent(pdf_factory) -> None:
    path = pdf_factory("plain.pdf", ["Only text"], metadata={"/Title": "Plain"})

    metadata = init_doc(path)

    assert metadata.page_count == 1
    assert metadata.info.title == "Plain"
    assert metadata.info.creation_date is None
    assert metadata.info.modification_date is None
    assert metadata.info.author is None


def test_unparsable_date_is_absent(pdf_factory) -> None:
    path = pdf_factory("bad_date.pdf", [None], metadata={"/CreationDate": "yesterday", "/Author": "Someone"})

    info = init_doc(path).info

    assert info.creation_date is None
    assert info.author == "Someone"


def test_metadata_of_protected_document(pdf_factory) -> None:
    path = pdf_factory("locked.pdf", ["x"], metadata={"/Title": "Locked"}, user_password="pw")

    metadata = init_doc(path, "pw")

    assert metadata.page_count == 1
    assert metadata.info.title == "Locked"


def test_to_dict_wire_shape(three_page_pdf: Path) -> None:
    payload = init_doc(three_page_pdf).to_dict()

    assert payload["length"] == 3
    assert set(payload["info"]) == {
        "author",
        "creationDate",
        "modificationDate",
        "creator",
        "producer",
        "keywords",
        "title",
        "subject",
    }
    assert payload["info"]["title"] == "Test Document"


def test_init_doc_is_idempotent(three_page_pdf: Path) -> None:
    assert init_doc(three_page_pdf) == init_doc(three_page_pdf)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("D:20230501120000+01'00'", datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=1)))),
        ("D:20230501120000-05'30", datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone(-timedelta(hours=5, minutes=30)))),
        ("D:20230501120000Z", datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc)),
        ("20230501", datetime(2023, 5, 1, tzinfo=timezone.utc)),
        ("D:2023", datetime(2023, 1, 1, tzinfo=timezone.utc)),
    ],
)
def test_parse_pdf_date(raw: str, expected: datetime) -> None:
    assert parse_pdf_date(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "D:", "not a date", "D:20231399000000", "D:202"])
def test_parse_pdf_date_rejects_invalid_values(raw) -> None:
    assert parse_pdf_date(raw) is None


def test_format_pdf_date_uses_twelve_hour_clock() -> None:
    formatted = format_pdf_date("D:20230501230000Z")
    expected = datetime(2023, 5, 1, 23, 0, 0, tzinfo=timezone.utc).astimezone()

    assert formatted == expected.strftime("%Y-%m-%d %I:%M:%S")
    assert DATE_PATTERN.match(formatted)


def test_format_pdf_date_custom_format() -> None:
    assert format_pdf_date("D:20230615120000Z", "%Y") == "2023"
    assert format_pdf_date(None) is None


def test_build_document_info_fields_are_independent() -> None:
    info = build_document_info({"Producer": "pypdf", "ModDate": "garbage"})

    assert info == DocumentInfo(producer="pypdf")


@pytest.mark.parametrize("raw", ["D:99991231230000-05'00'", "D:00010101000000+05'00'"])
def test_format_pdf_date_outside_calendar_is_absent(raw: str) -> None:
    assert format_pdf_date(raw) is None


def test_out_of_range_date_keeps_other_fields(pdf_factory) -> None:
    path = pdf_factory(
        "edge_date.pdf",
        [None],
        metadata={"/CreationDate": "D:99991231230000-05'00'", "/Author": "Someone"},
    )

    info = init_doc(path).info

    assert info.creation_date is None
    assert info.author == "Someone"
