"""Metadata extraction for opened PDF documents."""
from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional

from .config import DEFAULT_DATE_FORMAT
from .document import PdfTextDocument
from .types import DocumentInfo, DocumentMetadata

LOGGER = logging.getLogger(__name__)

_DATE_FORMATS = {
    4: "%Y",
    6: "%Y%m",
    8: "%Y%m%d",
    10: "%Y%m%d%H",
    12: "%Y%m%d%H%M",
    14: "%Y%m%d%H%M%S",
}
_DATE_DIGITS = re.compile(r"\d+")


def parse_pdf_date(raw: str | None) -> datetime | None:
    """Parse a PDF date string into a timezone-aware :class:`datetime`.

    Dates without an offset are taken as UTC. Returns ``None`` for anything
    that is not a PDF date.
    """
    if not raw:
        return None
    text = raw.strip()
    if text.startswith("D:"):
        text = text[2:]
    match = _DATE_DIGITS.match(text)
    if match is None:
        return None
    digits = match.group()[:14]
    fmt = _DATE_FORMATS.get(len(digits))
    if fmt is None:
        return None
    try:
        base = datetime.strptime(digits, fmt)
    except ValueError:
        return None

    offset = text[len(digits):]
    tz_sign = offset[:1]
    if tz_sign in {"+", "-"}:
        parts = re.findall(r"\d{1,2}", offset[1:])
        try:
            hours = int(parts[0]) if parts else 0
            minutes = int(parts[1]) if len(parts) > 1 else 0
            delta = timedelta(hours=hours, minutes=minutes)
            if tz_sign == "-":
                delta = -delta
            tz = timezone(delta)
        except ValueError:
            tz = timezone.utc
    else:
        tz = timezone.utc
    return base.replace(tzinfo=tz)


def format_pdf_date(raw: str | None, date_format: str = DEFAULT_DATE_FORMAT) -> Optional[str]:
    """Format a raw PDF date in local time, or return ``None`` when it cannot be parsed."""
    parsed = parse_pdf_date(raw)
    if parsed is None:
        if raw:
            LOGGER.debug("Ignoring unparsable PDF date %r", raw)
        return None
    try:
        return parsed.astimezone().strftime(date_format)
    except (OverflowError, ValueError):
        LOGGER.debug("PDF date %r is outside the supported range", raw)
        return None


def build_document_info(raw: Mapping[str, str], date_format: str = DEFAULT_DATE_FORMAT) -> DocumentInfo:
    return DocumentInfo(
        author=raw.get("Author"),
        creation_date=format_pdf_date(raw.get("CreationDate"), date_format),
        modification_date=format_pdf_date(raw.get("ModDate"), date_format),
        creator=raw.get("Creator"),
        producer=raw.get("Producer"),
        keywords=raw.get("Keywords"),
        title=raw.get("Title"),
        subject=raw.get("Subject"),
    )


def read_metadata(document: PdfTextDocument, date_format: str = DEFAULT_DATE_FORMAT) -> DocumentMetadata:
    """Read the page count and descriptive attributes of ``document``.

    Missing attributes, and dates that cannot be parsed, are reported as
    ``None``; this function does not raise for incomplete metadata.
    """
    return DocumentMetadata(
        page_count=document.page_count,
        info=build_document_info(document.info(), date_format),
    )
