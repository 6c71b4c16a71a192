"""
Type definitions and dataclasses for PDF Text.

This module defines the values returned to callers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DocumentInfo:
    """
    Descriptive attributes of a PDF document.

    Every field is independently optional; most producers omit some of them.

    Attributes:
        author: Document author
        creation_date: Creation date formatted as ``yyyy-MM-dd hh:mm:ss``
        modification_date: Modification date formatted as ``yyyy-MM-dd hh:mm:ss``
        creator: Application that created the original document
        producer: Application that produced the PDF
        keywords: Keywords entry
        title: Document title
        subject: Document subject
    """
    author: Optional[str] = None
    creation_date: Optional[str] = None
    modification_date: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    keywords: Optional[str] = None
    title: Optional[str] = None
    subject: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "author": self.author,
            "creationDate": self.creation_date,
            "modificationDate": self.modification_date,
            "creator": self.creator,
            "producer": self.producer,
            "keywords": self.keywords,
            "title": self.title,
            "subject": self.subject,
        }


@dataclass(frozen=True)
class DocumentMetadata:
    """
    Page count and descriptive attributes of a PDF document.

    Attributes:
        page_count: Total number of pages, including pages without text
        info: Descriptive attributes
    """
    page_count: int
    info: DocumentInfo = field(default_factory=DocumentInfo)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation used by the ``initDoc`` method."""
        return {"length": self.page_count, "info": self.info.to_dict()}
