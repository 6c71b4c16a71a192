"""Runtime settings for the PDF Text channel."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_DATE_FORMAT = "%Y-%m-%d %I:%M:%S"


@dataclass(frozen=True)
class ChannelConfig:
    """Settings shared by every request handled by a :class:`PdfTextChannel`."""

    max_workers: int = 4
    date_format: str = DEFAULT_DATE_FORMAT
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    def with_updates(self, **updates: object) -> "ChannelConfig":
        return replace(self, **{k: v for k, v in updates.items() if v is not None})
