from __future__ import annotations

from pydantic import BaseModel, Field


class PdfDocument(BaseModel):
    """Everything read out of one PDF: header fields plus per-page text."""

    version: str
    info: dict[str, str] = Field(default_factory=dict)
    metadata: str | None = None
    page_count: int = 0
    pages: list[str] = Field(default_factory=list)
