from __future__ import annotations

import logging
from pathlib import Path

import fitz

from core.extract.base import ExtractionError, Extractor
from core.extract.models import PdfDocument

log = logging.getLogger(__name__)

# Standard Info dictionary entries as PyMuPDF names them in doc.metadata.
INFO_KEYS = (
    "title",
    "author",
    "subject",
    "keywords",
    "creator",
    "producer",
    "creationDate",
    "modDate",
    "trapped",
)


def _pdf_version(fmt: str | None) -> str:
    """'PDF 1.7' -> '1.7'."""
    if not fmt:
        return ""
    return fmt.split(" ", 1)[1] if fmt.startswith("PDF ") else fmt


def _single_line(value: str) -> str:
    return " ".join(line.strip() for line in value.splitlines() if line.strip())


def render_text(document: PdfDocument) -> str:
    """Header lines (version, info, metadata, page count) followed by non-blank page texts."""
    parts = [
        f"PDF_VERSION: {document.version}\n",
        f"PDF_INFO: {document.info}\n",
        f"PDF_METADATA: {_single_line(document.metadata or '')}\n",
        f"PDF_PAGE_COUNT: {document.page_count}\n",
    ]
    parts.extend(text for text in document.pages if text.strip())
    return "".join(parts)


class PyMuPDFExtractor(Extractor):
    """Byte-level text extraction via PyMuPDF, prefixed with the document's metadata."""

    suffixes = (".pdf",)

    def read(self, path: str | Path) -> PdfDocument:
        """
        Open path and read its header fields and page texts.

        A document without pages is rejected: MuPDF can "repair" arbitrary bytes into an empty
        document, so zero pages is treated as unparseable input rather than written out as a
        header-only text file. Password-protected documents are rejected as well.
        """
        try:
            doc = fitz.open(str(path))
        except Exception as e:
            raise ExtractionError(f"Cannot open PDF {path}: {e}") from e

        try:
            if doc.needs_pass:
                raise ExtractionError(f"PDF is encrypted: {path}")
            if doc.page_count == 0:
                raise ExtractionError(f"PDF has no pages: {path}")
            meta = doc.metadata or {}
            info = {key: str(meta[key]) for key in INFO_KEYS if meta.get(key)}
            pages = [page.get_text() for page in doc]
            return PdfDocument(
                version=_pdf_version(meta.get("format")),
                info=info,
                metadata=doc.get_xml_metadata() or None,
                page_count=doc.page_count,
                pages=pages,
            )
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(f"Cannot read PDF {path}: {e}") from e
        finally:
            doc.close()

    def extract(self, path: str | Path) -> str:
        if not self.supports(path):
            raise ExtractionError(f"File is not a pdf: {path}")
        document = self.read(path)
        log.debug("Read %s: version=%s pages=%d", path, document.version, document.page_count)
        return render_text(document)
