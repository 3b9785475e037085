from core.extract.base import EmptyExtractionError, ExtractionError, Extractor
from core.extract.models import PdfDocument
from core.extract.pymupdf_extractor import PyMuPDFExtractor

__all__ = [
    "EmptyExtractionError",
    "ExtractionError",
    "Extractor",
    "PdfDocument",
    "PyMuPDFExtractor",
]
