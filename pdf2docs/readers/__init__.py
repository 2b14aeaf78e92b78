"""PDF reading module: per-page plain text via PyMuPDF."""

from pdf2docs.readers.pdf_reader import (
    PDFReader,
    RawDocument,
    pages_from_texts,
)

__all__ = [
    "PDFReader",
    "RawDocument",
    "pages_from_texts",
]
