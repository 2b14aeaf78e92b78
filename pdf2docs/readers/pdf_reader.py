"""
PDF Reader using PyMuPDF (fitz).

Supplies the per-page plain text that structure extraction works on.
Structure detection is handled by the extractors module
(StructureExtractor); this module never interprets the text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import fitz  # PyMuPDF

from pdf2docs.models import PageText

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class RawDocument:
    """Raw extracted data from a PDF, before structure detection."""

    source_path: Path
    page_count: int
    pages: list[PageText]
    labels: list[str] = field(default_factory=list)  # Printed page labels ("xiv", "42")
    metadata: dict[str, str | None] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Full document text, pages separated by blank lines."""
        return "\n\n".join(p.text for p in self.pages if p.text)

    def page(self, number: int) -> PageText | None:
        """Page by 1-based number."""
        if 1 <= number <= len(self.pages):
            return self.pages[number - 1]
        return None


class PDFReader:
    """Extracts per-page text from PDFs using PyMuPDF.

    Usage:
        reader = PDFReader()
        raw = reader.read("/path/to/manual.pdf")
        # raw.pages, raw.metadata, raw.text
    """

    def __init__(self, *, sort_blocks: bool = True):
        """Initialize the PDF reader.

        Args:
            sort_blocks: Whether to order text top-to-bottom,
                left-to-right instead of content-stream order.
        """
        self.sort_blocks = sort_blocks

    def read(self, path: str | Path) -> RawDocument:
        """Read a PDF file and extract page texts.

        Args:
            path: Path to PDF file.

        Returns:
            RawDocument with pages, labels and metadata.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If file is not a valid PDF.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")

        try:
            doc = fitz.open(path)
        except Exception as e:
            raise ValueError(f"Failed to open PDF: {e}") from e

        try:
            pages = []
            labels = []
            for page_text, label in self._extract_pages(doc):
                pages.append(page_text)
                labels.append(label)

            return RawDocument(
                source_path=path,
                page_count=len(doc),
                pages=pages,
                labels=labels,
                metadata=self._extract_metadata(doc),
            )
        finally:
            doc.close()

    def _extract_pages(self, doc: fitz.Document) -> Iterator[tuple[PageText, str]]:
        """Extract text and label of each page."""
        for page_idx in range(len(doc)):
            page = doc[page_idx]
            label = page.get_label() or str(page_idx + 1)
            text = page.get_text("text", sort=self.sort_blocks)
            yield PageText(page=page_idx + 1, text=text), label

    def _extract_metadata(self, doc: fitz.Document) -> dict[str, str | None]:
        """Extract PDF metadata."""
        meta = doc.metadata or {}
        return {
            "title": meta.get("title") or None,
            "author": meta.get("author") or None,
            "subject": meta.get("subject") or None,
            "creator": meta.get("creator") or None,
            "producer": meta.get("producer") or None,
        }


def pages_from_texts(texts: list[str]) -> list[PageText]:
    """Wrap plain strings as numbered pages."""
    return [PageText(page=i, text=t) for i, t in enumerate(texts, start=1)]
