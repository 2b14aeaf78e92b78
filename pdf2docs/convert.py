"""
Document conversion orchestrator.

This module provides the main `convert()` function that turns PDFs
into DocumentStructure objects by wiring together:
- PDFReader (per-page text)
- StructureExtractor (ToC / fallback sections and the section tree)
- page collection (per-section page texts with tables reformatted)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TYPE_CHECKING

from pdf2docs.config import ConversionConfig
from pdf2docs.exceptions import ExtractionError, UnsupportedFormatError
from pdf2docs.extractors.cascading import StructureExtractor
from pdf2docs.models import DocumentStructure, PageText, SectionPages
from pdf2docs.normalizers.tables import collect_page_texts
from pdf2docs.readers.pdf_reader import PDFReader

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pdf2docs.extractors.repair import ToCRepairService

logger = logging.getLogger(__name__)


def convert_pages(
    pages: Sequence[PageText | str],
    config: ConversionConfig | None = None,
    repair: ToCRepairService | None = None,
    source_path: str | None = None,
) -> DocumentStructure:
    """
    Extract structure from page texts that are already in memory.

    Args:
        pages: Page texts in document order (PageText or plain strings)
        config: Conversion configuration (uses defaults if None)
        repair: Optional ToC repair service
        source_path: Recorded on the result for reference

    Returns:
        DocumentStructure with flat sections, tree and per-section pages
    """
    config = config or ConversionConfig()
    page_list = [
        p if isinstance(p, PageText) else PageText(page=i, text=p)
        for i, p in enumerate(pages, start=1)
    ]

    extractor = StructureExtractor(config, repair=repair)
    result = extractor.extract(page_list)

    contents = [
        SectionPages(
            section=section,
            pages=collect_page_texts(
                page_list,
                section.start_page,
                section.end_page,
                transform=config.transform_tables,
            ),
        )
        for section in result.sections
    ]

    log = list(result.processing_log)
    log.append(
        f"Structure complete: {len(result.sections)} sections from {result.source}, "
        f"{len(page_list)} pages"
    )

    return DocumentStructure(
        sections=result.sections,
        tree=result.tree,
        contents=contents,
        source=result.source,
        page_count=len(page_list),
        source_path=source_path,
        validation_issues=result.validation_issues,
        processing_log=log,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════════


def convert(
    source: str | Path,
    config: ConversionConfig | None = None,
    repair: ToCRepairService | None = None,
) -> DocumentStructure:
    """
    Convert a document to a DocumentStructure.

    This is the main entry point for pdf2docs. It handles:
    - Format detection
    - Page text extraction (PDFReader)
    - Structure extraction (ToC or fallback sections, section tree)
    - Per-section page collection

    Args:
        source: Path to document file
        config: Conversion configuration (uses defaults if None)
        repair: Optional ToC repair service

    Returns:
        DocumentStructure with sections, tree and page texts

    Raises:
        FileNotFoundError: If source doesn't exist
        UnsupportedFormatError: If format not supported
        ExtractionError: If reading fails (when on_extraction_error="raise")

    Example:
        >>> structure = convert("manual.pdf")
        >>> for root in structure.tree:
        ...     print(root.number, root.title)
    """
    source = Path(source)
    config = config or ConversionConfig()

    # Validate file exists
    if not source.exists():
        raise FileNotFoundError(f"Source file not found: {source}")

    # Only PDFs are read
    detect_format(source)

    try:
        raw_doc = PDFReader().read(source)
    except Exception as e:
        if config.on_extraction_error == "raise":
            raise ExtractionError(f"Failed to read {source}: {e}") from e
        logger.warning("Extraction error for %s: %s", source, e)
        return DocumentStructure(
            source_path=str(source),
            processing_log=[f"Extraction failed: {e}"],
        )

    return convert_pages(raw_doc.pages, config, repair=repair, source_path=str(source))


def convert_batch(
    sources: Sequence[str | Path],
    config: ConversionConfig | None = None,
    parallel: bool = False,
    max_workers: int = 4,
    repair: ToCRepairService | None = None,
) -> Iterator[tuple[Path, DocumentStructure | Exception]]:
    """
    Convert multiple documents, yielding results as completed.

    Documents are independent, so parallel conversion needs no
    coordination beyond rate-limiting the repair service, which is
    the caller's responsibility.

    Args:
        sources: Paths to document files
        config: Conversion configuration
        parallel: Whether to process in a thread pool
        max_workers: Max parallel workers (if parallel=True)
        repair: Optional ToC repair service shared by all documents

    Yields:
        (path, result) tuples where result is DocumentStructure or Exception
    """
    config = config or ConversionConfig()
    paths = [Path(s) for s in sources]

    if not parallel:
        for path in paths:
            try:
                yield (path, convert(path, config, repair))
            except Exception as e:
                yield (path, e)
        return

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {pool.submit(convert, path, config, repair): path for path in paths}
        for future in as_completed(futures):
            path = futures[future]
            try:
                yield (path, future.result())
            except Exception as e:
                yield (path, e)


def detect_format(path: str | Path) -> str:
    """
    Detect a PDF by file extension or magic bytes.

    Args:
        path: Path to document file

    Returns:
        "pdf"

    Raises:
        UnsupportedFormatError: If the file is not recognizably a PDF
    """
    path = Path(path)

    if path.suffix.lower() == ".pdf":
        return "pdf"

    # Misnamed or extensionless PDFs
    try:
        with open(path, "rb") as f:
            header = f.read(8)
            if header.startswith(b"%PDF"):
                return "pdf"
    except OSError:
        pass

    raise UnsupportedFormatError(f"Not a PDF: {path}. Currently only PDF is supported.")


def supported_formats() -> list[str]:
    """Return list of currently supported input formats."""
    return ["pdf"]

