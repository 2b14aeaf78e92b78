"""
pdf2docs: Reconstruct the section structure of long PDF documents.

This library reads a PDF's per-page text, locates its table of
contents, parses the numbered entries ("1.2", "IV", "Appendix A")
and assembles them into a section tree with page ranges, ready for
a documentation page writer and a navigation generator.

Example:
    >>> import pdf2docs
    >>> structure = pdf2docs.convert("manual.pdf")
    >>> for root in structure.tree:
    ...     print(root.number, root.title, root.start_page, root.end_page)

    >>> # Page texts per section, tables already reformatted
    >>> for content in structure.contents:
    ...     print(content.section.slug, len(content.pages))
"""

from pdf2docs.config import ConversionConfig, load_config
from pdf2docs.convert import (
    convert,
    convert_batch,
    convert_pages,
    detect_format,
    supported_formats,
)
from pdf2docs.exceptions import (
    ConfigurationError,
    ExtractionError,
    Pdf2DocsError,
    UnsupportedFormatError,
)
from pdf2docs.extractors import (
    CallableRepair,
    NoopRepair,
    StructureExtractor,
    StructureResult,
    ToCRepairService,
    ValidationIssue,
)
from pdf2docs.models import (
    DocumentStructure,
    EntryKind,
    PageText,
    Section,
    SectionPages,
    TocEntry,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "convert",
    "convert_pages",
    "convert_batch",
    "detect_format",
    "supported_formats",
    # Configuration
    "ConversionConfig",
    "load_config",
    # Extraction
    "StructureExtractor",
    "StructureResult",
    "ValidationIssue",
    # ToC repair
    "ToCRepairService",
    "NoopRepair",
    "CallableRepair",
    # Models
    "DocumentStructure",
    "Section",
    "SectionPages",
    "PageText",
    "TocEntry",
    "EntryKind",
    # Exceptions
    "Pdf2DocsError",
    "UnsupportedFormatError",
    "ExtractionError",
    "ConfigurationError",
]
