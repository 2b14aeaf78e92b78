"""
Structure extraction module.

Cascade:
- Primary: table of contents located in the early pages, parsed into
  numbered entries and assembled into a section tree by numbering
- Fallback: heading-like lines or one section per page

Entry numbering families, in matching priority:
- Appendix ("Appendix A", "Appendix B.2")
- Decimal ("1", "1.2", "1.2.3")
- Alphabetic ("A", "A.1")
- Roman ("I", "IV", "IV.2")
"""

from pdf2docs.extractors.cascading import (
    StructureExtractor,
    StructureResult,
    extract_structure,
)
from pdf2docs.extractors.fallback import (
    fallback_sections,
    split_by_headings,
    split_by_pages,
)
from pdf2docs.extractors.locator import find_toc_lines, find_toc_start, has_toc_heading
from pdf2docs.extractors.patterns import (
    ENTRY_PATTERNS,
    EntryPattern,
    is_toc_line,
    match_entry,
    parse_toc_lines,
)
from pdf2docs.extractors.repair import (
    CallableRepair,
    NoopRepair,
    ToCRepairService,
    apply_repair,
)
from pdf2docs.extractors.sections import (
    build_hierarchy,
    build_sections,
    find_orphans,
    find_parent_indices,
    flatten,
)
from pdf2docs.extractors.validators import (
    HierarchyValidator,
    NoOverlapValidator,
    OrphanSectionValidator,
    TitleQualityValidator,
    ValidationIssue,
    ValidationRule,
    default_validators,
)

__all__ = [
    # Main extractor
    "StructureExtractor",
    "StructureResult",
    "extract_structure",
    # Entry matching
    "ENTRY_PATTERNS",
    "EntryPattern",
    "match_entry",
    "is_toc_line",
    "parse_toc_lines",
    # ToC location
    "find_toc_lines",
    "find_toc_start",
    "has_toc_heading",
    # Sections
    "build_sections",
    "build_hierarchy",
    "find_parent_indices",
    "find_orphans",
    "flatten",
    # Fallback
    "fallback_sections",
    "split_by_headings",
    "split_by_pages",
    # Repair
    "ToCRepairService",
    "NoopRepair",
    "CallableRepair",
    "apply_repair",
    # Validators
    "ValidationRule",
    "ValidationIssue",
    "OrphanSectionValidator",
    "HierarchyValidator",
    "NoOverlapValidator",
    "TitleQualityValidator",
    "default_validators",
]
