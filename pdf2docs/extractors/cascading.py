"""
Cascading structure extractor.

The cascade:
1. Primary: table of contents found in the early pages
   (optionally cleaned up by a ToC repair service)
2. Fallback: heading detection or one section per page,
   depending on config.fallback_mode

ToC sections are assembled into a tree by numbering; fallback
sections are flat and used as their own tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pdf2docs.config import ConversionConfig
from pdf2docs.extractors.fallback import fallback_sections
from pdf2docs.extractors.locator import find_toc_lines
from pdf2docs.extractors.patterns import parse_toc_lines
from pdf2docs.extractors.repair import apply_repair
from pdf2docs.extractors.sections import build_hierarchy, build_sections
from pdf2docs.extractors.validators import (
    ValidationIssue,
    ValidationRule,
    default_validators,
)
from pdf2docs.normalizers.slugs import apply_slug_prefix

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pdf2docs.extractors.repair import ToCRepairService
    from pdf2docs.models import PageText, Section, TocEntry

logger = logging.getLogger(__name__)


@dataclass
class StructureResult:
    """Result of structure extraction."""

    sections: list[Section]  # Flat, in document order
    tree: list[Section]  # Roots with children populated
    source: str  # "toc", "fallback_heading" or "fallback_page"
    toc_lines: list[str] = field(default_factory=list)
    entries: list[TocEntry] = field(default_factory=list)
    validation_issues: list[ValidationIssue] = field(default_factory=list)
    processing_log: list[str] = field(default_factory=list)


class StructureExtractor:
    """Orchestrates structure extraction with fallback.

    Usage:
        extractor = StructureExtractor(ConversionConfig(max_depth=2))
        result = extractor.extract(pages)
        for root in result.tree:
            print(root.number, root.title, len(root.children))

    With a ToC repair service:
        extractor = StructureExtractor(config, repair=CallableRepair(ask_model))
    """

    def __init__(
        self,
        config: ConversionConfig | None = None,
        *,
        repair: ToCRepairService | None = None,
        validators: list[ValidationRule] | None = None,
    ):
        """Initialize the extractor.

        Args:
            config: Conversion configuration (defaults if None).
            repair: Optional service that cleans up raw ToC lines.
            validators: Validation rules (default creates standard set).
        """
        self.config = config or ConversionConfig()
        self.repair = repair
        self.validators = default_validators() if validators is None else validators

    def extract(self, pages: Sequence[PageText | str]) -> StructureResult:
        """Extract document structure from page texts.

        Args:
            pages: Page texts in document order.

        Returns:
            StructureResult with flat sections, tree and diagnostics.
        """
        log: list[str] = []
        toc_lines: list[str] = []
        entries: list[TocEntry] = []
        sections: list[Section] = []

        # Step 1: Try the table of contents
        if self.config.use_toc:
            toc_lines = find_toc_lines(pages, self.config.toc_page_scan_budget)
            if toc_lines:
                log.append(f"Found {len(toc_lines)} candidate ToC lines")
                toc_lines = apply_repair(
                    self.repair, toc_lines, log, self.config.repair_instruction
                )
                entries = parse_toc_lines(toc_lines)
                sections = build_sections(entries, self.config.max_depth)
                log.append(f"Parsed {len(entries)} ToC entries into {len(sections)} sections")
            else:
                log.append("No table of contents found")
        else:
            log.append("ToC detection disabled")

        # Step 2: Build the tree, or fall back to flat segmentation
        if sections:
            source = "toc"
            sections = apply_slug_prefix(sections, self.config.slug_prefix)
            tree = build_hierarchy(sections)
            log.append(f"Built hierarchy with {len(tree)} top-level sections")
        else:
            mode = self.config.fallback_mode
            source = f"fallback_{mode}"
            sections = fallback_sections(pages, mode)
            sections = apply_slug_prefix(sections, self.config.slug_prefix)
            tree = list(sections)
            log.append(f"Fallback split by {mode}: {len(sections)} sections")
            logger.info("No usable ToC, split %d pages by %s", len(pages), mode)

        # Step 3: Validate
        issues = []
        for validator in self.validators:
            issues.extend(validator.check(sections))

        if issues:
            log.append(f"Validation found {len(issues)} issues")

        return StructureResult(
            sections=sections,
            tree=tree,
            source=source,
            toc_lines=toc_lines,
            entries=entries,
            validation_issues=issues,
            processing_log=log,
        )


def extract_structure(
    pages: Sequence[PageText | str],
    config: ConversionConfig | None = None,
) -> list[Section]:
    """Convenience function for structure extraction.

    Args:
        pages: Page texts in document order.
        config: Conversion configuration.

    Returns:
        Root sections of the document tree.
    """
    extractor = StructureExtractor(config)
    result = extractor.extract(pages)
    return result.tree
