"""
Validation rules for extracted structure.

Validators check flat sections for consistency and quality.
Issues are reported but don't block extraction (graceful degradation).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pdf2docs.extractors.sections import find_orphans

if TYPE_CHECKING:
    from pdf2docs.models import Section


@dataclass
class ValidationIssue:
    """A validation problem found in extracted structure."""

    type: str  # "orphan_section", "level_skip", "overlap", etc.
    message: str
    severity: str  # "warning", "info"
    section_titles: list[str]  # Affected section titles


class ValidationRule(ABC):
    """Abstract base for validation rules."""

    name: str = "base"

    @abstractmethod
    def check(self, sections: list[Section]) -> list[ValidationIssue]:
        """Check flat sections for issues.

        Returns list of issues found (empty if all good).
        """
        pass


class OrphanSectionValidator(ValidationRule):
    """Report nested sections that were placed at the top level.

    A section like "3.2" with no "3" before it has no numeric
    ancestor, so the hierarchy keeps it as a root.
    """

    name = "orphan_section"

    def check(self, sections: list[Section]) -> list[ValidationIssue]:
        """Check for sections without an eligible parent."""
        return [
            ValidationIssue(
                type="orphan_section",
                message=f"Section '{s.number} {s.title}' (depth {s.depth}) has no parent "
                "with matching numbering and was placed at the top level",
                severity="info",
                section_titles=[s.title],
            )
            for s in find_orphans(sections)
        ]


class NoOverlapValidator(ValidationRule):
    """Ensure sections at the same depth don't overlap.

    A later sibling starting before an earlier one ends usually means
    a misread page number.
    """

    name = "no_overlap"

    def check(self, sections: list[Section]) -> list[ValidationIssue]:
        """Check for overlapping page spans at the same depth."""
        issues = []

        # Group by depth
        by_depth: dict[int, list[Section]] = {}
        for section in sections:
            by_depth.setdefault(section.depth, []).append(section)

        for _depth, depth_sections in by_depth.items():
            for s1, s2 in zip(depth_sections, depth_sections[1:]):
                if s2.start_page < s1.end_page or s2.start_page < s1.start_page:
                    issues.append(
                        ValidationIssue(
                            type="overlap",
                            message=f"Sections overlap: '{s1.title}' ends on page {s1.end_page}, "
                            f"'{s2.title}' starts on page {s2.start_page}",
                            severity="warning",
                            section_titles=[s1.title, s2.title],
                        )
                    )

        return issues


class HierarchyValidator(ValidationRule):
    """Check that section depths are consistent.

    Depths shouldn't skip (e.g., 1 -> 3 without 2).
    """

    name = "hierarchy"

    def check(self, sections: list[Section]) -> list[ValidationIssue]:
        """Check for depth skips."""
        issues = []
        prev_depth = 0

        for section in sections:
            if section.depth > prev_depth + 1:
                issues.append(
                    ValidationIssue(
                        type="level_skip",
                        message=f"Section '{section.title}' skips levels "
                        f"({prev_depth} -> {section.depth})",
                        severity="info",
                        section_titles=[section.title],
                    )
                )
            prev_depth = section.depth

        return issues


class TitleQualityValidator(ValidationRule):
    """Check section titles for quality issues.

    Detects likely misparsed ToC lines like single characters or numbers.
    """

    name = "title_quality"

    def __init__(self, min_title_length: int = 2, max_title_length: int = 200):
        """Initialize validator.

        Args:
            min_title_length: Minimum characters for valid title.
            max_title_length: Maximum characters for valid title.
        """
        self.min_title_length = min_title_length
        self.max_title_length = max_title_length

    def check(self, sections: list[Section]) -> list[ValidationIssue]:
        """Check section titles for quality."""
        issues = []

        for section in sections:
            title = section.title.strip()

            if len(title) < self.min_title_length:
                issues.append(
                    ValidationIssue(
                        type="short_title",
                        message=f"Section title '{title}' is too short",
                        severity="info",
                        section_titles=[title],
                    )
                )

            # Probably a paragraph caught by the ToC patterns
            elif len(title) > self.max_title_length:
                issues.append(
                    ValidationIssue(
                        type="long_title",
                        message=f"Section title is too long ({len(title)} chars)",
                        severity="warning",
                        section_titles=[title[:50] + "..."],
                    )
                )

            elif title.isdigit():
                issues.append(
                    ValidationIssue(
                        type="numeric_title",
                        message=f"Section title '{title}' is just a number",
                        severity="info",
                        section_titles=[title],
                    )
                )

        return issues


def default_validators() -> list[ValidationRule]:
    """The standard validator set."""
    return [
        OrphanSectionValidator(),
        HierarchyValidator(),
        NoOverlapValidator(),
        TitleQualityValidator(),
    ]
