"""
Data models for pdf2docs.

These models represent the extracted document structure:
ToC entries (ephemeral), sections (flat and as a tree),
and the page texts handed to the writer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pdf2docs.extractors.validators import ValidationIssue


class EntryKind(Enum):
    """Numbering family a ToC entry was recognized by."""

    APPENDIX = "appendix"
    DECIMAL = "decimal"
    ALPHABETIC = "alphabetic"
    ROMAN = "roman"


@dataclass(frozen=True)
class TocEntry:
    """One parsed ToC line, before sections are built."""

    number: str  # Numbering as it appeared: "1.2", "I", "A.1"
    title: str
    page: int
    depth: int  # 1 = chapter, 2 = section, etc.
    kind: EntryKind = EntryKind.DECIMAL


@dataclass(frozen=True)
class PageText:
    """Plain text of one source page."""

    page: int  # 1-based page number
    text: str


@dataclass
class Section:
    """A node in the document structure, carrying a page span."""

    number: str
    title: str
    start_page: int
    end_page: int
    depth: int  # 1 = top level
    slug: str
    children: list[Section] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """Whether the section has no children."""
        return not self.children

    @property
    def page_count(self) -> int:
        """Number of pages spanned, inclusive."""
        return self.end_page - self.start_page + 1

    def walk(self) -> Iterator[Section]:
        """Yield this section and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the section and its subtree
        """
        data: dict[str, Any] = {
            "number": self.number,
            "title": self.title,
            "start_page": self.start_page,
            "end_page": self.end_page,
            "depth": self.depth,
            "slug": self.slug,
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class SectionPages:
    """Page texts belonging to one flat section."""

    section: Section
    pages: list[PageText] = field(default_factory=list)

    @property
    def text(self) -> str:
        """All page texts joined by blank lines."""
        return "\n\n".join(p.text for p in self.pages if p.text)


@dataclass
class DocumentStructure:
    """
    The main output type for users.

    Holds the flat section list, the section tree built from it and
    the per-section page texts, ready for a page writer and a
    navigation generator.

    Example:
        >>> structure = pdf2docs.convert("manual.pdf")
        >>> for root in structure.tree:
        ...     print(root.number, root.title, root.start_page)
    """

    sections: list[Section] = field(default_factory=list)
    tree: list[Section] = field(default_factory=list)
    contents: list[SectionPages] = field(default_factory=list)

    # "toc", "fallback_heading", "fallback_page" or "" when nothing ran
    source: str = ""
    page_count: int = 0
    source_path: str | None = None

    # Diagnostics
    validation_issues: list[ValidationIssue] = field(default_factory=list)
    processing_log: list[str] = field(default_factory=list)

    def top_level(self) -> list[Section]:
        """Depth-1 sections from the flat list."""
        return [s for s in self.sections if s.depth == 1]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the structure
        """
        return {
            "source": self.source,
            "source_path": self.source_path,
            "page_count": self.page_count,
            "sections": [s.to_dict() for s in self.sections],
            "tree": [s.to_dict() for s in self.tree],
            "contents": [
                {
                    "slug": c.section.slug,
                    "pages": [{"page": p.page, "text": p.text} for p in c.pages],
                }
                for c in self.contents
            ],
            "validation_issues": [
                {"type": i.type, "message": i.message, "severity": i.severity}
                for i in self.validation_issues
            ],
            "processing_log": list(self.processing_log),
        }
