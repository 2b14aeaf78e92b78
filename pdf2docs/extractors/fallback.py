"""
Fallback segmentation for documents without a usable ToC.

- heading: start a new section at the first heading-like line of a page
- page: one section per page

Both produce flat, depth-1 sections; no hierarchy is built from them.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pdf2docs.models import Section
from pdf2docs.normalizers.slugs import slugify

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pdf2docs.models import PageText

# Capitalized line of 4+ characters with restricted punctuation
HEADING_RE = re.compile(r"^[A-Z][A-Za-z0-9 ,\-/()]{3,}$")


def _page_texts(pages: Sequence[PageText | str]) -> list[str]:
    return [p if isinstance(p, str) else p.text for p in pages]


def _first_heading(text: str) -> str | None:
    for line in text.split("\n"):
        line = line.strip()
        if HEADING_RE.match(line):
            return line
    return None


def split_by_headings(pages: Sequence[PageText | str]) -> list[Section]:
    """Split a document at heading-like lines.

    The first section always starts on page 1 as "Section 1". A page
    whose text holds a heading-like line starts a new section titled
    by that line; headings on the running section's start page are
    ignored. Each section ends the page before the next one starts,
    and the last section ends on the last page.
    """
    texts = _page_texts(pages)
    if not texts:
        return []

    sections = []
    index = 1
    current = Section(
        number="1",
        title="Section 1",
        start_page=1,
        end_page=1,
        depth=1,
        slug=slugify("1-section-1"),
    )

    for page_number, text in enumerate(texts, start=1):
        if page_number != current.start_page:
            heading = _first_heading(text)
            if heading is not None:
                current.end_page = page_number - 1
                sections.append(current)
                index += 1
                current = Section(
                    number=str(index),
                    title=heading,
                    start_page=page_number,
                    end_page=page_number,
                    depth=1,
                    slug=slugify(f"{index}-{heading}"),
                )
        current.end_page = page_number

    sections.append(current)
    return sections


def split_by_pages(pages: Sequence[PageText | str]) -> list[Section]:
    """One section per page, titled "Page N"."""
    sections = []
    for page_number in range(1, len(pages) + 1):
        title = f"Page {page_number}"
        sections.append(
            Section(
                number=str(page_number),
                title=title,
                start_page=page_number,
                end_page=page_number,
                depth=1,
                slug=slugify(title),
            )
        )
    return sections


def fallback_sections(pages: Sequence[PageText | str], mode: str = "page") -> list[Section]:
    """Segment a document without a ToC.

    Args:
        pages: Page texts in document order.
        mode: "heading" for heading detection; anything else splits
            by page.

    Returns:
        Flat depth-1 sections.
    """
    if mode == "heading":
        return split_by_headings(pages)
    return split_by_pages(pages)
