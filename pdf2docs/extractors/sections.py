"""
Section building and hierarchy assembly.

ToC entries become flat sections with page spans, then the flat list
is turned into a tree by numbering prefix: "2.1" goes under "2",
"2.1.4" under "2.1". Sections whose numbering has no eligible
ancestor become roots rather than being dropped.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from pdf2docs.models import Section
from pdf2docs.normalizers.slugs import slugify

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pdf2docs.models import TocEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


def build_sections(entries: Sequence[TocEntry], max_depth: int = DEFAULT_MAX_DEPTH) -> list[Section]:
    """Turn page-ordered ToC entries into flat sections.

    Each section ends the page before the next entry starts, clamped so
    it never ends before its own start. Following entries on the same
    page that are numbered below the section (its subsections) are
    skipped, so a chapter sharing its first page with its first
    subsection still spans up to the next sibling. The final entry
    spans a single page. Entries deeper than max_depth are dropped,
    though they still bound the spans of the entries before them.

    Args:
        entries: Entries sorted by ascending page.
        max_depth: Deepest level to keep; values <= 0 mean
            DEFAULT_MAX_DEPTH.

    Returns:
        Sections in input order.
    """
    if max_depth <= 0:
        max_depth = DEFAULT_MAX_DEPTH

    sections = []
    for i, entry in enumerate(entries):
        if entry.depth > max_depth:
            continue

        end = entry.page
        for following in entries[i + 1 :]:
            if following.page == entry.page and _is_subnumber(entry.number, following.number):
                continue
            end = max(following.page - 1, entry.page)
            break

        sections.append(
            Section(
                number=entry.number,
                title=entry.title,
                start_page=entry.page,
                end_page=end,
                depth=entry.depth,
                slug=slugify(f"{entry.number}-{entry.title}"),
            )
        )
    return sections


def _is_subnumber(number: str, other: str) -> bool:
    return other.startswith(number + ".")


def _is_ancestor(parent: Section, child: Section) -> bool:
    return parent.depth < child.depth and _is_subnumber(parent.number, child.number)


def find_parent_indices(sections: Sequence[Section]) -> list[int | None]:
    """Index of each section's nearest eligible ancestor, or None for roots.

    The nearest earlier section that is shallower and whose number plus
    "." prefixes the section's number wins. Scanning all earlier
    sections instead of keeping a depth stack tolerates skipped levels
    and out-of-order depths.
    """
    parents: list[int | None] = []
    for i, section in enumerate(sections):
        parent = None
        for j in range(i - 1, -1, -1):
            if _is_ancestor(sections[j], section):
                parent = j
                break
        parents.append(parent)
    return parents


def build_hierarchy(sections: Sequence[Section]) -> list[Section]:
    """Assemble flat sections into a tree.

    Input sections are not modified: the tree is built from copies
    with fresh children lists, so each node has exactly one owner.
    Any children already present on the inputs are ignored, which
    makes re-assembling a flattened tree yield the same tree.

    Args:
        sections: Flat sections in document order.

    Returns:
        Root sections with children populated transitively.
    """
    nodes = [replace(s, children=[]) for s in sections]
    parents = find_parent_indices(nodes)

    roots = []
    for node, parent in zip(nodes, parents):
        if parent is None:
            if node.depth > 1:
                logger.debug(
                    "No parent for section %s %r, placing at top level", node.number, node.title
                )
            roots.append(node)
        else:
            nodes[parent].children.append(node)
    return roots


def flatten(roots: Sequence[Section]) -> list[Section]:
    """Sections of a tree in depth-first order."""
    return [s for root in roots for s in root.walk()]


def find_orphans(sections: Sequence[Section]) -> list[Section]:
    """Nested sections (depth > 1) that end up at the top level."""
    parents = find_parent_indices(sections)
    return [s for s, p in zip(sections, parents) if p is None and s.depth > 1]
