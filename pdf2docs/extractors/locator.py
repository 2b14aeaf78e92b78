"""
Table of contents detection over raw page texts.

Long manuals spread their ToC over several pages, so detection works
in two phases: find where the ToC starts within the first few pages,
then keep reading following pages while they still contribute entry
lines. The first page contributing nothing ends the ToC, which keeps
scattered numeric lines in the body from being collected.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from pdf2docs.extractors.patterns import is_toc_line

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pdf2docs.models import PageText

logger = logging.getLogger(__name__)

HEADING_WINDOW = 6  # Pages searched for the ToC heading
DEFAULT_SCAN_BUDGET = 8
MIN_EXTENSION = 2

# Without MULTILINE, the bare "Contents" form only matches a page that
# consists of nothing else
TOC_HEADING_RE = re.compile(r"(?i)\btable of contents\b|^\s*contents\s*$")
TRAILING_PAGE_RE = re.compile(r"\b\d+\s*$")


def _page_texts(pages: Sequence[PageText | str]) -> list[str]:
    return [p if isinstance(p, str) else p.text for p in pages]


def has_toc_heading(text: str) -> bool:
    """Whether a page announces a table of contents."""
    return bool(TOC_HEADING_RE.search(text))


def toc_lines_on_page(text: str) -> list[str]:
    """Lines of a page that independently look like ToC entries."""
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        if line and is_toc_line(line):
            lines.append(line)
    return lines


def _heading_page_lines(text: str) -> list[str]:
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        if TRAILING_PAGE_RE.search(line):
            lines.append(line)
    return lines


def find_toc_start(pages: Sequence[PageText | str], scan_budget: int) -> int | None:
    """Index of the first page with a ToC heading or any entry line."""
    texts = _page_texts(pages)
    for i, text in enumerate(texts[:scan_budget]):
        if has_toc_heading(text) or toc_lines_on_page(text):
            return i
    return None


def find_toc_lines(
    pages: Sequence[PageText | str],
    scan_budget: int = DEFAULT_SCAN_BUDGET,
) -> list[str]:
    """Collect candidate ToC lines from the early pages of a document.

    Args:
        pages: Page texts in document order.
        scan_budget: How many early pages may hold the ToC; values <= 0
            fall back to DEFAULT_SCAN_BUDGET.

    Returns:
        Stripped candidate lines in page order. Empty when no ToC was
        found, in which case callers use a fallback segmentation.
    """
    if scan_budget <= 0:
        scan_budget = DEFAULT_SCAN_BUDGET

    texts = _page_texts(pages)
    window = texts[:HEADING_WINDOW]
    collected: dict[int, list[str]] = {}

    # Step 1: pages with a ToC heading, keep lines ending in a page number
    for i, text in enumerate(window):
        if has_toc_heading(text):
            lines = _heading_page_lines(text)
            if lines:
                collected[i] = lines

    # Step 2: any line that looks like an entry on its own
    if not collected:
        for i, text in enumerate(window):
            lines = toc_lines_on_page(text)
            if lines:
                collected[i] = lines

    if collected:
        start = find_toc_start(texts, scan_budget)
        if start is None:
            start = min(collected)
        extend = max(MIN_EXTENSION, scan_budget // 2)

        for i in range(start + 1, min(len(texts), start + extend + 1)):
            if i in collected:
                continue
            lines = toc_lines_on_page(texts[i])
            if not lines:
                logger.debug("ToC ends before page %d", i + 1)
                break
            collected[i] = lines

        pages_used = sorted(collected)
        logger.debug("ToC lines found on pages %s", [i + 1 for i in pages_used])
        return [line for i in pages_used for line in collected[i]]

    # Nothing in the heading window: brute-force the whole budget
    out = []
    for text in texts[:scan_budget]:
        out.extend(toc_lines_on_page(text))
    if out:
        logger.debug("ToC lines found by scanning %d pages", min(scan_budget, len(texts)))
    return out
