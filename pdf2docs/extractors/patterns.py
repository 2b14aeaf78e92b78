"""
ToC entry patterns.

Each numbering family has its own recognizer, tried in a fixed order:

1. Appendix:   "Appendix A.1 Wiring diagrams 88"
2. Decimal:    "2.1 General rules 4"
3. Alphabetic: "B.2 Spare parts 91"
4. Roman:      "IV.2 Maintenance 40"

Appendix comes before alphabetic so "Appendix A ..." is never read as
a bare "A" section. Lines are expected to be normalized first
(see pdf2docs.normalizers.lines).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pdf2docs.models import EntryKind, TocEntry
from pdf2docs.normalizers.lines import normalize_line

APPENDIX_RE = re.compile(r"^\s*(?:Appendix|APPENDIX)\s+([A-Z](?:\.[0-9]+)*)\s+(.+?)\s+(\d+)\s*$")
DECIMAL_RE = re.compile(r"^\s*(\d+(?:\.\d+)*)\s+(.+?)\s+(\d+)\s*$")
ALPHA_RE = re.compile(r"^\s*([A-Z](?:\.[0-9]+)*)\s+(.+?)\s+(\d+)\s*$")
ROMAN_RE = re.compile(r"^\s*([IVXLCDM]+)(?:\.([0-9]+))?\s+(.+?)\s+(\d+)\s*$")


def _dotted_entry(kind: EntryKind) -> Callable[[re.Match[str]], TocEntry]:
    def extract(m: re.Match[str]) -> TocEntry:
        number, title, page = m.groups()
        return TocEntry(
            number=number,
            title=title.strip(),
            page=int(page),
            depth=number.count(".") + 1,
            kind=kind,
        )

    return extract


def _roman_entry(m: re.Match[str]) -> TocEntry:
    numeral, sub_index, title, page = m.groups()
    if sub_index:
        number, depth = f"{numeral}.{sub_index}", 2
    else:
        number, depth = numeral, 1
    return TocEntry(
        number=number,
        title=title.strip(),
        page=int(page),
        depth=depth,
        kind=EntryKind.ROMAN,
    )


@dataclass(frozen=True)
class EntryPattern:
    """A numbering family: recognizer regex plus entry extractor."""

    kind: EntryKind
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], TocEntry]

    def match(self, line: str) -> TocEntry | None:
        m = self.regex.match(line)
        return self.extract(m) if m else None


# Priority order matters
ENTRY_PATTERNS: tuple[EntryPattern, ...] = (
    EntryPattern(EntryKind.APPENDIX, APPENDIX_RE, _dotted_entry(EntryKind.APPENDIX)),
    EntryPattern(EntryKind.DECIMAL, DECIMAL_RE, _dotted_entry(EntryKind.DECIMAL)),
    EntryPattern(EntryKind.ALPHABETIC, ALPHA_RE, _dotted_entry(EntryKind.ALPHABETIC)),
    EntryPattern(EntryKind.ROMAN, ROMAN_RE, _roman_entry),
)


def match_entry(line: str) -> TocEntry | None:
    """Classify a normalized line as a ToC entry.

    Args:
        line: Normalized text line.

    Returns:
        The entry from the first matching family, or None when the
        line has no leading numbering or no trailing page number.
    """
    for pattern in ENTRY_PATTERNS:
        entry = pattern.match(line)
        if entry is not None:
            return entry
    return None


def is_toc_line(line: str) -> bool:
    """Whether a raw line looks like a ToC entry once normalized."""
    normalized = normalize_line(line)
    return any(p.regex.match(normalized) for p in ENTRY_PATTERNS)


def parse_toc_lines(lines: Iterable[str]) -> list[TocEntry]:
    """Parse raw ToC lines into entries ordered by page.

    Lines that match no family are skipped. The sort is stable, so
    entries sharing a page keep their listing order.
    """
    entries = []
    for line in lines:
        entry = match_entry(normalize_line(line))
        if entry is not None:
            entries.append(entry)
    entries.sort(key=lambda e: e.page)
    return entries
