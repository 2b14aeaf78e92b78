"""
Column-aligned text to Markdown tables.

Extracted PDF text often keeps tables as space-aligned columns:

    Name   Qty   Price
    Bolt   10    2.50

Runs of such lines are rewritten as pipe tables. This is a visual
heuristic: false positives and negatives are accepted, but no
line is ever dropped.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tabulate import tabulate

from pdf2docs.models import PageText

if TYPE_CHECKING:
    from collections.abc import Sequence

MAX_TABLE_ROWS = 50

_COLUMN_GAP = re.compile(r"\s{2,}")


def split_columns(line: str) -> list[str]:
    """Split a line into fields on runs of 2+ whitespace characters."""
    stripped = line.strip()
    if not stripped:
        return []
    return [cell.strip() for cell in _COLUMN_GAP.split(stripped)]


def render_table(rows: list[list[str]]) -> list[str]:
    """Render rows as a pipe table; the first row is the header.

    Pipes inside cells are escaped so they don't add columns.
    """
    rows = [[cell.replace("|", r"\|") for cell in row] for row in rows]
    table = tabulate(
        rows[1:],
        headers=rows[0],
        tablefmt="github",
        disable_numparse=True,
    )
    return table.split("\n")


def transform_tables(text: str) -> str:
    """Rewrite runs of column-aligned lines as Markdown tables.

    A run is 2 or more consecutive non-blank lines that split into the
    same number (2 or more) of fields. Runs are capped at
    MAX_TABLE_ROWS lines; the remainder starts a new run.

    Args:
        text: One page of raw text.

    Returns:
        Text with qualifying runs replaced by tables.
    """
    lines = text.split("\n")
    out: list[str] = []
    i = 0

    while i < len(lines):
        rows: list[list[str]] = []
        j = i
        while j < len(lines) and len(rows) < MAX_TABLE_ROWS:
            cells = split_columns(lines[j])
            if len(cells) < 2 or (rows and len(cells) != len(rows[0])):
                break
            rows.append(cells)
            j += 1

        if len(rows) >= 2:
            out.extend(render_table(rows))
            i = j
        else:
            out.append(lines[i])
            i += 1

    return "\n".join(out)


def collect_page_texts(
    pages: Sequence[PageText],
    start: int,
    end: int,
    transform: bool = True,
) -> list[PageText]:
    """Collect the cleaned texts of pages start..end (1-based, inclusive).

    The range is clamped to the document.
    """
    start = max(start, 1)
    end = min(end, len(pages))

    collected = []
    for number in range(start, end + 1):
        text = pages[number - 1].text.strip()
        if transform:
            text = transform_tables(text)
        collected.append(PageText(page=number, text=text))
    return collected
