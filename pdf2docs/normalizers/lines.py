"""
Dot-leader and bullet cleanup for candidate ToC lines.

ToC lines visually connect a title to its page number with leaders:
"1.2 Wiring ........ 14", "1.2 Wiring • • • 14", "1.2 Wiring … 14".
Matching is done on the normalized form "1.2 Wiring 14".
"""

from __future__ import annotations

import re

# Glyphs replaced outright: bullet, middle dot, bullet operator, ellipsis
_LEADER_GLYPHS = re.compile("[•·∙…]")

# "....." leaders
_DOT_RUN = re.compile(r"\.{3,}")

# " . . . ." leaders
_SPACED_DOTS = re.compile(r"(?:\s+\.){2,}(?=\s|$)")

_WHITESPACE = re.compile(r"\s+")


def normalize_line(line: str) -> str:
    """Strip leader characters and collapse whitespace in one line.

    Args:
        line: Raw text line.

    Returns:
        Normalized line, possibly empty.
    """
    line = _LEADER_GLYPHS.sub(" ", line)
    line = _DOT_RUN.sub(" ", line)
    line = _SPACED_DOTS.sub(" ", line)
    return _WHITESPACE.sub(" ", line).strip()
