"""URL-safe slugs for section addressing."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdf2docs.models import Section

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated ASCII slug.

    "Safety: Overview" and "Safety Overview" both become
    "safety-overview"; such collisions are accepted.
    """
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG.sub("-", text.lower()).strip("-")


def apply_slug_prefix(sections: list[Section], prefix: str | None) -> list[Section]:
    """Return copies of flat sections with the prefix folded into each slug."""
    if not prefix:
        return list(sections)
    return [replace(s, slug=slugify(f"{prefix}-{s.slug}")) for s in sections]
