"""Text normalization: ToC line cleanup, slugs and table reformatting."""

from pdf2docs.normalizers.lines import normalize_line
from pdf2docs.normalizers.slugs import apply_slug_prefix, slugify
from pdf2docs.normalizers.tables import (
    collect_page_texts,
    render_table,
    split_columns,
    transform_tables,
)

__all__ = [
    "normalize_line",
    "slugify",
    "apply_slug_prefix",
    "transform_tables",
    "split_columns",
    "render_table",
    "collect_page_texts",
]
