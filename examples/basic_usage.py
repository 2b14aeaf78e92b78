#!/usr/bin/env python3
"""
Basic pdf2docs Usage Example

This example demonstrates the core workflow:
1. Convert a PDF to a DocumentStructure
2. Walk the section tree
3. Read the page texts of each section
4. Customize conversion and plug in a ToC repair service
5. Convert a batch of documents
"""

import json
from pathlib import Path

from pdf2docs import CallableRepair, ConversionConfig, convert, convert_batch


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Conversion
    # ─────────────────────────────────────────────────────────────────────────

    structure = convert("path/to/manual.pdf")

    print(f"Converted: {structure.source_path}")
    print(f"  Pages: {structure.page_count}")
    print(f"  Sections: {len(structure.sections)} (from {structure.source})")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Walk the Section Tree
    # ─────────────────────────────────────────────────────────────────────────

    for root in structure.tree:
        for section in root.walk():
            indent = "  " * (section.depth - 1)
            print(f"{indent}{section.number} {section.title} (pp. {section.start_page}-{section.end_page})")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Section Page Texts
    # ─────────────────────────────────────────────────────────────────────────

    out_dir = Path("output/docs")
    out_dir.mkdir(parents=True, exist_ok=True)
    for content in structure.contents:
        page_file = out_dir / f"{content.section.slug}.md"
        page_file.write_text(f"# {content.section.title}\n\n{content.text}\n", encoding="utf-8")

    # Navigation data for a docs site generator
    nav_file = out_dir / "nav.json"
    nav_file.write_text(json.dumps([r.to_dict() for r in structure.tree], indent=2))

    for issue in structure.validation_issues:
        print(f"  [{issue.severity}] {issue.message}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Custom Configuration and ToC Repair
    # ─────────────────────────────────────────────────────────────────────────

    config = ConversionConfig(
        max_depth=2,  # Chapters and sections only
        fallback_mode="heading",  # Split at headings if there's no ToC
        slug_prefix="x200",  # Namespace slugs per product
    )

    def tidy_toc(lines, instruction):
        # Stand-in for a call to a language model
        return [line.replace("…", "...") for line in lines]

    structure = convert(
        "path/to/manual.pdf",
        config=config,
        repair=CallableRepair(tidy_toc, name="tidy"),
    )
    for note in structure.processing_log:
        print(f"  {note}")

    # ─────────────────────────────────────────────────────────────────────────
    # 5. Batch Processing
    # ─────────────────────────────────────────────────────────────────────────

    pdf_files = list(Path("path/to/manuals/").glob("*.pdf"))

    for path, result in convert_batch(pdf_files, config, parallel=True, max_workers=4):
        if isinstance(result, Exception):
            print(f"Failed: {path}: {result}")
        else:
            print(f"Converted: {path.name} ({len(result.sections)} sections)")


if __name__ == "__main__":
    main()
