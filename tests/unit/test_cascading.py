"""Tests for the cascading structure extractor and convert_pages()."""

import json
import logging

from pdf2docs.config import ConversionConfig
from pdf2docs.convert import convert_pages
from pdf2docs.extractors.cascading import StructureExtractor, extract_structure
from pdf2docs.extractors.repair import CallableRepair, ToCRepairService
from pdf2docs.models import PageText

PROSE = "Remove the unit from its box.\nCheck that all parts are present."


def _safety_pages() -> list[str]:
    toc = "Table of Contents\n1 Safety ... 4\n1.1 General rules ... 4\n2 Installation ... 9"
    return ["Front cover", toc] + [PROSE] * 7


def _summary(sections):
    return [(s.number, s.start_page, s.end_page) for s in sections]


class BrokenRepair(ToCRepairService):
    """Service that always raises."""

    name = "broken"

    def repair(self, lines, instruction=""):
        raise ConnectionError("unreachable")


class TestToCExtraction:
    """Test extraction from a table of contents."""

    def test_safety_manual(self):
        """Chapters span to the next chapter; subsections nest."""
        result = StructureExtractor().extract(_safety_pages())

        assert result.source == "toc"
        assert _summary(result.tree) == [("1", 4, 8), ("2", 9, 9)]
        assert _summary(result.tree[0].children) == [("1.1", 4, 8)]
        assert [s.slug for s in result.sections] == ["1-safety", "1-1-general-rules", "2-installation"]

    def test_multi_page_toc(self, manual_pages):
        """Entries continuing onto the next page are collected."""
        result = StructureExtractor().extract(manual_pages)

        assert result.source == "toc"
        assert _summary(result.sections) == [
            ("1", 4, 4),
            ("1.1", 4, 4),
            ("1.2", 5, 6),
            ("2", 7, 7),
            ("2.1", 7, 7),
            ("2.2", 8, 9),
            ("A", 10, 10),
        ]
        assert [(r.number, [c.number for c in r.children]) for r in result.tree] == [
            ("1", ["1.1", "1.2"]),
            ("2", ["2.1", "2.2"]),
            ("A", []),
        ]
        assert result.validation_issues == []

    def test_diagnostics_recorded(self, manual_pages):
        """ToC lines, entries and log notes are kept on the result."""
        result = StructureExtractor().extract(manual_pages)

        assert len(result.toc_lines) == 7
        assert len(result.entries) == 7
        assert any("Parsed 7 ToC entries" in note for note in result.processing_log)

    def test_max_depth(self, manual_pages):
        """Entries deeper than max_depth are dropped."""
        result = StructureExtractor(ConversionConfig(max_depth=1)).extract(manual_pages)

        assert _summary(result.sections) == [("1", 4, 4), ("2", 7, 7), ("A", 10, 10)]
        assert all(r.children == [] for r in result.tree)

    def test_slug_prefix(self, manual_pages):
        """The prefix is folded into every slug."""
        config = ConversionConfig(slug_prefix="X200 Manual")
        result = StructureExtractor(config).extract(manual_pages)

        assert result.sections[0].slug == "x200-manual-1-safety"
        assert result.tree[0].children[0].slug == "x200-manual-1-1-general-rules"

    def test_orphan_reported(self):
        """A subsection without its chapter stays at the top level with an issue."""
        pages = ["Table of Contents\n1 Intro ... 2\n3.2 Filters ... 3", PROSE, PROSE]
        result = StructureExtractor().extract(pages)

        assert [r.number for r in result.tree] == ["1", "3.2"]
        assert [i.type for i in result.validation_issues] == ["orphan_section"]


class TestRepair:
    """Test the ToC repair hook."""

    def test_repaired_lines_are_parsed(self):
        """Lines from the repair service replace the raw ones."""
        pages = ["Table of Contents\n1 Safety\n4\n2 Installation 9", PROSE, PROSE, PROSE]
        fixed = "1 Safety .... 4\n2 Installation .... 9"
        repair = CallableRepair(lambda lines, instruction: fixed, name="fixer")

        result = StructureExtractor(repair=repair).extract(pages + [PROSE] * 6)

        assert _summary(result.tree) == [("1", 4, 8), ("2", 9, 9)]
        assert any("ToC repair fixer" in note for note in result.processing_log)

    def test_instruction_from_config(self):
        """The configured instruction is sent to the service."""
        seen = []

        def fake(lines, instruction):
            seen.append(instruction)
            return lines

        config = ConversionConfig(repair_instruction="one entry per line")
        StructureExtractor(config, repair=CallableRepair(fake)).extract(_safety_pages())

        assert seen == ["one entry per line"]

    def test_failing_repair_keeps_raw_lines(self, caplog):
        """A failing service doesn't stop extraction."""
        with caplog.at_level(logging.WARNING):
            result = StructureExtractor(repair=BrokenRepair()).extract(_safety_pages())

        assert result.source == "toc"
        assert _summary(result.tree) == [("1", 4, 8), ("2", 9, 9)]
        assert "unreachable" in caplog.text


class TestFallback:
    """Test fallback when no ToC is usable."""

    def test_page_fallback(self):
        """Three prose pages give three page sections."""
        result = StructureExtractor(ConversionConfig(fallback_mode="page")).extract([PROSE] * 3)

        assert result.source == "fallback_page"
        assert [(s.title, s.start_page, s.end_page, s.depth) for s in result.sections] == [
            ("Page 1", 1, 1, 1),
            ("Page 2", 2, 2, 1),
            ("Page 3", 3, 3, 1),
        ]
        assert result.tree == result.sections

    def test_heading_fallback(self):
        """Heading mode splits at heading-like lines."""
        pages = ["intro text", "Getting Started\nbody", "more body"]
        result = StructureExtractor(ConversionConfig(fallback_mode="heading")).extract(pages)

        assert result.source == "fallback_heading"
        assert [s.title for s in result.sections] == ["Section 1", "Getting Started"]

    def test_toc_disabled(self, manual_pages):
        """use_toc=False goes straight to the fallback."""
        result = StructureExtractor(ConversionConfig(use_toc=False)).extract(manual_pages)

        assert result.source == "fallback_page"
        assert len(result.sections) == 10
        assert "ToC detection disabled" in result.processing_log

    def test_unparseable_toc(self):
        """Heading-page lines that parse to nothing trigger the fallback."""
        pages = ["Table of Contents\nRevision 3\nPrinted in 2024", PROSE]
        result = StructureExtractor().extract(pages)

        assert result.source == "fallback_page"
        assert len(result.sections) == 2

    def test_fallback_slug_prefix(self):
        """Fallback slugs get the prefix too."""
        config = ConversionConfig(slug_prefix="guide")
        result = StructureExtractor(config).extract([PROSE])

        assert result.sections[0].slug == "guide-page-1"

    def test_empty_document(self):
        """No pages, no sections."""
        result = StructureExtractor().extract([])

        assert result.sections == []
        assert result.tree == []


def test_extract_structure(manual_pages):
    """The convenience function returns the tree."""
    roots = extract_structure(manual_pages)

    assert [r.number for r in roots] == ["1", "2", "A"]


class TestConvertPages:
    """Test convert_pages()."""

    def test_contents_per_section(self, manual_pages):
        """Each flat section gets the texts of its pages."""
        structure = convert_pages(manual_pages)

        assert structure.source == "toc"
        assert structure.page_count == 10
        assert len(structure.contents) == len(structure.sections)
        by_number = {c.section.number: c for c in structure.contents}
        assert [p.page for p in by_number["1.2"].pages] == [5, 6]
        assert by_number["1.2"].text == "Wear gloves and eye protection.\n\nKeep the work area dry."

    def test_tables_transformed(self, manual_pages):
        """Column-aligned pages become pipe tables."""
        structure = convert_pages(manual_pages)
        page = next(c for c in structure.contents if c.section.number == "2.2").pages[0]

        assert page.page == 8
        assert page.text.startswith("|")
        assert "Bolt" in page.text

    def test_tables_left_alone(self, manual_pages):
        """transform_tables=False keeps raw page text."""
        structure = convert_pages(manual_pages, ConversionConfig(transform_tables=False))
        page = next(c for c in structure.contents if c.section.number == "2.2").pages[0]

        assert page.text.startswith("Name   Qty   Price")

    def test_plain_strings(self):
        """Plain strings are numbered from 1."""
        structure = convert_pages(["one", "two", "three"], source_path="memo.pdf")

        assert [c.pages[0].page for c in structure.contents] == [1, 2, 3]
        assert structure.source_path == "memo.pdf"
        assert structure.processing_log[-1].startswith("Structure complete: 3 sections")

    def test_section_beyond_last_page(self):
        """A ToC pointing past the end gets no page texts."""
        pages = [PageText(1, "Table of Contents\n1 Intro ... 2\n2 Annex ... 9"), PageText(2, "Intro")]
        structure = convert_pages(pages)

        annex = next(c for c in structure.contents if c.section.number == "2")
        assert annex.pages == []

    def test_same_page_subsections_keep_own_pages(self):
        """Sibling subsections listed on one page don't share later pages."""
        toc = "Table of Contents\n2 Installation .... 3\n2.1 Unpacking .... 3\n2.2 Mounting .... 3\n3 Use .... 6"
        structure = convert_pages([toc, PROSE, PROSE, PROSE, PROSE, PROSE])
        by_number = {c.section.number: c for c in structure.contents}

        assert [p.page for p in by_number["2.1"].pages] == [3]
        assert [p.page for p in by_number["2.2"].pages] == [3, 4, 5]
        assert [i.type for i in structure.validation_issues] == []

    def test_to_dict_is_json_ready(self, manual_pages):
        """The serialized structure survives json and keeps page texts."""
        data = json.loads(json.dumps(convert_pages(manual_pages).to_dict()))

        assert [c["slug"] for c in data["contents"]][:2] == ["1-safety", "1-1-general-rules"]
        assert data["contents"][2]["pages"][1]["text"] == "Keep the work area dry."
        assert data["processing_log"][-1].startswith("Structure complete")
