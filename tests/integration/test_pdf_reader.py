"""Tests for the PyMuPDF reader."""

import pytest

from pdf2docs.readers import PDFReader, RawDocument, pages_from_texts


class TestPDFReader:
    """Test PDFReader.read()."""

    def test_reads_pages(self, make_pdf):
        """Each PDF page becomes a numbered PageText."""
        raw = PDFReader().read(make_pdf(["First page", "Second page"]))

        assert isinstance(raw, RawDocument)
        assert raw.page_count == 2
        assert [p.page for p in raw.pages] == [1, 2]
        assert "First page" in raw.pages[0].text
        assert "Second page" in raw.pages[1].text

    def test_multi_line_text(self, make_pdf):
        """Lines come back separated by newlines."""
        raw = PDFReader().read(make_pdf(["Table of Contents\n1 Safety ... 4"]))
        lines = [line.strip() for line in raw.pages[0].text.split("\n") if line.strip()]

        assert lines == ["Table of Contents", "1 Safety ... 4"]

    def test_labels_default_to_numbers(self, make_pdf):
        """Pages without printed labels get their 1-based number."""
        raw = PDFReader().read(make_pdf(["a", "b", "c"]))

        assert raw.labels == ["1", "2", "3"]

    def test_page_lookup(self, make_pdf):
        """page() uses 1-based numbers and returns None out of range."""
        raw = PDFReader().read(make_pdf(["a", "b"]))

        assert raw.page(2).page == 2
        assert raw.page(0) is None
        assert raw.page(3) is None

    def test_metadata_keys(self, make_pdf):
        """Metadata always has the standard keys."""
        raw = PDFReader().read(make_pdf(["a"]))

        assert set(raw.metadata) == {"title", "author", "subject", "creator", "producer"}

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PDFReader().read(tmp_path / "missing.pdf")

    def test_invalid_pdf(self, tmp_path):
        """A non-PDF file raises ValueError."""
        path = tmp_path / "fake.pdf"
        path.write_bytes(b"not a pdf at all")

        with pytest.raises(ValueError):
            PDFReader().read(path)


def test_pages_from_texts():
    """Plain strings are wrapped as numbered pages."""
    pages = pages_from_texts(["a", "b"])

    assert [(p.page, p.text) for p in pages] == [(1, "a"), (2, "b")]
