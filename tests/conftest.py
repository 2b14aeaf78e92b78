"""
Pytest configuration and fixtures for pdf2docs tests.
"""

from pathlib import Path

import pytest

from pdf2docs.models import PageText


@pytest.fixture(scope="session")
def sample_config():
    """Return a default ConversionConfig for testing."""
    from pdf2docs import ConversionConfig

    return ConversionConfig()


@pytest.fixture
def manual_pages() -> list[PageText]:
    """Ten-page manual with a ToC on page 2 continuing onto page 3."""
    texts = [
        "Operator Manual\nModel X-200",
        "Table of Contents\n"
        "1 Safety ........ 4\n"
        "1.1 General rules ........ 4\n"
        "1.2 Protective gear ........ 5\n"
        "2 Installation ........ 7",
        "2.1 Unpacking ........ 7\n"
        "2.2 Mounting ........ 8\n"
        "Appendix A Wiring diagrams ........ 10",
        "Safety\nAlways disconnect power before opening the housing.",
        "Wear gloves and eye protection.",
        "Keep the work area dry.",
        "Installation\nRemove the unit from its box.",
        "Name   Qty   Price\nBolt   10    2.50\nNut    20    0.75",
        "Fasten the bracket to the wall.",
        "Wiring\nSee the diagrams below.",
    ]
    return [PageText(page=i, text=t) for i, t in enumerate(texts, start=1)]


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a PDF with one page per text, using PyMuPDF."""
    import fitz

    def _make(texts: list[str], name: str = "doc.pdf") -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in texts:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text, fontsize=11)
        doc.save(path)
        doc.close()
        return path

    return _make
