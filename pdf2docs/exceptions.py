"""
Exception classes for pdf2docs.

Structure extraction itself never raises: unparseable ToC lines are
skipped, a missing ToC falls back to flat sections and a failing repair
service leaves the raw lines in place. Exceptions are reserved for the
edges, where input files are opened and options are read.

Example:
    >>> try:
    ...     structure = pdf2docs.convert("manual.pdf", config)
    ... except pdf2docs.ExtractionError as e:
    ...     print(f"Could not read the PDF: {e}")
    ... except pdf2docs.Pdf2DocsError as e:
    ...     print(f"pdf2docs error: {e}")
"""


class Pdf2DocsError(Exception):
    """Base exception for all pdf2docs errors."""

    pass


class UnsupportedFormatError(Pdf2DocsError):
    """
    Raised when the input is not a PDF.

    A file counts as a PDF when its extension is .pdf or its
    content starts with the %PDF header.
    """

    pass


class ExtractionError(Pdf2DocsError):
    """
    Raised when PyMuPDF can't open or read the PDF.

    Typical causes are truncated or encrypted files and files with a
    .pdf extension that hold something else. Only raised with
    on_extraction_error="raise"; in "warn" mode the failure is logged
    and convert() returns an empty DocumentStructure whose
    processing_log starts with "Extraction failed".
    """

    pass


class ConfigurationError(Pdf2DocsError):
    """
    Raised for invalid options, in code or in a YAML config file.

    Covers out-of-range values, unknown fallback or error modes,
    values of the wrong type and unknown keys in load_config().
    """

    pass
