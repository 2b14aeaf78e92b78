"""
Configuration for pdf2docs structure extraction.

Options can be set in code or loaded from a YAML file:

    max_depth: 2
    fallback_mode: heading
    slug_prefix: manual
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Literal

import yaml

from pdf2docs.exceptions import ConfigurationError

DEFAULT_REPAIR_INSTRUCTION = (
    "Fix and normalize this Table of Contents to one entry per line as "
    "'NUMBER TITLE .... PAGE', keep order, no extra text."
)

FALLBACK_MODES = ("page", "heading")
EXTRACTION_ERROR_MODES = ("raise", "warn")


@dataclass
class ConversionConfig:
    """
    Configuration for document structure extraction.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = ConversionConfig(
        ...     max_depth=2,
        ...     fallback_mode="heading",
        ... )
        >>> structure = pdf2docs.convert("manual.pdf", config)
    """

    # Table of contents
    use_toc: bool = True
    max_depth: int = 3  # Entries deeper than this are dropped
    toc_page_scan_budget: int = 16  # Early pages scanned for a multi-page ToC

    # Used when no ToC is found
    fallback_mode: Literal["page", "heading"] = "page"

    # Output addressing
    slug_prefix: str | None = None

    # Page text options
    transform_tables: bool = True

    # Sent to the ToC repair service along with the raw ToC lines
    repair_instruction: str = DEFAULT_REPAIR_INSTRUCTION

    # Error handling
    on_extraction_error: Literal["raise", "warn"] = "warn"

    def __post_init__(self):
        """Validate configuration."""
        self._check_types()

        if self.max_depth < 1:
            raise ConfigurationError(f"max_depth must be >= 1, got {self.max_depth}")

        if self.toc_page_scan_budget < 1:
            raise ConfigurationError(
                f"toc_page_scan_budget must be >= 1, got {self.toc_page_scan_budget}"
            )

        if self.fallback_mode not in FALLBACK_MODES:
            raise ConfigurationError(
                f"fallback_mode must be one of {FALLBACK_MODES}, got {self.fallback_mode!r}"
            )

        if self.on_extraction_error not in EXTRACTION_ERROR_MODES:
            raise ConfigurationError(
                f"on_extraction_error must be one of {EXTRACTION_ERROR_MODES}, "
                f"got {self.on_extraction_error!r}"
            )

        if self.slug_prefix is not None and not self.slug_prefix.strip():
            self.slug_prefix = None

    def _check_types(self):
        """Reject option values of the wrong type."""
        # YAML reads an unquoted prefix like 2024 as a number
        if isinstance(self.slug_prefix, (int, float)) and not isinstance(self.slug_prefix, bool):
            self.slug_prefix = str(self.slug_prefix)

        expected = {
            "use_toc": (bool,),
            "max_depth": (int,),
            "toc_page_scan_budget": (int,),
            "fallback_mode": (str,),
            "slug_prefix": (str, type(None)),
            "transform_tables": (bool,),
            "repair_instruction": (str,),
            "on_extraction_error": (str,),
        }
        for name, types in expected.items():
            value = getattr(self, name)
            # bool is an int subclass; True is not a depth
            if not isinstance(value, types) or (isinstance(value, bool) and bool not in types):
                names = " or ".join("None" if t is type(None) else t.__name__ for t in types)
                raise ConfigurationError(
                    f"{name} must be {names}, got {type(value).__name__} {value!r}"
                )

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain mapping."""
        return asdict(self)


def load_config(path: str | Path) -> ConversionConfig:
    """Load a ConversionConfig from a YAML file.

    Args:
        path: Path to a YAML file holding a mapping of config options.

    Returns:
        Validated ConversionConfig.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigurationError: If the YAML is malformed, isn't a mapping,
            names unknown options or holds invalid values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ConversionConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ConversionConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config options in {path}: {', '.join(unknown)}")

    return ConversionConfig(**data)
