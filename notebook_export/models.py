"""Shared dataclasses for notebook parsing and conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

DEFAULT_SKIP_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^Bookmark.*$"),
)


@dataclass(frozen=True, slots=True)
class Highlight:
    """One heading/text pair lifted from the notebook export."""

    heading: str = ""
    text: str = ""


@dataclass(frozen=True, slots=True)
class Notebook:
    """Parsed notebook: book title, display-order authors and highlights."""

    title: str = ""
    authors: tuple[str, ...] = ()
    highlights: tuple[Highlight, ...] = ()


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Selectors and skip rules used to pull a notebook out of the markup."""

    authors_selector: str = ".authors"
    title_selector: str = ".bookTitle"
    highlight_selectors: tuple[str, ...] = (".noteHeading", ".noteText")
    skip_patterns: tuple[re.Pattern[str], ...] = DEFAULT_SKIP_PATTERNS


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """Knobs controlling where converted notebooks are written."""

    extension: str = ".md"
    naming_strategy: str = "sanitize"
    source_extension: str = ".html"
    parse: ParseOptions = field(default_factory=ParseOptions)
