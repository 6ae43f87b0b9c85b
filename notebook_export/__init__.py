"""Convert exported e-reader notebooks into Markdown documents."""

from .formats.markdown import to_markdown
from .models import ConversionOptions, Highlight, Notebook, ParseOptions
from .naming import (
    NAMING_STRATEGIES,
    get_naming_strategy,
    preserve_filename,
    sanitize_filename,
)
from .parser import parse_authors, parse_notebook
from .pipeline import (
    ConversionError,
    ConversionResult,
    MissingFileError,
    UnsupportedFileTypeError,
    convert_notebook,
    process_paths,
)
from .query import DocumentQuery, SoupDocument, load_document

__all__ = [
    "NAMING_STRATEGIES",
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "DocumentQuery",
    "Highlight",
    "MissingFileError",
    "Notebook",
    "ParseOptions",
    "SoupDocument",
    "UnsupportedFileTypeError",
    "convert_notebook",
    "get_naming_strategy",
    "load_document",
    "parse_authors",
    "parse_notebook",
    "preserve_filename",
    "process_paths",
    "sanitize_filename",
    "to_markdown",
]
