"""Turn an exported notebook document into a ``Notebook``.

Headings and highlight texts are sibling elements in the export, so once the
skip patterns have removed bookmark entries the remaining nodes are consumed
in heading/text pairs.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from .models import Highlight, Notebook, ParseOptions
from .query import DocumentQuery, load_document

AUTHOR_SEPARATOR = "; "
NAME_SEPARATOR = ", "


def parse_authors(raw: str) -> tuple[str, ...]:
    """Convert ``"Last, First; Last, First"`` into ``("First Last", ...)``."""

    if not raw.strip():
        return ()

    authors: list[str] = []
    for token in raw.split(AUTHOR_SEPARATOR):
        parts = token.strip().split(NAME_SEPARATOR, 1)
        lastname = parts[0]
        firstname = parts[1] if len(parts) > 1 else ""
        authors.append(f"{firstname} {lastname}".strip())
    return tuple(authors)


def is_skipped(text: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """Return True when any pattern matches the whole of ``text``."""

    return any(pattern.fullmatch(text) for pattern in patterns)


def pair_highlights(texts: Sequence[str]) -> tuple[Highlight, ...]:
    """Group node texts two at a time into heading/text highlights."""

    highlights: list[Highlight] = []
    for index in range(0, len(texts), 2):
        heading = texts[index].strip()
        text = texts[index + 1].strip() if index + 1 < len(texts) else ""
        highlights.append(Highlight(heading=heading, text=text))
    return tuple(highlights)


def collect_highlight_texts(
    document: DocumentQuery, options: ParseOptions
) -> List[str]:
    """Return candidate texts across all highlight selectors, minus skips."""

    selector = ", ".join(options.highlight_selectors)
    texts = [document.text(node) for node in document.select(selector)]
    return [
        text for text in texts if not is_skipped(text, options.skip_patterns)
    ]


def parse_notebook(
    document: DocumentQuery | str,
    options: Optional[ParseOptions] = None,
) -> Notebook:
    """Extract title, authors and highlights from a notebook export."""

    resolved = options or ParseOptions()
    if isinstance(document, str):
        document = load_document(document)

    authors = parse_authors(document.select_text(resolved.authors_selector))
    title = document.select_text(resolved.title_selector)
    highlights = pair_highlights(collect_highlight_texts(document, resolved))

    return Notebook(title=title, authors=authors, highlights=highlights)
