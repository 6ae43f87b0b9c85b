"""Render a parsed notebook as Markdown."""

from __future__ import annotations

from ..models import Notebook

AUTHOR_JOINER = " and "


def render_header(notebook: Notebook) -> str:
    return f"# {notebook.title}, by {AUTHOR_JOINER.join(notebook.authors)}"


def to_markdown(notebook: Notebook) -> str:
    """Return the Markdown document for ``notebook``.

    Heading and text are emitted verbatim; nothing is escaped.
    """

    blocks: list[str] = [render_header(notebook)]
    for highlight in notebook.highlights:
        blocks.append(f"## {highlight.heading}\n\n{highlight.text}")
    # No highlights leaves just the header line, with no trailing separator.
    return "\n\n".join(blocks) + "\n"
