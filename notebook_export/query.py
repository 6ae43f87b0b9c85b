"""BeautifulSoup-backed document queries used by the notebook parser."""

from __future__ import annotations

from typing import Any, List, Protocol

from bs4 import BeautifulSoup  # type: ignore[import-not-found]


class DocumentQuery(Protocol):
    """Minimal selector interface the parser is written against."""

    def select(self, selector: str) -> List[Any]:
        ...

    def text(self, node: Any) -> str:
        ...

    def select_text(self, selector: str) -> str:
        ...


class SoupDocument:
    """Wraps a parsed ``BeautifulSoup`` tree behind ``DocumentQuery``."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    def select(self, selector: str) -> List[Any]:
        """Return every node matching ``selector`` in document order."""

        return list(self.soup.select(selector))

    def text(self, node: Any) -> str:
        """Return the trimmed text content of ``node``."""

        return node.get_text().strip()

    def select_text(self, selector: str) -> str:
        """Return the joined text of all matches, or ``""`` when none."""

        return "".join(node.get_text() for node in self.select(selector)).strip()


def load_document(html: str) -> SoupDocument:
    """Parse raw markup into a queryable document."""

    return SoupDocument(BeautifulSoup(html, "lxml"))
