# floorball_cal/scrapers/html_document.py
"""Thin query interface over a parsed HTML page.

The extractors only ever call the methods defined here, so the parser behind
them (currently BeautifulSoup with soupsieve CSS selectors) can be swapped
without touching extraction logic.
"""
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

HTML_PARSER = "html.parser"


class Element:
    """A single element of a parsed document."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def text(self) -> str:
        """Concatenated text of the element and all its descendants."""
        return self._tag.get_text()

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            # Multi-valued attributes such as class
            return " ".join(value)
        return value

    def closest(self, selector: str) -> Optional["Element"]:
        """Nearest ancestor-or-self matching ``selector``."""
        match = self._tag.css.closest(selector)
        return Element(match) if match is not None else None

    def query_all(self, selector: str) -> List["Element"]:
        return [Element(tag) for tag in self._tag.select(selector)]

    def __repr__(self) -> str:
        return f"Element(<{self._tag.name}>)"


class Document:
    """A parsed HTML page."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @classmethod
    def parse(cls, markup: str) -> "Document":
        return cls(BeautifulSoup(markup, HTML_PARSER))

    def query_all(self, selector: str) -> List[Element]:
        return [Element(tag) for tag in self._soup.select(selector)]
