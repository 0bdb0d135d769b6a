"""
BeautifulSoup adapter for the DocumentNode protocol.
"""

from __future__ import annotations

import copy
from typing import Iterator, List, Optional, Sequence, Union

from bs4 import BeautifulSoup, Tag

from .protocols import DocumentNode

DEFAULT_PARSER = "html.parser"


class SoupNode:
    """Wraps a BeautifulSoup ``Tag`` (or a whole document) as a DocumentNode."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Union[Tag, BeautifulSoup]) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag}>)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def raw(self) -> Union[Tag, BeautifulSoup]:
        """The wrapped BeautifulSoup object."""
        return self._tag

    @property
    def tag(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def classes(self) -> Sequence[str]:
        value = self._tag.get("class")
        if not value:
            return ()
        if isinstance(value, str):
            return tuple(value.split())
        return tuple(value)

    @property
    def element_id(self) -> str:
        value = self._tag.get("id")
        if isinstance(value, list):
            return " ".join(value)
        return value or ""

    @property
    def text(self) -> str:
        return self._tag.get_text()

    def get_attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def children(self) -> List[DocumentNode]:
        return [SoupNode(child) for child in self._tag.children if isinstance(child, Tag)]

    def descendants(self) -> Iterator[DocumentNode]:
        for element in self._tag.find_all(True):
            yield SoupNode(element)

    def select(self, selector: str) -> List[DocumentNode]:
        return [SoupNode(element) for element in self._tag.select(selector)]

    def select_one(self, selector: str) -> Optional[DocumentNode]:
        element = self._tag.select_one(selector)
        return SoupNode(element) if element is not None else None

    def clone(self) -> DocumentNode:
        return SoupNode(copy.copy(self._tag))

    def detach(self) -> None:
        self._tag.extract()


def parse_html(html: str, parser: str = DEFAULT_PARSER) -> SoupNode:
    """Parse an HTML string into a document node."""
    return SoupNode(BeautifulSoup(html, parser))
