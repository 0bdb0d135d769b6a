"""
Protocols for the document trees the extraction pipeline walks.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class DocumentNode(Protocol):
    """Minimal capability set of a parsed document element.

    The extraction pipeline never assumes a particular tree implementation;
    anything exposing these members can be located, filtered and scored.
    """

    @property
    def tag(self) -> str:
        """Lowercase tag name."""
        ...

    @property
    def classes(self) -> Sequence[str]:
        """Class tokens, in attribute order."""
        ...

    @property
    def element_id(self) -> str:
        """The id attribute, or an empty string."""
        ...

    @property
    def text(self) -> str:
        """Concatenated text content of the subtree."""
        ...

    def get_attribute(self, name: str) -> Optional[str]:
        ...

    def children(self) -> List[DocumentNode]:
        """Direct element children."""
        ...

    def descendants(self) -> Iterator[DocumentNode]:
        """All element descendants in document order, excluding the node itself."""
        ...

    def select(self, selector: str) -> List[DocumentNode]:
        """Descendants matching a CSS selector, in document order."""
        ...

    def select_one(self, selector: str) -> Optional[DocumentNode]:
        ...

    def clone(self) -> DocumentNode:
        """Deep copy that shares no state with the original."""
        ...

    def detach(self) -> None:
        """Remove this node from its tree."""
        ...
