"""
Removal of navigation, advertising and other non-content subtrees.
"""

from __future__ import annotations

from typing import Optional

import structlog

from ..config.config import NoiseRules
from .protocols import DocumentNode

logger = structlog.get_logger(__name__)


class NoiseFilter:
    """
    Strips block-listed subtrees from a copy of a document tree.

    A node is noise when its tag is block-listed, when one of its class
    tokens or its id equals a block-listed name, or when a class token or
    the id contains a block-listed substring (``ad-`` for instance). The
    node passed in is never removed itself, only its descendants.
    """

    def __init__(self, rules: Optional[NoiseRules] = None) -> None:
        self.rules = rules or NoiseRules()
        self._tags = frozenset(tag.lower() for tag in self.rules.tags)
        self._classes = frozenset(self.rules.classes)
        self._ids = frozenset(self.rules.ids)

    def is_noise(self, node: DocumentNode) -> bool:
        if node.tag in self._tags:
            return True

        for token in node.classes:
            if token in self._classes:
                return True
            if any(fragment in token for fragment in self.rules.class_substrings):
                return True

        element_id = node.element_id
        if element_id:
            if element_id in self._ids:
                return True
            if any(fragment in element_id for fragment in self.rules.id_substrings):
                return True

        return False

    def filter(self, node: DocumentNode) -> DocumentNode:
        """Return a noise-free copy of ``node``; the original is left untouched."""
        clone = node.clone()
        removed = self._strip(clone)
        logger.debug("Noise filtered", root=node.tag, removed=removed)
        return clone

    def _strip(self, node: DocumentNode) -> int:
        removed = 0
        for child in node.children():
            if self.is_noise(child):
                child.detach()
                removed += 1
            else:
                removed += self._strip(child)
        return removed
