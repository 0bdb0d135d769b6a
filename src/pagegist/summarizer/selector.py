"""
Top-k sentence selection that keeps document order.
"""

from __future__ import annotations

from typing import Sequence

from .models import ScoredSentence, Summary


class SummarySelector:
    def __init__(self, max_points: int = 4) -> None:
        self.max_points = max_points

    def select(self, scored: Sequence[ScoredSentence], k: int | None = None) -> Summary:
        """Keep the ``k`` best sentences, returned in their original order.

        The sort is stable, so among equal scores the earlier sentence wins.
        """
        if k is None:
            k = self.max_points
        top = sorted(scored, key=lambda item: item.score, reverse=True)[:k]
        return tuple(item.text for item in sorted(top, key=lambda item: item.original_index))
