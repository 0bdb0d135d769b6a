"""
Sentence segmentation for extractive summarization.
"""

from __future__ import annotations

import re
from typing import List

from .models import Sentence

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
WHITESPACE_RUN = re.compile(r"\s+")


def split_sentences(text: str, min_length: int = 30) -> List[Sentence]:
    """
    Split text on runs of ``.``, ``!`` and ``?``.

    Fragments shorter than ``min_length`` characters after trimming are
    dropped; indices are assigned to the surviving sentences only.

    ``token_count`` is measured on the untrimmed fragment, so the space that
    follows each terminator counts as an empty leading token.
    """
    sentences: List[Sentence] = []
    for fragment in SENTENCE_BOUNDARY.split(text):
        trimmed = fragment.strip()
        if len(trimmed) < min_length:
            continue
        sentences.append(
            Sentence(
                text=trimmed,
                original_index=len(sentences),
                token_count=len(WHITESPACE_RUN.split(fragment)),
            )
        )
    return sentences
