"""Cosine similarity scoring and top-k ranking."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from .contracts import Document, ScoredDocument


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        ValueError: If the vectors have different dimensions
    """
    if len(vec_a) != len(vec_b):
        raise ValueError(f"Vector dimensions must match: {len(vec_a)} != {len(vec_b)}")

    dot_product = sum(a * b for a, b in zip(vec_a, vec_b))
    magnitude_a = math.sqrt(sum(a * a for a in vec_a))
    magnitude_b = math.sqrt(sum(b * b for b in vec_b))

    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    # clamp float drift
    return max(-1.0, min(1.0, dot_product / (magnitude_a * magnitude_b)))


def rank(query_vector: Sequence[float], documents: Iterable[Document], top_k: int) -> List[ScoredDocument]:
    """Score every document against the query and keep the best ``top_k``.

    Ordering is by score descending, then by document id ascending so equal
    scores always come back in the same order.
    """
    if top_k < 0:
        raise ValueError("top_k must be non-negative")
    if top_k == 0:
        return []

    scored = [
        ScoredDocument(document=document, score=cosine_similarity(document.embedding, query_vector))
        for document in documents
    ]
    scored.sort(key=lambda hit: (-hit.score, hit.document.id))
    return scored[:top_k]
