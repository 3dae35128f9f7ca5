"""Tests for cosine similarity and ranking."""

from __future__ import annotations

import math

import pytest

from rag.contracts import Document
from rag.ranker import cosine_similarity, rank


def test_cosine_similarity_basic_cases() -> None:
    assert cosine_similarity([1.0, 0.0], [2.0, 0.0]) == pytest.approx(1.0)
    assert cosine_similarity([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.0)
    assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0)


def test_cosine_similarity_zero_vector_is_zero_not_nan() -> None:
    score = cosine_similarity([0.0, 0.0], [1.0, 2.0])
    assert score == 0.0
    assert not math.isnan(score)


def test_cosine_similarity_rejects_dimension_mismatch() -> None:
    with pytest.raises(ValueError):
        cosine_similarity([1.0], [1.0, 0.0])


def test_rank_orders_by_score_then_id() -> None:
    documents = [
        Document(id="b", content="b", embedding=[1.0, 0.0]),
        Document(id="a", content="a", embedding=[1.0, 0.0]),
        Document(id="c", content="c", embedding=[0.0, 1.0]),
    ]
    hits = rank([1.0, 0.0], documents, top_k=3)
    assert [hit.document.id for hit in hits] == ["a", "b", "c"]
    assert [hit.score for hit in hits] == sorted((hit.score for hit in hits), reverse=True)


def test_rank_respects_top_k() -> None:
    documents = [Document(id=str(i), content=str(i), embedding=[1.0]) for i in range(5)]
    assert len(rank([1.0], documents, top_k=2)) == 2
    assert rank([1.0], documents, top_k=0) == []
    with pytest.raises(ValueError):
        rank([1.0], documents, top_k=-1)
