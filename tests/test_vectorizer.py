"""Tests for TF-IDF vector construction."""

from __future__ import annotations

import pytest

from rag.vectorizer import term_frequencies, vectorize
from rag.vocabulary import Vocabulary


def _vocabulary() -> Vocabulary:
    vocab = Vocabulary()
    vocab.observe("d1", ["cat", "sat", "mat"])
    vocab.observe("d2", ["dogs", "loyal", "animals"])
    vocab.refresh_idf()
    return vocab


def test_term_frequencies_are_shares_of_tokens() -> None:
    assert term_frequencies(["cat", "cat", "mat", "sat"]) == {"cat": 0.5, "mat": 0.25, "sat": 0.25}
    assert term_frequencies([]) == {}


def test_vectorize_follows_vocabulary_axes() -> None:
    vocab = _vocabulary()
    vector = vectorize(["cat", "cat", "mat"], vocab)
    assert len(vector) == len(vocab)
    assert vector[vocab.index_of("cat")] == pytest.approx(2 / 3 * vocab.idf("cat"))
    assert vector[vocab.index_of("mat")] == pytest.approx(1 / 3 * vocab.idf("mat"))
    assert vector[vocab.index_of("dogs")] == 0.0


def test_vectorize_ignores_unknown_terms_and_stays_non_negative() -> None:
    vocab = _vocabulary()
    vector = vectorize(["zebra", "cat"], vocab)
    assert len(vector) == len(vocab)
    assert all(weight >= 0 for weight in vector)
    assert vector[vocab.index_of("cat")] == pytest.approx(0.5 * vocab.idf("cat"))


def test_vectorize_empty_tokens_gives_zero_vector() -> None:
    vocab = _vocabulary()
    assert vectorize([], vocab) == [0.0] * len(vocab)
