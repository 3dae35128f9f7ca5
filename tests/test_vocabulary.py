"""Tests for vocabulary and IDF bookkeeping."""

from __future__ import annotations

import math

import pytest

from rag.vocabulary import Vocabulary


def test_vocabulary_orders_terms_lexicographically() -> None:
    vocab = Vocabulary()
    vocab.observe("d1", ["mat", "cat", "sat"])
    vocab.observe("d2", ["dogs", "cat"])
    assert vocab.terms == ("cat", "dogs", "mat", "sat")
    assert vocab.index_of("dogs") == 1
    with pytest.raises(KeyError):
        vocab.index_of("zebra")


def test_observe_reports_only_new_terms() -> None:
    vocab = Vocabulary()
    assert vocab.observe("d1", ["b", "a", "a"]) == ["a", "b"]
    assert vocab.observe("d2", ["a", "c"]) == ["c"]
    assert len(vocab) == 3


def test_refresh_idf_matches_formula() -> None:
    vocab = Vocabulary()
    vocab.observe("d1", ["cat", "mat"])
    vocab.observe("d2", ["cat", "dogs"])
    vocab.observe("d3", ["birds"])
    vocab.refresh_idf()
    assert vocab.document_frequency("cat") == 2
    assert vocab.idf("cat") == pytest.approx(math.log(1 + 3 / 3))
    assert vocab.idf("mat") == pytest.approx(math.log(1 + 3 / 2))
    assert vocab.idf("unknown") == 0.0
    assert vocab.idf_table() == {term: vocab.idf(term) for term in vocab.terms}


def test_idf_is_stale_until_refreshed() -> None:
    vocab = Vocabulary()
    vocab.observe("d1", ["cat"])
    assert vocab.idf("cat") == 0.0
    vocab.refresh_idf()
    assert vocab.idf("cat") > 0
