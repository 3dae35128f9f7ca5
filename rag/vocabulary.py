"""Vocabulary, postings and inverse document frequency bookkeeping."""

from __future__ import annotations

import bisect
import math
from typing import Dict, Iterable, List, Set, Tuple


class Vocabulary:
    """Append-only term set with a postings index and IDF table.

    Term axes are kept in lexicographic order so vectors built at different
    times line up dimension by dimension. Document frequencies come from the
    postings index (``term -> document ids``), which is updated in time
    proportional to the unique terms of each new document instead of
    rescanning the corpus.
    """

    def __init__(self) -> None:
        self._terms: List[str] = []
        self._postings: Dict[str, Set[str]] = {}
        self._documents: Set[str] = set()
        self._idf: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    @property
    def terms(self) -> Tuple[str, ...]:
        return tuple(self._terms)

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def index_of(self, term: str) -> int:
        """Return the vector axis assigned to ``term``."""

        position = bisect.bisect_left(self._terms, term)
        if position == len(self._terms) or self._terms[position] != term:
            raise KeyError(f"Term '{term}' is not in the vocabulary")
        return position

    def observe(self, document_id: str, terms: Iterable[str]) -> List[str]:
        """Record a document's terms; return the terms that were new."""

        self._documents.add(document_id)
        added: List[str] = []
        for term in set(terms):
            postings = self._postings.get(term)
            if postings is None:
                postings = self._postings[term] = set()
                bisect.insort(self._terms, term)
                added.append(term)
            postings.add(document_id)
        return sorted(added)

    def document_frequency(self, term: str) -> int:
        return len(self._postings.get(term, ()))

    def idf(self, term: str) -> float:
        """IDF weight of ``term``; 0.0 for terms the table does not know."""

        return self._idf.get(term, 0.0)

    def idf_table(self) -> Dict[str, float]:
        return dict(self._idf)

    def refresh_idf(self) -> None:
        """Rebuild the IDF table from scratch.

        ``idf(t) = ln(1 + N / (1 + df(t)))`` where ``N`` is the number of
        observed documents.
        """

        total = self.document_count
        self._idf = {
            term: math.log(1 + total / (1 + len(postings)))
            for term, postings in self._postings.items()
        }
