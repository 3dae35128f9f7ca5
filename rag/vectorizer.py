"""TF-IDF vector construction."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Mapping, Sequence

from .vocabulary import Vocabulary


def term_frequencies(tokens: Sequence[str]) -> Dict[str, float]:
    """Return each term's share of the token sequence."""

    if not tokens:
        return {}
    total = len(tokens)
    return {term: count / total for term, count in Counter(tokens).items()}


def weigh(frequencies: Mapping[str, float], vocabulary: Vocabulary) -> List[float]:
    """Lay out ``tf * idf`` weights along the vocabulary's axes."""

    vector = [0.0] * len(vocabulary)
    for term, tf in frequencies.items():
        if term not in vocabulary:
            continue
        vector[vocabulary.index_of(term)] = tf * vocabulary.idf(term)
    return vector


def vectorize(tokens: Sequence[str], vocabulary: Vocabulary) -> List[float]:
    """Build the TF-IDF vector for ``tokens`` against the current vocabulary.

    The result always has ``len(vocabulary)`` dimensions; an empty token
    sequence yields the all-zero vector.
    """

    return weigh(term_frequencies(tokens), vocabulary)
