"""Text normalisation and tokenisation."""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import AbstractSet, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
        "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
        "to", "was", "were", "will", "with",
    }
)

NON_WORD_RE = re.compile(r"[^\w\s]")


def _normalize_char(char: str) -> str:
    try:
        return unicodedata.normalize("NFC", char).lower()
    except (TypeError, ValueError, UnicodeError):
        logger.warning("Passing through character that failed normalisation", extra={"codepoint": ord(char)})
        return char


def normalize_text(text: str) -> str:
    """Apply NFC normalisation and lowercase folding.

    Characters that cannot be normalised are kept as they are so a single bad
    codepoint never costs the whole passage.
    """

    try:
        return unicodedata.normalize("NFC", text).lower()
    except (TypeError, ValueError, UnicodeError):
        return "".join(_normalize_char(char) for char in text)


def tokenize(text: str, stopwords: Optional[AbstractSet[str]] = None) -> List[str]:
    """Split text into normalised terms, dropping stopwords.

    Example: ``tokenize("The a an cat sat") -> ["cat", "sat"]``
    """

    if not text:
        return []
    stop = DEFAULT_STOPWORDS if stopwords is None else stopwords
    cleaned = NON_WORD_RE.sub(" ", normalize_text(text))
    return [token for token in cleaned.split() if token not in stop]
