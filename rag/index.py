"""In-memory TF-IDF index over free-text passages."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import AbstractSet, Callable, Iterable, List, Optional, Union

from .contracts import Document, IngestionFailure, IngestionReport, ScoredDocument
from .exceptions import DuplicateDocumentError, EmptyQueryError, RetrievalError
from .ranker import rank
from .store import DocumentStore
from .tokenizer import DEFAULT_STOPWORDS, tokenize
from .vectorizer import term_frequencies, vectorize, weigh
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)

Content = Union[str, bytes]


def _new_document_id() -> str:
    return str(uuid.uuid4())


def _as_text(content: Content) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    if isinstance(content, str):
        return content
    raise TypeError(f"Expected str or bytes, got {type(content).__name__}")


class TfidfIndex:
    """Keyword retriever scoring passages by TF-IDF cosine similarity.

    Every ``add`` refreshes the IDF table and recomputes all stored
    embeddings, so stored vectors and query vectors always share the current
    vocabulary's dimensions. That keeps the vector space consistent at the
    cost of ``O(documents x vocabulary)`` work per ingestion, which is fine
    for a few thousand passages and not beyond. A new document is inserted
    without an embedding and receives its first one from that recompute, i.e.
    against the IDF table that already counts it.

    A single re-entrant lock serialises ``add`` and ``search`` so readers
    never observe a half-updated vocabulary, IDF table or store.
    """

    def __init__(
        self,
        stopwords: Optional[AbstractSet[str]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.stopwords: AbstractSet[str] = frozenset(DEFAULT_STOPWORDS if stopwords is None else stopwords)
        self._id_factory = id_factory or _new_document_id
        self._vocabulary = Vocabulary()
        self._store = DocumentStore()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._store)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def documents(self) -> List[Document]:
        with self._lock:
            return list(self._store)

    def tokenize(self, text: str) -> List[str]:
        return tokenize(text, self.stopwords)

    def add(self, content: Content) -> str:
        """Ingest a passage and return its generated identifier."""

        text = _as_text(content)
        tokens = self.tokenize(text)
        frequencies = term_frequencies(tokens)
        with self._lock:
            document_id = self._id_factory()
            if document_id in self._store:
                raise DuplicateDocumentError(document_id)
            new_terms = self._vocabulary.observe(document_id, tokens)
            self._store.insert(Document(id=document_id, content=text), frequencies)
            self._vocabulary.refresh_idf()
            self._store.reembed(lambda freqs: weigh(freqs, self._vocabulary))
        logger.debug(
            "Indexed document",
            extra={"document_id": document_id, "tokens": len(tokens), "new_terms": len(new_terms)},
        )
        return document_id

    def add_many(self, contents: Iterable[Content]) -> IngestionReport:
        """Ingest a batch; a failing item is reported without stopping the rest."""

        report = IngestionReport()
        for position, content in enumerate(contents):
            try:
                report.document_ids.append(self.add(content))
            except (RetrievalError, TypeError) as exc:
                logger.warning("Skipping passage", extra={"position": position, "error": str(exc)})
                report.failures.append(IngestionFailure(source=f"#{position}", error=str(exc)))
        logger.info(
            "Batch ingestion finished",
            extra={"ingested": len(report.document_ids), "failed": len(report.failures)},
        )
        return report

    def vector_for(self, text: str) -> List[float]:
        """Return the transient TF-IDF vector of ``text`` under current weights."""

        with self._lock:
            return vectorize(self.tokenize(text), self._vocabulary)

    def search_scored(self, query: str, top_k: int = 3) -> List[ScoredDocument]:
        """Return the ``top_k`` documents most similar to ``query`` with scores.

        A blank query raises ``EmptyQueryError`` only when there is something
        to search; with ``top_k == 0`` or an empty store the result is ``[]``.
        """

        if top_k < 0:
            raise ValueError("top_k must be non-negative")
        with self._lock:
            if top_k == 0 or not len(self._store):
                return []
            if not query or not query.strip():
                raise EmptyQueryError(query)
            query_vector = vectorize(self.tokenize(query), self._vocabulary)
            hits = rank(query_vector, self._store, top_k)
        logger.debug("Search finished", extra={"hits": len(hits), "top_k": top_k})
        return hits

    def search(self, query: str, top_k: int = 3) -> List[str]:
        """Return the contents of the ``top_k`` most relevant passages."""

        return [hit.content for hit in self.search_scored(query, top_k)]
