"""Append-only document storage."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Mapping, Optional

from .contracts import Document
from .exceptions import DuplicateDocumentError


class DocumentStore:
    """Insertion-ordered store of passages and their embeddings.

    Term frequencies are kept next to each document so embeddings can be
    rebuilt without tokenising the content again.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}
        self._frequencies: Dict[str, Dict[str, float]] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents.values()))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def get(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def frequencies(self, document_id: str) -> Dict[str, float]:
        return dict(self._frequencies[document_id])

    def insert(self, document: Document, frequencies: Mapping[str, float]) -> None:
        if document.id in self._documents:
            raise DuplicateDocumentError(document.id)
        self._documents[document.id] = document
        self._frequencies[document.id] = dict(frequencies)

    def reembed(self, embed: Callable[[Mapping[str, float]], List[float]]) -> None:
        """Replace every embedding with ``embed(term_frequencies)``."""

        refreshed = {
            document_id: document.model_copy(update={"embedding": embed(self._frequencies[document_id])})
            for document_id, document in self._documents.items()
        }
        self._documents = refreshed
