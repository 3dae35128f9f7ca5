"""Error types raised by the retrieval core."""

from __future__ import annotations


class RetrievalError(Exception):
    """Base class for retrieval failures."""


class EmptyQueryError(RetrievalError, ValueError):
    """Raised when a query is blank after trimming."""

    def __init__(self, query: str = "") -> None:
        super().__init__("Query must contain non-whitespace text")
        self.query = query


class DuplicateDocumentError(RetrievalError, KeyError):
    """Raised when a generated identifier is already present in the store."""

    def __init__(self, document_id: str) -> None:
        super().__init__(f"Document '{document_id}' is already stored")
        self.document_id = document_id


class IngestionError(RetrievalError):
    """Wraps a failure to load or ingest a single passage."""

    def __init__(self, source: str, cause: BaseException) -> None:
        super().__init__(f"Failed to ingest {source}: {cause}")
        self.source = source
        self.cause = cause
