"""
Keyword retrieval core for retrieval-augmented generation.

Passages are indexed as TF-IDF vectors over a shared, lexicographically ordered
vocabulary and ranked against queries by cosine similarity. The returned
passages are meant to be handed to an external text generator as context.
"""

from .contracts import (
    Document,
    GenerationConfig,
    IngestionFailure,
    IngestionReport,
    ScoredDocument,
)
from .exceptions import (
    DuplicateDocumentError,
    EmptyQueryError,
    IngestionError,
    RetrievalError,
)
from .index import TfidfIndex
from .loader import ingest_directory, split_into_chunks
from .ranker import cosine_similarity
from .retriever import GenerationEngine, Retriever
from .tokenizer import DEFAULT_STOPWORDS, normalize_text, tokenize

__all__ = [
    "DEFAULT_STOPWORDS",
    "Document",
    "DuplicateDocumentError",
    "EmptyQueryError",
    "GenerationConfig",
    "GenerationEngine",
    "IngestionError",
    "IngestionFailure",
    "IngestionReport",
    "Retriever",
    "RetrievalError",
    "ScoredDocument",
    "TfidfIndex",
    "cosine_similarity",
    "ingest_directory",
    "normalize_text",
    "split_into_chunks",
    "tokenize",
]
