"""Corpus loading and chunking helpers feeding the index."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional

from .contracts import IngestionFailure, IngestionReport
from .exceptions import IngestionError, RetrievalError
from .index import TfidfIndex

logger = logging.getLogger(__name__)

SENTENCE_END_RE = re.compile(r"[.!?]")


def split_into_chunks(text: str, max_chars: int) -> List[str]:
    """
    Pack sentences into chunks of roughly ``max_chars`` characters.

    Sentences end at ``.``, ``!`` or ``?`` and are re-terminated with a period.
    A single sentence longer than ``max_chars`` becomes its own chunk.
    Example: split_into_chunks("One. Two. Three.", 10) -> ["One. Two.", "Three."]
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be positive")

    chunks: List[str] = []
    current: List[str] = []
    current_len = 0

    for sentence in SENTENCE_END_RE.split(text):
        sentence = sentence.strip()
        if not sentence:
            continue
        if current and current_len + len(sentence) + 2 > max_chars:
            chunks.append(" ".join(current))
            current, current_len = [], 0
        if current:
            current_len += 1
        current.append(sentence + ".")
        current_len += len(sentence) + 1

    if current:
        chunks.append(" ".join(current))
    return chunks


def iter_text_files(directory: Path) -> Iterator[Path]:
    """Yield ``.txt`` files below ``directory`` in a stable order."""

    for path in sorted(directory.rglob("*.txt")):
        if path.is_file():
            yield path


def _read_text_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IngestionError(str(path), exc) from exc


def ingest_directory(
    index: TfidfIndex,
    directory: str | Path,
    chunk_max_chars: Optional[int] = None,
) -> IngestionReport:
    """Load every text file under ``directory`` into ``index``.

    Without ``chunk_max_chars`` each file becomes one passage. A file that
    cannot be read is recorded in the report and the remaining files are
    still ingested.
    """

    root = Path(directory)
    report = IngestionReport()
    if not root.is_dir():
        logger.warning("Document directory not found", extra={"path": str(root)})
        return report

    for path in iter_text_files(root):
        try:
            text = _read_text_file(path)
            passages = split_into_chunks(text, chunk_max_chars) if chunk_max_chars else [text]
            for passage in passages:
                report.document_ids.append(index.add(passage))
        except RetrievalError as exc:
            logger.warning("Skipping document", extra={"path": str(path), "error": str(exc)})
            report.failures.append(IngestionFailure(source=str(path), error=str(exc)))

    logger.info(
        "Loaded documents",
        extra={"path": str(root), "ingested": len(report.document_ids), "failed": len(report.failures)},
    )
    return report
