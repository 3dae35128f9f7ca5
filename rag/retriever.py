"""Retrieval facade used by the question-answering loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .contracts import GenerationConfig
from .exceptions import EmptyQueryError
from .index import Content, TfidfIndex


class GenerationEngine(Protocol):
    """Anything that turns a question plus context passages into an answer."""

    def generate(self, query: str, context: Sequence[str], config: GenerationConfig) -> str:
        ...


@dataclass
class Retriever:
    """Owns a knowledge base and supplies grounding context for generation."""

    index: TfidfIndex = field(default_factory=TfidfIndex)
    generation_config: GenerationConfig = field(default_factory=GenerationConfig)

    def add_to_knowledge_base(self, content: Content) -> str:
        return self.index.add(content)

    def retrieve(self, query: str, top_k: int = 3) -> List[str]:
        """Return the most relevant passages for ``query``."""

        return self.index.search(query, top_k=top_k)

    def answer(
        self,
        query: str,
        engine: GenerationEngine,
        top_k: int = 3,
        config: Optional[GenerationConfig] = None,
    ) -> str:
        """Retrieve context for ``query`` and delegate the answer to ``engine``.

        Engine errors propagate to the caller unchanged.
        """

        query = query.strip()
        if not query:
            raise EmptyQueryError(query)
        context = self.retrieve(query, top_k=top_k)
        return engine.generate(query, context, config or self.generation_config)
