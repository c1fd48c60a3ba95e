"""Chat answer domain entity."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class ChatAnswer:
    """Result of answering one question against the document collection."""
    question: str
    answer: str
    context: str = ""
    sources: List[str] = field(default_factory=list)

    @property
    def grounded(self) -> bool:
        """True when the answer was generated with document context."""
        return bool(self.context)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "answer": self.answer,
            "context": self.context,
            "sources": list(self.sources),
            "grounded": self.grounded,
        }
