"""Domain entities for documents and retrieval results."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
from datetime import datetime


@dataclass(frozen=True)
class Document:
    """An ingested file: its extracted text and the chunks cut from it."""
    id: str
    name: str
    raw_text: str
    chunks: Tuple[str, ...] = ()
    file_type: str = ""
    size: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Document ID cannot be empty")
        if not self.name:
            raise ValueError("Document name cannot be empty")
        if self.size < 0:
            raise ValueError("Document size must be non-negative")
        # Accept any sequence but store a tuple
        object.__setattr__(self, 'chunks', tuple(self.chunks))

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    @property
    def char_count(self) -> int:
        return len(self.raw_text)


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk scored against one query; lives only for a single retrieval call."""
    text: str
    score: int
    source_name: str
    document_id: str = ""
    chunk_index: int = 0

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError("Score must be non-negative")
        if self.chunk_index < 0:
            raise ValueError("Chunk index must be non-negative")
