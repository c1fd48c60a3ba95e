"""Domain entities package."""

from .document import Document, ScoredChunk
from .answer import ChatAnswer

__all__ = [
    'Document',
    'ScoredChunk',
    'ChatAnswer'
]
