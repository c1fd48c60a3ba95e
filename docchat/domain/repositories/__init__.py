"""Repository interfaces package."""

from .llm_repository import LLMRepository
from .document_repository import DocumentRepository
from .extractor_repository import TextExtractor

__all__ = [
    'LLMRepository',
    'DocumentRepository',
    'TextExtractor'
]
