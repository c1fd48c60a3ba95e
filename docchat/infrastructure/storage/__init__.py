"""Storage infrastructure module."""

from .memory_document_repository import InMemoryDocumentRepository

__all__ = ['InMemoryDocumentRepository']
