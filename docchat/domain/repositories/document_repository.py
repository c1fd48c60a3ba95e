"""Document repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..entities import Document


class DocumentRepository(ABC):
    """Abstract interface for the ingested document collection."""

    @abstractmethod
    def add_document(self, document: Document) -> str:
        """Append document and return its ID."""
        pass

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Document]:
        """Get document by ID."""
        pass

    @abstractmethod
    def list_documents(self) -> Tuple[Document, ...]:
        """Snapshot of all documents in ingestion order."""
        pass

    @abstractmethod
    def delete_document(self, document_id: str) -> bool:
        """Delete document and return success status."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of documents in the collection."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Remove every document."""
        pass
