"""In-memory document collection."""

from typing import Optional, Tuple
import threading

from ...domain.entities import Document
from ...domain.repositories import DocumentRepository
from ...exceptions import DocumentError
from ...logging_config import get_logger

logger = get_logger(__name__)


class InMemoryDocumentRepository(DocumentRepository):
    """Process-local DocumentRepository.

    Documents are kept in an immutable tuple that is replaced on every write,
    so ``list_documents`` hands readers a snapshot that later uploads never
    touch.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._documents: Tuple[Document, ...] = ()

    def add_document(self, document: Document) -> str:
        with self._lock:
            if any(d.id == document.id for d in self._documents):
                raise DocumentError(
                    message=f"Document already exists: {document.id}",
                    details={"document_id": document.id, "name": document.name}
                )
            self._documents = self._documents + (document,)
        logger.info(f"Added document {document.id} ({document.name}, {document.chunk_count} chunks)")
        return document.id

    def get_document(self, document_id: str) -> Optional[Document]:
        for doc in self._documents:
            if doc.id == document_id:
                return doc
        return None

    def list_documents(self) -> Tuple[Document, ...]:
        return self._documents

    def delete_document(self, document_id: str) -> bool:
        with self._lock:
            remaining = tuple(d for d in self._documents if d.id != document_id)
            if len(remaining) == len(self._documents):
                return False
            self._documents = remaining
        logger.info(f"Deleted document: {document_id}")
        return True

    def count(self) -> int:
        return len(self._documents)

    def reset(self) -> None:
        with self._lock:
            self._documents = ()
        logger.info("Document collection reset")
