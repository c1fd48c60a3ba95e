"""Document ingestion use case."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
import uuid

from ...chunking import chunk_text
from ...config import CHUNK_SIZE, CHUNK_OVERLAP
from ...domain.entities import Document
from ...domain.repositories import DocumentRepository, TextExtractor
from ...exceptions import DocumentProcessingError, IngestionErrorKind
from ...error_handler import log_error
from ...logging_config import get_logger

logger = get_logger(__name__)

# (filename, data, content_type)
Upload = Tuple[str, bytes, Optional[str]]


@dataclass
class IngestFailure:
    filename: str
    kind: IngestionErrorKind
    message: str

    def to_dict(self) -> dict:
        return {"filename": self.filename, "kind": self.kind.value, "message": self.message}


@dataclass
class IngestReport:
    """Outcome of one batch upload."""
    documents: List[Document] = field(default_factory=list)
    failures: List[IngestFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return bool(self.documents)


def generate_document_id(filename: str) -> str:
    return f"{Path(filename).stem or 'document'}_{uuid.uuid4().hex[:8]}"


class IngestUseCase:
    """Extracts, chunks and stores uploaded files."""

    def __init__(
        self,
        extractor: TextExtractor,
        document_repository: DocumentRepository,
        chunk_size: int = CHUNK_SIZE,
        chunk_overlap: int = CHUNK_OVERLAP
    ):
        self._extractor = extractor
        self._document_repo = document_repository
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def ingest(self, filename: str, data: bytes, content_type: Optional[str] = None) -> Document:
        """Turn one upload into a stored Document.

        Raises DocumentProcessingError; ``kind`` says why.
        """
        text = self._extractor.extract(filename, data, content_type)
        logger.info(f"Extracted {len(text)} characters from {filename}")

        if not text or not text.strip():
            raise DocumentProcessingError(
                message="No text could be extracted from the file",
                kind=IngestionErrorKind.EMPTY,
                details={"filename": filename}
            )

        chunks = chunk_text(text, self.chunk_size, self.chunk_overlap)
        document = Document(
            id=generate_document_id(filename),
            name=filename,
            raw_text=text,
            chunks=chunks,
            file_type=content_type or "",
            size=len(data)
        )
        self._document_repo.add_document(document)
        logger.info(f"Created {document.chunk_count} chunks for {filename}")
        return document

    def ingest_many(self, uploads: Iterable[Upload]) -> IngestReport:
        """Ingest each upload independently; failures don't stop the batch."""
        report = IngestReport()
        for filename, data, content_type in uploads:
            try:
                report.documents.append(self.ingest(filename, data, content_type))
            except DocumentProcessingError as e:
                log_error(e, f"Failed to process {filename}")
                report.failures.append(IngestFailure(filename=filename, kind=e.kind, message=e.message))

        logger.info(
            f"Ingest summary: accepted={len(report.documents)} failed={len(report.failures)}"
        )
        return report
