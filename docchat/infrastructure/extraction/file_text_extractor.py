"""Extract plain text from uploaded PDF, Word and text files."""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Callable, Optional
import io
import os

import PyPDF2
import docx  # python-docx

from ...domain.repositories import TextExtractor
from ...config import MAX_UPLOAD_BYTES, PDF_EXTRACTION_TIMEOUT, EXTRACTION_TIMEOUT
from ...exceptions import DocumentProcessingError, IngestionErrorKind
from ...logging_config import get_logger

logger = get_logger(__name__)

PDF = "pdf"
DOCX = "docx"
TEXT = "text"
LEGACY_DOC = "doc"

MIME_TYPES = {
    "application/pdf": PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "application/msword": LEGACY_DOC,
    "text/plain": TEXT,
}

EXTENSIONS = {
    ".pdf": PDF,
    ".docx": DOCX,
    ".doc": LEGACY_DOC,
    ".txt": TEXT,
}


def sniff_is_pdf(data: bytes) -> bool:
    return data[:5].startswith(b'%PDF-')


def resolve_file_kind(filename: str, data: bytes, content_type: Optional[str] = None) -> Optional[str]:
    """Pick the parser from MIME type, then extension, then PDF magic bytes."""
    if content_type:
        mime = content_type.split(';')[0].strip().lower()
        if mime in MIME_TYPES:
            return MIME_TYPES[mime]
    ext = os.path.splitext(filename or "")[1].lower()
    if ext in EXTENSIONS:
        return EXTENSIONS[ext]
    if sniff_is_pdf(data):
        return PDF
    return None


def read_pdf(data: bytes) -> str:
    """Extract text from PDF bytes, one line per page."""
    reader = PyPDF2.PdfReader(io.BytesIO(data))
    if reader.is_encrypted:
        reader.decrypt("")
    text_parts = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(text_parts)


def read_docx(data: bytes) -> str:
    """Extract paragraph text from DOCX bytes."""
    d = docx.Document(io.BytesIO(data))
    return "\n".join(p.text for p in d.paragraphs)


def read_text(data: bytes) -> str:
    return data.decode('utf-8', errors='ignore')


READERS = {
    PDF: read_pdf,
    DOCX: read_docx,
    TEXT: read_text,
}


class FileTextExtractor(TextExtractor):
    """TextExtractor backed by PyPDF2 and python-docx, with size and time limits."""

    def __init__(self,
                 max_bytes: int = MAX_UPLOAD_BYTES,
                 pdf_timeout: float = PDF_EXTRACTION_TIMEOUT,
                 timeout: float = EXTRACTION_TIMEOUT):
        self.max_bytes = max_bytes
        self.pdf_timeout = pdf_timeout
        self.timeout = timeout

    def extract(self, filename: str, data: bytes, content_type: Optional[str] = None) -> str:
        if len(data) > self.max_bytes:
            raise DocumentProcessingError(
                message=f"{filename} exceeds the {self.max_bytes // (1024 * 1024)}MB upload limit",
                kind=IngestionErrorKind.TOO_LARGE,
                details={"filename": filename, "size": len(data), "max_bytes": self.max_bytes}
            )

        kind = resolve_file_kind(filename, data, content_type)
        if kind not in READERS:
            message = "Unsupported file type. Please upload PDF, Word (.docx) or text documents."
            if kind == LEGACY_DOC:
                message = "Legacy .doc files are not supported; convert to .docx first."
            raise DocumentProcessingError(
                message=message,
                kind=IngestionErrorKind.UNSUPPORTED,
                details={"filename": filename, "content_type": content_type}
            )

        timeout = self.pdf_timeout if kind == PDF else self.timeout
        logger.info(f"Extracting text from {filename} as {kind} (timeout={timeout}s)")
        return self._run_with_timeout(READERS[kind], data, filename, kind, timeout)

    @staticmethod
    def _run_with_timeout(reader: Callable[[bytes], str], data: bytes,
                          filename: str, kind: str, timeout: float) -> str:
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(reader, data)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError as e:
            raise DocumentProcessingError(
                message="Processing timeout - file may be too large or complex",
                kind=IngestionErrorKind.TIMEOUT,
                details={"filename": filename, "timeout": timeout}
            ) from e
        except Exception as e:
            raise DocumentProcessingError(
                message=f"Failed to extract text from {kind.upper()} file",
                kind=IngestionErrorKind.INVALID_FORMAT,
                details={"filename": filename, "original_error": str(e)}
            ) from e
        finally:
            # A timed-out reader keeps running in the background; don't block on it
            executor.shutdown(wait=False)
