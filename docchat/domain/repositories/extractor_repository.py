"""Text extraction interface."""

from abc import ABC, abstractmethod
from typing import Optional


class TextExtractor(ABC):
    """Turns an uploaded file into plain text."""

    @abstractmethod
    def extract(self, filename: str, data: bytes, content_type: Optional[str] = None) -> str:
        """Return extracted text or raise DocumentProcessingError with its kind."""
        pass
