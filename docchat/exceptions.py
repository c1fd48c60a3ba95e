"""Custom exceptions for the docchat application."""

from enum import Enum
from typing import Optional


class DocChatError(Exception):
    """Base exception for all docchat errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class IngestionErrorKind(Enum):
    """Why a file could not be turned into a document."""
    TIMEOUT = "timeout"
    INVALID_FORMAT = "invalid_format"
    UNSUPPORTED = "unsupported"
    EMPTY = "empty"
    TOO_LARGE = "too_large"


class DocumentProcessingError(DocChatError):
    """Raised when text extraction or chunking of an upload fails."""

    def __init__(
        self,
        message: str,
        kind: IngestionErrorKind = IngestionErrorKind.INVALID_FORMAT,
        error_code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, error_code=error_code, details=details)
        self.kind = kind


class DocumentError(DocChatError):
    """Raised when document collection operations fail."""
    pass


class LLMError(DocChatError):
    """Raised when the generation service fails."""
    pass


class LLMNotConfiguredError(LLMError):
    """Raised when no generation service credentials are configured."""
    pass


class ConfigurationError(DocChatError):
    """Raised when configuration is invalid."""
    pass

