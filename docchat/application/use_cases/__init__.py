"""Application use cases."""

from .chat_use_case import ChatUseCase, GENERIC_ERROR_MESSAGE
from .ingest_use_case import IngestUseCase, IngestReport, IngestFailure

__all__ = [
    'ChatUseCase',
    'GENERIC_ERROR_MESSAGE',
    'IngestUseCase',
    'IngestReport',
    'IngestFailure'
]
