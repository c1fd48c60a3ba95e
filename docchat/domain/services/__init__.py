"""Domain services package."""

from .retrieval_service import RetrievalService
from .answer_service import AnswerService

__all__ = [
    'RetrievalService',
    'AnswerService'
]
