"""Text extraction infrastructure module."""

from .file_text_extractor import FileTextExtractor

__all__ = ['FileTextExtractor']
