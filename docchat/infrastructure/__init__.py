"""Infrastructure layer module."""

from . import llm
from . import storage
from . import extraction

__all__ = ['llm', 'storage', 'extraction']
