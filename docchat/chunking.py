from __future__ import annotations
from typing import List, Tuple
import math

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200

# Extra iterations allowed on top of the expected window count before the loop is cut off.
ITERATION_SLACK = 10


def _clamp(chunk_size: int, overlap: int) -> Tuple[int, int]:
    size = max(1, int(chunk_size))
    safe_overlap = max(0, min(int(overlap), size - 1))
    return size, safe_overlap


def chunk_spans(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
                overlap: int = DEFAULT_CHUNK_OVERLAP) -> List[Tuple[int, int]]:
    """Return the ``(start, end)`` offsets of each overlapping window over ``text``.

    Degenerate parameters are clamped rather than rejected: ``chunk_size`` is
    at least 1 and ``overlap`` at most ``chunk_size - 1``, so every step moves
    the cursor forward. The last window is clipped to the end of the text.
    """
    if not text:
        return []
    size, safe_overlap = _clamp(chunk_size, overlap)
    length = len(text)
    step = size - safe_overlap
    max_iterations = math.ceil(length / step) + ITERATION_SLACK

    spans: List[Tuple[int, int]] = []
    start = 0
    while start < length:
        if len(spans) >= max_iterations:
            logger.warning(
                f"Chunking stopped at iteration ceiling ({max_iterations}) "
                f"for text of length {length} (size={size}, overlap={safe_overlap})"
            )
            break
        end = min(start + size, length)
        if end > start:
            spans.append((start, end))
        if end >= length:
            break
        next_start = end - safe_overlap
        if next_start <= start:
            start += size
        else:
            start = next_start
    return spans


def chunk_text(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
               overlap: int = DEFAULT_CHUNK_OVERLAP) -> List[str]:
    """Split ``text`` into overlapping character windows.

    Never raises; empty text gives an empty list.
    """
    return [text[start:end] for start, end in chunk_spans(text, chunk_size, overlap)]
