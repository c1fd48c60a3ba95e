"""Keyword retrieval domain service."""

from typing import List, Sequence

from ..entities import Document, ScoredChunk
from ..repositories import DocumentRepository
from ...logging_config import get_logger

logger = get_logger(__name__)

# Fixed retrieval policy
TOP_K_CHUNKS = 3
MAX_CHUNKS_TO_PROCESS = 1000
MAX_MATCHES_PER_TOKEN = 10
MIN_TOKEN_LENGTH = 3


def tokenize_query(query: str) -> List[str]:
    """Lower-case, whitespace-split and drop tokens shorter than three characters.

    Repeated tokens are kept once, in order of first appearance.
    """
    if not query:
        return []
    seen = set()
    tokens = []
    for token in query.lower().split():
        if len(token) < MIN_TOKEN_LENGTH or token in seen:
            continue
        seen.add(token)
        tokens.append(token)
    return tokens


def count_occurrences(haystack: str, token: str, cap: int = MAX_MATCHES_PER_TOKEN) -> int:
    """Count non-overlapping occurrences of ``token`` in ``haystack``, up to ``cap``."""
    if not token:
        return 0
    count = 0
    pos = haystack.find(token)
    while pos != -1 and count < cap:
        count += 1
        pos = haystack.find(token, pos + len(token))
    return count


def score_chunk(chunk: str, tokens: Sequence[str]) -> int:
    chunk_lower = chunk.lower()
    return sum(count_occurrences(chunk_lower, token) for token in tokens)


def rank_chunks(query: str, documents: Sequence[Document]) -> List[ScoredChunk]:
    """Score every chunk against the query and return the best ones.

    At most ``MAX_CHUNKS_TO_PROCESS`` chunks are scanned per call, in document
    then chunk order. Chunks scoring zero are dropped. Equal scores keep scan
    order. Never raises; degenerate input gives an empty list.
    """
    if not documents:
        logger.debug("No documents available")
        return []

    tokens = tokenize_query(query)
    if not tokens:
        logger.debug("No valid query words")
        return []

    scored: List[ScoredChunk] = []
    processed = 0
    for doc in documents:
        if processed >= MAX_CHUNKS_TO_PROCESS:
            break
        for index, chunk in enumerate(doc.chunks):
            if processed >= MAX_CHUNKS_TO_PROCESS:
                break
            processed += 1
            score = score_chunk(chunk, tokens)
            if score > 0:
                scored.append(ScoredChunk(
                    text=chunk,
                    score=score,
                    source_name=doc.name,
                    document_id=doc.id,
                    chunk_index=index
                ))

    logger.info(f"Processed {processed} chunks, found {len(scored)} relevant chunks")

    # sorted() is stable
    ranked = sorted(scored, key=lambda c: c.score, reverse=True)[:TOP_K_CHUNKS]
    logger.debug(f"Top chunk scores: {[c.score for c in ranked]}")
    return ranked


def format_context(chunks: Sequence[ScoredChunk]) -> str:
    return "\n\n".join(f"From {c.source_name}: {c.text}" for c in chunks)


def find_relevant_context(query: str, documents: Sequence[Document]) -> str:
    """Return the context string handed to the generation service, or ``""``."""
    return format_context(rank_chunks(query, documents))


class RetrievalService:
    """Domain service for keyword retrieval over the document collection."""

    def __init__(self, document_repository: DocumentRepository):
        self._document_repo = document_repository

    def rank_chunks(self, query: str) -> List[ScoredChunk]:
        return rank_chunks(query, self._document_repo.list_documents())

    def find_relevant_context(self, query: str) -> str:
        return format_context(self.rank_chunks(query))
