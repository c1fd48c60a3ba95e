"""Chat use case implementation."""

from typing import List

from ...domain.entities import ChatAnswer, ScoredChunk
from ...domain.services import RetrievalService, AnswerService
from ...domain.services.retrieval_service import format_context
from ...logging_config import get_logger

logger = get_logger(__name__)

# Shown to the user when the generation service fails
GENERIC_ERROR_MESSAGE = (
    "Sorry, I encountered an error while processing your message. "
    "Please make sure your API keys are configured correctly."
)


class ChatUseCase:
    """Use case for answering a chat question."""

    def __init__(
        self,
        retrieval_service: RetrievalService,
        answer_service: AnswerService
    ):
        self._retrieval_service = retrieval_service
        self._answer_service = answer_service

    def search(self, question: str) -> List[ScoredChunk]:
        return self._retrieval_service.rank_chunks(question)

    def execute(self, question: str) -> ChatAnswer:
        """Answer ``question``. LLMError is not caught here."""
        ranked = self.search(question)
        context = format_context(ranked)
        if not context:
            logger.info("No relevant context found, answering without document grounding")

        answer = self._answer_service.generate_answer(question, context)

        sources: List[str] = []
        for chunk in ranked:
            if chunk.source_name not in sources:
                sources.append(chunk.source_name)

        return ChatAnswer(question=question, answer=answer, context=context, sources=sources)
