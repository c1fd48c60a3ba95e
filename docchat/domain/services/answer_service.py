"""Answer generation domain service."""

from ..repositories import LLMRepository
from ...logging_config import get_logger

logger = get_logger(__name__)

ANSWER_INSTRUCTION = (
    "Please answer the question based on the provided context. "
    "If the answer cannot be found in the context, please say so."
)


def build_prompt(question: str, context: str = "") -> str:
    """Build the prompt sent to the generation service.

    Without context the question is sent as-is.
    """
    if not context:
        return question
    return f"Context: {context}\n\nQuestion: {question}\n\n{ANSWER_INSTRUCTION}"


class AnswerService:
    """Domain service for answer generation."""

    def __init__(self, llm_repository: LLMRepository):
        self._llm_repo = llm_repository

    def generate_answer(self, question: str, context: str = "") -> str:
        """Generate an answer; LLMError from the repository propagates."""
        prompt = build_prompt(question, context)
        logger.info(f"Generating answer (grounded={bool(context)}, prompt_chars={len(prompt)})")
        return self._llm_repo.generate_answer(prompt)
