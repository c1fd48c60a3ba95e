"""Dependency injection container."""

from typing import Optional

from .domain.repositories import LLMRepository, DocumentRepository, TextExtractor
from .infrastructure.storage import InMemoryDocumentRepository
from .infrastructure.extraction import FileTextExtractor
from .infrastructure.llm import GeminiLLMClient, OpenAILLMClient, OllamaLLMClient, UnconfiguredLLMClient
from .domain.services import RetrievalService, AnswerService
from .application.use_cases import ChatUseCase, IngestUseCase
from .config import LLM_PROVIDER, GEMINI_API_KEY, OPENAI_API_KEY, CHUNK_SIZE, CHUNK_OVERLAP
from .exceptions import ConfigurationError
from .error_handler import validate_config
from .logging_config import get_logger

logger = get_logger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "openai", "ollama")


def build_llm_client(provider: str = LLM_PROVIDER) -> LLMRepository:
    """Create the generation client for ``provider``.

    A provider without credentials yields an UnconfiguredLLMClient so the
    rest of the app keeps working and chat reports the problem.
    """
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            message=f"Unknown LLM provider: {provider}",
            details={"provider": provider, "supported": list(SUPPORTED_PROVIDERS)}
        )
    if provider == "ollama":
        logger.info("Creating Ollama LLM client")
        return OllamaLLMClient()

    required = {"gemini": {"GEMINI_API_KEY": GEMINI_API_KEY},
                "openai": {"OPENAI_API_KEY": OPENAI_API_KEY}}[provider]
    try:
        validate_config(required, list(required), context=f"{provider} client")
    except ConfigurationError as e:
        logger.warning(f"{e.message}; chat will run without a generation service")
        return UnconfiguredLLMClient(provider=provider)

    if provider == "openai":
        logger.info("Creating OpenAI LLM client")
        return OpenAILLMClient(api_key=OPENAI_API_KEY)
    logger.info("Creating Gemini LLM client")
    return GeminiLLMClient(api_key=GEMINI_API_KEY)


class Container:
    """Dependency injection container."""

    def __init__(self, llm_provider: str = LLM_PROVIDER):
        self.llm_provider = llm_provider
        self._document_repository: Optional[DocumentRepository] = None
        self._text_extractor: Optional[TextExtractor] = None
        self._llm_repository: Optional[LLMRepository] = None
        self._retrieval_service: Optional[RetrievalService] = None
        self._answer_service: Optional[AnswerService] = None
        self._chat_use_case: Optional[ChatUseCase] = None
        self._ingest_use_case: Optional[IngestUseCase] = None

    def document_repository(self) -> DocumentRepository:
        """Get document repository instance."""
        if self._document_repository is None:
            logger.info("Creating InMemoryDocumentRepository")
            self._document_repository = InMemoryDocumentRepository()
        return self._document_repository

    def text_extractor(self) -> TextExtractor:
        if self._text_extractor is None:
            self._text_extractor = FileTextExtractor()
        return self._text_extractor

    def llm_repository(self) -> LLMRepository:
        """Get LLM repository instance."""
        if self._llm_repository is None:
            self._llm_repository = build_llm_client(self.llm_provider)
        return self._llm_repository

    def retrieval_service(self) -> RetrievalService:
        if self._retrieval_service is None:
            self._retrieval_service = RetrievalService(
                document_repository=self.document_repository()
            )
        return self._retrieval_service

    def answer_service(self) -> AnswerService:
        if self._answer_service is None:
            self._answer_service = AnswerService(
                llm_repository=self.llm_repository()
            )
        return self._answer_service

    def chat_use_case(self) -> ChatUseCase:
        """Get chat use case instance."""
        if self._chat_use_case is None:
            self._chat_use_case = ChatUseCase(
                retrieval_service=self.retrieval_service(),
                answer_service=self.answer_service()
            )
        return self._chat_use_case

    def ingest_use_case(self) -> IngestUseCase:
        """Get ingest use case instance."""
        if self._ingest_use_case is None:
            self._ingest_use_case = IngestUseCase(
                extractor=self.text_extractor(),
                document_repository=self.document_repository(),
                chunk_size=CHUNK_SIZE,
                chunk_overlap=CHUNK_OVERLAP
            )
        return self._ingest_use_case

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._document_repository = None
        self._text_extractor = None
        self._llm_repository = None
        self._retrieval_service = None
        self._answer_service = None
        self._chat_use_case = None
        self._ingest_use_case = None
        logger.info("Container reset")


# Global container instance
container = Container()
