"""Test cases for domain entities and the answer service."""

import dataclasses
import pytest
from datetime import datetime

from docchat.domain.entities import Document, ScoredChunk, ChatAnswer
from docchat.domain.services import AnswerService
from docchat.domain.services.answer_service import build_prompt
from docchat.exceptions import LLMError


class TestEntityValidation:
    """Test domain entity validation logic."""

    def test_document_creation(self):
        doc = Document(
            id="report_1a2b3c4d",
            name="report.pdf",
            raw_text="Revenue grew.",
            chunks=["Revenue grew."],
            file_type="application/pdf",
            size=2048
        )

        assert doc.chunks == ("Revenue grew.",)
        assert doc.chunk_count == 1
        assert doc.char_count == len("Revenue grew.")
        assert isinstance(doc.created_at, datetime)

    def test_document_is_immutable(self, notes_document):
        with pytest.raises(dataclasses.FrozenInstanceError):
            notes_document.raw_text = "changed"

    def test_document_validation(self):
        with pytest.raises(ValueError, match="Document ID cannot be empty"):
            Document(id="", name="a.txt", raw_text="x")

        with pytest.raises(ValueError, match="Document name cannot be empty"):
            Document(id="a_1", name="", raw_text="x")

        with pytest.raises(ValueError, match="size must be non-negative"):
            Document(id="a_1", name="a.txt", raw_text="x", size=-1)

    def test_empty_document_has_no_chunks(self):
        doc = Document(id="empty_1", name="empty.txt", raw_text="")
        assert doc.chunks == ()
        assert doc.chunk_count == 0

    def test_scored_chunk_validation(self):
        chunk = ScoredChunk(text="cat", score=0, source_name="notes.txt")
        assert chunk.score == 0

        with pytest.raises(ValueError):
            ScoredChunk(text="cat", score=-1, source_name="notes.txt")

        with pytest.raises(ValueError):
            ScoredChunk(text="cat", score=1, source_name="notes.txt", chunk_index=-1)

    def test_chat_answer_grounded(self):
        grounded = ChatAnswer(question="q", answer="a", context="From x.txt: y", sources=["x.txt"])
        ungrounded = ChatAnswer(question="q", answer="a")

        assert grounded.grounded is True
        assert ungrounded.grounded is False
        assert grounded.to_dict() == {
            "question": "q",
            "answer": "a",
            "context": "From x.txt: y",
            "sources": ["x.txt"],
            "grounded": True,
        }


class TestBuildPrompt:
    """Test prompt assembly for the generation service."""

    def test_prompt_with_context(self):
        prompt = build_prompt("Where did the cat sit?", "From notes.txt: the cat sat on the mat")
        assert prompt == (
            "Context: From notes.txt: the cat sat on the mat\n\n"
            "Question: Where did the cat sit?\n\n"
            "Please answer the question based on the provided context. "
            "If the answer cannot be found in the context, please say so."
        )

    def test_prompt_without_context_is_bare_question(self):
        assert build_prompt("Hello there") == "Hello there"
        assert build_prompt("Hello there", "") == "Hello there"


class TestAnswerService:
    """Test AnswerService."""

    def test_generate_answer(self, mock_llm_repository):
        service = AnswerService(mock_llm_repository)

        answer = service.generate_answer("Where did the cat sit?", "From notes.txt: the cat sat on the mat")

        assert answer == "Mock LLM response"
        assert mock_llm_repository.call_count == 1
        assert mock_llm_repository.last_prompt.startswith("Context: From notes.txt")

    def test_llm_error_propagates(self, failing_llm_repository):
        service = AnswerService(failing_llm_repository)

        with pytest.raises(LLMError) as exc_info:
            service.generate_answer("question", "context")

        assert exc_info.value.details["status_code"] == 503
