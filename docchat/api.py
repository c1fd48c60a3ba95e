"""FastAPI backend for docchat (API only).

Endpoints:
  POST   /documents       -> multipart upload of one or more files
  GET    /documents       -> ingested document summaries
  DELETE /documents/{id}  -> drop one document
  POST   /search          -> JSON {question:str} returns the top scored chunks
  POST   /chat            -> JSON {question:str} returns {question, answer, context, sources, grounded}
  GET    /health          -> {'status':'ok'}
  GET    /info            -> chunking and generation configuration
  POST   /admin/reset     -> clear the document collection
"""

from typing import Dict, Any, List
from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .container import container
from .config import (
    API_HOST, API_PORT, FRONTEND_VITE_PORT, FRONTEND_REACT_PORT,
    CHUNK_SIZE, CHUNK_OVERLAP, MAX_UPLOAD_BYTES
)
from .domain.entities import Document
from .domain.services.retrieval_service import TOP_K_CHUNKS, MAX_CHUNKS_TO_PROCESS
from .application.use_cases import GENERIC_ERROR_MESSAGE
from .exceptions import (
    DocChatError, LLMError, ConfigurationError, DocumentProcessingError, IngestionErrorKind
)
from .error_handler import log_error
from .logging_config import get_logger

logger = get_logger(__name__)

app = FastAPI(title="docchat")


# Global exception handler for our custom exceptions
@app.exception_handler(DocChatError)
async def docchat_exception_handler(request, exc: DocChatError):
    log_error(exc, f"API error in {request.url.path}")

    status_code = 500
    message = exc.message
    if isinstance(exc, LLMError):
        status_code = 502  # Bad Gateway
        message = GENERIC_ERROR_MESSAGE
    elif isinstance(exc, DocumentProcessingError):
        status_code = 422

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.error_code,
            "message": message,
            "details": exc.details
        }
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        f"http://127.0.0.1:{FRONTEND_VITE_PORT}",
        f"http://localhost:{FRONTEND_VITE_PORT}",
        f"http://127.0.0.1:{FRONTEND_REACT_PORT}",
        f"http://localhost:{FRONTEND_REACT_PORT}",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ChatRequest(BaseModel):
    question: str


def _document_summary(doc: Document) -> Dict[str, Any]:
    return {
        "id": doc.id,
        "name": doc.name,
        "type": doc.file_type,
        "size": doc.size,
        "chunks": doc.chunk_count,
        "chars": doc.char_count,
        "created_at": doc.created_at.isoformat(),
    }


@app.post("/documents")
async def upload_documents(files: List[UploadFile] = File(...)) -> Dict[str, Any]:
    """Extract, chunk and store uploaded files; each file succeeds or fails on its own."""
    uploads = []
    for upload in files:
        data = await upload.read()
        uploads.append((upload.filename or "untitled", data, upload.content_type))

    report = container.ingest_use_case().ingest_many(uploads)
    if not report.ok:
        raise DocumentProcessingError(
            message="No files could be processed successfully.",
            kind=report.failures[0].kind if report.failures else IngestionErrorKind.EMPTY,
            details={"failures": [f.to_dict() for f in report.failures]}
        )

    return {
        "documents": [_document_summary(d) for d in report.documents],
        "failures": [f.to_dict() for f in report.failures],
        "total_documents": container.document_repository().count(),
    }


@app.get("/documents")
def list_documents() -> Dict[str, Any]:
    docs = container.document_repository().list_documents()
    return {"documents": [_document_summary(d) for d in docs], "count": len(docs)}


@app.delete("/documents/{document_id}")
def delete_document(document_id: str) -> Dict[str, Any]:
    if not container.document_repository().delete_document(document_id):
        raise HTTPException(status_code=404, detail={"error": "NotFound", "message": f"Unknown document: {document_id}"})
    return {"status": "deleted", "id": document_id}


@app.post("/search")
def search(req: ChatRequest) -> Dict[str, Any]:
    """Return the chunks that would be used as context for ``question``."""
    chunks = container.chat_use_case().search(req.question)
    return {
        "question": req.question,
        "results": [
            {
                "source": c.source_name,
                "document_id": c.document_id,
                "chunk_index": c.chunk_index,
                "score": c.score,
                "text": c.text,
            }
            for c in chunks
        ]
    }


@app.post("/chat")
def chat(req: ChatRequest) -> Dict[str, Any]:
    """Answer a question using keyword-selected document context."""
    q = req.question.strip()
    if not q:
        return JSONResponse({"error": "empty question"}, status_code=400)

    try:
        logger.info(f"Chat request: {q[:50]}...")
        answer = container.chat_use_case().execute(q)
        logger.info(f"Chat response: grounded={answer.grounded}, sources={answer.sources}")
        return answer.to_dict()
    except DocChatError:
        # Handled by the global exception handler
        raise
    except Exception as e:
        log_error(e, "Unexpected error in chat endpoint", {'question': q})
        raise HTTPException(
            status_code=500,
            detail={
                "error": "InternalServerError",
                "message": GENERIC_ERROR_MESSAGE
            }
        )


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/info")
def info() -> Dict[str, Any]:
    """Chunking, retrieval and generation configuration."""
    try:
        llm = container.llm_repository()
        llm_available = llm.is_available()
        llm_error = None
    except ConfigurationError as e:
        llm_available = False
        llm_error = e.message

    return {
        "version": "1.0",
        "chunking": {
            "chunk_size": CHUNK_SIZE,
            "chunk_overlap": CHUNK_OVERLAP,
        },
        "retrieval": {
            "strategy": "keyword",
            "top_k": TOP_K_CHUNKS,
            "max_chunks_scanned": MAX_CHUNKS_TO_PROCESS,
        },
        "generation": {
            "provider": container.llm_provider,
            "available": llm_available,
            "error": llm_error,
        },
        "uploads": {
            "max_bytes": MAX_UPLOAD_BYTES,
            "documents": container.document_repository().count(),
        }
    }


@app.post("/admin/reset")
def reset_documents() -> Dict[str, Any]:
    """Clear the document collection."""
    container.document_repository().reset()
    return {"status": "success", "message": "Document collection reset", "documents": 0}


@app.get("/")
def root() -> Dict[str, Any]:
    return {
        "name": "docchat API",
        "endpoints": [
            "POST /documents", "GET /documents", "DELETE /documents/{id}",
            "POST /search", "POST /chat", "GET /health", "GET /info", "POST /admin/reset"
        ],
        "frontend": "The chat UI runs separately and talks to this API.",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("docchat.api:app", host=API_HOST, port=API_PORT, reload=True)
