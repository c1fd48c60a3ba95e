import os
from dotenv import load_dotenv

load_dotenv()

# Basic settings
DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", "data"))
LOG_DIR = os.path.abspath(os.getenv("LOG_DIR", os.path.join(DATA_DIR, "logs")))

# Chunking defaults (characters)
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "1000"))
CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", "200"))

# Generation provider: gemini | openai | ollama
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini").strip().lower()

# Gemini configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_TIMEOUT = int(os.getenv("GEMINI_TIMEOUT", "60"))
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")

# OpenAI configuration
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.3"))
OPENAI_MAX_TOKENS = int(os.getenv("OPENAI_MAX_TOKENS", "800"))

# Local LLM (Ollama) configuration
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "localhost")
OLLAMA_PORT = int(os.getenv("OLLAMA_PORT", "11434"))
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "mistral")

# Upload / extraction limits
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))
PDF_EXTRACTION_TIMEOUT = float(os.getenv("PDF_EXTRACTION_TIMEOUT", "60"))
EXTRACTION_TIMEOUT = float(os.getenv("EXTRACTION_TIMEOUT", "30"))

# API Configuration
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
FRONTEND_VITE_PORT = int(os.getenv("FRONTEND_VITE_PORT", "5173"))
FRONTEND_REACT_PORT = int(os.getenv("FRONTEND_REACT_PORT", "3000"))
