"""docchat: chat with your documents using keyword retrieval and a hosted LLM."""

__version__ = "1.0.0"
