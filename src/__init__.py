"""Document Vision Chat - multimodal question answering over PDF documents.

Combines FastAPI for HTTP, pypdf and PyMuPDF for document processing,
the OpenAI client for model calls, and Pydantic for data validation.

Components:
    - api: HTTP endpoints and streaming responses
    - parsing: PDF text extraction and page rendering
    - pipeline: Document-to-prompt assembly
    - agent: Model invocation
    - models: Message and request/response schemas
"""

__version__ = "0.1.0"
