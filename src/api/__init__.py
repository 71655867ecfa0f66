"""FastAPI endpoints for document question answering.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Answer a question about the document
    - POST /api/chat/stream: Same, streamed as Server-Sent Events
    - POST /upload/pdf: Validate a PDF and render its first pages
"""
