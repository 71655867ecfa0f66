"""Integration tests for components working together as a system.

Coverage:
    - Chat endpoints with real document extraction and rendering
    - SSE streaming protocol
    - Upload validation and page rendering

Uses httpx AsyncClient with ASGITransport. The model call is faked, so no
API key or network access is required.
"""
