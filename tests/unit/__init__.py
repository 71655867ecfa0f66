"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Payload decoding, text extraction, truncation, page rendering
    - pipeline/: Document building, merge rules, payload assembly
    - models/: Content shapes, serialization, request validation
    - agent/: Configuration and OpenAI client wrapping (client patched)
"""
