"""Document-to-prompt assembly.

    - config: page cap, render scale, and text limits
    - document: concurrent extraction and rendering joined into one context
    - merger: attaches document blocks to the active user turn
    - assembler: system instruction + history + document, in order

Kept import-free so parsing modules can depend on ``src.pipeline.config``.
"""
