"""Test package for Document Vision Chat.

Structure:
    - unit/: Pipeline, parsing, model and agent tests in isolation
    - integration/: HTTP endpoints through the real app

PDFs are generated with PyMuPDF at test time. The model call is the only
component replaced by a fake. Leverages pytest with pytest-check for soft
assertions.
"""
