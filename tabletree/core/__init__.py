# tabletree/core/__init__.py
"""
Core - Document and extraction pipeline

- HTMLDocument: Parsed document, main entry point
- functions: Data model, configuration, errors, formatting
- processor: Format-specific extractors
"""

from tabletree.core.document import HTMLDocument, extract_table
from tabletree.core import functions
from tabletree.core import processor

__all__ = [
    "HTMLDocument",
    "extract_table",
    "functions",
    "processor",
]
