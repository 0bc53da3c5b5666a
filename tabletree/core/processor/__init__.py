# tabletree/core/processor/__init__.py
"""
Processor - Format-specific Extraction Module

Helper Modules (subdirectories):
- html_helper/: HTML table header mapping, layout building and row extraction

Usage Example:
    from tabletree.core.processor import HTMLTableExtractor
"""

from tabletree.core.processor.html_helper import HTMLTableExtractor, HTMLTableExtractorConfig
from tabletree.core.processor import html_helper

__all__ = [
    "HTMLTableExtractor",
    "HTMLTableExtractorConfig",
    "html_helper",
]
