# tabletree/__init__.py
"""
Tabletree Library

Extracts nested records from HTML tables with merged header and body cells.

Package Structure:
- core: Extraction core module
    - HTMLDocument: Main document class
    - processor: Format-specific extractors (HTML)
    - functions: Data model, configuration, errors, record formatting

Usage:
    from tabletree import HTMLDocument

    document = HTMLDocument(html)
    records = document.table("table#sales")
    # [{"region": "North", "sales": {"jan": "100", "feb": "200"}}, ...]
"""

__version__ = "0.1.0"

from tabletree.core import HTMLDocument, extract_table
from tabletree.core.functions.errors import (
    TableExtractionError,
    TableNotFoundError,
    TableBodyNotFoundError,
    SpanMismatchError,
)
from tabletree.core.functions.table_extractor import TableExtractorConfig
from tabletree.core.functions.table_processor import (
    RecordOutputFormat,
    RecordProcessor,
    RecordProcessorConfig,
    flatten_record,
)

from tabletree import core

__all__ = [
    "__version__",
    "HTMLDocument",
    "extract_table",
    "TableExtractorConfig",
    "TableExtractionError",
    "TableNotFoundError",
    "TableBodyNotFoundError",
    "SpanMismatchError",
    "RecordOutputFormat",
    "RecordProcessor",
    "RecordProcessorConfig",
    "flatten_record",
    "core",
]
