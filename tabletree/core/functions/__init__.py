# tabletree/core/functions/__init__.py
"""
Functions - Common Utility Functions Module

Provides the format-independent parts of table extraction.

Module Components:
- utils: Text cleaning and label normalization
- errors: Extraction exceptions
- table_extractor: Data model and abstract extractor interface
- table_processor: Record formatting (JSON, Markdown, Text)
- encoding: Decoding raw HTML bytes

Usage Example:
    from tabletree.core.functions import normalize_label, flatten_record
    from tabletree.core.functions.table_extractor import HeaderCell, PLACEHOLDER
"""

from tabletree.core.functions.utils import (
    clean_text,
    to_camel_case,
    normalize_label,
    parse_span,
)

from tabletree.core.functions.errors import (
    TableExtractionError,
    TableNotFoundError,
    TableBodyNotFoundError,
    SpanMismatchError,
)

# Table extractor module (data model + abstract interface)
from tabletree.core.functions.table_extractor import (
    PLACEHOLDER,
    HeaderCell,
    ColumnMap,
    LayoutNode,
    Record,
    TableSections,
    TableExtractorConfig,
    BaseTableExtractor,
    count_placeholders,
    DEFAULT_EXTRACTOR_CONFIG,
)

# Record processor module (formatting)
from tabletree.core.functions.table_processor import (
    RecordOutputFormat,
    RecordProcessorConfig,
    RecordProcessor,
    flatten_record,
    create_record_processor,
    DEFAULT_PROCESSOR_CONFIG,
)

from tabletree.core.functions.encoding import (
    EncodingConfig,
    HTMLDecoder,
    ENCODING_CANDIDATES,
    DEFAULT_ENCODING_CONFIG,
)

__all__ = [
    # Text utilities
    "clean_text",
    "to_camel_case",
    "normalize_label",
    "parse_span",
    # Errors
    "TableExtractionError",
    "TableNotFoundError",
    "TableBodyNotFoundError",
    "SpanMismatchError",
    # Table extractor
    "PLACEHOLDER",
    "HeaderCell",
    "ColumnMap",
    "LayoutNode",
    "Record",
    "TableSections",
    "TableExtractorConfig",
    "BaseTableExtractor",
    "count_placeholders",
    "DEFAULT_EXTRACTOR_CONFIG",
    # Record processor
    "RecordOutputFormat",
    "RecordProcessorConfig",
    "RecordProcessor",
    "flatten_record",
    "create_record_processor",
    "DEFAULT_PROCESSOR_CONFIG",
    # Encoding
    "EncodingConfig",
    "HTMLDecoder",
    "ENCODING_CANDIDATES",
    "DEFAULT_ENCODING_CONFIG",
]
