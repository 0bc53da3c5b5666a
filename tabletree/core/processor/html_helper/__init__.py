# tabletree/core/processor/html_helper/__init__.py
"""HTML helper module for table record extraction."""

from tabletree.core.processor.html_helper.html_header_mapper import map_header_rows
from tabletree.core.processor.html_helper.html_layout_builder import build_layout
from tabletree.core.processor.html_helper.html_row_extractor import HTMLRowExtractor, fill_layout
from tabletree.core.processor.html_helper.html_table_extractor import (
    HTMLTableExtractor,
    HTMLTableExtractorConfig,
)

__all__ = [
    'map_header_rows',
    'build_layout',
    'HTMLRowExtractor',
    'fill_layout',
    'HTMLTableExtractor',
    'HTMLTableExtractorConfig',
]
