# tabletree/core/functions/table_processor.py
"""
Record Processor - Formatting Extracted Records

Turns the nested records produced by a table extractor into text.

================================================================================
RECORD PROCESSOR ARCHITECTURE
================================================================================

Main Entry Point:
    format_records(records: List[Record]) → str

Internal Processing Functions (called from format_records):
    ├─ format_records_as_json()     - JSON (nesting preserved)
    ├─ format_records_as_markdown() - Markdown table (flattened keys)
    └─ format_records_as_text()     - Tab separated text (flattened keys)

Common Utility:
    ├─ flatten_record()             - {"sales": {"jan": 1}} → {"sales.jan": 1}
    └─ _clean_cell_content()        - whitespace normalization

================================================================================
"""
import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from tabletree.core.functions.table_extractor import Record

logger = logging.getLogger("tabletree")


class RecordOutputFormat(Enum):
    """Record output format options."""
    JSON = "json"
    MARKDOWN = "markdown"
    TEXT = "text"


@dataclass
class RecordProcessorConfig:
    """Configuration for record formatting."""
    output_format: RecordOutputFormat = RecordOutputFormat.JSON
    key_separator: str = "."
    json_indent: Optional[int] = 2
    clean_whitespace: bool = True


def flatten_record(record: Record, separator: str = ".", prefix: str = "") -> Dict[str, Any]:
    """
    Flatten nested field names into joined keys, preserving field order.

    Args:
        record: Nested record
        separator: String placed between nesting levels
        prefix: Key prefix of the current level

    Returns:
        Flat mapping of joined key to leaf value
    """
    flat: Dict[str, Any] = {}
    for key, value in record.items():
        full_key = f"{prefix}{separator}{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten_record(value, separator, full_key))
        else:
            flat[full_key] = value
    return flat


class RecordProcessor:
    """
    Main record formatting class.

    Public Methods:
        format_records()             ← Main Entry Point (config.output_format)
        format_records_as_json()
        format_records_as_markdown()
        format_records_as_text()
    """

    def __init__(self, config: Optional[RecordProcessorConfig] = None):
        self.config = config or RecordProcessorConfig()
        self.logger = logging.getLogger("tabletree")

    def format_records(self, records: List[Record]) -> str:
        """
        Main entry point for record formatting.

        Args:
            records: Records from a table extractor

        Returns:
            Formatted string (JSON/Markdown/Text)
        """
        if self.config.output_format == RecordOutputFormat.JSON:
            return self.format_records_as_json(records)
        elif self.config.output_format == RecordOutputFormat.MARKDOWN:
            return self.format_records_as_markdown(records)
        else:
            return self.format_records_as_text(records)

    def format_records_as_json(self, records: List[Record]) -> str:
        return json.dumps(records, ensure_ascii=False, indent=self.config.json_indent)

    def format_records_as_markdown(self, records: List[Record]) -> str:
        """
        Render records as a Markdown table.

        Note: nesting is not representable, header cells use flattened keys.
        """
        columns, rows = self._tabulate(records)
        if not columns:
            return ""

        lines = ["| " + " | ".join(columns) + " |"]
        lines.append("| " + " | ".join(["---"] * len(columns)) + " |")
        for row in rows:
            cells = [self._clean_cell_content(value).replace("|", "\\|") for value in row]
            lines.append("| " + " | ".join(cells) + " |")
        return "\n".join(lines)

    def format_records_as_text(self, records: List[Record]) -> str:
        columns, rows = self._tabulate(records)
        if not columns:
            return ""

        lines = ["\t".join(columns)]
        for row in rows:
            lines.append("\t".join(self._clean_cell_content(value) for value in row))
        return "\n".join(lines)

    def _tabulate(self, records: List[Record]):
        """Flatten records and align them on the union of their keys."""
        flat_records = [flatten_record(record, self.config.key_separator) for record in records]

        columns: List[str] = []
        for flat in flat_records:
            for key in flat:
                if key not in columns:
                    columns.append(key)

        rows = [[flat.get(column, "") for column in columns] for flat in flat_records]
        return columns, rows

    def _clean_cell_content(self, content: Any) -> str:
        if content is None:
            return ""
        content = str(content)

        if self.config.clean_whitespace:
            content = re.sub(r'\s+', ' ', content)
            content = content.strip()

        return content


def create_record_processor(config: Optional[RecordProcessorConfig] = None) -> RecordProcessor:
    """
    Factory function to create a RecordProcessor.

    Args:
        config: Record formatting configuration

    Returns:
        Configured RecordProcessor instance
    """
    return RecordProcessor(config)


# Default configuration
DEFAULT_PROCESSOR_CONFIG = RecordProcessorConfig()
