# tabletree/core/functions/table_extractor.py
"""
Table Extractor - Abstract Interface for Record Extraction

Provides the data model shared by every pipeline stage and the abstract base
class that wires the stages together.

Module Components:
- PLACEHOLDER: Leaf marker of a layout template
- HeaderCell: One labelled header cell and its cumulative column position
- TableSections: The header rows and body rows resolved for one table
- TableExtractorConfig: Configuration shared by all extractors
- BaseTableExtractor: Abstract base class running the 3-stage pipeline
- count_placeholders: Leaf count of a layout template

Pipeline:
    map_headers()   -> ColumnMap   (Header Mapper)
    build_layout()  -> LayoutNode  (Layout Builder, once per table)
    iter_records()  -> Record...   (Row Extractor, once per body row)

Usage Example:
    from tabletree.core.functions.table_extractor import (
        BaseTableExtractor,
        HeaderCell,
        TableSections,
    )

    class MyTableExtractor(BaseTableExtractor):
        def locate_sections(self, document, selector, skip_rows=None):
            ...
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

logger = logging.getLogger("tabletree")

PLACEHOLDER = "###"

# A layout leaf is PLACEHOLDER; an inner node maps a field name to a child.
LayoutNode = Union[str, Dict[str, Any]]
Record = Dict[str, Any]


@dataclass(frozen=True)
class HeaderCell:
    """A labelled header cell.

    Attributes:
        row: 1-based header row index
        col: 1-based cumulative column index of the cell's last column
        label: Normalized field name
        span: Number of columns the cell covers
    """
    row: int
    col: int
    label: str
    span: int = 1

    @property
    def start(self) -> int:
        """Cumulative column index just before the cell's first column."""
        return self.col - self.span


class ColumnMap(list):
    """One list of HeaderCell per header row, top to bottom.

    Attributes:
        width: Header columns counted over all rows, unlabelled and
            vertically held columns included
    """

    def __init__(self, rows: Iterable[List[HeaderCell]] = (), width: int = 0):
        super().__init__(rows)
        self.width = width


@dataclass
class TableSections:
    """Header and body rows resolved for one matched table.

    Attributes:
        table: The matched table element
        header_rows: Rows defining field names, top to bottom
        body_rows: Every row of the body container, in document order
        skip_rows: Leading body rows to exclude (header rows living in the body)
        selector: Selector the table was matched with
    """
    table: Any
    header_rows: List[Any] = field(default_factory=list)
    body_rows: List[Any] = field(default_factory=list)
    skip_rows: int = 0
    selector: str = ""


@dataclass
class TableExtractorConfig:
    """Configuration for record extraction.

    Attributes:
        parser: BeautifulSoup tree builder ("lxml" or "html.parser")
        image_attribute: Attribute of a descendant img used when a cell has no text
        fill_value: Value for placeholders left without a body value
        strict: Raise SpanMismatchError instead of degrading on span mismatches
        default_header_rows: Header rows assumed when there is no thead and no skip count
    """
    parser: str = "lxml"
    image_attribute: str = "src"
    fill_value: str = ""
    strict: bool = False
    default_header_rows: int = 1


def count_placeholders(layout: LayoutNode) -> int:
    """Number of PLACEHOLDER leaves in a layout template."""
    if isinstance(layout, dict):
        return sum(count_placeholders(child) for child in layout.values())
    return 1 if layout == PLACEHOLDER else 0


class BaseTableExtractor(ABC):
    """Abstract base class for format-specific table extractors.

    Subclasses supply the four pipeline stages; extract_table() runs them in
    order. The layout is built once per table and reused, unmodified, for
    every body row.
    """

    def __init__(self, config: Optional[TableExtractorConfig] = None):
        """Initialize the extractor.

        Args:
            config: Table extraction configuration
        """
        self.config = config or TableExtractorConfig()
        self.logger = logging.getLogger("tabletree")

    @abstractmethod
    def locate_sections(
        self,
        document: Any,
        selector: str,
        skip_rows: Optional[int] = None
    ) -> TableSections:
        """Find the table and split its rows into header and body.

        Raises:
            TableNotFoundError: Nothing matched the selector
            TableBodyNotFoundError: The table has no body rows
        """
        pass

    @abstractmethod
    def map_headers(self, sections: TableSections) -> ColumnMap:
        """Build the ColumnMap of the header rows."""
        pass

    @abstractmethod
    def build_layout(self, column_map: ColumnMap) -> LayoutNode:
        """Build the nested field-name template from a ColumnMap."""
        pass

    @abstractmethod
    def iter_records(self, sections: TableSections, layout: LayoutNode) -> Iterator[Record]:
        """Yield one record per retained body row."""
        pass

    def extract_table(
        self,
        document: Any,
        selector: str,
        skip_rows: Optional[int] = None
    ) -> List[Record]:
        """Extract every body row of the selected table as a record.

        Args:
            document: Parsed document to query
            selector: CSS selector of the table element
            skip_rows: Number of header rows (None for auto detection)

        Returns:
            List of records in document order
        """
        sections = self.locate_sections(document, selector, skip_rows)
        return self.extract_sections(sections)

    def extract_sections(self, sections: TableSections) -> List[Record]:
        """Run the pipeline on already located sections."""
        column_map = self.map_headers(sections)
        self.logger.debug(
            f"Mapped {sum(len(row) for row in column_map)} header cells "
            f"over {len(column_map)} header rows"
        )

        layout = self.build_layout(column_map)
        self.logger.debug(f"Layout has {count_placeholders(layout)} placeholders")

        records = list(self.iter_records(sections, layout))
        self.logger.debug(f"Extracted {len(records)} records from {sections.selector!r}")
        return records


# Default configuration
DEFAULT_EXTRACTOR_CONFIG = TableExtractorConfig()
