# tabletree/core/processor/html_helper/html_table_extractor.py
"""
HTML Table Extractor - HTML Format-Specific Record Extraction

Implements BaseTableExtractor for BeautifulSoup documents.

HTML Table Structure:
- thead/tr: header rows, when the table declares a header section
- tbody/tr: body rows (several tbody sections are read in order)
- table/tr: rows without a section; the table is its own body
- th|td[colspan]: horizontal merge
- th|td[rowspan]: vertical merge

Header rows:
- with a thead, its rows are the header and no body row is skipped
- without one, the first `skip_rows` rows of the table are the header
  (default_header_rows when not given) and are skipped in the body

Usage:
    from bs4 import BeautifulSoup
    from tabletree.core.processor.html_helper import HTMLTableExtractor

    soup = BeautifulSoup(html, "lxml")
    records = HTMLTableExtractor().extract_table(soup, "table#prices")
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from bs4 import Tag

from tabletree.core.functions.errors import TableBodyNotFoundError, TableNotFoundError
from tabletree.core.functions.table_extractor import (
    BaseTableExtractor,
    ColumnMap,
    LayoutNode,
    Record,
    TableExtractorConfig,
    TableSections,
)
from tabletree.core.processor.html_helper.html_elements import direct_rows, table_rows
from tabletree.core.processor.html_helper.html_header_mapper import map_header_rows
from tabletree.core.processor.html_helper.html_layout_builder import build_layout
from tabletree.core.processor.html_helper.html_row_extractor import HTMLRowExtractor

logger = logging.getLogger("tabletree")


@dataclass
class HTMLTableExtractorConfig(TableExtractorConfig):
    """Configuration specific to HTML table extraction.

    Attributes:
        include_footer: Whether tfoot rows count as table rows when the
            header is taken from the first rows of the table
    """
    include_footer: bool = False


class HTMLTableExtractor(BaseTableExtractor):
    """HTML format-specific table extractor."""

    def __init__(self, config: Optional[TableExtractorConfig] = None):
        """Initialize HTML table extractor.

        Args:
            config: Table extraction configuration
        """
        self._config = config or HTMLTableExtractorConfig()
        super().__init__(self._config)
        self._row_extractor = HTMLRowExtractor(self._config)

    # ========================================================================
    # BaseTableExtractor Interface Implementation
    # ========================================================================

    def locate_sections(
        self,
        document: Tag,
        selector: str,
        skip_rows: Optional[int] = None
    ) -> TableSections:
        table = document.select_one(selector)
        if table is None:
            raise TableNotFoundError(selector)
        return self.resolve_sections(table, selector, skip_rows)

    def locate_all_sections(
        self,
        document: Tag,
        selector: str,
        skip_rows: Optional[int] = None
    ) -> List[TableSections]:
        """Sections of every table matching the selector."""
        tables = document.select(selector)
        if not tables:
            raise TableNotFoundError(selector)
        return [self.resolve_sections(table, selector, skip_rows) for table in tables]

    def map_headers(self, sections: TableSections) -> ColumnMap:
        return map_header_rows(sections.header_rows)

    def build_layout(self, column_map: ColumnMap) -> LayoutNode:
        return build_layout(column_map, 0, 0, "")

    def iter_records(self, sections: TableSections, layout: LayoutNode) -> Iterator[Record]:
        return self._row_extractor.iter_records(sections.body_rows, layout, sections.skip_rows)

    # ========================================================================
    # Internal Methods
    # ========================================================================

    def resolve_sections(
        self,
        table: Tag,
        selector: str = "",
        skip_rows: Optional[int] = None
    ) -> TableSections:
        """Split a table element's rows into header rows and body rows.

        Args:
            table: Matched table element
            selector: Selector used, for error messages
            skip_rows: Header row count when the table has no thead

        Returns:
            TableSections

        Raises:
            TableBodyNotFoundError: Neither a tbody nor section-less rows exist
        """
        bodies = table.find_all("tbody", recursive=False)
        if bodies:
            body_rows = [row for body in bodies for row in direct_rows(body)]
        else:
            body_rows = direct_rows(table)
            if not body_rows:
                raise TableBodyNotFoundError(selector)

        head_rows = direct_rows(table.find("thead", recursive=False))
        if head_rows:
            if skip_rows:
                self.logger.debug(
                    f"Table {selector!r} has a thead, using its {len(head_rows)} rows "
                    f"instead of skip_rows={skip_rows}"
                )
            return TableSections(
                table=table,
                header_rows=head_rows,
                body_rows=body_rows,
                skip_rows=0,
                selector=selector,
            )

        header_count = skip_rows if skip_rows and skip_rows > 0 else self._config.default_header_rows
        include_footer = getattr(self._config, "include_footer", False)
        header_rows = table_rows(table, include_footer)[:header_count]

        # header rows sit at the top of the body; count them out by identity
        header_ids = {id(row) for row in header_rows}
        skip = 0
        while skip < len(body_rows) and id(body_rows[skip]) in header_ids:
            skip += 1

        self.logger.debug(
            f"Table {selector!r}: {len(header_rows)} header rows, "
            f"{len(body_rows) - skip} body rows"
        )
        return TableSections(
            table=table,
            header_rows=header_rows,
            body_rows=body_rows,
            skip_rows=skip,
            selector=selector,
        )
