# tabletree/core/processor/html_helper/html_row_extractor.py
"""
Row Extractor - body rows to records

Every body row is expanded to one value per column:
- a cell with colspan=N contributes its value N times
- a cell with rowspan=M keeps its columns for the next M-1 rows; those rows
  get the carried value spliced back in at the same column

The expanded values then fill the layout placeholders in pre-order, so the
Nth placeholder receives the value of the Nth column.
"""
import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from bs4 import Tag

from tabletree.core.functions.errors import SpanMismatchError
from tabletree.core.functions.table_extractor import (
    LayoutNode,
    Record,
    TableExtractorConfig,
    count_placeholders,
)
from tabletree.core.functions.utils import clean_text, parse_span
from tabletree.core.processor.html_helper.html_elements import cell_text, row_cells

logger = logging.getLogger("tabletree")

# column index -> (value, rows still to receive it)
CarryMap = Dict[int, Tuple[str, int]]


def fill_layout(layout: LayoutNode, values: Sequence[str], fill_value: str = "") -> Record:
    """
    Instantiate a layout with values in placeholder order.

    The layout itself is not modified. Placeholders left over once values
    run out receive `fill_value`; surplus values are ignored.
    """
    iterator = iter(values)

    def fill(node: LayoutNode):
        if isinstance(node, dict):
            return {key: fill(child) for key, child in node.items()}
        return next(iterator, fill_value)

    return fill(layout)


class HTMLRowExtractor:
    """Expands body rows and fills a layout template per row."""

    def __init__(self, config: Optional[TableExtractorConfig] = None):
        self.config = config or TableExtractorConfig()
        self.logger = logging.getLogger("tabletree")

    def iter_records(
        self,
        body_rows: Sequence[Tag],
        layout: LayoutNode,
        skip_rows: int = 0
    ) -> Iterator[Record]:
        """
        Yield one record per body row after the first `skip_rows`.

        Args:
            body_rows: Rows of the body container, in document order
            layout: Template from the Layout Builder
            skip_rows: Leading rows to exclude

        Raises:
            SpanMismatchError: In strict mode, when a row's value count differs
                from the placeholder count
        """
        expected = count_placeholders(layout)
        carried: CarryMap = {}
        mismatched = 0

        for row_index, row in enumerate(body_rows[skip_rows:]):
            values, carried = self.expand_row(row, carried)

            if len(values) != expected:
                if self.config.strict:
                    raise SpanMismatchError(row_index, expected, len(values))
                mismatched += 1
                self.logger.debug(
                    f"Row {row_index}: {len(values)} values for {expected} placeholders"
                )

            yield fill_layout(layout, values, self.config.fill_value)

        if mismatched:
            self.logger.warning(
                f"{mismatched} rows did not match the header layout ({expected} columns); "
                f"missing values filled with {self.config.fill_value!r}, extra values dropped"
            )

    def expand_row(self, row: Tag, carried: CarryMap) -> Tuple[List[str], CarryMap]:
        """
        Expand one row to a value per column.

        Args:
            row: Body row element
            carried: Values held for this row by vertical spans from above

        Returns:
            Tuple of (values, carry map for the next row)
        """
        pending = dict(carried)
        next_carried: CarryMap = {}
        values: List[str] = []

        def take_carried(column: int) -> None:
            value, remaining = pending.pop(column)
            values.append(value)
            if remaining > 1:
                next_carried[column] = (value, remaining - 1)

        for cell in row_cells(row):
            while len(values) in pending:
                take_carried(len(values))

            colspan = parse_span(cell.get("colspan"))
            rowspan = parse_span(cell.get("rowspan"))
            value = self.cell_value(cell)

            first = len(values)
            values.extend([value] * colspan)
            if rowspan > 1:
                for column in range(first, first + colspan):
                    next_carried[column] = (value, rowspan - 1)

        # held columns past the row's own cells
        for column in sorted(pending):
            if column > len(values):
                values.extend([self.config.fill_value] * (column - len(values)))
            if column == len(values):
                take_carried(column)

        return values, next_carried

    def cell_value(self, cell: Tag) -> str:
        """Cleaned cell text, else the image attribute of a descendant img."""
        value = clean_text(cell_text(cell))
        if value:
            return value

        img = cell.find("img")
        if img is None:
            return ""
        attribute = img.get(self.config.image_attribute)
        return attribute.strip() if isinstance(attribute, str) else ""
