# tabletree/core/processor/html_helper/html_header_mapper.py
"""
Header Mapper - header rows to a ColumnMap

Each labelled header cell is recorded with the cumulative column index of its
last column. A cell with rowspan > 1 holds its columns in the header rows
beneath it; those rows skip the held columns when counting, so cells placed
after a vertically spanning cell keep their true column index.

Example:
    <tr><th rowspan="2">Name</th><th colspan="2">Sales</th></tr>
    <tr><th>Jan</th><th>Feb</th></tr>

    [[HeaderCell(1, 1, "name"), HeaderCell(1, 3, "sales", span=2)],
     [HeaderCell(2, 2, "jan"), HeaderCell(2, 3, "feb")]]
"""
import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Set

from bs4 import Tag

from tabletree.core.functions.table_extractor import ColumnMap, HeaderCell
from tabletree.core.functions.utils import normalize_label, parse_span
from tabletree.core.processor.html_helper.html_elements import cell_text, row_cells

logger = logging.getLogger("tabletree")


def map_header_rows(header_rows: Sequence[Tag]) -> ColumnMap:
    """
    Build the ColumnMap of the given header rows.

    Args:
        header_rows: Header row elements, top to bottom

    Returns:
        One list of HeaderCell per header row, with the full header width
    """
    # header row index -> columns held by a vertical span from a row above
    held: Dict[int, Set[int]] = defaultdict(set)
    column_map = ColumnMap()

    for row_index, row in enumerate(header_rows):
        occupied = held.pop(row_index, set())
        cells: List[HeaderCell] = []
        total_cols = 0

        for th in row_cells(row):
            colspan = parse_span(th.get("colspan"))
            rowspan = parse_span(th.get("rowspan"))

            while total_cols + 1 in occupied:
                total_cols += 1
            start = total_cols
            total_cols += colspan

            if rowspan > 1:
                last_row = min(row_index + rowspan, len(header_rows))
                for below in range(row_index + 1, last_row):
                    held[below].update(range(start + 1, total_cols + 1))

            label = normalize_label(cell_text(th))
            if not label:
                # spacer: takes width, names nothing
                continue

            cells.append(HeaderCell(row=row_index + 1, col=total_cols, label=label, span=colspan))

        row_width = max(total_cols, max(occupied, default=0))
        column_map.width = max(column_map.width, row_width)

        logger.debug(f"Header row {row_index + 1}: {[cell.label for cell in cells]}")
        column_map.append(cells)

    return column_map
