# tabletree/core/processor/html_helper/html_layout_builder.py
"""
Layout Builder - ColumnMap to a nested field-name template

A header cell covering columns (start, col] owns every cell of a lower header
row whose last column falls inside that range. Ownership is decided from the
cumulative column positions alone, so a top label such as "Sales" over
"Jan", "Feb", "Mar" becomes:

    {"sales": {"jan": "###", "feb": "###", "mar": "###"}}

Leaves are PLACEHOLDER. The template always has exactly one leaf per header
column:
- a wide cell with nothing beneath it gets numbered leaves "label#0".."label#N-1"
- columns nobody labels get numbered keys "parent#offset" ("#offset" at the top)
- a repeated label at one level becomes "label#1", "label#2", ...

The ColumnMap is only read, never consumed, so the same map always yields
the same template.
"""
import logging
from typing import Dict, Optional

from tabletree.core.functions.table_extractor import PLACEHOLDER, ColumnMap, LayoutNode

logger = logging.getLogger("tabletree")


def build_layout(
    column_map: ColumnMap,
    row_index: int = 0,
    column_span: int = 0,
    column_name: str = "",
    start: int = 0
) -> Dict[str, LayoutNode]:
    """
    Recursively build the layout of header row `row_index`.

    Args:
        column_map: Mapped header cells
        row_index: Header row to read labels from
        column_span: Width of the parent cell (0 for the whole table)
        column_name: Label of the parent cell, used for numbered keys
        start: Column index just before the parent's first column

    Returns:
        Mapping of field name to placeholder or nested layout
    """
    if row_index >= len(column_map):
        return _numbered_leaves(column_name, 0, column_span)

    end = start + column_span if column_span else table_width(column_map)
    layout: Dict[str, LayoutNode] = {}
    position = start

    for cell in column_map[row_index]:
        if cell.col <= position or cell.col > end:
            continue

        cell_start = max(cell.start, position)
        if cell_start > position:
            _fill_gap(layout, column_map, row_index, position, cell_start, column_name, start)

        _insert(layout, cell.label, _build_cell(column_map, row_index, cell.label, cell_start, cell.col))
        position = cell.col

    if end > position:
        _fill_gap(layout, column_map, row_index, position, end, column_name, start)

    return layout


def table_width(column_map: ColumnMap) -> int:
    """Header width, trailing unlabelled columns included."""
    labelled = max((cell.col for row in column_map for cell in row), default=0)
    return max(getattr(column_map, "width", 0), labelled)


def _build_cell(column_map: ColumnMap, row_index: int, label: str, start: int, end: int) -> LayoutNode:
    width = end - start
    child_row = _find_child_row(column_map, row_index, start, end)
    if child_row is not None:
        return build_layout(column_map, child_row, width, label, start)
    if width == 1:
        return PLACEHOLDER
    return _numbered_leaves(label, 0, width)


def _fill_gap(
    layout: Dict[str, LayoutNode],
    column_map: ColumnMap,
    row_index: int,
    start: int,
    end: int,
    column_name: str,
    origin: int
) -> None:
    """Lay out columns (start, end] that have no label in this row."""
    child_row = _find_child_row(column_map, row_index, start, end)
    if child_row is not None:
        filled = build_layout(column_map, child_row, end - start, column_name, start)
    else:
        filled = _numbered_leaves(column_name, start - origin, end - start)

    for key, value in filled.items():
        _insert(layout, key, value)


def _find_child_row(column_map: ColumnMap, row_index: int, start: int, end: int) -> Optional[int]:
    """First lower header row with a cell ending inside (start, end]."""
    for index in range(row_index + 1, len(column_map)):
        if any(start < cell.col <= end for cell in column_map[index]):
            return index
    return None


def _numbered_leaves(column_name: str, offset: int, count: int) -> Dict[str, LayoutNode]:
    return {f"{column_name}#{offset + index}": PLACEHOLDER for index in range(count)}


def _insert(layout: Dict[str, LayoutNode], key: str, value: LayoutNode) -> None:
    if key in layout:
        suffix = 1
        while f"{key}#{suffix}" in layout:
            suffix += 1
        logger.debug(f"Duplicate field name {key!r}, using {key}#{suffix}")
        key = f"{key}#{suffix}"
    layout[key] = value
