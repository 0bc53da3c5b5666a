# tabletree/core/processor/html_helper/html_elements.py
"""
Row and cell access on BeautifulSoup table elements.

Only rows owned by the table itself are returned; rows of tables nested
inside a cell belong to those tables.
"""
from typing import List, Optional

from bs4 import Tag

SECTION_TAGS = ("thead", "tbody", "tfoot")
CELL_TAGS = ["td", "th"]


def direct_rows(container: Optional[Tag]) -> List[Tag]:
    """tr children of a table section (or of a table without sections)."""
    if container is None:
        return []
    return container.find_all("tr", recursive=False)


def table_rows(table: Tag, include_footer: bool = False) -> List[Tag]:
    """Every row of the table in document order."""
    rows = []
    for child in table.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "tr":
            rows.append(child)
        elif child.name in SECTION_TAGS:
            if child.name == "tfoot" and not include_footer:
                continue
            rows.extend(direct_rows(child))
    return rows


def row_cells(row: Tag) -> List[Tag]:
    return row.find_all(CELL_TAGS, recursive=False)


def cell_text(cell: Tag) -> str:
    """Trimmed text content of a cell, inner elements joined by spaces."""
    return cell.get_text(" ", strip=True)
