"""Tests for mapping header rows to HeaderCell descriptors."""

from tabletree.core.functions.table_extractor import HeaderCell
from tabletree.core.processor.html_helper.html_header_mapper import map_header_rows


class TestFlatHeader:

    def test_single_row(self, rows):
        column_map = map_header_rows(rows("<tr><th>Name</th><th>Age</th></tr>"))
        assert column_map == [[HeaderCell(1, 1, "name"), HeaderCell(1, 2, "age")]]

    def test_colspan_accumulates(self, rows):
        column_map = map_header_rows(rows(
            '<tr><th>Name</th><th colspan="3">Scores</th><th>Total</th></tr>'
        ))
        assert [(cell.col, cell.span) for cell in column_map[0]] == [(1, 1), (4, 3), (5, 1)]

    def test_labels_are_normalized(self, rows):
        column_map = map_header_rows(rows('<tr><th>Date of Birth[1]</th><th>"Home" Town</th></tr>'))
        assert [cell.label for cell in column_map[0]] == ["dateOfBirth", "homeTown"]

    def test_td_cells_are_headers_too(self, rows):
        column_map = map_header_rows(rows("<tr><td>Name</td><th>Age</th></tr>"))
        assert [cell.label for cell in column_map[0]] == ["name", "age"]


class TestEmptyCells:

    def test_empty_cell_takes_width_but_emits_nothing(self, rows):
        column_map = map_header_rows(rows("<tr><th></th><th>Name</th></tr>"))
        assert column_map == [[HeaderCell(1, 2, "name")]]

    def test_wide_empty_cell(self, rows):
        column_map = map_header_rows(rows('<tr><th colspan="2"> </th><th>Name</th></tr>'))
        assert column_map == [[HeaderCell(1, 3, "name")]]

    def test_width_counts_trailing_empty_cell(self, rows):
        column_map = map_header_rows(rows("<tr><th>Name</th><th>Age</th><th></th></tr>"))
        assert column_map == [[HeaderCell(1, 1, "name"), HeaderCell(1, 2, "age")]]
        assert column_map.width == 3

    def test_width_counts_held_columns(self, rows):
        column_map = map_header_rows(rows(
            '<tr><th>A</th><th rowspan="2" colspan="2">B</th></tr>'
            "<tr><th>C</th></tr>"
        ))
        assert column_map.width == 3


class TestRowspan:

    def test_rowspan_does_not_shift_cells_beneath(self, rows):
        column_map = map_header_rows(rows(
            '<tr><th rowspan="2">Name</th><th colspan="2">Sales</th><th rowspan="2">Total</th></tr>'
            '<tr><th>Jan</th><th>Feb</th></tr>'
        ))
        assert column_map[0] == [
            HeaderCell(1, 1, "name"),
            HeaderCell(1, 3, "sales", 2),
            HeaderCell(1, 4, "total"),
        ]
        assert column_map[1] == [HeaderCell(2, 2, "jan"), HeaderCell(2, 3, "feb")]

    def test_rowspan_in_the_middle(self, rows):
        column_map = map_header_rows(rows(
            '<tr><th colspan="2">Sales</th><th rowspan="2">Region</th><th colspan="2">Costs</th></tr>'
            '<tr><th>Jan</th><th>Feb</th><th>Jan</th><th>Feb</th></tr>'
        ))
        assert [cell.col for cell in column_map[1]] == [1, 2, 4, 5]

    def test_rowspan_over_three_rows(self, rows):
        column_map = map_header_rows(rows(
            '<tr><th rowspan="3">Id</th><th colspan="2">A</th></tr>'
            '<tr><th colspan="2">B</th></tr>'
            '<tr><th>C</th><th>D</th></tr>'
        ))
        assert column_map[1] == [HeaderCell(2, 3, "b", 2)]
        assert column_map[2] == [HeaderCell(3, 2, "c"), HeaderCell(3, 3, "d")]

    def test_rowspan_past_last_header_row_is_ignored(self, rows):
        column_map = map_header_rows(rows('<tr><th rowspan="5">Name</th><th>Age</th></tr>'))
        assert column_map == [[HeaderCell(1, 1, "name"), HeaderCell(1, 2, "age")]]

    def test_document_is_not_mutated(self, rows):
        header_rows = rows(
            '<tr><th rowspan="2">Name</th><th colspan="2">Sales</th></tr>'
            '<tr><th>Jan</th><th>Feb</th></tr>'
        )
        before = [str(row) for row in header_rows]
        map_header_rows(header_rows)
        assert [str(row) for row in header_rows] == before


def test_no_header_rows():
    assert map_header_rows([]) == []
