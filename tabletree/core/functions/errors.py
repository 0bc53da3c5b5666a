# tabletree/core/functions/errors.py
"""Exceptions raised by table extraction."""


class TableExtractionError(Exception):
    """Base class for table extraction failures."""

    def __init__(self, message: str, selector: str = ""):
        self.message = message
        self.selector = selector
        super().__init__(self.message)


class TableNotFoundError(TableExtractionError):
    """No element matched the table selector."""

    def __init__(self, selector: str):
        super().__init__(f"No table found with the given selector: {selector!r}", selector)


class TableBodyNotFoundError(TableExtractionError):
    """The matched table has no body rows container."""

    def __init__(self, selector: str = ""):
        super().__init__(f"No tbody found in the table: {selector!r}", selector)


class SpanMismatchError(TableExtractionError):
    """Expanded body values do not line up with the layout placeholders.

    Only raised when the extractor runs with ``strict=True``.
    """

    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index}: expected {expected} values for the header layout, got {actual}"
        )
