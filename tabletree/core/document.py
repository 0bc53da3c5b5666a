# tabletree/core/document.py
"""HTMLDocument - Parsed HTML Document

Entry point of the library. Wraps a BeautifulSoup tree and extracts
structured records from the tables in it.

Usage Example:
    from tabletree import HTMLDocument

    document = HTMLDocument(html)
    records = document.table("table.wikitable")

    # Tables without a thead: the first two rows form the header
    records = document.table("#results", skip_rows=2)

    # Local files, decoded with the declared or a candidate encoding
    document = HTMLDocument.from_file("page.html")
"""
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from tabletree.core.functions.encoding import EncodingConfig, HTMLDecoder
from tabletree.core.functions.table_extractor import Record, TableExtractorConfig
from tabletree.core.processor.html_helper import HTMLTableExtractor, HTMLTableExtractorConfig

logger = logging.getLogger("tabletree")


class HTMLDocument:
    """
    A parsed HTML document with table extraction.

    Attributes:
        config: Extraction configuration
        encoding: Encoding the source bytes were decoded with (None for str input)

    Example:
        >>> document = HTMLDocument("<table><tr><th>Name</th></tr><tr><td>Ann</td></tr></table>")
        >>> document.table("table")
        [{'name': 'Ann'}]
    """

    def __init__(
        self,
        html: Union[str, bytes],
        config: Optional[TableExtractorConfig] = None,
        *,
        encoding_config: Optional[EncodingConfig] = None
    ):
        """
        Initialize HTMLDocument.

        Args:
            html: Markup as text, or raw bytes to decode
            config: Extraction configuration (parser, fill value, strict mode, ...)
            encoding_config: Decoding configuration, used for bytes input only
        """
        self._config = config or HTMLTableExtractorConfig()
        self._logger = logging.getLogger("tabletree.document")
        self._encoding: Optional[str] = None

        if isinstance(html, bytes):
            html, self._encoding = HTMLDecoder(encoding_config).decode(html)
            self._logger.debug(f"Decoded document as {self._encoding}")

        self._soup = BeautifulSoup(html, self._config.parser)
        self._extractor = HTMLTableExtractor(self._config)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        config: Optional[TableExtractorConfig] = None,
        *,
        encoding_config: Optional[EncodingConfig] = None
    ) -> "HTMLDocument":
        return cls(data, config, encoding_config=encoding_config)

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        config: Optional[TableExtractorConfig] = None,
        *,
        encoding_config: Optional[EncodingConfig] = None
    ) -> "HTMLDocument":
        """
        Load and parse a local HTML file.

        Raises:
            FileNotFoundError: If file cannot be found
        """
        file_path_str = str(file_path)
        if not os.path.exists(file_path_str):
            raise FileNotFoundError(f"File not found: {file_path_str}")

        logger.info(f"Loading HTML document: {file_path_str}")
        with open(file_path_str, "rb") as f:
            data = f.read()
        return cls(data, config, encoding_config=encoding_config)

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> TableExtractorConfig:
        return self._config

    @property
    def encoding(self) -> Optional[str]:
        return self._encoding

    @property
    def soup(self) -> BeautifulSoup:
        """Underlying BeautifulSoup tree."""
        return self._soup

    # =========================================================================
    # Public Methods - Queries
    # =========================================================================

    def select(self, selector: str) -> List[Tag]:
        """Every element matching a CSS selector."""
        return self._soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        """First element matching a CSS selector, or None."""
        return self._soup.select_one(selector)

    # =========================================================================
    # Public Methods - Table Extraction
    # =========================================================================

    def table(self, selector: str, skip_rows: Optional[int] = None) -> List[Record]:
        """
        Extract the first table matching `selector` as records.

        Args:
            selector: CSS selector of the table element
            skip_rows: How many leading rows form the header when the table
                has no thead (default 1); ignored when a thead exists

        Returns:
            One nested record per body row, in document order

        Raises:
            TableNotFoundError: No element matched the selector
            TableBodyNotFoundError: The table has no body rows
            SpanMismatchError: Strict mode only, spans do not add up
        """
        self._logger.info(f"Extracting table: {selector}")
        return self._extractor.extract_table(self._soup, selector, skip_rows)

    def tables(self, selector: str, skip_rows: Optional[int] = None) -> List[List[Record]]:
        """
        Extract every table matching `selector`.

        Returns:
            One list of records per matched table, in document order

        Raises:
            TableNotFoundError: No element matched the selector
        """
        self._logger.info(f"Extracting tables: {selector}")
        sections = self._extractor.locate_all_sections(self._soup, selector, skip_rows)
        return [self._extractor.extract_sections(table_sections) for table_sections in sections]

    def __repr__(self) -> str:
        return f"HTMLDocument(parser={self._config.parser!r}, encoding={self._encoding!r})"


def extract_table(
    html: Union[str, bytes],
    selector: str,
    skip_rows: Optional[int] = None,
    config: Optional[TableExtractorConfig] = None
) -> List[Record]:
    """
    Parse `html` and extract the first table matching `selector`.

    Shortcut for HTMLDocument(html, config).table(selector, skip_rows).
    """
    return HTMLDocument(html, config).table(selector, skip_rows)
