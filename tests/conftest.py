import pytest
from bs4 import BeautifulSoup


def parse_rows(html: str):
    """tr elements of a markup fragment, parsed with the stdlib tree builder."""
    return BeautifulSoup(f"<table>{html}</table>", "html.parser").find_all("tr")


@pytest.fixture
def rows():
    return parse_rows
