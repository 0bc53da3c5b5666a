# tabletree/core/functions/utils.py
"""
Text utilities shared by the header and body passes.

Labels and cell values go through the same cleaning so that a footnote
marker such as ``[1]`` never leaks into a field name or a value.
"""
import re
from typing import Any, Optional

_ANNOTATION_RE = re.compile(r'\[.*?\]')
_QUOTE_RE = re.compile(r'[\'"]')
_WHITESPACE_RE = re.compile(r'\s+')


def clean_text(text: Optional[str]) -> str:
    """
    Remove bracketed annotations and quote characters from cell text.

    Whitespace runs (including newlines from pretty-printed markup) are
    collapsed to a single space.

    Args:
        text: Raw cell text

    Returns:
        Cleaned text, never None
    """
    if not text:
        return ""
    text = _ANNOTATION_RE.sub('', text)
    text = _QUOTE_RE.sub('', text)
    return _WHITESPACE_RE.sub(' ', text).strip()


def to_camel_case(text: str) -> str:
    """
    Convert space separated words to a camel-style identifier.

    >>> to_camel_case("Date of Birth")
    'dateOfBirth'
    """
    words = text.split()
    if not words:
        return ""
    head, tail = words[0], words[1:]
    return head.lower() + ''.join(word[:1].upper() + word[1:].lower() for word in tail)


def normalize_label(text: Optional[str]) -> str:
    """Header text -> field name."""
    return to_camel_case(clean_text(text))


def parse_span(value: Any) -> int:
    """
    Read a colspan/rowspan attribute value.

    Missing, non-numeric and non-positive values degrade to 1.
    """
    if value is None:
        return 1
    if isinstance(value, list):
        value = value[0] if value else None
    try:
        span = int(str(value).strip())
    except (ValueError, TypeError):
        return 1
    return span if span > 0 else 1
