# tabletree/core/functions/encoding.py
"""
Encoding - Decoding raw HTML bytes

Module Components:
- ENCODING_CANDIDATES: Encodings tried in order
- EncodingConfig: Configuration dataclass for decoding
- HTMLDecoder: Declared-charset aware decoder for HTML documents

Usage Example:
    from tabletree.core.functions.encoding import HTMLDecoder

    text, encoding = HTMLDecoder().decode(raw_bytes)
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from bs4.dammit import EncodingDetector

logger = logging.getLogger("tabletree")


ENCODING_CANDIDATES = [
    'utf-8-sig',  # also plain utf-8
    'cp949',      # Korean Windows
    'euc-kr',     # Korean legacy
    'cp1252',     # Western Windows
]


@dataclass
class EncodingConfig:
    """Configuration for decoding operations.

    Attributes:
        preferred_encoding: Encoding to try first
        sniff_meta_charset: Whether to honor a charset declared in a meta tag
        sniff_bytes: How many leading bytes to scan for the meta tag
        encoding_candidates: List of encodings to try in order
        fallback_encoding: Final fallback encoding (never fails)
    """
    preferred_encoding: Optional[str] = None
    sniff_meta_charset: bool = True
    sniff_bytes: int = 4096
    encoding_candidates: List[str] = field(default_factory=lambda: ENCODING_CANDIDATES.copy())
    fallback_encoding: str = 'latin-1'


class HTMLDecoder:
    """Decode HTML bytes to text."""

    def __init__(self, config: Optional[EncodingConfig] = None):
        self.config = config or EncodingConfig()
        self.logger = logging.getLogger("tabletree")

    def decode(self, data: bytes) -> Tuple[str, str]:
        """Decode binary data to string.

        Args:
            data: Binary data to decode

        Returns:
            Tuple of (decoded_text, encoding_used)
        """
        for encoding in self._candidates(data):
            try:
                return data.decode(encoding), encoding
            except (UnicodeDecodeError, LookupError):
                continue

        self.logger.warning(
            f"No candidate encoding matched, decoding as {self.config.fallback_encoding}"
        )
        return data.decode(self.config.fallback_encoding, errors='replace'), self.config.fallback_encoding

    def _candidates(self, data: bytes) -> List[str]:
        candidates = []
        if self.config.preferred_encoding:
            candidates.append(self.config.preferred_encoding)
        if self.config.sniff_meta_charset:
            declared = self.sniff_charset(data)
            if declared:
                candidates.append(declared)
        for encoding in self.config.encoding_candidates:
            if encoding not in candidates:
                candidates.append(encoding)
        return candidates

    def sniff_charset(self, data: bytes) -> Optional[str]:
        """Return the charset declared in a meta tag, if any."""
        charset = EncodingDetector.find_declared_encoding(
            data[:self.config.sniff_bytes], is_html=True, search_entire_document=True
        )
        if charset:
            self.logger.debug(f"Declared charset: {charset}")
        return charset or None


# Default configuration instance
DEFAULT_ENCODING_CONFIG = EncodingConfig()
