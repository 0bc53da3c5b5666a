"""Tests for decoding raw HTML bytes and loading files."""

import pytest

from tabletree import HTMLDocument
from tabletree.core.functions.encoding import EncodingConfig, HTMLDecoder


class TestHTMLDecoder:

    def test_utf8(self):
        text, encoding = HTMLDecoder().decode("café".encode("utf-8"))
        assert text == "café"
        assert encoding == "utf-8-sig"

    def test_utf8_bom_is_removed(self):
        text, _ = HTMLDecoder().decode(b"\xef\xbb\xbf<p>x</p>")
        assert text == "<p>x</p>"

    def test_declared_charset_wins(self):
        data = b'<meta charset="cp1252"><p>caf\xe9</p>'
        text, encoding = HTMLDecoder().decode(data)
        assert encoding == "cp1252"
        assert "café" in text

    def test_http_equiv_charset(self):
        data = b'<meta http-equiv="Content-Type" content="text/html; charset=ISO-8859-1">'
        assert HTMLDecoder().sniff_charset(data) == "iso-8859-1"

    def test_unquoted_charset(self):
        assert HTMLDecoder().sniff_charset(b"<head><meta charset=utf-8></head>") == "utf-8"

    def test_declaration_past_sniff_window_is_ignored(self):
        data = b" " * 100 + b'<meta charset="cp1252">'
        assert HTMLDecoder(EncodingConfig(sniff_bytes=50)).sniff_charset(data) is None

    def test_unknown_declared_charset_is_skipped(self):
        text, encoding = HTMLDecoder().decode(b'<meta charset="x-bogus"><p>ok</p>')
        assert encoding == "utf-8-sig"
        assert text.endswith("<p>ok</p>")

    def test_candidate_list(self):
        text, encoding = HTMLDecoder().decode(b"caf\xe9")
        assert (text, encoding) == ("café", "cp1252")

    def test_preferred_encoding(self):
        config = EncodingConfig(preferred_encoding="latin-1")
        assert HTMLDecoder(config).decode("é".encode("utf-8"))[1] == "latin-1"

    def test_fallback(self):
        assert HTMLDecoder().decode(b"\x81") == ("\x81", "latin-1")


class TestLoading:

    HTML = "<table id='t'><thead><tr><th>Città</th></tr></thead><tbody><tr><td>Roma</td></tr></tbody></table>"

    def test_from_bytes(self):
        document = HTMLDocument.from_bytes(self.HTML.encode("utf-8"))
        assert document.encoding == "utf-8-sig"
        assert document.table("#t") == [{"città": "Roma"}]

    def test_from_file(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_bytes(self.HTML.encode("utf-8"))
        assert HTMLDocument.from_file(path).table("#t") == [{"città": "Roma"}]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HTMLDocument.from_file(tmp_path / "missing.html")

    def test_text_input_has_no_encoding(self):
        assert HTMLDocument(self.HTML).encoding is None
