"""Tests for encoding resolution."""

from candle.parsing.encoding import resolve_encoding, sniff_charset


class TestSniffCharset:
    """Tests for sniff_charset."""

    def test_double_quotes(self):
        """Test charset declared with double quotes."""
        assert sniff_charset('<html><meta charset="utf-8">') == "utf-8"

    def test_single_quotes_and_uppercase(self):
        """Test single quotes and uppercase keywords."""
        assert sniff_charset("<META CHARSET='ISO-8859-1'>") == "ISO-8859-1"

    def test_no_declaration(self):
        """Test a document without a charset."""
        assert sniff_charset("<html><title>x</title>") is None

    def test_declaration_outside_scan_window(self):
        """Test that only the first scan_chars characters are searched."""
        text = '<meta charset="utf-8">'

        assert sniff_charset(text, scan_chars=10) is None
        assert sniff_charset(" " * 2000 + text) is None


class TestResolveEncoding:
    """Tests for resolve_encoding."""

    def test_less_than_1024_bytes_of_html(self):
        """Test that short input comes back unchanged."""
        html = """
            <!DOCTYPE html>
            <meta charset="utf-8">
            <title>Hello, world!</title>
            <h1 class="foo">Hello, <i>world!</i></h1>
        """
        assert resolve_encoding(html.encode("utf-8")) == html

    def test_utf8_without_declaration(self):
        """Test non-ASCII UTF-8 with no charset declared."""
        html = "<p>Héllo Wörld</p>"

        assert resolve_encoding(html.encode("utf-8")) == html

    def test_invalid_utf8_is_replaced(self):
        """Test that undecodable bytes never raise."""
        result = resolve_encoding(b"<p>caf\xe9</p>")

        assert result == "<p>caf�</p>"

    def test_declared_charset_redecodes_whole_buffer(self):
        """Test that bytes after the scan window use the declared charset."""
        html = "<meta charset='windows-1252'>" + "x" * 2000 + "<p>café</p>"

        result = resolve_encoding(html.encode("cp1252"))

        assert result.endswith("<p>café</p>")
        assert "�" not in result

    def test_charset_alias(self):
        """Test a label alias resolved through the encoding registry."""
        html = '<meta charset="latin1"><p>naïve</p>'

        assert resolve_encoding(html.encode("latin-1")).endswith("<p>naïve</p>")

    def test_unknown_charset_falls_back_to_utf8(self):
        """Test that an unrecognized label is ignored."""
        raw = b'<meta charset="klingon"><p>caf\xe9</p>'

        assert resolve_encoding(raw) == '<meta charset="klingon"><p>caf�</p>'

    def test_declaration_after_scan_window_is_not_honored(self):
        """Test the known limitation for late charset declarations."""
        html = "x" * 2000 + "<meta charset='windows-1252'><p>café</p>"

        result = resolve_encoding(html.encode("cp1252"))

        assert result.endswith("<p>caf�</p>")

    def test_custom_scan_window(self):
        """Test widening the scan window."""
        html = "x" * 2000 + "<meta charset='windows-1252'><p>café</p>"

        result = resolve_encoding(html.encode("cp1252"), scan_chars=4096)

        assert result.endswith("<p>café</p>")

    def test_empty_input(self):
        """Test that empty input decodes to an empty string."""
        assert resolve_encoding(b"") == ""
