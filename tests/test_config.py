"""Tests for CandleConfig."""

import pytest
from candle import CandleConfig
from pydantic import ValidationError


class TestCandleConfig:
    """Tests for CandleConfig."""

    def test_defaults(self):
        """Test default values."""
        config = CandleConfig()

        assert config.parser == "html5lib"
        assert config.charset_scan_chars == 1024
        assert config.indent_width == 2
        assert config.trim_results is True
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_unknown_field_rejected(self):
        """Test extra='forbid'."""
        with pytest.raises(ValidationError):
            CandleConfig(colour="red")

    def test_unknown_parser_rejected(self):
        """Test the parser whitelist."""
        with pytest.raises(ValidationError):
            CandleConfig(parser="lxml-xml")

    def test_negative_indent_rejected(self):
        """Test numeric bounds."""
        with pytest.raises(ValidationError):
            CandleConfig(indent_width=-1)

    def test_yaml_round_trip(self):
        """Test to_yaml and from_yaml."""
        pytest.importorskip("yaml")
        config = CandleConfig(parser="html.parser", indent_width=4, log_level="DEBUG")

        assert CandleConfig.from_yaml(config.to_yaml()) == config

    def test_from_yaml_file(self, tmp_path):
        """Test loading a config file."""
        pytest.importorskip("yaml")
        path = tmp_path / "candle.yaml"
        path.write_text("indent_width: 3\ntrim_results: false\n")

        config = CandleConfig.from_yaml_file(path)

        assert config.indent_width == 3
        assert config.trim_results is False

    def test_empty_yaml(self):
        """Test that an empty file means defaults."""
        pytest.importorskip("yaml")

        assert CandleConfig.from_yaml("") == CandleConfig()
