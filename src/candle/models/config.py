"""Pydantic configuration model for candle."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class CandleConfig(BaseModel):
    """
    Root configuration model for candle.

    Example:
        config = CandleConfig(parser="html.parser", indent_width=4)

    YAML format:
        parser: html5lib
        charset_scan_chars: 1024
        indent_width: 2
        log_level: DEBUG
    """

    # Parsing
    parser: Literal["html5lib", "html.parser"] = Field(
        "html5lib",
        description="BeautifulSoup tree builder used to parse the document",
    )
    charset_scan_chars: int = Field(
        1024,
        ge=0,
        description="Number of leading characters searched for a <meta charset> declaration",
    )

    # Output
    indent_width: int = Field(2, ge=0, description="Spaces per nesting level for {html} output")
    trim_results: bool = Field(True, description="Strip leading/trailing whitespace from each result")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "CandleConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "CandleConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
