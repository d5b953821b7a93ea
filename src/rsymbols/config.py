"""Configuration management for the symbol tools."""

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field


class ExportConfig(BaseModel):
    """Export configuration."""

    json_export: bool = Field(default=True, alias="json")
    csv: bool = False

    model_config = {"populate_by_name": True}


class DisplayConfig(BaseModel):
    """Terminal display settings."""

    max_value_width: int = Field(default=60, ge=4)
    show_types: bool = True


class RSymbolsConfig(BaseModel):
    """Main configuration."""

    encoding: str = "utf-8"
    output_dir: str = "output"

    export: ExportConfig = Field(default_factory=ExportConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "RSymbolsConfig":
        """Load configuration from YAML file."""
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    @classmethod
    def load_default(cls) -> "RSymbolsConfig":
        """Load default configuration."""
        return cls()

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(by_alias=True), f, default_flow_style=False)


def load_config(config_path: Optional[str] = None) -> RSymbolsConfig:
    """Load configuration from file or defaults."""
    if config_path:
        return RSymbolsConfig.load_from_file(Path(config_path))

    # Try to find config in standard locations
    standard_paths = [
        Path("rsymbols_config.yaml"),
        Path("config/rsymbols.yaml"),
        Path.home() / ".rsymbols" / "config.yaml"
    ]

    for path in standard_paths:
        if path.exists():
            return RSymbolsConfig.load_from_file(path)

    return RSymbolsConfig.load_default()
