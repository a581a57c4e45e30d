"""Configuration defaults for the filepath command-line interface."""

from dataclasses import dataclass


@dataclass
class CliConfig:
    """Output settings used by ``filepath.cli``."""

    # Output format when --format is not given: "text", "json" or "yaml"
    default_format: str = "text"

    # Indentation for JSON output
    json_indent: int = 2

    # Minimum column width for the inspect table
    table_min_width: int = 6

    def resolve_format(self, requested: str | None) -> str:
        """Return ``requested`` or the configured default when it is None."""
        return requested if requested is not None else self.default_format


# Global configuration instance
CLI_CONFIG = CliConfig()
