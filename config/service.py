"""Configuration service facade for simplified configuration access.

Implements the Facade pattern to provide a clean, simple interface
to the layered configuration. Reduces nesting in client code.
"""
from __future__ import annotations

from typing import Any, Optional
from pathlib import Path

from config.config import AppConfig, ConfigLoader


class ConfigurationService:
    """Facade for application configuration management.

    All properties delegate to the underlying AppConfig instance.

    Example:
        config_service = ConfigurationService(config)
        fmt = config_service.output_format  # Instead of config.output.format
    """

    def __init__(self, config: AppConfig):
        self._config = config

    # Input
    @property
    def input_path(self) -> str:
        """Get input file path ("-" for standard input)."""
        return self._config.input.path

    @property
    def input_encoding(self) -> Optional[str]:
        """Get forced input encoding, if any."""
        return self._config.input.encoding

    # Output
    @property
    def output_format(self) -> str:
        return self._config.output.format

    @property
    def weight_unit(self) -> str:
        return self._config.output.weight_unit

    @property
    def show_summary(self) -> bool:
        return self._config.output.show_summary

    @property
    def exercises_only(self) -> bool:
        return self._config.output.exercises_only

    @property
    def restart_set_numbering(self) -> bool:
        return self._config.output.restart_set_numbering

    # General configuration
    @property
    def strict(self) -> bool:
        """Get whether unparseable lines fail the run."""
        return self._config.strict

    @property
    def debug(self) -> bool:
        """Get debug mode status."""
        return self._config.debug

    @property
    def log_level(self) -> str:
        """Get effective log level (debug mode forces DEBUG)."""
        return "DEBUG" if self._config.debug else self._config.log_level

    @property
    def raw_config(self) -> AppConfig:
        """Get raw configuration object."""
        return self._config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for logging and serialization."""
        return {
            "input": {
                "path": self.input_path,
                "encoding": self.input_encoding,
            },
            "output": {
                "format": self.output_format,
                "weight_unit": self.weight_unit,
                "show_summary": self.show_summary,
                "exercises_only": self.exercises_only,
                "restart_set_numbering": self.restart_set_numbering,
            },
            "strict": self.strict,
            "debug": self.debug,
            "log_level": self.log_level,
        }


class ConfigurationServiceFactory:
    """Factory for creating ConfigurationService instances."""

    @staticmethod
    def create_from_args(
        args: list[str],
        config_dir: Path = Path("config"),
    ) -> tuple[ConfigurationService, list[str]]:
        """Create configuration service from command-line arguments.

        Args:
            args: Command-line arguments
            config_dir: Directory searched for settings.json

        Returns:
            Tuple of (ConfigurationService, unknown_args)
        """
        loader = ConfigLoader(config_dir)
        config, unknown_args = loader.load(args)
        return ConfigurationService(config), unknown_args

    @staticmethod
    def create_from_config(config: AppConfig) -> ConfigurationService:
        return ConfigurationService(config)

    @staticmethod
    def create_default() -> ConfigurationService:
        """Create configuration service from defaults, settings file and environment."""
        loader = ConfigLoader()
        config, _ = loader.load([])
        return ConfigurationService(config)
