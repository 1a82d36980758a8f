"""Layered configuration for the workout log tools.

Implements a hierarchical configuration system with the following precedence:
1. Default values (lowest priority)
2. JSON settings file (config/settings.json, optional)
3. Environment variables
4. Command-line arguments (highest priority)

Configuration is deep-merged across all sources, allowing partial overrides
at any level of the configuration hierarchy. Parser behavior itself is fixed;
only input handling, output rendering and logging are configurable.
"""
from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import argparse
from loguru import logger

from core.exceptions import ConfigurationError

OUTPUT_FORMATS = ("text", "json")
WEIGHT_UNITS = ("kg", "lbs")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class InputConfig:
    """Input source configuration.

    Attributes:
        path: File to read, or "-" for standard input
        encoding: Forced text encoding; None tries the fallback chain
    """
    path: str = "-"
    encoding: Optional[str] = None

    def __post_init__(self):
        if not self.path:
            raise ConfigurationError("Input path must not be empty")
        if self.encoding is not None:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                raise ConfigurationError(f"Unknown encoding: {self.encoding}")


@dataclass(frozen=True)
class OutputConfig:
    """Output rendering configuration.

    Attributes:
        format: "text" for a readable listing, "json" for machine output
        weight_unit: Unit label attached to set records
        show_summary: Append workout totals
        exercises_only: Leave comments, blank and unparseable lines out
        restart_set_numbering: Number sets per exercise instead of per workout
    """
    format: str = "text"
    weight_unit: str = "kg"
    show_summary: bool = True
    exercises_only: bool = False
    restart_set_numbering: bool = False

    def __post_init__(self):
        if self.format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Invalid output format: {self.format}")
        if self.weight_unit not in WEIGHT_UNITS:
            raise ConfigurationError(f"Invalid weight unit: {self.weight_unit}")


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration.

    Attributes:
        input: Input source settings
        output: Output rendering settings
        strict: Treat unparseable lines as a failure
        debug: Debug mode flag
        log_level: Logging verbosity level
    """
    input: InputConfig
    output: OutputConfig
    strict: bool = False
    debug: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as ConfigurationError."""

    def error(self, message: str):
        raise ConfigurationError(message)


class ConfigLoader:
    """Centralized configuration loader with validation and hierarchy.

    Implements the configuration loading strategy with proper precedence
    and deep merging of nested configuration dictionaries.
    """

    SETTINGS_FILE = "settings.json"

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = config_dir

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration with proper hierarchy: defaults → file → env → CLI.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, unknown CLI arguments)

        Raises:
            ConfigurationError: If any source holds an invalid value
        """
        # 1. Start with defaults
        config_dict = self._get_defaults()

        # 2. Settings file (deep merge)
        self._deep_update(config_dict, self._load_settings_file())

        # 3. Override with environment variables (deep merge)
        self._deep_update(config_dict, self._load_env_overrides())

        # 4. Parse CLI arguments (highest priority, deep merge)
        cli_overrides, unknown_args = self._parse_cli_args(argv)
        self._deep_update(config_dict, cli_overrides)

        # 5. Build and validate final config
        config = self._build_config(config_dict)
        return config, unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values."""
        return {
            "input": {
                "path": "-",
                "encoding": None,
            },
            "output": {
                "format": "text",
                "weight_unit": "kg",
                "show_summary": True,
                "exercises_only": False,
                "restart_set_numbering": False,
            },
            "strict": False,
            "debug": False,
            "log_level": "WARNING",
        }

    def _load_settings_file(self) -> Dict[str, Any]:
        """Load the optional JSON settings file.

        Returns:
            Parsed settings, or an empty dict when the file is missing or unreadable

        Raises:
            ConfigurationError: If the file holds something other than a JSON object
        """
        file_path = self.config_dir / self.SETTINGS_FILE
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"{file_path} must contain a JSON object")
        return data

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables.

        Supported environment variables:
        - WORKOUT_OUTPUT_FORMAT: Output format (text or json)
        - WORKOUT_INPUT_ENCODING: Forced input encoding
        - WORKOUT_WEIGHT_UNIT: Unit label for set records
        - WORKOUT_STRICT: Fail on unparseable lines
        - DEBUG: Enable debug mode
        - LOG_LEVEL: Set logging level

        Returns:
            Dictionary with environment-based overrides
        """
        overrides: Dict[str, Any] = {}

        output_format = os.getenv("WORKOUT_OUTPUT_FORMAT")
        if output_format:
            overrides.setdefault("output", {})["format"] = output_format.strip().lower()

        weight_unit = os.getenv("WORKOUT_WEIGHT_UNIT")
        if weight_unit:
            overrides.setdefault("output", {})["weight_unit"] = weight_unit.strip().lower()

        encoding = os.getenv("WORKOUT_INPUT_ENCODING")
        if encoding:
            overrides.setdefault("input", {})["encoding"] = encoding.strip()

        if self._env_bool("WORKOUT_STRICT"):
            overrides["strict"] = True

        # Debug and logging
        if self._env_bool("DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.strip().upper()

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        """Parse CLI arguments.

        Args:
            argv: Command-line arguments

        Returns:
            Tuple of (overrides dictionary, unknown arguments)
        """
        parser = _ArgumentParser(
            prog="workout-parse",
            description="Parse free-text workout logs into exercises and sets",
        )

        parser.add_argument(
            "input",
            nargs="?",
            help="Workout log file ('-' or omitted reads standard input)"
        )
        parser.add_argument(
            "--format",
            choices=list(OUTPUT_FORMATS),
            help="Output format"
        )
        parser.add_argument(
            "--encoding",
            help="Input text encoding (default: try utf-8, utf-8-sig, latin-1, cp1252)"
        )
        parser.add_argument(
            "--weight-unit",
            choices=list(WEIGHT_UNITS),
            help="Unit label attached to set records"
        )
        parser.add_argument(
            "--exercises-only",
            action="store_true",
            help="Only list recognized exercises"
        )
        parser.add_argument(
            "--no-summary",
            action="store_true",
            help="Do not print workout totals"
        )
        parser.add_argument(
            "--restart-set-numbering",
            action="store_true",
            help="Number sets within each exercise"
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Exit with status 2 when a line cannot be parsed"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug mode"
        )
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=list(LOG_LEVELS),
            help="Set logging level"
        )

        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        if known.input:
            overrides.setdefault("input", {})["path"] = known.input
        if known.encoding:
            overrides.setdefault("input", {})["encoding"] = known.encoding
        if known.format:
            overrides.setdefault("output", {})["format"] = known.format
        if known.weight_unit:
            overrides.setdefault("output", {})["weight_unit"] = known.weight_unit
        if known.exercises_only:
            overrides.setdefault("output", {})["exercises_only"] = True
        if known.no_summary:
            overrides.setdefault("output", {})["show_summary"] = False
        if known.restart_set_numbering:
            overrides.setdefault("output", {})["restart_set_numbering"] = True
        if known.strict:
            overrides["strict"] = True
        if known.debug:
            overrides["debug"] = True
        if known.log_level:
            overrides["log_level"] = known.log_level

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Build and validate the final configuration object.

        Args:
            config_dict: Merged configuration dictionary

        Returns:
            Validated AppConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            input_config = InputConfig(**config_dict.get("input", {}))
            output_config = OutputConfig(**config_dict.get("output", {}))
        except TypeError as e:
            # Unknown keys from the settings file
            raise ConfigurationError(f"Invalid configuration: {e}")

        return AppConfig(
            input=input_config,
            output=output_config,
            strict=bool(config_dict.get("strict", False)),
            debug=bool(config_dict.get("debug", False)),
            log_level=str(config_dict.get("log_level", "WARNING")).upper(),
        )

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        """Parse boolean from environment variable.

        Returns:
            Boolean value (True for "1", "true", "yes", "y", "on")
        """
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively update mapping 'target' with 'updates' without clobbering nested dicts.

        - Only keys present in updates are applied.
        - For dict values, merge recursively.
        - For non-dict values, assign directly.
        """
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)
            else:
                target[key] = new_val


def parse_app_args(argv: List[str]) -> Tuple[AppConfig, List[str]]:
    """Load configuration from the default locations and ``argv``."""
    loader = ConfigLoader()
    return loader.load(argv)


__all__ = ["AppConfig", "InputConfig", "OutputConfig", "ConfigLoader", "parse_app_args"]
