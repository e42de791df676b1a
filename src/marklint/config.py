"""Configuration management for marklint using Pydantic models."""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .diagnostics import Severity
from .exceptions import ConfigError

CONFIG_FILE_NAME = ".marklintrc.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class Syntax(str, Enum):
    """Markup syntax used to parse documents."""
    AUTO = "auto"
    HTML = "html"
    XML = "xml"


class ParserConfig(BaseModel):
    """Parser configuration section."""
    syntax: Syntax = Syntax.AUTO
    dynamic_value_patterns: list[str] | None = Field(alias="dynamicValuePatterns", default=None)
    strict_mode: bool = Field(alias="strictMode", default=False)

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    def to_parser_config(self) -> dict[str, Any]:
        """Settings in the form MarkupParser expects."""
        config: dict[str, Any] = {"syntax": self.syntax, "strict_mode": self.strict_mode}
        if self.dynamic_value_patterns is not None:
            config["dynamic_value_patterns"] = self.dynamic_value_patterns
        return config


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class RuleConfig(BaseModel):
    """Settings for one rule. Unset fields fall back to the rule's defaults."""
    enabled: bool = True
    severity: Severity | None = None
    value: Any = None
    options: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @property
    def has_value(self) -> bool:
        return "value" in self.model_fields_set


class MarklintConfig(BaseModel):
    """Complete marklint configuration model."""
    rules: dict[str, RuleConfig] = Field(default_factory=dict)
    locale: str = "en"
    specs: list[str] = Field(default_factory=list)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    @field_validator("rules", mode="before")
    @classmethod
    def normalize_rules(cls, v):
        """Accept `true`/`false`, a bare rule value, or a full rule mapping."""
        if not isinstance(v, dict):
            return v
        normalized = {}
        for name, entry in v.items():
            if isinstance(entry, RuleConfig):
                normalized[name] = entry
            elif entry is True:
                normalized[name] = {}
            elif entry is False:
                normalized[name] = {"enabled": False}
            elif isinstance(entry, dict) and set(entry) <= set(RuleConfig.model_fields):
                normalized[name] = entry
            else:
                normalized[name] = {"value": entry}
        return normalized

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v):
        supported = ["en", "ja"]
        if v not in supported:
            raise ValueError(f"locale must be one of {supported}, got: {v}")
        return v

    def rule(self, name: str) -> RuleConfig:
        """Settings for a rule, defaults if it is not configured."""
        return self.rules.get(name) or RuleConfig()


def load_config(config_path: str | Path | None = None) -> MarklintConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .marklintrc.json

    Returns:
        MarklintConfig: Loaded and validated configuration

    Raises:
        ConfigError: If the file is given but missing, or is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return create_default_config()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
        return MarklintConfig(**config_data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e
    except (OSError, TypeError, ValidationError) as e:
        raise ConfigError(f"Failed to load config from {config_path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .marklintrc.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> MarklintConfig:
    """Create the zero-config setup: every built-in rule with its defaults."""
    return MarklintConfig()
