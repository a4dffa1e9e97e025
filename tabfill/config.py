# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Tabfill completion sources.

A configuration file (YAML or TOML) lists completion sources and, optionally,
the default viewport used when the terminal size is unknown:

    columns: 80
    rows: 10
    sources:
      - key: builtins
        completions: [help, history, halt]
      - key: git
        prefix: "git "
        completions: ["git commit", "git checkout"]
      - key: cd
        prefix: {pattern: "^cd\\\\s"}
        strict: true
        completions: ["cd src/", "cd tests/"]
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tabfill.exceptions import ConfigError
from tabfill.formatter import DEFAULT_COLUMNS, DEFAULT_ROWS, Viewport
from tabfill.logger import logger
from tabfill.registry import CompletionRegistry
from tabfill.rules import PrefixRule


class PatternPrefix(BaseModel):
    """Regular expression prefix rule as written in a config file."""

    pattern: str
    ignore_case: bool = False

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as error:
            raise ValueError(f"Invalid pattern '{value}': {error}") from error
        return value

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.pattern, re.IGNORECASE if self.ignore_case else 0)


class RawSource(BaseModel):
    """Raw completion source model for Tabfill configuration."""

    key: str = ""
    prefix: str | list[str] | PatternPrefix | None = None
    strict: bool = False
    completions: list[str] = Field(default_factory=list)
    replace: bool = False

    def rule(self) -> PrefixRule:
        if isinstance(self.prefix, PatternPrefix):
            return PrefixRule.from_pattern(self.prefix.compile())
        if isinstance(self.prefix, list):
            return PrefixRule.from_list(self.prefix)
        return PrefixRule.from_literal(self.prefix or "")


class TabfillConfig(BaseModel):
    """Tabfill configuration model."""

    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    sources: list[RawSource] = Field(default_factory=list)

    def viewport(self) -> Viewport:
        return Viewport(columns=self.columns, rows=self.rows)

    def to_registry(
        self, registry: CompletionRegistry | None = None
    ) -> CompletionRegistry:
        """Register every source, in file order, into `registry` or a new one."""
        registry = registry if registry is not None else CompletionRegistry()
        for raw_source in self.sources:
            registry.register(
                {
                    "prefix": raw_source.rule(),
                    "strict": raw_source.strict,
                    "completions": raw_source.completions,
                },
                raw_source.key,
                replace=raw_source.replace,
            )
        return registry


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "tabfill.yaml",
        Path.cwd() / "tabfill.toml",
        Path.cwd() / ".tabfill.yaml",
        Path.cwd() / ".tabfill.toml",
        Path(os.environ.get("TABFILL_CONFIG", "tabfill.yaml")),
        Path.home() / ".config" / "tabfill" / "tabfill.yaml",
        Path.home() / ".config" / "tabfill" / "tabfill.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def loader(file_path: Path | str) -> TabfillConfig:
    """
    Load Tabfill configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        TabfillConfig: The validated configuration.

    Raises:
        ConfigError: If the file is missing, has an unsupported format, cannot
            be parsed, or does not match the configuration schema.
    """
    if not isinstance(file_path, (str, Path)):
        raise ConfigError("file_path must be a string or Path object.")

    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config: Any = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse '{path}': {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of sources.\n"
            "Example:\n"
            "sources:\n"
            "  - key: 'builtins'\n"
            "    completions: ['help', 'history']"
        )

    try:
        config = TabfillConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in '{path}':\n{error}") from error

    logger.debug("Loaded %d source(s) from '%s'.", len(config.sources), path)
    return config
