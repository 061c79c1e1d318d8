#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: options.py

Description:
------------
Output options for the cpuinfo_parser command-line interface.
"""

import json
from dataclasses import dataclass, field, asdict
from enum import Enum, auto
from typing import Optional, List, Dict, Any

from loguru import logger

from .exceptions import ConfigError
from .models import Cpu
from .source import PathLike, DEFAULT_CPUINFO_PATH


class OutputFormat(Enum):
    """Enumeration of supported output formats."""

    TABLE = auto()
    JSON = auto()
    CSV = auto()
    YAML = auto()

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Convert string format name to enum value."""
        name = format_name.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported output format: {format_name}")


@dataclass
class CliOptions:
    """Data class for storing output options."""

    source: str = str(DEFAULT_CPUINFO_PATH)
    output_format: OutputFormat = OutputFormat.TABLE
    output_file: Optional[str] = None

    # JSON indent
    indent: int = 2

    # Subset of Cpu attributes for table and CSV output
    fields: List[str] = field(default_factory=list)
    show_flags: bool = False

    def __post_init__(self):
        if isinstance(self.output_format, str):
            self.output_format = OutputFormat.from_string(self.output_format)
        if not isinstance(self.output_format, OutputFormat):
            raise ConfigError(f"Invalid output format: {self.output_format!r}")
        if not isinstance(self.fields, list) or not all(
            isinstance(name, str) for name in self.fields
        ):
            raise ConfigError(f"fields must be a list of names, got {self.fields!r}")
        unknown = [name for name in self.fields if name not in Cpu.attribute_names()]
        if unknown:
            raise ConfigError(f"Unknown processor attributes: {', '.join(unknown)}")

    def selected_fields(self) -> List[str]:
        """Attributes to include in tabular output."""
        return list(self.fields) or Cpu.attribute_names()

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary."""
        result = asdict(self)
        result["output_format"] = self.output_format.name.lower()
        return result

    @classmethod
    def from_dict(cls, options_dict: Dict[str, Any]) -> "CliOptions":
        """Create CliOptions from dictionary."""
        if not isinstance(options_dict, dict):
            raise ConfigError(f"Options must be a mapping, got {type(options_dict).__name__}")
        try:
            return cls(
                **{k: v for k, v in options_dict.items() if k in cls.__dataclass_fields__}
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_json(cls, json_file: PathLike) -> "CliOptions":
        """Load options from JSON file."""
        try:
            with open(json_file, "r", encoding="utf-8") as f:
                options_dict = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load options from JSON file: {str(e)}")
            raise ConfigError(f"Invalid options file {json_file}: {e}") from e
        return cls.from_dict(options_dict)

    @classmethod
    def from_yaml(cls, yaml_file: PathLike) -> "CliOptions":
        """Load options from YAML file."""
        try:
            import yaml
        except ImportError:
            logger.error(
                "YAML support requires PyYAML. Install with 'pip install pyyaml'"
            )
            raise ConfigError(
                "YAML support requires PyYAML. Install with 'pip install pyyaml'"
            )

        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                options_dict = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load options from YAML file: {str(e)}")
            raise ConfigError(f"Invalid options file {yaml_file}: {e}") from e
        return cls.from_dict(options_dict)

    @classmethod
    def from_file(cls, config_file: PathLike) -> "CliOptions":
        """Load options from a JSON or YAML file, chosen by extension."""
        if str(config_file).lower().endswith((".yml", ".yaml")):
            return cls.from_yaml(config_file)
        return cls.from_json(config_file)
