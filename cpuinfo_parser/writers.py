#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: writers.py

Description:
------------
Serializers for parsed processor listings (JSON, CSV, YAML) and a factory
to pick one by output format.
"""

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from loguru import logger

from .models import Cpu, CpuInfo
from .options import CliOptions, OutputFormat


class OutputWriter(Protocol):
    """Protocol defining interface for output writers."""

    def render(self, cpuinfo: CpuInfo, options: Optional[CliOptions] = None) -> str:
        """Serialize the parsed listing to a string."""
        ...

    def write(
        self, cpuinfo: CpuInfo, output_path: Path, options: Optional[CliOptions] = None
    ) -> None:
        """Write the parsed listing to the specified path."""
        ...


class _FileWriter:
    format_name = ""

    def render(self, cpuinfo: CpuInfo, options: Optional[CliOptions] = None) -> str:
        raise NotImplementedError

    def write(
        self, cpuinfo: CpuInfo, output_path: Path, options: Optional[CliOptions] = None
    ) -> None:
        output_path = Path(output_path)
        output_path.write_text(self.render(cpuinfo, options), encoding="utf-8")
        logger.info(f"{self.format_name} output written to {output_path}")


class JsonWriter(_FileWriter):
    """Writer for JSON output format."""

    format_name = "JSON"

    def render(self, cpuinfo: CpuInfo, options: Optional[CliOptions] = None) -> str:
        indent = options.indent if options else 2
        return json.dumps(cpuinfo.to_dict(), indent=indent) + "\n"


class YamlWriter(_FileWriter):
    """Writer for YAML output format."""

    format_name = "YAML"

    def render(self, cpuinfo: CpuInfo, options: Optional[CliOptions] = None) -> str:
        import yaml

        return yaml.safe_dump(cpuinfo.to_dict(), sort_keys=False)


def flatten_cpu(cpu: Cpu, attributes: List[str]) -> Dict[str, Any]:
    """Flatten a Cpu into scalar columns for tabular output."""
    row: Dict[str, Any] = {}
    for name in attributes:
        value = getattr(cpu, name)
        if name == "address_sizes":
            row["address_physical"] = value.physical
            row["address_virtual"] = value.virtual
        elif isinstance(value, tuple):
            row[name] = " ".join(value)
        elif value is None:
            row[name] = ""
        else:
            row[name] = value
    return row


class CsvWriter(_FileWriter):
    """Writer for CSV output format, one row per processor."""

    format_name = "CSV"

    def render(self, cpuinfo: CpuInfo, options: Optional[CliOptions] = None) -> str:
        attributes = options.selected_fields() if options else Cpu.attribute_names()
        rows = [flatten_cpu(cpu, attributes) for cpu in cpuinfo]
        if not rows:
            return ""

        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()), lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
        return buffer.getvalue()


class WriterFactory:
    """Factory for creating appropriate output writer instances."""

    @staticmethod
    def create_writer(format_type: Union[OutputFormat, str]) -> OutputWriter:
        """Create and return the appropriate writer for the given output format."""
        if isinstance(format_type, str):
            format_type = OutputFormat.from_string(format_type)

        match format_type:
            case OutputFormat.JSON:
                return JsonWriter()
            case OutputFormat.CSV:
                return CsvWriter()
            case OutputFormat.YAML:
                return YamlWriter()
            case _:
                raise ValueError(f"Unsupported output format: {format_type}")
