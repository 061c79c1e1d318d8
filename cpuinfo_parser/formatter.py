#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: formatter.py

Description:
------------
Rich console rendering of parsed processor listings.
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import Cpu, CpuInfo
from .writers import flatten_cpu

_LIST_ATTRIBUTES = ("flags", "vmx_flags", "bugs")
_DEFAULT_COLUMNS = [
    "processor",
    "vendor_id",
    "model_name",
    "cpu_mhz",
    "cache_size",
    "physical_id",
    "core_id",
    "apicid",
]


class ConsoleFormatter:
    """Formatter for displaying parsed listings on the console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def summary_panel(self, cpuinfo: CpuInfo) -> Panel:
        """Build a panel summarizing the whole listing."""
        lines = [
            f"[bold]Processors:[/bold] {len(cpuinfo)}",
            f"[bold]Packages:[/bold] {len(cpuinfo.physical_packages)}",
            f"[bold]Vendors:[/bold] {escape(', '.join(cpuinfo.vendors))}",
        ]
        lines.extend(f"[bold]Model:[/bold] {escape(name)}" for name in cpuinfo.model_names)
        return Panel("\n".join(lines), title="CPU Summary")

    def topology_table(self, cpuinfo: CpuInfo) -> Table:
        """Build a package / core / processor table."""
        table = Table(title="Topology", show_header=True)
        table.add_column("Package", style="cyan")
        table.add_column("Core", style="green")
        table.add_column("Processors", style="yellow")

        for package, cores in sorted(cpuinfo.topology().items()):
            for core, processors in sorted(cores.items()):
                table.add_row(
                    str(package), str(core), ", ".join(str(p) for p in processors)
                )
        return table

    def processor_table(
        self,
        cpuinfo: CpuInfo,
        columns: Optional[List[str]] = None,
        show_flags: bool = False,
    ) -> Table:
        """Build a table with one row per processor."""
        columns = list(columns or _DEFAULT_COLUMNS)
        if not show_flags:
            columns = [name for name in columns if name not in _LIST_ATTRIBUTES]
        elif "flags" not in columns:
            columns.append("flags")

        rows = [flatten_cpu(cpu, columns) for cpu in cpuinfo]
        headers = list(rows[0].keys()) if rows else columns

        table = Table(title=f"Processors ({len(cpuinfo)})", show_header=True)
        for header in headers:
            table.add_column(header.replace("_", " ").title(), overflow="fold")
        for row in rows:
            table.add_row(*(self._cell(value) for value in row.values()))
        return table

    @staticmethod
    def _cell(value) -> str:
        if isinstance(value, bool):
            return "✓" if value else "✗"
        return escape(str(value))

    def print_summary(self, cpuinfo: CpuInfo) -> None:
        """Print the summary panel and topology table."""
        self.console.print(self.summary_panel(cpuinfo))
        self.console.print(self.topology_table(cpuinfo))

    def print_processors(
        self,
        cpuinfo: CpuInfo,
        columns: Optional[List[str]] = None,
        show_flags: bool = False,
    ) -> None:
        """Print the per-processor table."""
        self.console.print(self.processor_table(cpuinfo, columns, show_flags))

    def print_cpu(self, cpu: Cpu) -> None:
        """Print every attribute of a single processor."""
        table = Table(title=f"Processor {cpu.processor}", show_header=True)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green", overflow="fold")
        for key, value in flatten_cpu(cpu, Cpu.attribute_names()).items():
            table.add_row(key.replace("_", " ").title(), self._cell(value))
        self.console.print(table)
