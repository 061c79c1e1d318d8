#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: cli.py

Description:
------------
Command-line interface for the cpuinfo_parser package, powered by Typer.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from loguru import logger

from . import __version__
from .exceptions import CpuinfoError, MalformedInputError
from .formatter import ConsoleFormatter
from .models import CpuInfo
from .options import CliOptions, OutputFormat
from .parser import parse_cpuinfo
from .source import DEFAULT_CPUINFO_PATH, normalize_listing, read_cpuinfo
from .writers import WriterFactory

app = typer.Typer(
    name="cpuinfo-parser",
    help="Parse processor information listings into structured data.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

SOURCE_HELP = "Listing to parse, '-' for stdin. [default: /proc/cpuinfo]"


def version_callback(value: bool):
    if value:
        console.print(f"cpuinfo-parser version: {__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """Manage global options."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level,
               format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}")


def _load(source: str) -> CpuInfo:
    """Read and parse the listing named by ``source``."""
    if source == "-":
        text = normalize_listing(sys.stdin.read())
    else:
        text = read_cpuinfo(source)
    return parse_cpuinfo(text)


def _report(error: CpuinfoError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1)


def _get_options(config_file: Optional[Path], **kwargs) -> CliOptions:
    """Create CliOptions from config file and CLI arguments."""
    options = CliOptions()
    if config_file:
        logger.info(f"Loading options from config file: {config_file}")
        options = CliOptions.from_file(config_file)

    for key, value in kwargs.items():
        if value is not None and hasattr(options, key):
            setattr(options, key, value)
    return options


@app.command("parse")
def parse_command(
    source: Optional[str] = typer.Argument(None, help=SOURCE_HELP),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json, csv or yaml."),
    output_file: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write output to this file instead of stdout."),
    config: Optional[Path] = typer.Option(
        None, help="Path to JSON/YAML configuration file.", exists=True),
    fields: Optional[str] = typer.Option(
        None, help="Comma-separated processor attributes to include."),
    show_flags: Optional[bool] = typer.Option(
        None, "--flags/--no-flags", help="Include flag lists in table output."),
):
    """Parse a listing and print or save it in the chosen format."""
    try:
        fmt = OutputFormat.from_string(output_format) if output_format else None
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format")

    try:
        options = _get_options(
            config,
            source=source,
            output_format=fmt,
            output_file=output_file,
            fields=[f.strip() for f in fields.split(",") if f.strip()] if fields else None,
            show_flags=show_flags,
        )
        # re-run validation after CLI overrides
        options = CliOptions.from_dict(options.to_dict())
        cpuinfo = _load(options.source)
    except CpuinfoError as e:
        _report(e)

    if options.output_format is OutputFormat.TABLE:
        ConsoleFormatter(console).print_processors(
            cpuinfo, options.fields or None, options.show_flags
        )
        return

    writer = WriterFactory.create_writer(options.output_format)
    if options.output_file:
        writer.write(cpuinfo, Path(options.output_file), options)
        console.print(f"[green]✔[/green] Output saved to: {escape(options.output_file)}")
    else:
        typer.echo(writer.render(cpuinfo, options), nl=False)


@app.command("summary")
def summary_command(
    source: str = typer.Argument(str(DEFAULT_CPUINFO_PATH), help=SOURCE_HELP),
):
    """Show processor count, vendors, models and topology."""
    try:
        cpuinfo = _load(source)
    except CpuinfoError as e:
        _report(e)
    ConsoleFormatter(console).print_summary(cpuinfo)


@app.command("show")
def show_command(
    processor: int = typer.Argument(..., help="Processor index to display."),
    source: str = typer.Argument(str(DEFAULT_CPUINFO_PATH), help=SOURCE_HELP),
):
    """Show every attribute of one processor."""
    try:
        cpuinfo = _load(source)
    except CpuinfoError as e:
        _report(e)

    for cpu in cpuinfo:
        if cpu.processor == processor:
            ConsoleFormatter(console).print_cpu(cpu)
            return
    console.print(f"[red]Error:[/red] No processor {processor} in listing")
    raise typer.Exit(code=1)


@app.command("validate")
def validate_command(
    source: str = typer.Argument(str(DEFAULT_CPUINFO_PATH), help=SOURCE_HELP),
):
    """Check that a listing parses."""
    try:
        cpuinfo = _load(source)
    except MalformedInputError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except CpuinfoError as e:
        _report(e)
    console.print(f"[green]✔[/green] {len(cpuinfo)} processor record(s) parsed")


def main():
    app()


if __name__ == "__main__":
    main()
