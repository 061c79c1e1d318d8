#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: fields.py

Description:
------------
Field parsers for the lines of a processor record.

A field line has the shape::

    <name> [ \\t]* ":" [ \\t]* <value> <line terminator>

field_parser() builds a parser for one such line out of a literal field name
and a value decoder. FIELDS lists every field of a record, in the order the
kernel prints them, together with the Cpu attribute it populates.
"""

from dataclasses import dataclass
from typing import Any, Callable, Tuple

from . import primitives
from .exceptions import ParseFailure, ParseKind
from .primitives import Decoder

FieldParser = Callable[[str, int], Tuple[Any, int]]


def _preview(text: str, pos: int, width: int = 40) -> str:
    if pos >= len(text):
        return "<end of input>"
    line = text[pos:].splitlines()[0]
    return line[:width] if line else "<blank line>"


def separator(text: str, pos: int, field: str) -> int:
    """Consume the ':' separator with optional horizontal padding."""
    pos = primitives.skip_hspace(text, pos)
    if not text.startswith(":", pos):
        raise ParseFailure(
            ParseKind.SEPARATOR, pos, field=field, detail="expected ':'"
        )
    return primitives.skip_hspace(text, pos + 1)


def field_parser(name: str, decoder: Decoder) -> FieldParser:
    """
    Build a parser for a single ``name: value`` line.

    Args:
        name: Literal field name expected at the current position.
        decoder: Value decoder applied after the separator.

    Returns:
        A parser returning the decoded value and the position just past the
        line terminator.
    """

    def parse(text: str, pos: int) -> Tuple[Any, int]:
        if not text.startswith(name, pos):
            raise ParseFailure(
                ParseKind.FIELD,
                pos,
                field=name,
                detail=f"found '{_preview(text, pos)}'",
            )
        value_pos = separator(text, pos + len(name), name)
        try:
            value, end = decoder(text, value_pos)
            end = primitives.line_end(text, end)
        except ParseFailure as failure:
            raise ParseFailure(
                failure.kind, failure.position, field=name, detail=failure.detail
            ) from failure
        return value, end

    parse.__name__ = f"parse_{name.replace(' ', '_')}"
    return parse


@dataclass(frozen=True)
class FieldSpec:
    """A named field, the Cpu attribute it fills and its parser."""

    name: str
    attribute: str
    parse: FieldParser


def _spec(name: str, decoder: Decoder, attribute: str = "") -> FieldSpec:
    attribute = attribute or name.replace(" ", "_").lower()
    return FieldSpec(name=name, attribute=attribute, parse=field_parser(name, decoder))


FIELDS: Tuple[FieldSpec, ...] = (
    _spec("processor", primitives.unsigned),
    _spec("vendor_id", primitives.alpha),
    _spec("cpu family", primitives.unsigned),
    _spec("model", primitives.unsigned),
    _spec("model name", primitives.rest_of_line),
    _spec("stepping", primitives.unsigned),
    _spec("microcode", primitives.hexadecimal),
    _spec("cpu MHz", primitives.decimal),
    _spec("cache size", primitives.kilobytes),
    _spec("physical id", primitives.unsigned),
    _spec("siblings", primitives.unsigned),
    _spec("core id", primitives.unsigned),
    _spec("cpu cores", primitives.unsigned),
    _spec("apicid", primitives.unsigned),
    _spec("initial apicid", primitives.unsigned),
    _spec("fpu", primitives.boolean),
    _spec("fpu_exception", primitives.boolean),
    _spec("cpuid level", primitives.unsigned),
    _spec("wp", primitives.boolean),
    _spec("flags", primitives.token_list),
    _spec("vmx flags", primitives.token_list),
    _spec("bugs", primitives.token_list),
    _spec("bogomips", primitives.decimal),
    _spec("clflush size", primitives.unsigned),
    _spec("cache_alignment", primitives.unsigned),
    _spec("address sizes", primitives.address_sizes),
    _spec("power management", primitives.optional_alnum),
)

FIELDS_BY_NAME = {spec.name: spec for spec in FIELDS}
