#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: primitives.py

Description:
------------
Primitive value decoders for processor listing fields.

Every decoder has the signature ``decoder(text, pos) -> (value, new_pos)``:
it matches at ``pos`` only, never searches ahead, and raises ParseFailure
with kind VALUE when the text at ``pos`` does not fit. Decoders never consume
the line terminator; that is left to the field parser.
"""

import re
from typing import Callable, Optional, Tuple, TypeVar

from .exceptions import ParseFailure, ParseKind
from .models import AddressSizes

T = TypeVar("T")
Decoder = Callable[[str, int], Tuple[T, int]]

HSPACE_PATTERN = re.compile(r"[ \t]*")
LINE_END_PATTERN = re.compile(r"\r?\n")

_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:infinity|inf|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_ALPHA_PATTERN = re.compile(r"[A-Za-z]+")
_ALNUM_PATTERN = re.compile(r"[A-Za-z0-9]+")
_REST_OF_LINE_PATTERN = re.compile(r"[^\r\n]*")
_HEX_PATTERN = re.compile(r"0[xX]([0-9a-fA-F]+)")
_BOOLEAN_PATTERN = re.compile(r"yes|no")
_TOKEN_PATTERN = re.compile(r"[a-z0-9_]+")
_ADDRESS_SIZES_PATTERN = re.compile(r"([0-9]+) bits physical, ([0-9]+) bits virtual")
_KILOBYTES_SUFFIX_PATTERN = re.compile(r"[ \t]*KB")


def _nonempty(pattern: "re.Pattern[str]", text: str, pos: int, expected: str) -> "re.Match[str]":
    match = pattern.match(text, pos)
    if match is None or match.end() == pos:
        raise ParseFailure(ParseKind.VALUE, pos, detail=f"expected {expected}")
    return match


def skip_hspace(text: str, pos: int) -> int:
    """Skip horizontal whitespace (spaces and tabs) and return the new position."""
    return HSPACE_PATTERN.match(text, pos).end()


def line_end(text: str, pos: int) -> int:
    """Consume one line terminator ("\\n" or "\\r\\n")."""
    match = LINE_END_PATTERN.match(text, pos)
    if match is None:
        raise ParseFailure(ParseKind.VALUE, pos, detail="expected end of line")
    return match.end()


def unsigned(text: str, pos: int) -> Tuple[int, int]:
    """Decode a non-negative decimal integer."""
    match = _nonempty(_UNSIGNED_PATTERN, text, pos, "an unsigned integer")
    return int(match.group()), match.end()


def decimal(text: str, pos: int) -> Tuple[float, int]:
    """Decode a floating point number such as ``2893.202``, ``-1.5e3`` or ``inf``."""
    match = _nonempty(_DECIMAL_PATTERN, text, pos, "a decimal number")
    return float(match.group()), match.end()


def hexadecimal(text: str, pos: int) -> Tuple[int, int]:
    """Decode a ``0x``/``0X`` prefixed hexadecimal integer."""
    match = _nonempty(_HEX_PATTERN, text, pos, "a 0x-prefixed hexadecimal integer")
    return int(match.group(1), 16), match.end()


def boolean(text: str, pos: int) -> Tuple[bool, int]:
    """Decode the literal tokens ``yes`` and ``no``."""
    match = _nonempty(_BOOLEAN_PATTERN, text, pos, "'yes' or 'no'")
    return match.group() == "yes", match.end()


def alpha(text: str, pos: int) -> Tuple[str, int]:
    """Decode one or more ASCII letters."""
    match = _nonempty(_ALPHA_PATTERN, text, pos, "an alphabetic token")
    return match.group(), match.end()


def alnum(text: str, pos: int) -> Tuple[str, int]:
    """Decode one or more ASCII letters or digits."""
    match = _nonempty(_ALNUM_PATTERN, text, pos, "an alphanumeric token")
    return match.group(), match.end()


def rest_of_line(text: str, pos: int) -> Tuple[str, int]:
    """Take everything up to the line terminator, possibly nothing."""
    match = _REST_OF_LINE_PATTERN.match(text, pos)
    return match.group(), match.end()


def token_list(text: str, pos: int) -> Tuple[Tuple[str, ...], int]:
    """
    Decode zero or more ``[a-z0-9_]+`` tokens separated by single spaces.

    Order and duplicates are preserved. A separator that is not followed by
    another token is left unconsumed.
    """
    match = _TOKEN_PATTERN.match(text, pos)
    if match is None:
        return (), pos

    tokens = [match.group()]
    pos = match.end()
    while text.startswith(" ", pos):
        match = _TOKEN_PATTERN.match(text, pos + 1)
        if match is None:
            break
        tokens.append(match.group())
        pos = match.end()
    return tuple(tokens), pos


def address_sizes(text: str, pos: int) -> Tuple[AddressSizes, int]:
    """Decode ``<n> bits physical, <n> bits virtual``."""
    match = _nonempty(
        _ADDRESS_SIZES_PATTERN,
        text,
        pos,
        "'<n> bits physical, <n> bits virtual'",
    )
    sizes = AddressSizes(physical=int(match.group(1)), virtual=int(match.group(2)))
    return sizes, match.end()


def kilobytes(text: str, pos: int) -> Tuple[int, int]:
    """Decode ``<n> KB`` and scale it to bytes."""
    value, pos = unsigned(text, pos)
    match = _nonempty(_KILOBYTES_SUFFIX_PATTERN, text, pos, "'KB' suffix")
    return value * 1024, match.end()


def optional(decoder: Decoder) -> Callable[[str, int], Tuple[Optional[T], int]]:
    """Wrap a decoder so that an empty match yields None instead of failing."""

    def decode(text: str, pos: int) -> Tuple[Optional[T], int]:
        try:
            return decoder(text, pos)
        except ParseFailure:
            return None, pos

    decode.__name__ = f"optional_{getattr(decoder, '__name__', 'decoder')}"
    return decode


optional_alnum = optional(alnum)
