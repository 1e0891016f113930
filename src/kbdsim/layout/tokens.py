"""Tokenizer for mobile layer strings.

Mobile rows are whitespace-separated tokens. Most are the literal output of a
key; non-printing keys are written with an escape, ``\\s{name}`` or
``\\s{name:width}``. The escape name ``spacer`` is a gap, not a key.
"""
from __future__ import annotations

import re
import typing

import msgspec

SPECIAL_MATCHER = re.compile(r"^\\s\{([A-Za-z0-9_-]+)(?::(\d+(?:\.\d*)?|\.\d+))?\}$")
SPACER_NAME = "spacer"
# kbdgen writes codepoints as \u{XXXX}; \u{0} marks a key with no output
CODEPOINT_MATCHER = re.compile(r"^\\u\{([0-9A-Fa-f]{1,6})\}$")


class Literal(msgspec.Struct, frozen=True, tag=True):
    char: str


class Special(msgspec.Struct, frozen=True, tag=True):
    name: str
    width: typing.Optional[float] = None


class Spacer(msgspec.Struct, frozen=True, tag=True):
    width: typing.Optional[float] = None


Token = Literal | Special | Spacer


def unescape(token: str) -> str:
    if match := CODEPOINT_MATCHER.match(token):
        codepoint = int(match.group(1), base=16)
        return chr(codepoint) if codepoint else ""
    return token


def tokenize(token: str) -> Token:
    if match := SPECIAL_MATCHER.match(token):
        name, width = match.group(1), match.group(2)
        parsed_width = float(width) if width is not None else None
        if name == SPACER_NAME:
            return Spacer(width=parsed_width)
        return Special(name=name, width=parsed_width)
    return Literal(char=unescape(token))


def tokenize_row(line: str) -> list[Token]:
    return [tokenize(token) for token in line.split()]


def tokenize_layer(layer: str) -> list[list[Token]]:
    return [tokenize_row(line) for line in layer.strip().splitlines() if line.strip()]


def positional(tokens: list[Token]) -> list[Literal | Special]:
    """Drop spacers, leaving only the tokens that occupy a key position."""
    return [token for token in tokens if not isinstance(token, Spacer)]


def leading_spacer_width(tokens: list[Token]) -> float:
    width = 0.0
    for token in tokens:
        if not isinstance(token, Spacer):
            break
        width += token.width if token.width is not None else 1.0
    return width
