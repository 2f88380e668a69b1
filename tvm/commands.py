"""Command parsing for TVM

Turns one line of text into a typed command:

    set VAR VALUE    -> SetCommand
    compute VAR      -> ComputeCommand
    clear            -> ClearCommand
    (blank)          -> EmptyCommand

Tokens are separated by runs of spaces and tabs only. Variable names are
not checked here; the dispatcher does that, after the value has parsed.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Union

from .constants import TOKEN_SEPARATORS
from .exceptions import InvalidCommandError

__all__ = [
    "SetCommand",
    "ComputeCommand",
    "ClearCommand",
    "EmptyCommand",
    "Command",
    "tokenize",
    "parse_number",
    "parse_command",
]


@dataclass(frozen=True)
class SetCommand:
    variable: str
    value: float


@dataclass(frozen=True)
class ComputeCommand:
    variable: str


@dataclass(frozen=True)
class ClearCommand:
    pass


@dataclass(frozen=True)
class EmptyCommand:
    pass


Command = Union[SetCommand, ComputeCommand, ClearCommand, EmptyCommand]


_SEPARATOR_RE = re.compile("[" + re.escape(TOKEN_SEPARATORS) + "]+")

# Literal forms: decimal, hexadecimal, inf/infinity, nan.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_HEX_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?", re.ASCII)
_SPECIAL_RE = re.compile(r"[+-]?(?:inf(?:inity)?|nan)", re.IGNORECASE)
_LEADING_SPACE = "\v\f\r"


def tokenize(line: str) -> List[str]:
    return [tok for tok in _SEPARATOR_RE.split(line) if tok]


def parse_number(token: str) -> float:
    """Parse *token* as a complete floating point literal.

    Whitespace that cannot separate tokens (``\\v``, ``\\f``, ``\\r``) may
    lead the literal; nothing may follow it. Python's ``float()`` is more
    lenient than that (trailing whitespace, ``1_000``), so the token is
    matched against the literal forms first.

    Raises
    ------
    InvalidCommandError
        If any part of the token is not part of the literal.
    """
    literal = token.lstrip(_LEADING_SPACE)
    if _DECIMAL_RE.fullmatch(literal) or _SPECIAL_RE.fullmatch(literal):
        return float(literal)
    if _HEX_RE.fullmatch(literal):
        return float.fromhex(literal)
    raise InvalidCommandError()


def parse_command(line: str) -> Command:
    """Parse one command line.

    Raises
    ------
    InvalidCommandError
        For an unknown keyword, a wrong number of operands, or a ``set``
        value that is not a number.
    """
    tokens = tokenize(line)
    if not tokens:
        return EmptyCommand()

    keyword, operands = tokens[0], tokens[1:]
    if keyword == "clear" and not operands:
        return ClearCommand()
    if keyword == "compute" and len(operands) == 1:
        return ComputeCommand(variable=operands[0])
    if keyword == "set" and len(operands) == 2:
        return SetCommand(variable=operands[0], value=parse_number(operands[1]))
    raise InvalidCommandError()
