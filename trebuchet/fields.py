"""
Field Helpers
=============
Small splitting and number parsing helpers used by the line grammars.
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import MalformedInputError, ParseFailureError

# Plain decimal digits only; rejects "+3", "3_000", "-1" and unicode digits
UINT_PATTERN = re.compile(r"[0-9]+")

# ASCII whitespace only: space, tab, line feed, form feed, carriage return
WHITESPACE_PATTERN = re.compile(r"[ \t\n\x0c\r]+")


def split_once(
    text: str,
    sep: str,
    what: str,
    line_number: Optional[int] = None,
) -> tuple[str, str]:
    """
    Split ``text`` at the first occurrence of ``sep``.

    Raises:
        MalformedInputError: If ``sep`` does not occur in ``text``.
    """
    head, found, tail = text.partition(sep)
    if not found:
        details = {"line": text}
        if line_number is not None:
            details["line_number"] = line_number
        raise MalformedInputError(
            f"malformed line, no {what} separated data", details
        )
    return head, tail


def parse_uint(
    field: str,
    what: str = "number",
    line_number: Optional[int] = None,
) -> int:
    """Parse a non-negative decimal integer field."""
    if not UINT_PATTERN.fullmatch(field):
        raise ParseFailureError(field, what, line_number)
    return int(field)


def parse_uint_list(
    text: str,
    what: str = "number",
    line_number: Optional[int] = None,
) -> list[int]:
    """Parse an ASCII-whitespace separated list of non-negative integers."""
    return [
        parse_uint(token, what, line_number)
        for token in WHITESPACE_PATTERN.split(text)
        if token
    ]


def split_lines(text: str) -> list[str]:
    """
    Split ``text`` into lines on ``\\n`` only.

    One trailing ``\\r`` is stripped from each line and a final newline adds
    no empty line. Other control characters (form feed, ``\\x85``, ...) stay
    inside their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
