"""
Digit Extractor
===============
Day 1: recover the calibration value hidden in each line.

Part one combines the first and last ASCII digit of each line into a
two-digit number. Part two also accepts spelled-out number words
("zero".."nine"), matched with overlap so "oneight" yields 1 then 8.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import EmptyResultError
from .fields import split_lines

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

NUMBER_WORDS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

# Every token recognised in part two, mapped to its value
NUMERIC_TOKENS: dict[str, int] = {
    **{d: int(d) for d in DIGITS},
    **NUMBER_WORDS,
}


def _no_digits(line: str, line_number: Optional[int]) -> EmptyResultError:
    details = {"line": line}
    if line_number is not None:
        details["line_number"] = line_number
    return EmptyResultError("no digits in string", details)


def find_occurrences(line: str, token: str) -> list[int]:
    """Return every offset of ``token`` in ``line``, overlapping allowed."""
    offsets = []
    start = line.find(token)
    while start != -1:
        offsets.append(start)
        start = line.find(token, start + 1)
    return offsets


def extract_digits(line: str) -> list[int]:
    """ASCII digits of ``line`` in order."""
    return [int(c) for c in line if c in DIGITS]


def extract_digits_and_words(line: str) -> list[int]:
    """Digits and number words of ``line`` ordered by starting offset."""
    matches: list[tuple[int, int]] = []
    for token, value in NUMERIC_TOKENS.items():
        matches.extend((offset, value) for offset in find_occurrences(line, token))
    matches.sort(key=lambda m: m[0])
    return [value for _, value in matches]


def calibration_value(line: str, line_number: Optional[int] = None) -> int:
    """First and last digit of ``line`` as a two-digit number."""
    digits = extract_digits(line)
    if not digits:
        raise _no_digits(line, line_number)
    return digits[0] * 10 + digits[-1]


def spelled_calibration_value(line: str, line_number: Optional[int] = None) -> int:
    """Like :func:`calibration_value` but number words count as digits."""
    digits = extract_digits_and_words(line)
    if not digits:
        raise _no_digits(line, line_number)
    return digits[0] * 10 + digits[-1]


def solve_part_one(text: str) -> int:
    """Sum of the calibration values of every line."""
    lines = split_lines(text)
    total = 0
    for line_number, line in enumerate(lines, start=1):
        total += calibration_value(line, line_number)
    logger.debug(f"Calibrated {len(lines)} lines (digits only)")
    return total


def solve_part_two(text: str) -> int:
    """Sum of the calibration values with number words counted."""
    lines = split_lines(text)
    total = 0
    for line_number, line in enumerate(lines, start=1):
        total += spelled_calibration_value(line, line_number)
    logger.debug(f"Calibrated {len(lines)} lines (digits and words)")
    return total
