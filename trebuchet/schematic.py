"""
Schematic Scanner
=================
Day 3: find the part numbers and gears of an engine schematic.

Each row is scanned by a two-state finite state machine:

    SCANNING        idle, between numbers
    PARSING_NUMBER  inside a run of digits

Every character is classified as a digit, a symbol (anything that is not
a digit and not '.') or neither. The transition table maps
(state, class) to an action and the next state. Symbols mark their 3x3
neighborhood in an adjacency map keyed by (column, row); a later symbol
overwrites an earlier one at a shared cell.

A part number is any digit run touching a marked cell. A gear is a '*'
credited with exactly two part numbers; a part number is credited to the
first '*' found scanning its columns left to right.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional

from .errors import InvariantViolationError
from .fields import split_lines
from .models import PartNumber, SchematicSymbol

logger = logging.getLogger(__name__)

GEAR_CHAR = "*"
EMPTY_CHAR = "."

AdjacencyMap = dict[tuple[int, int], SchematicSymbol]


class ScannerState(Enum):
    """Scanner states within one row."""
    SCANNING = "SCANNING"
    PARSING_NUMBER = "PARSING_NUMBER"


class CharClass(Enum):
    DIGIT = "digit"
    SYMBOL = "symbol"
    NEITHER = "neither"


class Action(Enum):
    """Side effect performed for a transition."""
    NONE = "none"
    START_RUN = "start_run"
    EXTEND_RUN = "extend_run"
    FINALIZE_RUN = "finalize_run"
    RECORD_SYMBOL = "record_symbol"
    FINALIZE_AND_RECORD = "finalize_and_record"


TRANSITIONS: dict[tuple[ScannerState, CharClass], tuple[Action, ScannerState]] = {
    (ScannerState.SCANNING, CharClass.DIGIT):
        (Action.START_RUN, ScannerState.PARSING_NUMBER),
    (ScannerState.SCANNING, CharClass.SYMBOL):
        (Action.RECORD_SYMBOL, ScannerState.SCANNING),
    (ScannerState.SCANNING, CharClass.NEITHER):
        (Action.NONE, ScannerState.SCANNING),
    (ScannerState.PARSING_NUMBER, CharClass.DIGIT):
        (Action.EXTEND_RUN, ScannerState.PARSING_NUMBER),
    (ScannerState.PARSING_NUMBER, CharClass.SYMBOL):
        (Action.FINALIZE_AND_RECORD, ScannerState.SCANNING),
    (ScannerState.PARSING_NUMBER, CharClass.NEITHER):
        (Action.FINALIZE_RUN, ScannerState.SCANNING),
}


def classify(char: str) -> CharClass:
    """
    Classify one schematic character.

    Raises:
        InvariantViolationError: If the character is both digit and symbol.
    """
    is_digit = "0" <= char <= "9"
    is_symbol = not (is_digit or char == EMPTY_CHAR)
    if is_digit and is_symbol:
        raise InvariantViolationError(
            "character classified as both digit and symbol", {"char": char}
        )
    if is_digit:
        return CharClass.DIGIT
    if is_symbol:
        return CharClass.SYMBOL
    return CharClass.NEITHER


def transition(
    state: ScannerState, char_class: CharClass
) -> tuple[Action, ScannerState]:
    """Look up the action and next state for ``(state, char_class)``."""
    return TRANSITIONS[(state, char_class)]


def mark_neighborhood(symbol: SchematicSymbol, adjacency: AdjacencyMap):
    """Map every cell of the 3x3 block around ``symbol`` to it (clamped at 0)."""
    for y in range(max(symbol.row - 1, 0), symbol.row + 2):
        for x in range(max(symbol.column - 1, 0), symbol.column + 2):
            adjacency[(x, y)] = symbol


class SchematicScanner:
    """
    Finite State Machine that turns one schematic row into its digit runs
    and the adjacency cells marked by its symbols.
    """

    def __init__(self):
        self.state = ScannerState.SCANNING
        self.row = 0
        self.begin = 0
        self.digits: list[str] = []
        self.part_numbers: list[PartNumber] = []
        self.adjacency: AdjacencyMap = {}

    def reset(self, row: int = 0):
        """Reset the state machine for a fresh row."""
        self.state = ScannerState.SCANNING
        self.row = row
        self.begin = 0
        self.digits = []
        self.part_numbers = []
        self.adjacency = {}

    def scan(self, line: str, row: int) -> tuple[list[PartNumber], AdjacencyMap]:
        """Scan one row and return its part numbers and adjacency cells."""
        self.reset(row)

        for column, char in enumerate(line):
            self._process_char(column, char)

        # A run reaching the end of the line is still a number
        if self.state == ScannerState.PARSING_NUMBER:
            self._finalize_run(len(line) - 1)
            self.state = ScannerState.SCANNING

        return self.part_numbers, self.adjacency

    def _process_char(self, column: int, char: str):
        action, next_state = transition(self.state, classify(char))

        if action == Action.START_RUN:
            self.begin = column
            self.digits = [char]

        elif action == Action.EXTEND_RUN:
            self.digits.append(char)

        elif action == Action.FINALIZE_RUN:
            self._finalize_run(column - 1)

        elif action == Action.RECORD_SYMBOL:
            self._record_symbol(column, char)

        elif action == Action.FINALIZE_AND_RECORD:
            self._finalize_run(column - 1)
            self._record_symbol(column, char)

        self.state = next_state

    def _finalize_run(self, end: int):
        self.part_numbers.append(PartNumber(
            row=self.row,
            begin=self.begin,
            end=end,
            value=int("".join(self.digits)),
        ))
        self.digits = []

    def _record_symbol(self, column: int, char: str):
        symbol = SchematicSymbol(row=self.row, column=column, char=char)
        mark_neighborhood(symbol, self.adjacency)


def scan_schematic(text: str) -> tuple[list[PartNumber], AdjacencyMap]:
    """Scan every row and merge the results, later rows overwriting."""
    scanner = SchematicScanner()
    part_numbers: list[PartNumber] = []
    adjacency: AdjacencyMap = {}

    for row, line in enumerate(split_lines(text)):
        row_parts, row_adjacency = scanner.scan(line, row)
        part_numbers.extend(row_parts)
        adjacency.update(row_adjacency)

    logger.debug(
        f"Scanned {len(part_numbers)} numbers, "
        f"{len(adjacency)} symbol-adjacent cells"
    )
    return part_numbers, adjacency


def is_part(part_number: PartNumber, adjacency: AdjacencyMap) -> bool:
    """True iff any column of the run touches a symbol-adjacent cell."""
    return any((x, part_number.row) in adjacency for x in part_number.columns)


def gear_symbol(
    part_number: PartNumber, adjacency: AdjacencyMap
) -> Optional[SchematicSymbol]:
    """First '*' found scanning the run's columns left to right."""
    for x in part_number.columns:
        symbol = adjacency.get((x, part_number.row))
        if symbol is not None and symbol.char == GEAR_CHAR:
            return symbol
    return None


def gear_groups(
    part_numbers: list[PartNumber], adjacency: AdjacencyMap
) -> dict[SchematicSymbol, list[int]]:
    """Group part number values by the '*' symbol each is credited to."""
    groups: dict[SchematicSymbol, list[int]] = {}
    for part_number in part_numbers:
        symbol = gear_symbol(part_number, adjacency)
        if symbol is not None:
            groups.setdefault(symbol, []).append(part_number.value)
    return groups


def solve_part_one(text: str) -> int:
    """Sum of every number adjacent to a symbol."""
    part_numbers, adjacency = scan_schematic(text)
    return sum(pn.value for pn in part_numbers if is_part(pn, adjacency))


def solve_part_two(text: str) -> int:
    """Sum of the gear ratios of every '*' with exactly two part numbers."""
    part_numbers, adjacency = scan_schematic(text)
    groups = gear_groups(part_numbers, adjacency)
    gears = [values for values in groups.values() if len(values) == 2]
    logger.debug(f"{len(gears)} gears out of {len(groups)} '*' candidates")
    return sum(math.prod(values) for values in gears)
