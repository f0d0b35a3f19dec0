"""
Puzzle Registry
===============
Maps a day number to the solvers for that day's puzzle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from . import cube_game, digits, schematic, scratchcards
from .errors import UnknownPuzzleError
from .parallel import LineSolver


@dataclass(frozen=True)
class Puzzle:
    """
    Solvers for one day.

    ``line_part_one``/``line_part_two`` are set only when every line can be
    solved on its own, which makes the day eligible for the parallel variant.
    """
    day: int
    title: str
    solve_part_one: Callable[[str], int]
    solve_part_two: Callable[[str], int]
    line_part_one: Optional[LineSolver] = None
    line_part_two: Optional[LineSolver] = None

    @property
    def supports_parallel(self) -> bool:
        return self.line_part_one is not None and self.line_part_two is not None


PUZZLES: dict[int, Puzzle] = {
    1: Puzzle(
        day=1,
        title="Trebuchet calibration (digit extractor)",
        solve_part_one=digits.solve_part_one,
        solve_part_two=digits.solve_part_two,
        line_part_one=digits.calibration_value,
        line_part_two=digits.spelled_calibration_value,
    ),
    2: Puzzle(
        day=2,
        title="Cube conundrum (cube-game parser)",
        solve_part_one=cube_game.solve_part_one,
        solve_part_two=cube_game.solve_part_two,
        line_part_one=cube_game.possible_game_id,
        line_part_two=cube_game.game_power,
    ),
    # Numbers depend on symbols in neighboring rows
    3: Puzzle(
        day=3,
        title="Gear ratios (schematic scanner)",
        solve_part_one=schematic.solve_part_one,
        solve_part_two=schematic.solve_part_two,
    ),
    # Copies cascade from earlier cards to later ones
    4: Puzzle(
        day=4,
        title="Scratchcards (scratchcard matcher)",
        solve_part_one=scratchcards.solve_part_one,
        solve_part_two=scratchcards.solve_part_two,
    ),
}


def get_puzzle(day: int) -> Puzzle:
    """
    Raises:
        UnknownPuzzleError: If no solver is registered for ``day``.
    """
    try:
        return PUZZLES[day]
    except KeyError:
        raise UnknownPuzzleError(day) from None
