"""
Cube-Game Parser
================
Day 2: games of cubes drawn from a bag.

Line grammar::

    "Game " id ":" subset (";" subset)*
    subset = count " " color ("," count " " color)*

Part one sums the ids of games possible with a bag of 12 red, 13 green
and 14 blue cubes. Part two sums the power (product of the per-color
maxima) of every game.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .errors import MalformedInputError
from .fields import parse_uint, split_lines, split_once
from .models import CubeGame

logger = logging.getLogger(__name__)

GAME_PREFIX = "Game"

# Bag contents for part one
BAG_LIMITS: dict[str, int] = {
    "red": 12,
    "green": 13,
    "blue": 14,
}


def parse_line(line: str, line_number: Optional[int] = None) -> CubeGame:
    """
    Parse one ``Game N: ...`` line.

    Raises:
        MalformedInputError: On a missing prefix, space or colon.
        ParseFailureError: On a non-numeric id or count.
    """
    prefix, rest = split_once(line, " ", "space", line_number)
    if prefix.strip() != GAME_PREFIX:
        raise MalformedInputError(
            f"malformed line, expected {GAME_PREFIX!r} prefix",
            {"line": line, "line_number": line_number},
        )

    game_id, draws = split_once(rest, ":", "colon", line_number)
    parsed_id = parse_uint(game_id.strip(), "game id", line_number)

    subsets: list[dict[str, int]] = []
    for subset in draws.split(";"):
        counts: dict[str, int] = {}
        for cube_data in subset.split(","):
            count, color = split_once(
                cube_data.strip(), " ", "cube count/color space", line_number
            )
            parsed_count = parse_uint(count, "cube count", line_number)
            color = color.strip()
            counts[color] = max(counts.get(color, 0), parsed_count)
        subsets.append(counts)

    return CubeGame(id=parsed_id, subsets=subsets)


def highest_count_seen(game: CubeGame) -> dict[str, int]:
    """Largest count of each color across all subsets of ``game``."""
    counts: dict[str, int] = {}
    for subset in game.subsets:
        for color, count in subset.items():
            if color not in counts or counts[color] < count:
                counts[color] = count
    return counts


def possible_game(
    counts: dict[str, int],
    limits: Optional[dict[str, int]] = None,
) -> bool:
    """
    True iff every color count is within ``limits``.
    A color absent from ``limits`` can never be satisfied.
    """
    limits = BAG_LIMITS if limits is None else limits
    return all(
        color in limits and count <= limits[color]
        for color, count in counts.items()
    )


def power(counts: dict[str, int]) -> int:
    """Product of the observed color maxima; missing colors add no factor."""
    return math.prod(counts.values())


def possible_game_id(line: str, line_number: Optional[int] = None) -> int:
    """Id of the game on ``line`` if it is possible, else 0."""
    game = parse_line(line, line_number)
    if possible_game(highest_count_seen(game)):
        return game.id
    return 0


def game_power(line: str, line_number: Optional[int] = None) -> int:
    """Power of the minimal bag for the game on ``line``."""
    return power(highest_count_seen(parse_line(line, line_number)))


def solve_part_one(text: str) -> int:
    """Sum of the ids of the games possible with :data:`BAG_LIMITS`."""
    lines = split_lines(text)
    total = 0
    for line_number, line in enumerate(lines, start=1):
        total += possible_game_id(line, line_number)
    logger.debug(f"Checked {len(lines)} games against {BAG_LIMITS}")
    return total


def solve_part_two(text: str) -> int:
    """Sum of the powers of the minimal bags of every game."""
    return sum(
        game_power(line, line_number)
        for line_number, line in enumerate(split_lines(text), start=1)
    )
