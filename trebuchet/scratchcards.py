"""
Scratchcard Matcher
===================
Day 4: score scratchcards and cascade the copies they win.

Line grammar::

    "Card" ws id ":" number* "|" number*

The numbers before the bar are the winning set, the numbers after it are
the numbers we have.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import MalformedInputError
from .fields import parse_uint, parse_uint_list, split_lines, split_once
from .models import Card

logger = logging.getLogger(__name__)

CARD_PREFIX = "Card"


def parse_card(line: str, line_number: Optional[int] = None) -> Card:
    """
    Parse one ``Card N: ... | ...`` line.

    Raises:
        MalformedInputError: On a missing prefix, colon or '|'.
        ParseFailureError: On a non-numeric id or number.
    """
    header, numbers = split_once(line, ":", "colon", line_number)
    prefix, card_id = split_once(header, " ", "space", line_number)
    if prefix != CARD_PREFIX:
        raise MalformedInputError(
            f"malformed card id, expected {CARD_PREFIX!r} prefix",
            {"line": line, "line_number": line_number},
        )

    winning, have = split_once(numbers, "|", "'|'", line_number)

    return Card(
        id=parse_uint(card_id.strip(), "card number", line_number),
        winning=frozenset(parse_uint_list(winning, "winning number", line_number)),
        have=parse_uint_list(have, "card number", line_number),
    )


def parse_cards(text: str) -> list[Card]:
    return [
        parse_card(line, line_number)
        for line_number, line in enumerate(split_lines(text), start=1)
    ]


def count_instances(cards: list[Card]) -> dict[int, int]:
    """
    Instances of each card after every win has cascaded.

    Each card adds one original instance to its own count, then every
    instance of it wins one copy of each of the next ``match_count`` cards.
    Ids reached only by a cascade past the last real card are dropped.
    """
    counts: dict[int, int] = {}
    seen: set[int] = set()

    for card in cards:
        seen.add(card.id)
        counts[card.id] = counts.get(card.id, 0) + 1

        instances = counts[card.id]
        for copy_id in range(card.id + 1, card.id + card.match_count + 1):
            counts[copy_id] = counts.get(copy_id, 0) + instances

    return {
        card_id: count for card_id, count in counts.items() if card_id in seen
    }


def solve_part_one(text: str) -> int:
    """Total points of the pile."""
    return sum(card.points for card in parse_cards(text))


def solve_part_two(text: str) -> int:
    """Total scratchcards held once all copies have been won."""
    instances = count_instances(parse_cards(text))
    logger.debug(f"Cascaded copies across {len(instances)} cards")
    return sum(instances.values())
