"""
Parallel Line Solving
=====================
Map a per-line solver over contiguous line partitions with a worker pool,
then reduce the partial results with a sum.

Only solvers whose lines are independent of one another may use this;
the order of the partial sums does not affect the result.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from .fields import split_lines

logger = logging.getLogger(__name__)

LineSolver = Callable[[str, Optional[int]], int]


def partition(lines: list[str], workers: int) -> list[tuple[int, list[str]]]:
    """
    Split ``lines`` into at most ``workers`` contiguous chunks.

    Returns:
        (first line number, chunk) pairs; line numbers are 1-based.
    """
    if not lines:
        return []
    workers = max(1, min(workers, len(lines)))
    size, extra = divmod(len(lines), workers)

    chunks = []
    start = 0
    for i in range(workers):
        end = start + size + (1 if i < extra else 0)
        chunks.append((start + 1, lines[start:end]))
        start = end
    return chunks


def _sum_chunk(line_solver: LineSolver, first_line: int, chunk: list[str]) -> int:
    return sum(
        line_solver(line, line_number)
        for line_number, line in enumerate(chunk, start=first_line)
    )


def sum_lines(line_solver: LineSolver, text: str, workers: int) -> int:
    """
    Solve every line of ``text`` with ``line_solver`` across ``workers``
    threads and return the total.

    The first failing chunk's exception is re-raised.
    """
    chunks = partition(split_lines(text), workers)
    if len(chunks) <= 1:
        # Single chunk - no thread overhead
        return sum(_sum_chunk(line_solver, first, chunk) for first, chunk in chunks)

    logger.debug(f"Solving {len(chunks)} chunks on {len(chunks)} workers")
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        futures = [
            pool.submit(_sum_chunk, line_solver, first, chunk)
            for first, chunk in chunks
        ]
        return sum(future.result() for future in futures)
