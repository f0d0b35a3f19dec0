"""
Solver Engine
=============
Main orchestrator that reads a puzzle input, dispatches it to the day's
solvers and reports both answers.

Usage:
    engine = SolverEngine(config)
    result = engine.solve(3, "inputs/day3.txt")
    # result is a SolveResult with part_one / part_two

Architecture:
    input file → text → Puzzle.solve_part_one / solve_part_two
    (or parallel.sum_lines over per-line solvers) → SolveResult
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .fields import split_lines
from .models import SolveResult
from .parallel import sum_lines
from .registry import Puzzle, get_puzzle

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class SolverConfig:
    """Configuration for the solver engine."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Processing (1 = sequential)
    workers: int = 1


class SolverEngine:
    """
    Puzzle solving engine.

    Each call builds its own state, so one engine can solve any number
    of inputs and days.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging based on config."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        # Configure root logger for the package
        package_logger = logging.getLogger("trebuchet")
        package_logger.setLevel(log_level)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Console handler
        if not any(
            type(h) is logging.StreamHandler for h in package_logger.handlers
        ):
            console = logging.StreamHandler()
            console.setFormatter(formatter)
            package_logger.addHandler(console)

        for handler in package_logger.handlers:
            handler.setLevel(log_level)

        # File handler, one per path
        if self.config.log_file:
            log_path = os.path.abspath(self.config.log_file)
            if any(
                isinstance(h, logging.FileHandler) and h.baseFilename == log_path
                for h in package_logger.handlers
            ):
                return
            log_dir = Path(log_path).parent
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    def solve(self, day: int, input_path: str) -> SolveResult:
        """
        Solve both parts of ``day`` for the input file at ``input_path``.

        Raises:
            FileNotFoundError: If the input file doesn't exist.
            PuzzleError: If the day is unknown or the input is malformed.
        """
        input_path = os.path.abspath(input_path)

        if not os.path.exists(input_path):
            raise FileNotFoundError(f"Input not found: {input_path}")

        with open(input_path, "r", encoding="utf-8") as f:
            text = f.read()

        return self.solve_text(day, text, source=os.path.basename(input_path))

    def solve_text(self, day: int, text: str, source: str = "") -> SolveResult:
        """Solve both parts of ``day`` for raw input ``text``."""
        puzzle = get_puzzle(day)
        parallel = self._use_parallel(puzzle)

        start_time = time.time()
        logger.info(f"Solving day {day} ({puzzle.title}) from {source or 'text'}")

        if parallel:
            workers = self.config.workers
            part_one = sum_lines(puzzle.line_part_one, text, workers)
            part_two = sum_lines(puzzle.line_part_two, text, workers)
        else:
            part_one = puzzle.solve_part_one(text)
            part_two = puzzle.solve_part_two(text)

        elapsed = time.time() - start_time
        logger.info(f"Day {day} solved in {elapsed:.4f}s")

        return SolveResult(
            day=day,
            title=puzzle.title,
            source=source,
            part_one=part_one,
            part_two=part_two,
            line_count=len(split_lines(text)),
            elapsed_seconds=round(elapsed, 6),
            workers=self.config.workers if parallel else 1,
            parallel=parallel,
        )

    def _use_parallel(self, puzzle: Puzzle) -> bool:
        if self.config.workers <= 1:
            return False
        if not puzzle.supports_parallel:
            logger.warning(
                f"Day {puzzle.day} has cross-line state and must run "
                f"sequentially; ignoring --parallel {self.config.workers}"
            )
            return False
        return True
