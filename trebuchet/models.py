"""
Data Models
===========
Pydantic models for the parsed puzzle structures and the solve report.
All models are serializable to JSON via ``model_dump()``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ─── Schematic Models ─────────────────────────────────────────────────────────


class PartNumber(BaseModel):
    """
    A maximal run of digits on one schematic row.
    ``begin`` and ``end`` are inclusive column offsets.
    """
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    begin: int = Field(ge=0)
    end: int = Field(ge=0)
    value: int = Field(ge=0)

    @property
    def columns(self) -> range:
        return range(self.begin, self.end + 1)


class SchematicSymbol(BaseModel):
    """Any schematic character that is neither a digit nor a period."""
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0)
    column: int = Field(ge=0)
    char: str = Field(min_length=1, max_length=1)


# ─── Cube Game Model ──────────────────────────────────────────────────────────


class CubeGame(BaseModel):
    """One parsed ``Game N: ...`` line."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    subsets: list[dict[str, int]] = Field(default_factory=list)


# ─── Scratchcard Model ────────────────────────────────────────────────────────


class Card(BaseModel):
    """One scratchcard with its winning set and the numbers we have."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    winning: frozenset[int] = Field(default_factory=frozenset)
    have: list[int] = Field(default_factory=list)

    @computed_field
    @property
    def match_count(self) -> int:
        return sum(1 for n in self.have if n in self.winning)

    @computed_field
    @property
    def points(self) -> int:
        """First match is worth one point, each further match doubles it."""
        if self.match_count == 0:
            return 0
        return 1 << (self.match_count - 1)


# ─── Solve Report ─────────────────────────────────────────────────────────────


class SolveResult(BaseModel):
    """
    Output of a single solver run.
    This is the JSON structure printed by ``solve --json-output``.
    """
    day: int
    title: str
    source: str = ""
    part_one: int
    part_two: int
    line_count: int = 0
    elapsed_seconds: float = 0.0
    workers: int = 1
    parallel: bool = False
