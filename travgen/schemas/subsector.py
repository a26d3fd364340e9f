"""Subsector layout schemas."""

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict

from .base import Density
from .world import World


def hex_label(column: int, row: int) -> str:
    """Four digit hex location, 1-based: column 0, row 2 -> ``0103``."""
    return f"{column + 1:02d}{row + 1:02d}"


class Subsector(BaseModel):
    """A grid of possible world locations, indexed ``grid[column][row]``."""

    model_config = ConfigDict(frozen=True)

    density: Density
    grid: tuple[tuple[Optional[World], ...], ...]

    @property
    def columns(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def worlds(self) -> Iterator[tuple[str, World]]:
        """Yield ``(hex label, world)`` for each occupied cell, column by column."""
        for column, cells in enumerate(self.grid):
            for row, world in enumerate(cells):
                if world is not None:
                    yield hex_label(column, row), world

    @property
    def world_count(self) -> int:
        return sum(1 for _ in self.worlds())
