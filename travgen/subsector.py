"""Subsector layout."""

import logging
from typing import Optional

from travgen import config
from travgen.dice import Dice
from travgen.generator import WorldGenerator
from travgen.schemas import Density, Subsector, World

logger = logging.getLogger(__name__)


# Presence roll DM by stellar density.
DENSITY_DM: dict[Density, int] = {
    Density.RIFT: -2,
    Density.SPARSE: -1,
    Density.SPIRAL: 0,
    Density.DENSE: 1,
}


class SubsectorGenerator:
    """Fill a subsector grid with worlds.

    Each hex holds a world when 1d6 plus the density DM reaches the presence
    threshold. Hexes are visited column by column, and every world is rolled
    from the same dice as the presence checks.
    """

    def __init__(
        self,
        dice: Optional[Dice] = None,
        seed: Optional[int] = None,
        columns: int = config.SUBSECTOR_COLUMNS,
        rows: int = config.SUBSECTOR_ROWS,
    ):
        self.dice = dice if dice is not None else Dice(seed=seed)
        self.world_generator = WorldGenerator(dice=self.dice)
        self.columns = columns
        self.rows = rows

    def generate(self, density: Density = Density.SPIRAL) -> Subsector:
        dm = DENSITY_DM[density]
        grid = []
        for _ in range(self.columns):
            column: list[Optional[World]] = []
            for _ in range(self.rows):
                if self.dice.d6() + dm >= config.PRESENCE_THRESHOLD:
                    column.append(self.world_generator.generate())
                else:
                    column.append(None)
            grid.append(tuple(column))

        subsector = Subsector(density=density, grid=tuple(grid))
        logger.info(
            f"Generated {density.value} subsector with {subsector.world_count} worlds"
        )
        return subsector
