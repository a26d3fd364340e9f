"""World generation.

A world is built by a fixed chain of dice rolls. Each roll's modifier comes
from attributes rolled earlier in the chain, so the order of the steps in
``WorldGenerator.generate`` is significant: reordering them changes both the
distributions and which draws a seeded source hands to each step.
"""

import logging
from typing import Optional

from travgen import tables
from travgen.classification import classify
from travgen.dice import Dice
from travgen.schemas import (
    Base,
    Faction,
    Starport,
    StarportClass,
    Temperature,
    World,
    WorldProfile,
)

logger = logging.getLogger(__name__)


class WorldGenerator:
    """Generate worlds from a single dice source."""

    def __init__(self, dice: Optional[Dice] = None, seed: Optional[int] = None):
        self.dice = dice if dice is not None else Dice(seed=seed)

    def generate(self) -> World:
        """Run the full derivation chain and return the finished world."""
        size = self.roll_size()
        atmosphere = self.roll_atmosphere(size)
        temperature = self.roll_temperature(atmosphere)
        hydrographics = self.roll_hydrographics(size, atmosphere, temperature)
        population = self.roll_population()
        government = self.roll_government(population)
        factions = self.roll_factions(government)
        law = self.roll_law(government)
        starport = self.roll_starport()
        bases = self.roll_bases(starport.starport_class)
        tech = self.roll_tech(
            starport.starport_class, size, atmosphere, hydrographics, population, government
        )

        profile = WorldProfile(
            size=size,
            atmosphere=atmosphere,
            hydrographics=hydrographics,
            population=population,
            government=government,
            law=law,
            tech=tech,
        )
        zone, codes = classify(profile)
        logger.debug(f"Zone {zone.value}, codes {sorted(c.value for c in codes)}")

        return World(
            starport=starport,
            size=size,
            atmosphere=atmosphere,
            temperature=temperature,
            hydrographics=hydrographics,
            population=population,
            government=government,
            factions=factions,
            law=law,
            tech=tech,
            bases=bases,
            codes=codes,
            zone=zone,
        )

    def roll_size(self) -> int:
        size = self.dice.nd6dm(2, -2)
        logger.debug(f"Size {size}")
        return size

    def roll_atmosphere(self, size: int) -> int:
        atmosphere = min(self.dice.nd6dm(2, size - 7), tables.MAX_ATMOSPHERE)
        logger.debug(f"Atmosphere {atmosphere}")
        return atmosphere

    def roll_temperature(self, atmosphere: int) -> Temperature:
        roll = self.dice.nd6dm(2, tables.temperature_dm(atmosphere))
        temperature = tables.temperature_band(roll)
        logger.debug(f"Temperature {temperature.value} (roll {roll})")
        return temperature

    def roll_hydrographics(self, size: int, atmosphere: int, temperature: Temperature) -> int:
        if size <= tables.MAX_DRY_SIZE:
            logger.debug(f"Hydrographics 0 (size {size}, no roll)")
            return 0
        dm = tables.hydrographics_dm(size, atmosphere, temperature)
        hydrographics = min(self.dice.nd6dm(2, dm), tables.MAX_HYDROGRAPHICS)
        logger.debug(f"Hydrographics {hydrographics} (DM {dm:+d})")
        return hydrographics

    def roll_population(self) -> int:
        population = self.dice.nd6dm(2, -2)
        logger.debug(f"Population {population}")
        return population

    def roll_government(self, population: int) -> int:
        government = min(self.dice.nd6dm(2, population - 7), tables.MAX_GOVERNMENT)
        logger.debug(f"Government {government}")
        return government

    def roll_factions(self, government: int) -> tuple[Faction, ...]:
        count = self.dice.d3dm(tables.faction_count_dm(government))
        factions = []
        for _ in range(count):
            # Faction strength stands in for the faction's population when
            # rolling its government.
            strength = self.dice.roll_2d6()
            factions.append(
                Faction(
                    government=min(self.dice.nd6dm(2, strength - 7), tables.MAX_GOVERNMENT),
                    strength=tables.faction_strength(strength),
                )
            )
        logger.debug(f"{count} factions")
        return tuple(factions)

    def roll_law(self, government: int) -> int:
        law = min(self.dice.nd6dm(2, government - 7), tables.MAX_LAW)
        logger.debug(f"Law {law}")
        return law

    def roll_starport(self) -> Starport:
        port = tables.starport_class(self.dice.roll_2d6())
        scale = tables.BERTHING_SCALE.get(port)
        berthing = scale * self.dice.d6() if scale else 0
        logger.debug(f"Starport {port.value}, berthing Cr{berthing}")
        return Starport(starport_class=port, berthing=berthing)

    def roll_bases(self, port: StarportClass) -> frozenset[Base]:
        bases = set()
        for base, threshold in tables.base_thresholds(port).items():
            if self.dice.roll_2d6() >= threshold:
                bases.add(base)
        logger.debug(f"Bases {sorted(b.value for b in bases)}")
        return frozenset(bases)

    def roll_tech(
        self,
        port: StarportClass,
        size: int,
        atmosphere: int,
        hydrographics: int,
        population: int,
        government: int,
    ) -> int:
        # No upper bound: tech levels above 15 exist.
        dm = tables.tech_dm(port, size, atmosphere, hydrographics, population, government)
        tech = self.dice.d6dm(dm)
        logger.debug(f"Tech {tech} (DM {dm:+d})")
        return tech


def generate_world(seed: Optional[int] = None, dice: Optional[Dice] = None) -> World:
    """Generate a single world."""
    return WorldGenerator(dice=dice, seed=seed).generate()
