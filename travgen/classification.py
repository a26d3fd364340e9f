"""Trade code and travel zone classification.

Both are pure functions of a finished world profile. Trade codes are a rule
table: each rule is a list of requirements on profile fields, and a code
applies when every requirement holds. Codes are independent of each other,
so a world may carry any number of them, including none.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from travgen.schemas import TradeCode, Zone


class Profile(Protocol):
    size: int
    atmosphere: int
    hydrographics: int
    population: int
    government: int
    law: int
    tech: int


@dataclass(frozen=True)
class Requirement:
    """A range or membership test on one profile field.

    Bounds are inclusive; ``None`` leaves that side open.
    """

    field: str
    low: Optional[int] = None
    high: Optional[int] = None
    values: Optional[frozenset[int]] = None

    def holds(self, profile: Profile) -> bool:
        value = getattr(profile, self.field)
        if self.values is not None and value not in self.values:
            return False
        if self.low is not None and value < self.low:
            return False
        if self.high is not None and value > self.high:
            return False
        return True


def between(field: str, low: int, high: int) -> Requirement:
    return Requirement(field, low=low, high=high)


def at_least(field: str, low: int) -> Requirement:
    return Requirement(field, low=low)


def at_most(field: str, high: int) -> Requirement:
    return Requirement(field, high=high)


def equals(field: str, value: int) -> Requirement:
    return Requirement(field, values=frozenset({value}))


def one_of(field: str, *values: int) -> Requirement:
    return Requirement(field, values=frozenset(values))


@dataclass(frozen=True)
class TradeRule:
    code: TradeCode
    requirements: tuple[Requirement, ...]

    def applies(self, profile: Profile) -> bool:
        return all(req.holds(profile) for req in self.requirements)


TRADE_RULES: tuple[TradeRule, ...] = (
    TradeRule(TradeCode.AGRICULTURAL, (
        between("atmosphere", 4, 9),
        between("hydrographics", 4, 8),
        between("population", 5, 7),
    )),
    TradeRule(TradeCode.ASTEROID, (
        equals("size", 0),
        equals("atmosphere", 0),
        equals("hydrographics", 0),
    )),
    TradeRule(TradeCode.BARREN, (
        equals("population", 0),
        equals("government", 0),
        equals("law", 0),
    )),
    TradeRule(TradeCode.DESERT, (
        at_least("atmosphere", 2),
        equals("hydrographics", 0),
    )),
    TradeRule(TradeCode.FLUID_OCEANS, (
        at_least("atmosphere", 10),
        at_least("hydrographics", 1),
    )),
    TradeRule(TradeCode.GARDEN, (
        at_least("size", 5),
        between("atmosphere", 4, 9),
        between("hydrographics", 4, 8),
    )),
    TradeRule(TradeCode.HIGH_POPULATION, (at_least("population", 9),)),
    TradeRule(TradeCode.HIGH_TECH, (at_least("tech", 12),)),
    TradeRule(TradeCode.ICE_CAPPED, (
        at_most("atmosphere", 1),
        at_least("hydrographics", 1),
    )),
    TradeRule(TradeCode.INDUSTRIAL, (
        one_of("atmosphere", 0, 1, 2, 4, 7, 9),
        at_least("population", 9),
    )),
    TradeRule(TradeCode.LOW_POPULATION, (between("population", 1, 3),)),
    TradeRule(TradeCode.LOW_TECH, (at_most("tech", 5),)),
    TradeRule(TradeCode.NON_AGRICULTURAL, (
        at_most("atmosphere", 3),
        at_most("hydrographics", 3),
        at_least("population", 6),
    )),
    TradeRule(TradeCode.NON_INDUSTRIAL, (between("population", 4, 6),)),
    TradeRule(TradeCode.POOR, (
        between("atmosphere", 2, 5),
        at_most("hydrographics", 3),
    )),
    TradeRule(TradeCode.RICH, (
        one_of("atmosphere", 6, 8),
        between("population", 6, 8),
    )),
    TradeRule(TradeCode.VACUUM, (equals("atmosphere", 0),)),
    TradeRule(TradeCode.WATER_WORLD, (equals("hydrographics", 10),)),
)


def trade_codes(profile: Profile) -> frozenset[TradeCode]:
    """Every trade code whose rule the profile satisfies."""
    return frozenset(rule.code for rule in TRADE_RULES if rule.applies(profile))


AMBER_GOVERNMENTS = frozenset({0, 7, 10})


def assign_zone(profile: Profile) -> Zone:
    """Amber for hazardous atmospheres, governments or law levels; else Green.

    Red is never assigned here.
    """
    if (
        profile.atmosphere >= 10
        or profile.government in AMBER_GOVERNMENTS
        or profile.law == 0
        or profile.law >= 9
    ):
        return Zone.AMBER
    return Zone.GREEN


def classify(profile: Profile) -> tuple[Zone, frozenset[TradeCode]]:
    return assign_zone(profile), trade_codes(profile)
