"""Lookup tables for world generation.

Every table is total: values missing from a table fall through to the
default given by its lookup function.
"""

from travgen.schemas import Base, FactionStrength, StarportClass, Temperature


# ===== PHYSICAL =====

TEMPERATURE_DM: dict[int, int] = {
    0: 0, 1: 0,
    2: -2, 3: -2,
    4: -1, 5: -1, 14: -1,
    6: 0, 7: 0,
    8: 1, 9: 1,
    10: 2, 13: 2, 15: 2,
    11: 6, 12: 6,
}


def temperature_dm(atmosphere: int) -> int:
    return TEMPERATURE_DM.get(atmosphere, 0)


def temperature_band(roll: int) -> Temperature:
    """Categorize a modified temperature roll."""
    if roll <= 2:
        return Temperature.FROZEN
    if roll <= 4:
        return Temperature.COLD
    if roll <= 9:
        return Temperature.TEMPERATE
    if roll <= 11:
        return Temperature.HOT
    return Temperature.ROASTING


HYDROGRAPHICS_ATMOSPHERE_DM: dict[int, int] = {0: -4, 1: -4, 10: -4, 11: -4, 12: -4}

HYDROGRAPHICS_TEMPERATURE_DM: dict[Temperature, int] = {
    Temperature.HOT: -2,
    Temperature.ROASTING: -6,
}

HYDROGRAPHICS_BASE_DM = -7
MAX_DRY_SIZE = 1  # worlds this small hold no surface water


def hydrographics_dm(size: int, atmosphere: int, temperature: Temperature) -> int:
    return (
        HYDROGRAPHICS_ATMOSPHERE_DM.get(atmosphere, 0)
        + HYDROGRAPHICS_TEMPERATURE_DM.get(temperature, 0)
        + size
        + HYDROGRAPHICS_BASE_DM
    )


# ===== SOCIAL =====

MAX_ATMOSPHERE = 15
MAX_HYDROGRAPHICS = 10
MAX_GOVERNMENT = 13
MAX_LAW = 9

FACTION_COUNT_DM: dict[int, int] = {
    0: 1, 7: 1,
    10: -1, 11: -1, 12: -1, 13: -1,
}


def faction_count_dm(government: int) -> int:
    return FACTION_COUNT_DM.get(government, 0)


FACTION_STRENGTH: dict[int, FactionStrength] = {
    2: FactionStrength.OBSCURE, 3: FactionStrength.OBSCURE,
    4: FactionStrength.FRINGE, 5: FactionStrength.FRINGE,
    6: FactionStrength.MINOR, 7: FactionStrength.MINOR,
    8: FactionStrength.NOTABLE, 9: FactionStrength.NOTABLE,
    10: FactionStrength.SIGNIFICANT, 11: FactionStrength.SIGNIFICANT,
    12: FactionStrength.OVERWHELMING,
}


def faction_strength(roll: int) -> FactionStrength:
    # A 2d6 roll always lands in the table; the default never fires.
    return FACTION_STRENGTH.get(roll, FactionStrength.OBSCURE)


# ===== STARPORT =====

STARPORT_CLASS: dict[int, StarportClass] = {
    2: StarportClass.X,
    3: StarportClass.E, 4: StarportClass.E,
    5: StarportClass.D, 6: StarportClass.D,
    7: StarportClass.C, 8: StarportClass.C,
    9: StarportClass.B, 10: StarportClass.B,
    11: StarportClass.A, 12: StarportClass.A,
}


def starport_class(roll: int) -> StarportClass:
    return STARPORT_CLASS.get(roll, StarportClass.X)


# Credits per point of 1d6; classes without an entry charge nothing.
BERTHING_SCALE: dict[StarportClass, int] = {
    StarportClass.A: 1000,
    StarportClass.B: 500,
    StarportClass.C: 100,
    StarportClass.D: 10,
}

# 2d6 target per base, in roll order. Classes with no entry roll nothing.
BASE_THRESHOLDS: dict[StarportClass, dict[Base, int]] = {
    StarportClass.A: {
        Base.NAVAL: 8,
        Base.SCOUT: 10,
        Base.RESEARCH: 8,
        Base.TAS: 4,
        Base.CONSULATE: 6,
    },
    StarportClass.B: {
        Base.NAVAL: 8,
        Base.SCOUT: 8,
        Base.RESEARCH: 10,
        Base.TAS: 6,
        Base.CONSULATE: 8,
        Base.PIRATE: 12,
    },
    StarportClass.C: {
        Base.SCOUT: 8,
        Base.RESEARCH: 10,
        Base.TAS: 10,
        Base.CONSULATE: 10,
        Base.PIRATE: 10,
    },
    StarportClass.D: {
        Base.SCOUT: 7,
        Base.PIRATE: 12,
    },
    StarportClass.E: {
        Base.PIRATE: 12,
    },
    StarportClass.X: {},
}


def base_thresholds(port: StarportClass) -> dict[Base, int]:
    return BASE_THRESHOLDS.get(port, {})


# ===== TECH LEVEL =====

TECH_STARPORT_DM: dict[StarportClass, int] = {
    StarportClass.A: 6,
    StarportClass.B: 4,
    StarportClass.C: 2,
    StarportClass.D: 0,
    StarportClass.E: 0,
    StarportClass.X: -4,
}

TECH_SIZE_DM: dict[int, int] = {0: 2, 1: 2, 2: 1, 3: 1, 4: 1}

TECH_ATMOSPHERE_DM: dict[int, int] = {
    0: 1, 1: 1, 2: 1, 3: 1,
    10: 1, 11: 1, 12: 1, 13: 1, 14: 1, 15: 1,
}

TECH_HYDROGRAPHICS_DM: dict[int, int] = {0: 1, 9: 1, 10: 2}

TECH_POPULATION_DM: dict[int, int] = {
    1: 1, 2: 1, 3: 1, 4: 1, 5: 1, 9: 1,
    10: 2,
    11: 3,
    12: 4,
}

TECH_GOVERNMENT_DM: dict[int, int] = {0: 1, 5: 1, 7: 2, 13: -2, 14: -2}


def tech_dm(
    port: StarportClass,
    size: int,
    atmosphere: int,
    hydrographics: int,
    population: int,
    government: int,
) -> int:
    """Sum of the six tech level modifiers."""
    return (
        TECH_STARPORT_DM.get(port, 0)
        + TECH_SIZE_DM.get(size, 0)
        + TECH_ATMOSPHERE_DM.get(atmosphere, 0)
        + TECH_HYDROGRAPHICS_DM.get(hydrographics, 0)
        + TECH_POPULATION_DM.get(population, 0)
        + TECH_GOVERNMENT_DM.get(government, 0)
    )
