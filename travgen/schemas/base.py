"""Base enums for travgen schemas."""

from enum import Enum


class Temperature(str, Enum):
    FROZEN = "frozen"
    COLD = "cold"
    TEMPERATE = "temperate"
    HOT = "hot"
    ROASTING = "roasting"


class StarportClass(str, Enum):
    A = "A"  # excellent
    B = "B"  # good
    C = "C"  # routine
    D = "D"  # poor
    E = "E"  # frontier
    X = "X"  # none


class Base(str, Enum):
    NAVAL = "naval"
    SCOUT = "scout"
    RESEARCH = "research"
    TAS = "tas"
    CONSULATE = "consulate"
    PIRATE = "pirate"


class FactionStrength(str, Enum):
    OBSCURE = "obscure"
    FRINGE = "fringe"
    MINOR = "minor"
    NOTABLE = "notable"
    SIGNIFICANT = "significant"
    OVERWHELMING = "overwhelming"


class Zone(str, Enum):
    """Travel zone. Red is only ever set by hand."""

    UNCLASSIFIED = "unclassified"
    GREEN = "green"
    AMBER = "amber"
    RED = "red"


class TradeCode(str, Enum):
    """Trade classifications, valued by their standard abbreviation."""

    AGRICULTURAL = "Ag"
    ASTEROID = "As"
    BARREN = "Ba"
    DESERT = "De"
    FLUID_OCEANS = "Fl"
    GARDEN = "Ga"
    HIGH_POPULATION = "Hi"
    HIGH_TECH = "Ht"
    ICE_CAPPED = "IC"
    INDUSTRIAL = "In"
    LOW_POPULATION = "Lo"
    LOW_TECH = "Lt"
    NON_AGRICULTURAL = "Na"
    NON_INDUSTRIAL = "NI"
    POOR = "Po"
    RICH = "Ri"
    VACUUM = "Va"
    WATER_WORLD = "Wa"


class Density(str, Enum):
    """Stellar density of the region a subsector sits in."""

    RIFT = "rift"
    SPARSE = "sparse"
    SPIRAL = "spiral"
    DENSE = "dense"
