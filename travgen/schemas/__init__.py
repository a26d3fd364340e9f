"""Pydantic schemas for travgen."""

from .base import (
    Temperature,
    StarportClass,
    Base,
    FactionStrength,
    Zone,
    TradeCode,
    Density,
)
from .world import Starport, Faction, WorldProfile, World
from .subsector import Subsector, hex_label

__all__ = [
    # base
    "Temperature",
    "StarportClass",
    "Base",
    "FactionStrength",
    "Zone",
    "TradeCode",
    "Density",
    # world
    "Starport",
    "Faction",
    "WorldProfile",
    "World",
    # subsector
    "Subsector",
    "hex_label",
]
