"""Traveller world generation."""

from .dice import Dice, RandomSourceError, ScriptedSource
from .generator import WorldGenerator, generate_world
from .subsector import SubsectorGenerator

__all__ = [
    "Dice",
    "RandomSourceError",
    "ScriptedSource",
    "WorldGenerator",
    "generate_world",
    "SubsectorGenerator",
]
