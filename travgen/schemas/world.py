"""World record schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .base import Base, FactionStrength, StarportClass, Temperature, TradeCode, Zone


class Starport(BaseModel):
    """Starport quality and the cost of a berth there, in credits."""

    model_config = ConfigDict(frozen=True)

    starport_class: StarportClass
    berthing: int = Field(ge=0)


class Faction(BaseModel):
    """A political group on a world, separate from its overall government."""

    model_config = ConfigDict(frozen=True)

    government: int = Field(ge=0, le=13)
    strength: FactionStrength


class WorldProfile(BaseModel):
    """The finished attribute vector the trade codes and zone are read from."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=0, le=10)
    atmosphere: int = Field(ge=0, le=15)
    hydrographics: int = Field(ge=0, le=10)
    population: int = Field(ge=0, le=12)
    government: int = Field(ge=0, le=13)
    law: int = Field(ge=0, le=9)
    tech: int = Field(ge=0)


class World(BaseModel):
    """A fully generated world. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    starport: Starport
    size: int = Field(ge=0, le=10)
    atmosphere: int = Field(ge=0, le=15)
    temperature: Temperature
    hydrographics: int = Field(ge=0, le=10)
    population: int = Field(ge=0, le=12)
    government: int = Field(ge=0, le=13)
    factions: tuple[Faction, ...] = ()
    law: int = Field(ge=0, le=9)
    tech: int = Field(ge=0)
    bases: frozenset[Base] = frozenset()
    codes: frozenset[TradeCode] = frozenset()
    zone: Zone = Zone.UNCLASSIFIED

    @property
    def profile(self) -> WorldProfile:
        return WorldProfile(
            size=self.size,
            atmosphere=self.atmosphere,
            hydrographics=self.hydrographics,
            population=self.population,
            government=self.government,
            law=self.law,
            tech=self.tech,
        )

    # Sets serialize in enum declaration order.
    @field_serializer("bases")
    def _serialize_bases(self, bases: frozenset[Base]) -> list[Base]:
        return [base for base in Base if base in bases]

    @field_serializer("codes")
    def _serialize_codes(self, codes: frozenset[TradeCode]) -> list[TradeCode]:
        return [code for code in TradeCode if code in codes]

    def with_zone(self, zone: Zone) -> "World":
        """Return a copy with the travel zone overridden by the referee."""
        return self.model_copy(update={"zone": zone})
