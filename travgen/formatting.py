"""Text rendering for worlds and subsectors."""

from travgen.schemas import Base, Subsector, TradeCode, World, Zone

# Extended hex: I and O are skipped to avoid confusion with 1 and 0.
EHEX_DIGITS = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZ"

# Fixed columns of the bases field, left to right.
BASE_COLUMNS: tuple[tuple[Base, str], ...] = (
    (Base.TAS, "T"),
    (Base.CONSULATE, "C"),
    (Base.RESEARCH, "R"),
    (Base.NAVAL, "N"),
    (Base.SCOUT, "S"),
    (Base.PIRATE, "P"),
)

ZONE_GLYPHS: dict[Zone, str] = {
    Zone.UNCLASSIFIED: " ",
    Zone.GREEN: " ",
    Zone.AMBER: "A",
    Zone.RED: "R",
}


def ehex(value: int) -> str:
    """Single extended-hex digit; ``?`` when the value has none."""
    if 0 <= value < len(EHEX_DIGITS):
        return EHEX_DIGITS[value]
    return "?"


def format_bases(bases: frozenset[Base]) -> str:
    return "".join(glyph if base in bases else " " for base, glyph in BASE_COLUMNS)


def format_codes(codes: frozenset[TradeCode]) -> str:
    return " ".join(code.value for code in TradeCode if code in codes)


def format_zone(zone: Zone) -> str:
    return ZONE_GLYPHS.get(zone, " ")


def format_profile(world: World) -> str:
    """The bare UWP digits, e.g. ``A5208D9-A``."""
    digits = "".join(
        ehex(value)
        for value in (
            world.size,
            world.atmosphere,
            world.hydrographics,
            world.population,
            world.government,
            world.law,
        )
    )
    return f"{world.starport.starport_class.value}{digits}-{ehex(world.tech)}"


def format_uwp(world: World) -> str:
    return " ".join(
        (
            format_profile(world),
            format_bases(world.bases),
            format_codes(world.codes),
            format_zone(world.zone),
        )
    )


def format_details(world: World) -> str:
    """Multi-line description of a world, one attribute per line."""
    lines = [
        format_uwp(world),
        f"  Starport:      {world.starport.starport_class.value} "
        f"(berthing Cr{world.starport.berthing})",
        f"  Size:          {world.size}",
        f"  Atmosphere:    {world.atmosphere}",
        f"  Temperature:   {world.temperature.value}",
        f"  Hydrographics: {world.hydrographics * 10}%",
        f"  Population:    {world.population}",
        f"  Government:    {world.government}",
        f"  Law:           {world.law}",
        f"  Tech:          {world.tech}",
        f"  Bases:         {', '.join(b.value for b in Base if b in world.bases) or 'none'}",
        f"  Trade codes:   {format_codes(world.codes) or 'none'}",
        f"  Zone:          {world.zone.value}",
        f"  Factions:      {len(world.factions)}",
    ]
    for faction in world.factions:
        lines.append(
            f"    - {faction.strength.value} (government {faction.government})"
        )
    return "\n".join(lines)


def format_subsector(subsector: Subsector) -> str:
    """One ``CCRR UWP`` line per occupied hex."""
    return "\n".join(f"{label} {format_uwp(world)}" for label, world in subsector.worlds())
