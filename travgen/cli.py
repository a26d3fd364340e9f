"""CLI interface for travgen."""

import json
import logging
from typing import Optional

import click

from travgen import config
from travgen.formatting import format_details, format_subsector, format_uwp
from travgen.generator import WorldGenerator
from travgen.schemas import Density
from travgen.subsector import SubsectorGenerator


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every generation step")
def cli(verbose: bool):
    """Traveller World Generator"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )


@cli.command()
@click.option(
    "--count", "-n",
    default=config.DEFAULT_WORLD_COUNT,
    type=click.IntRange(min=0),
    help="Number of worlds",
)
@click.option("--seed", default=config.DEFAULT_SEED, type=int, help="Random seed")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON, one world per line")
@click.option("--detail", is_flag=True, help="Show every attribute and faction")
def world(count: int, seed: Optional[int], as_json: bool, detail: bool):
    """Generate standalone worlds."""
    generator = WorldGenerator(seed=seed)

    for _ in range(count):
        generated = generator.generate()
        if as_json:
            click.echo(generated.model_dump_json())
        elif detail:
            click.echo(format_details(generated))
            click.echo()
        else:
            click.echo(format_uwp(generated))


@cli.command()
@click.option(
    "--density",
    default=config.DEFAULT_DENSITY,
    type=click.Choice([d.value for d in Density]),
    help="Stellar density of the region",
)
@click.option("--seed", default=config.DEFAULT_SEED, type=int, help="Random seed")
@click.option("--json", "as_json", is_flag=True, help="Emit the subsector as JSON")
def subsector(density: str, seed: Optional[int], as_json: bool):
    """Generate a subsector of worlds."""
    generated = SubsectorGenerator(seed=seed).generate(Density(density))

    if as_json:
        click.echo(json.dumps(
            {label: w.model_dump(mode="json") for label, w in generated.worlds()},
            indent=2,
        ))
        return

    click.echo(f"Subsector ({generated.density.value}): {generated.world_count} worlds")
    listing = format_subsector(generated)
    if listing:
        click.echo(listing)


if __name__ == "__main__":
    cli()
