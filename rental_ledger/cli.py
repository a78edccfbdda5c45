"""
Rental ledger CLI - main entry point.
Built with Click; reads a dataset, prints the ledger report as JSON.
"""

import json
import sys
from dataclasses import asdict

import click

from rental_ledger.config import settings
from rental_ledger.domain.exceptions import DomainException
from rental_ledger.domain.ledger import actions_for_booking
from rental_ledger.domain.pricing import price as price_rental
from rental_ledger.infrastructure.dataset.store import DataStore
from rental_ledger.infrastructure.observability.logging import setup_logging
from rental_ledger.reports import SECTIONS, build_report, serialize_actions


def _dump(payload) -> str:
    return json.dumps(payload, indent=2) + "\n"


@click.group()
@click.version_option(version="0.1.0", prog_name="rental-ledger")
@click.option("--log-level", default=None, help="Override RENTAL_LEDGER_LOG_LEVEL")
def cli(log_level):
    """Rental pricing and ledger allocation."""
    # stdout carries the report
    setup_logging((log_level or settings.log_level).upper(), stream=sys.stderr)


@cli.command()
@click.argument("input_path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True),
              help="Write the report here instead of stdout")
@click.option("--section", type=click.Choice(SECTIONS), default="all", show_default=True)
def report(input_path, output, section):
    """Price every booking and modification in INPUT_PATH."""
    path = input_path or settings.input_path
    try:
        store = DataStore.from_file(path)
        payload = build_report(store, section=section)
    except FileNotFoundError:
        raise click.BadParameter(f"{path} does not exist", param_hint="INPUT_PATH")
    except DomainException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(_dump(payload))
        click.echo(f"Report written to {output}", err=True)
    else:
        click.echo(_dump(payload), nl=False)


@cli.command()
@click.option("--price-per-day", type=int, required=True)
@click.option("--price-per-km", type=int, required=True)
@click.option("--days", type=int, required=True, help="Inclusive rental length")
@click.option("--distance", type=int, required=True, help="Distance in km")
@click.option("--deductible-reduction", is_flag=True, help="Renter opted for the deductible reduction")
def price(price_per_day, price_per_km, days, distance, deductible_reduction):
    """Price a single rental without a dataset."""
    try:
        breakdown = price_rental(days, distance, price_per_day, price_per_km, deductible_reduction)
    except DomainException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(_dump({
        "breakdown": asdict(breakdown),
        "actions": serialize_actions(actions_for_booking(breakdown)),
    }), nl=False)


def main():
    cli()


if __name__ == "__main__":
    main()
