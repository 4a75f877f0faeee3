"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_storefront


@click.command("list")
@click.pass_obj
def product_list(settings) -> None:
    """List all products in the catalog."""
    try:
        products = build_storefront(settings).list_products.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}  Category")
    click.echo("-" * 56)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {'$' + format(p.price, '.2f'):>10} "
            f"{p.available_quantity:>7}  {p.category}"
        )
