"""CLI commands for orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_storefront


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,4:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(id_str)
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{id_str.strip()}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product {product_id}."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*42}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<10} {line.quantity:>5} "
            f"{'$' + format(line.unit_price, '.2f'):>12} "
            f"{'$' + format(line.line_total, '.2f'):>12}"
        )
    click.echo(f"  {'-'*42}")
    if dto.discount_code:
        click.echo(f"  {'Subtotal':<17} {'$' + format(dto.subtotal, '.2f'):>25}")
        click.echo(f"  {'Discount code':<17} {dto.discount_code:>25}")
    click.echo(f"  {'Order Total':<17} {'$' + format(dto.total, '.2f'):>25}")


@click.command("create")
@click.option("--customer", required=True, help="Customer id.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--discount", "discount_code", default=None, help="Discount code, e.g. SAVE10.")
@click.pass_obj
def order_create(settings, customer: str, items: str, discount_code: str | None) -> None:
    """Place an order against a freshly seeded catalog."""
    specs = _parse_items(items)

    try:
        dto = build_storefront(settings).create_order.handle(
            customer_id=customer, item_specs=specs, discount_code=discount_code
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
