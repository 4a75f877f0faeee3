import click
import uvicorn

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.bootstrap import build_storefront
from storefront.infrastructure.cli.order_commands import order_create
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import ConfigurationError, Settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: products, orders and discount pricing"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command()
@click.option("--host", default=None, help="Bind address (default: STOREFRONT_HOST).")
@click.option("--port", default=None, type=int, help="Bind port (default: STOREFRONT_PORT).")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    try:
        app = create_app(build_storefront(settings))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.group()
def order() -> None:
    """Place orders."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


# Register subcommands
order.add_command(order_create)
product.add_command(product_list)
