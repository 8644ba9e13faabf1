import logging

import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_edit,
    cart_qty,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.catalog_commands import catalog_import
from storefront.infrastructure.cli.product_commands import (
    product_list,
    product_rate,
    product_show,
)
from storefront.infrastructure.config import Settings


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from STOREFRONT_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Storefront — catalog, cart and checkout"""
    settings = Settings.from_env()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", type=int, default=None, help="Port (default from PORT, else 3000).")
@click.option("--debug", is_flag=True, default=False, help="Enable the Flask debugger.")
@click.pass_obj
def serve(settings: Settings, host: str, port: int | None, debug: bool) -> None:
    """Run the storefront HTTP API."""
    from storefront.infrastructure.web.app import create_app

    app = create_app(settings)
    port = port or settings.port
    click.echo(f"Server running at http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


@cli.group()
def product() -> None:
    """Browse and rate products."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def catalog() -> None:
    """Administer the catalog."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_rate)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_edit)
cart.add_command(cart_qty)
cart.add_command(cart_remove)
cart.add_command(cart_checkout)
catalog.add_command(catalog_import)
