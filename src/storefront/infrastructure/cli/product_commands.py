"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.rate_product import RateProductHandler
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import open_session
from storefront.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        products = bootstrap.catalog_loader(settings).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<20} {'Name':<28} {'Price':>10}")
    click.echo("-" * 60)
    for p in products:
        click.echo(f"{p.id:<20} {p.name:<28} {str(p.price):>10}")


@click.command("show")
@click.argument("key")
@click.pass_obj
def product_show(settings: Settings, key: str) -> None:
    """Show a product by id or slug, with its options."""
    session = open_session(settings)

    try:
        page = ShowProductHandler(session).handle(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{page.name}  ({page.id})  {page.price}")
    if page.description:
        click.echo(page.description)
    if page.rating_count:
        click.echo(f"Rating: {page.rating_average:.1f} / 5 ({page.rating_count} ratings)")
    click.echo()
    if page.colors:
        click.echo("Colors: " + ", ".join(f"{label} [{value}]" for value, label in page.colors))
    if page.sizes:
        marker = " (required)" if page.sizes_required else ""
        click.echo(
            f"{page.size_label}{marker}: "
            + ", ".join(f"{label} [{value}]" for value, label in page.sizes)
        )
    if page.dog_name:
        marker = " (required, 'none' for blank)" if page.dog_name_required else ""
        click.echo(f"Personalization name{marker}: up to 15 characters")
    if page.note:
        click.echo("Special request: free text")
    click.echo(f"Current settings: {page.summary}")
    for src in page.gallery:
        click.echo(f"  image: {src}")


@click.command("rate")
@click.argument("product_id")
@click.argument("rating", type=int)
@click.pass_obj
def product_rate(settings: Settings, product_id: str, rating: int) -> None:
    """Rate a product from 1 to 5."""
    handler = RateProductHandler(bootstrap.product_repository(settings))

    try:
        product = handler.handle(product_id, rating)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Thanks! {product.name} is now rated {product.rating_average:.2f} "
        f"({product.rating_count} ratings)"
    )
