"""CLI commands for the shopper's cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.change_quantity import ChangeQuantityHandler
from storefront.application.create_checkout_session import (
    CreateCheckoutSessionHandler,
    checkout_items_from_cart,
)
from storefront.application.dto import CartActionResult, CartDTO
from storefront.application.remove_cart_line import RemoveCartLineHandler
from storefront.application.session import ShopSession
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_line import UpdateCartLineHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.selection import SelectionPatch
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings

# Which flag to point the shopper at when an option is missing.
_FIELD_FLAGS = {"size": "--size", "dogName": "--name"}


def open_session(settings: Settings) -> ShopSession:
    try:
        return bootstrap.shop_session(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _patch(
    size: str | None, name: str | None, note: str | None, color: str | None
) -> SelectionPatch | None:
    if size is None and name is None and note is None and color is None:
        return None
    return SelectionPatch(color=color, size=size, dog_name=name, note=note)


def _report(result: CartActionResult) -> None:
    if not result.accepted:
        flag = _FIELD_FLAGS.get(result.failed_field, "")
        hint = f" (use {flag})" if flag else ""
        raise click.ClickException(f"{result.message}{hint}")


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        click.echo(f"  {'Total':<27} {dto.total:>20}")
        return

    click.echo(f"  {'#':<3} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*56}")
    for line in dto.lines:
        click.echo(
            f"  {line.index + 1:<3} {line.product_name:<24} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
        click.echo(f"      {line.details}")
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Items':<27} {dto.count:>29}")
    click.echo(f"  {'Total':<27} {dto.total:>29}")


def _option_flags(func):
    func = click.option("--color", default=None, help="Colour value.")(func)
    func = click.option("--note", default=None, help="Special request.")(func)
    func = click.option("--name", default=None, help="Personalization name ('none' for blank).")(func)
    func = click.option("--size", default=None, help="Size value.")(func)
    return func


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the cart."""
    session = open_session(settings)
    _display_cart(ShowCartHandler(session).handle())


@click.command("add")
@click.argument("product_id")
@_option_flags
@click.pass_obj
def cart_add(
    settings: Settings,
    product_id: str,
    size: str | None,
    name: str | None,
    note: str | None,
    color: str | None,
) -> None:
    """Add a product with the chosen options to the cart."""
    session = open_session(settings)

    try:
        result = AddToCartHandler(session).handle(product_id, _patch(size, name, note, color))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(result)
    click.echo(f"Added to cart (line #{result.line_index + 1}).")
    _display_cart(ShowCartHandler(session).handle())


@click.command("edit")
@click.argument("line", type=int)
@_option_flags
@click.pass_obj
def cart_edit(
    settings: Settings,
    line: int,
    size: str | None,
    name: str | None,
    note: str | None,
    color: str | None,
) -> None:
    """Change the options of cart line LINE."""
    session = open_session(settings)

    try:
        result = UpdateCartLineHandler(session).handle(line - 1, _patch(size, name, note, color))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(result)
    click.echo(f"Line #{line} updated.")
    _display_cart(ShowCartHandler(session).handle())


@click.command("qty")
@click.argument("line", type=int)
@click.option("--delta", type=int, default=1, show_default=True, help="Amount to add (negative to remove).")
@click.pass_obj
def cart_qty(settings: Settings, line: int, delta: int) -> None:
    """Change the quantity of cart line LINE."""
    session = open_session(settings)

    try:
        remaining = ChangeQuantityHandler(session).handle(line - 1, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if remaining is None:
        click.echo(f"Line #{line} removed.")
    else:
        click.echo(f"Line #{line} quantity is now {remaining.quantity}.")


@click.command("remove")
@click.argument("line", type=int)
@click.pass_obj
def cart_remove(settings: Settings, line: int) -> None:
    """Remove cart line LINE."""
    session = open_session(settings)

    try:
        RemoveCartLineHandler(session).handle(line - 1)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line #{line} removed.")


@click.command("checkout")
@click.pass_obj
def cart_checkout(settings: Settings) -> None:
    """Open a payment session for the cart and print its URL."""
    session = open_session(settings)
    if len(session.cart) == 0:
        raise click.ClickException("Your cart is empty.")

    handler = CreateCheckoutSessionHandler(
        product_repo=bootstrap.product_repository(settings),
        gateway=bootstrap.payment_gateway(settings),
        currency=settings.currency,
    )

    try:
        url = handler.handle(checkout_items_from_cart(session.cart))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(url)
