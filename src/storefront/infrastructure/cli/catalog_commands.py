"""CLI commands for catalog administration."""

from __future__ import annotations

import json

import click

from storefront.application.replace_catalog import ReplaceCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings


@click.command("import")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def catalog_import(settings: Settings, source) -> None:
    """Replace the whole catalog with the products in SOURCE (a JSON array)."""
    try:
        payload = json.load(source)
    except ValueError as exc:
        raise click.ClickException(f"{source.name} is not valid JSON: {exc}")

    handler = ReplaceCatalogHandler(bootstrap.product_repository(settings))

    try:
        count = handler.handle(payload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Catalog replaced: {count} products.")
