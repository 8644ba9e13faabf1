"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.load_catalog import LoadCatalogHandler
from storefront.application.payment_gateway import PaymentGateway
from storefront.application.session import ShopSession
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.api_product_repository import HttpProductRepository
from storefront.infrastructure.payments.stripe_gateway import StripeCheckoutGateway
from storefront.infrastructure.persistence.json_cart_storage import JsonCartStorage
from storefront.infrastructure.persistence.json_post_repository import JsonPostRepository
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.products_file)


def post_repository(settings: Settings) -> JsonPostRepository:
    return JsonPostRepository(settings.posts_file)


def cart_storage(settings: Settings) -> JsonCartStorage:
    return JsonCartStorage(settings.cart_file)


def payment_gateway(settings: Settings) -> PaymentGateway | None:
    if not settings.payments_configured:
        return None
    return StripeCheckoutGateway(
        api_key=settings.stripe_secret_key,
        success_url=settings.checkout_success_url,
        cancel_url=settings.checkout_cancel_url,
    )


def catalog_loader(settings: Settings) -> LoadCatalogHandler:
    """API first when one is configured, the catalog file otherwise or as fallback."""
    local = product_repository(settings)
    if settings.api_url:
        return LoadCatalogHandler(HttpProductRepository(settings.api_url), fallback=local)
    return LoadCatalogHandler(local)


def shop_session(settings: Settings) -> ShopSession:
    catalog = catalog_loader(settings).handle()
    return ShopSession.start(catalog, cart_storage(settings))
