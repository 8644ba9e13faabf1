"""Application service: Create Checkout Session use case.

Turns a cart snapshot into payment line items.  Prices always come from
the current catalog; whatever the client sends besides ids, quantities
and options is ignored.
"""

from __future__ import annotations

from typing import Any

from storefront.application.dto import CheckoutItemSpec
from storefront.application.payment_gateway import PaymentGateway
from storefront.domain.exceptions import (
    EntityNotFoundError,
    UpstreamUnconfiguredError,
    ValidationError,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class CreateCheckoutSessionHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        gateway: PaymentGateway | None,
        currency: str = "usd",
    ) -> None:
        self._product_repo = product_repo
        self._gateway = gateway
        self._currency = currency

    def ensure_configured(self) -> PaymentGateway:
        if self._gateway is None:
            raise UpstreamUnconfiguredError("Stripe is not configured yet.")
        return self._gateway

    def handle(self, items: list[CheckoutItemSpec]) -> str:
        gateway = self.ensure_configured()
        if not items:
            raise ValidationError("Your cart is empty.")

        catalog = {p.id: p for p in self._product_repo.list_all()}
        line_items: list[dict[str, Any]] = []
        for spec in items:
            product = catalog.get(spec.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found for checkout: '{spec.product_id}'"
                )
            line_items.append(self._line_item(product, spec))

        return gateway.create_checkout_session(line_items)

    def _line_item(self, product: Product, spec: CheckoutItemSpec) -> dict[str, Any]:
        product_data: dict[str, Any] = {"name": product.name}
        if product.description:
            product_data["description"] = product.description
        metadata = {
            key: value
            for key, value in (
                ("size", spec.size),
                ("dogName", spec.dog_name),
                ("note", spec.note),
                ("color", spec.color),
            )
            if value
        }
        if metadata:
            product_data["metadata"] = metadata

        return {
            "price_data": {
                "currency": self._currency,
                "product_data": product_data,
                "unit_amount": product.price.cents,  # <-- catalog price, in cents
            },
            "quantity": spec.quantity,
        }


def checkout_items_from_cart(cart: Cart) -> list[CheckoutItemSpec]:
    return [
        CheckoutItemSpec(
            product_id=line.product_id,
            quantity=line.quantity,
            size=line.size,
            dog_name=line.dog_name,
            note=line.note,
            color=line.color,
        )
        for line in cart.lines
    ]


def checkout_items_from_payload(payload: object) -> list[CheckoutItemSpec]:
    """Parse ``{"items": [{"id", "quantity", ...options}]}``.

    A missing or non-positive quantity counts as 1.
    """
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise ValidationError("Body must contain an 'items' array")

    specs: list[CheckoutItemSpec] = []
    for raw in items:
        if not isinstance(raw, dict):
            raise ValidationError("Each item must be an object")
        quantity = raw.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            quantity = 1
        specs.append(
            CheckoutItemSpec(
                product_id=str(raw.get("id") or ""),
                quantity=quantity,
                size=str(raw.get("size") or ""),
                dog_name=str(raw.get("dogName") or ""),
                note=str(raw.get("note") or ""),
                color=str(raw.get("color") or ""),
            )
        )
    return specs
