"""Tests for the CreateCheckoutSession use case."""

import pytest

from storefront.application.create_checkout_session import (
    CreateCheckoutSessionHandler,
    checkout_items_from_cart,
    checkout_items_from_payload,
)
from storefront.application.dto import CheckoutItemSpec
from storefront.domain.exceptions import (
    EntityNotFoundError,
    UpstreamUnconfiguredError,
    ValidationError,
)
from storefront.domain.model.cart import Cart, CartLine
from tests.catalog import full_catalog
from tests.fakes import FakePaymentGateway, FakeProductRepository


def _setup(
    gateway: FakePaymentGateway | None = None,
) -> CreateCheckoutSessionHandler:
    return CreateCheckoutSessionHandler(FakeProductRepository(full_catalog()), gateway)


class TestCreateCheckoutSession:

    def test_returns_gateway_url(self):
        gateway = FakePaymentGateway("https://pay.example/abc")
        url = _setup(gateway).handle([CheckoutItemSpec("rope", 2)])
        assert url == "https://pay.example/abc"

    def test_line_items_use_catalog_price(self):
        gateway = FakePaymentGateway()
        _setup(gateway).handle([CheckoutItemSpec("harness", 3, size="m", dog_name="Rex")])
        (item,) = gateway.calls[0]
        assert item["quantity"] == 3
        assert item["price_data"]["unit_amount"] == 1250
        assert item["price_data"]["currency"] == "usd"
        assert item["price_data"]["product_data"]["name"] == "Trail Harness"
        assert item["price_data"]["product_data"]["metadata"] == {"size": "m", "dogName": "Rex"}

    def test_no_metadata_without_options(self):
        gateway = FakePaymentGateway()
        _setup(gateway).handle([CheckoutItemSpec("rope")])
        assert "metadata" not in gateway.calls[0][0]["price_data"]["product_data"]

    def test_unconfigured(self):
        with pytest.raises(UpstreamUnconfiguredError, match="Stripe is not configured yet."):
            _setup(None).handle([CheckoutItemSpec("rope")])

    def test_empty(self):
        with pytest.raises(ValidationError, match="empty"):
            _setup(FakePaymentGateway()).handle([])

    def test_unknown_product(self):
        gateway = FakePaymentGateway()
        with pytest.raises(EntityNotFoundError):
            _setup(gateway).handle([CheckoutItemSpec("ghost")])
        assert gateway.calls == []


class TestCheckoutItems:

    def test_from_cart(self):
        cart = Cart([CartLine("collar", 2, dog_name="Rex")])
        assert checkout_items_from_cart(cart) == [CheckoutItemSpec("collar", 2, dog_name="Rex")]

    def test_from_payload(self):
        specs = checkout_items_from_payload(
            {"items": [{"id": "rope", "quantity": 2}, {"id": "collar", "dogName": "Rex"}]}
        )
        assert specs == [
            CheckoutItemSpec("rope", 2),
            CheckoutItemSpec("collar", 1, dog_name="Rex"),
        ]

    @pytest.mark.parametrize("quantity", [0, -2, "3", True])
    def test_bad_quantity_counts_as_one(self, quantity):
        (spec,) = checkout_items_from_payload({"items": [{"id": "rope", "quantity": quantity}]})
        assert spec.quantity == 1

    @pytest.mark.parametrize("payload", [{}, {"items": "rope"}, [], None])
    def test_items_array_required(self, payload):
        with pytest.raises(ValidationError, match="'items' array"):
            checkout_items_from_payload(payload)
