"""Tests for the Stripe gateway, with the Stripe API call patched out."""

from types import SimpleNamespace

import stripe

from storefront.infrastructure.payments.stripe_gateway import StripeCheckoutGateway


def test_creates_payment_session(monkeypatch):
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(id="cs_test_1", url="https://checkout.stripe.com/c/cs_test_1")

    monkeypatch.setattr(stripe.checkout.Session, "create", fake_create)
    gateway = StripeCheckoutGateway("sk_test_x", "https://shop/ok", "https://shop/cancel")
    items = [{"price_data": {"currency": "usd", "unit_amount": 999}, "quantity": 1}]

    url = gateway.create_checkout_session(items)

    assert url == "https://checkout.stripe.com/c/cs_test_1"
    assert calls == [
        {
            "api_key": "sk_test_x",
            "mode": "payment",
            "line_items": items,
            "success_url": "https://shop/ok",
            "cancel_url": "https://shop/cancel",
        }
    ]
