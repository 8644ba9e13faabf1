"""Stripe Checkout implementation of PaymentGateway."""

from __future__ import annotations

import logging
from typing import Any

import stripe

from storefront.application.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class StripeCheckoutGateway(PaymentGateway):

    def __init__(self, api_key: str, success_url: str, cancel_url: str) -> None:
        self._api_key = api_key
        self._success_url = success_url
        self._cancel_url = cancel_url

    def create_checkout_session(self, line_items: list[dict[str, Any]]) -> str:
        session = stripe.checkout.Session.create(
            api_key=self._api_key,
            mode="payment",
            line_items=line_items,
            success_url=self._success_url,
            cancel_url=self._cancel_url,
        )
        logger.info("Created checkout session %s (%d items)", session.id, len(line_items))
        return session.url
