"""Port for the hosted payment page provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PaymentGateway(ABC):

    @abstractmethod
    def create_checkout_session(self, line_items: list[dict[str, Any]]) -> str:
        """Open a hosted checkout for *line_items* and return its URL."""
