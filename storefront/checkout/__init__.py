"""Checkout package: order message rendering and hand-off."""
from .message import OrderMessage, OrderMessageBuilder, normalize_recipient
from .service import CheckoutService, MessagingChannel

__all__ = [
    "OrderMessage",
    "OrderMessageBuilder",
    "normalize_recipient",
    "CheckoutService",
    "MessagingChannel",
]
