"""Cart package: identity, pricing, models, and the in-memory store."""
from .identity import CartItemKey, identity_of
from .pricing import ResolvedPrice, resolve_price
from .models import CartLine, CartSnapshot, CartEvent
from .service import CartStore, CartRegistry

__all__ = [
    "CartItemKey",
    "identity_of",
    "ResolvedPrice",
    "resolve_price",
    "CartLine",
    "CartSnapshot",
    "CartEvent",
    "CartStore",
    "CartRegistry",
]
