"""Cart line identity."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CartItemKey:
    """
    Composite key of a cart line: product id plus optional variant id.

    Compared field by field, so ids containing separators cannot collide the
    way joined strings would. Only used for equality and lookup.
    """
    product_id: str
    variant_id: Optional[str] = None


def identity_of(product_id: str, variant_id: Optional[str] = None) -> CartItemKey:
    """Key for a (product, variant) selection; variant_id None means the base product."""
    return CartItemKey(
        product_id=str(product_id),
        variant_id=str(variant_id) if variant_id is not None else None,
    )
