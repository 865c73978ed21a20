"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from storefront.models import Product, ProductVariant
from storefront.services.money import to_float, multiply
from .identity import CartItemKey, identity_of
from .pricing import ResolvedPrice, resolve_price


@dataclass
class CartLine:
    """N units of a product, priced by its variant when one is selected."""
    product: Product
    quantity: int
    variant: Optional[ProductVariant] = None

    @property
    def key(self) -> CartItemKey:
        return identity_of(self.product.id, self.variant.id if self.variant else None)

    @property
    def pricing(self) -> ResolvedPrice:
        return resolve_price(self.product, self.variant)

    @property
    def unit_price(self) -> Decimal:
        return self.pricing.unit_price

    @property
    def size_label(self) -> str:
        return self.pricing.size_label

    @property
    def explicit_size(self) -> Optional[str]:
        """Size set on a variant-less product, if any. The default label does not count."""
        if self.variant is not None:
            return None
        return (self.product.size or "").strip() or None

    @property
    def total_price(self) -> Decimal:
        """Unrounded unit price times quantity."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "product_id": self.product.id,
            "variant_id": self.variant.id if self.variant else None,
            "product_name": self.product.name,
            "variant_name": self.variant.name if self.variant else None,
            "size": self.size_label,
            "description": self.pricing.description,
            "image_url": self.product.image_url,
            "quantity": self.quantity,
            "unit_price": to_float(self.unit_price),
            "total_price": to_float(self.total_price),
        }


@dataclass(frozen=True)
class CartSnapshot:
    """Lines and totals captured from one cart state."""
    lines: Tuple[CartLine, ...]
    total_price: Decimal
    total_items: int

    @classmethod
    def of(cls, lines) -> "CartSnapshot":
        """Freeze a line sequence, computing totals from exactly those lines."""
        frozen = tuple(
            CartLine(product=line.product, quantity=line.quantity, variant=line.variant)
            for line in lines
        )
        return cls(
            lines=frozen,
            total_price=sum((line.total_price for line in frozen), Decimal("0")),
            total_items=sum(line.quantity for line in frozen),
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict:
        return {
            "items": [line.to_dict() for line in self.lines],
            "total_items": self.total_items,
            "total_price": to_float(self.total_price),
            "is_empty": self.is_empty,
        }


ITEM_ADDED = "item_added"
ITEM_REMOVED = "item_removed"
QUANTITY_CHANGED = "quantity_changed"
CLEARED = "cleared"


@dataclass(frozen=True)
class CartEvent:
    """State change published by a CartStore."""
    kind: str
    key: Optional[CartItemKey] = None
    quantity: int = 0
