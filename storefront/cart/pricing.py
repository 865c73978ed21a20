"""Effective price, size and description of a product selection."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from storefront.config import DEFAULT_SIZE_LABEL
from storefront.errors import VariantRequired
from storefront.models import Product, ProductVariant


@dataclass(frozen=True)
class ResolvedPrice:
    unit_price: Decimal
    size_label: str
    description: str


def resolve_price(product: Product, variant: Optional[ProductVariant] = None) -> ResolvedPrice:
    """
    Resolve what one unit of a selection costs and how it is labelled.

    A selected variant always wins over the product's base price and size.
    The caller guarantees the variant belongs to the product.

    Raises:
        VariantRequired: the product has variants and none was selected
    """
    if variant is not None:
        return ResolvedPrice(
            unit_price=variant.price,
            size_label=variant.name,
            description=variant.description or product.description,
        )

    if product.has_variants:
        raise VariantRequired(product.id)

    return ResolvedPrice(
        unit_price=product.price,
        size_label=(product.size or "").strip() or DEFAULT_SIZE_LABEL,
        description=product.description,
    )
