"""
Cart API Router

Session cart operations and checkout. The cart lives in memory for the
session named by the X-Cart-Session header.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.cart import CartStore, identity_of
from storefront.catalog import CatalogStore
from storefront.checkout import CheckoutService
from storefront.errors import ERROR_PRODUCT_NOT_FOUND, UnknownVariant
from .deps import get_cart, get_catalog_store, get_checkout_service

router = APIRouter(prefix="/api/cart", tags=["cart"])


# ==================== PYDANTIC MODELS ====================

class AddItemRequest(BaseModel):
    product_id: str
    variant_id: Optional[str] = None


class AdjustQuantityRequest(BaseModel):
    product_id: str
    variant_id: Optional[str] = None
    delta: int


# ==================== CART ====================

@router.get("")
async def get_cart_snapshot(cart: CartStore = Depends(get_cart)):
    return cart.snapshot().to_dict()


@router.post("/items")
async def add_item(
    request: AddItemRequest,
    cart: CartStore = Depends(get_cart),
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """Add one unit of a product (variant required for variant products)"""
    product = await catalog.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    variant = None
    if request.variant_id is not None:
        variant = product.find_variant(request.variant_id)
        if variant is None:
            raise UnknownVariant(product.id, request.variant_id)

    event = cart.add_item(product, variant)
    return {
        "added": {
            "product_id": event.key.product_id,
            "variant_id": event.key.variant_id,
            "quantity": event.quantity,
        },
        "cart": cart.snapshot().to_dict(),
    }


@router.patch("/items")
async def adjust_quantity(request: AdjustQuantityRequest, cart: CartStore = Depends(get_cart)):
    """Change a line's quantity; dropping below 1 removes it"""
    cart.adjust_quantity(identity_of(request.product_id, request.variant_id), request.delta)
    return cart.snapshot().to_dict()


@router.delete("/items")
async def remove_item(
    product_id: str,
    variant_id: Optional[str] = None,
    cart: CartStore = Depends(get_cart),
):
    cart.remove_item(identity_of(product_id, variant_id))
    return cart.snapshot().to_dict()


@router.delete("")
async def clear_cart(cart: CartStore = Depends(get_cart)):
    cart.clear()
    return cart.snapshot().to_dict()


# ==================== CHECKOUT ====================

@router.post("/checkout")
async def checkout(
    cart: CartStore = Depends(get_cart),
    service: CheckoutService = Depends(get_checkout_service),
):
    """Build the order message and channel link; the client opens the link"""
    message = await service.checkout(cart)
    return {"text": message.text, "uri": message.uri, "recipient": message.recipient}
