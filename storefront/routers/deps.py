"""
Shared Dependencies for Routers

Lazy-loaded singletons so importing the app does not open a database client.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from storefront.cart import CartRegistry, CartStore
from storefront.catalog import CatalogStore
from storefront.checkout import CheckoutService
from storefront.errors import ERROR_SESSION_REQUIRED


# ==================== LAZY SINGLETONS ====================

_catalog_store: Optional[CatalogStore] = None
_cart_registry: Optional[CartRegistry] = None


async def get_catalog_store() -> CatalogStore:
    """Get or create CatalogStore singleton (lazy loaded)"""
    global _catalog_store
    if _catalog_store is None:
        from storefront.db import get_supabase
        _catalog_store = CatalogStore(await get_supabase())
    return _catalog_store


def get_cart_registry() -> CartRegistry:
    """Get or create the process-wide CartRegistry"""
    global _cart_registry
    if _cart_registry is None:
        _cart_registry = CartRegistry()
    return _cart_registry


# ==================== PER-REQUEST ====================

def get_cart(
    x_cart_session: Optional[str] = Header(None),
    registry: CartRegistry = Depends(get_cart_registry),
) -> CartStore:
    """Cart of the session named by the X-Cart-Session header"""
    if not x_cart_session or not x_cart_session.strip():
        raise HTTPException(status_code=400, detail=ERROR_SESSION_REQUIRED)
    return registry.get(x_cart_session.strip())


def get_checkout_service(catalog: CatalogStore = Depends(get_catalog_store)) -> CheckoutService:
    return CheckoutService(catalog)
