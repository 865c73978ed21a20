"""
Catalog API Router

Public read-only endpoints for products, categories and store theme.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.catalog import CatalogStore
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.models import Product
from storefront.services.money import to_float
from .deps import get_catalog_store

router = APIRouter(tags=["catalog"])


def product_payload(product: Product) -> dict:
    return {
        "id": product.id,
        "category_id": product.category_id,
        "name": product.name,
        "description": product.description,
        "price": to_float(product.price),
        "size": product.size,
        "image_url": product.image_url,
        "gallery": product.gallery,
        "variants": [
            {
                "id": v.id,
                "name": v.name,
                "price": to_float(v.price),
                "description": v.description,
            }
            for v in product.variants
        ],
    }


@router.get("/api/products")
async def get_products(
    category_id: Optional[str] = None,
    catalog: CatalogStore = Depends(get_catalog_store),
):
    """Get all products, optionally filtered by category"""
    products = await catalog.get_products(category_id=category_id)
    return [product_payload(p) for p in products]


@router.get("/api/products/{product_id}")
async def get_product(product_id: str, catalog: CatalogStore = Depends(get_catalog_store)):
    """Get product by ID"""
    product = await catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product_payload(product)


@router.get("/api/categories")
async def get_categories(catalog: CatalogStore = Depends(get_catalog_store)):
    categories = await catalog.get_categories()
    return [c.model_dump() for c in categories]


@router.get("/api/settings")
async def get_settings(catalog: CatalogStore = Depends(get_catalog_store)):
    """Store name, assets and colors for the storefront theme"""
    settings = await catalog.get_settings()
    return settings.model_dump(exclude={"whatsapp_number"})
