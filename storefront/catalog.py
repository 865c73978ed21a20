"""Catalog Store - read access to products, categories and store settings."""
from typing import List, Optional

from supabase._async.client import AsyncClient

from storefront.config import SETTINGS_ROW_ID
from storefront.logging import get_logger
from storefront.models import Category, Product, StoreSettings

logger = get_logger(__name__)

DEFAULT_SETTINGS = StoreSettings(store_name="Minha Loja", whatsapp_number="")


class CatalogStore:
    """
    Catalog reads against Supabase.

    Query errors propagate to the caller; checkout turns them into
    SettingsFetchFailed.
    """

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def get_settings(self) -> StoreSettings:
        """Get the store settings row, or defaults when it was never saved."""
        result = await (
            self.client.table("store_settings")
            .select("*")
            .eq("id", SETTINGS_ROW_ID)
            .limit(1)
            .execute()
        )
        if not result.data:
            logger.warning("store_settings row missing, using defaults")
            return DEFAULT_SETTINGS
        return StoreSettings(**result.data[0])

    async def get_products(self, category_id: Optional[str] = None) -> List[Product]:
        """Get all products, newest first, optionally within one category."""
        query = self.client.table("products").select("*")
        if category_id is not None:
            query = query.eq("category_id", category_id)
        result = await query.order("created_at", desc=True).execute()
        return [Product(**row) for row in result.data or []]

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table("products").select("*").eq("id", product_id).limit(1).execute()
        if not result.data:
            return None
        return Product(**result.data[0])

    async def get_categories(self) -> List[Category]:
        result = await self.client.table("categories").select("*").order("id").execute()
        return [Category(**row) for row in result.data or []]
