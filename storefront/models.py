"""Catalog Models - Pydantic models for catalog rows."""
from decimal import Decimal
from typing import Optional, List

from pydantic import BaseModel, field_validator

from storefront.services.money import to_decimal as _to_decimal


def _to_str(v):
    # Supabase returns bigint ids as ints
    return str(v) if v is not None else v


class ProductVariant(BaseModel):
    """A named, priced option of a product (usually a size)."""
    id: str
    name: str
    price: Decimal
    description: Optional[str] = None

    class Config:
        extra = "ignore"

    @field_validator("id", mode="before")
    @classmethod
    def convert_id(cls, v):
        return _to_str(v)

    @field_validator("price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)


class Product(BaseModel):
    """Product model."""
    id: str
    category_id: Optional[str] = None
    name: str
    price: Decimal
    description: str = ""
    image_url: Optional[str] = None
    gallery: List[str] = []
    size: Optional[str] = None
    variants: List[ProductVariant] = []

    class Config:
        extra = "ignore"

    @field_validator("id", "category_id", mode="before")
    @classmethod
    def convert_id(cls, v):
        return _to_str(v)

    @field_validator("price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v):
        return v or ""

    @field_validator("gallery", "variants", mode="before")
    @classmethod
    def default_list(cls, v):
        return v or []

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    def find_variant(self, variant_id: Optional[str]) -> Optional[ProductVariant]:
        """Return the variant with this id, or None."""
        if variant_id is None:
            return None
        return next((v for v in self.variants if v.id == str(variant_id)), None)


class Category(BaseModel):
    """Category model."""
    id: str
    name: str
    image_url: Optional[str] = None

    class Config:
        extra = "ignore"

    @field_validator("id", mode="before")
    @classmethod
    def convert_id(cls, v):
        return _to_str(v)


class StoreSettings(BaseModel):
    """
    Store-wide settings (single row).

    The admin password column is deliberately not part of the model so it
    never leaves the catalog layer.
    """
    store_name: Optional[str] = None
    whatsapp_number: Optional[str] = None
    banner_url: Optional[str] = None
    banner_link: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[str] = "#000000"
    secondary_color: Optional[str] = "#ffffff"

    class Config:
        extra = "ignore"

    @field_validator("whatsapp_number", mode="before")
    @classmethod
    def convert_contact(cls, v):
        # Numeric column types come back as int
        return _to_str(v)

    @property
    def contact_identifier(self) -> Optional[str]:
        """Recipient used by the messaging channel."""
        return self.whatsapp_number
