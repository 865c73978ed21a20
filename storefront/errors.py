"""
Storefront errors.

Message constants shared by the routers, plus the typed errors the cart and
checkout raise. Every error here is local and recoverable: the caller reports
it and the cart is left as it was.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Request errors
ERROR_SESSION_REQUIRED = "X-Cart-Session header is required"


class StorefrontError(Exception):
    """Base error for cart and checkout failures."""

    status_code = 422

    def __init__(self, message: str, code: str | None = None, retryable: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable


class VariantRequired(StorefrontError):
    """A product with variants was added or priced without a selection."""

    def __init__(self, product_id: str) -> None:
        super().__init__(
            f"Product {product_id} requires a variant selection",
            code="VARIANT_REQUIRED",
        )
        self.product_id = product_id


class UnknownVariant(StorefrontError):
    """The selected variant id does not belong to the product."""

    def __init__(self, product_id: str, variant_id: str) -> None:
        super().__init__(
            f"Variant {variant_id} does not belong to product {product_id}",
            code="UNKNOWN_VARIANT",
        )
        self.product_id = product_id
        self.variant_id = variant_id


class MissingRecipient(StorefrontError):
    """Store settings have no usable contact number for the order message."""

    def __init__(self, message: str = "Store has no contact number configured") -> None:
        super().__init__(message, code="MISSING_RECIPIENT")


class SettingsFetchFailed(StorefrontError):
    """Reading store settings from the catalog failed."""

    status_code = 503

    def __init__(self, message: str = "Could not load store settings") -> None:
        super().__init__(message, code="SETTINGS_FETCH_FAILED", retryable=True)


class EmptyCart(StorefrontError):
    """Checkout was requested for a cart with no lines."""

    def __init__(self, message: str = "Cart is empty") -> None:
        super().__init__(message, code="EMPTY_CART")
