"""
Storefront configuration read from the environment.

Values are resolved once at import, like the database credentials in
storefront.db. Tests override them by passing explicit arguments to the
classes that consume them.
"""

import os

STORE_CURRENCY = os.environ.get("STORE_CURRENCY", "BRL").upper()

# {recipient} is the digits-only contact, {text} the percent-encoded order text
MESSAGING_URI_TEMPLATE = os.environ.get(
    "MESSAGING_URI_TEMPLATE", "https://wa.me/{recipient}?text={text}"
)

DEFAULT_STORE_NAME = os.environ.get("DEFAULT_STORE_NAME", "Loja")

# Label shown for products that carry neither a size nor variants
DEFAULT_SIZE_LABEL = "Único"

# Catalog keeps exactly one settings row
SETTINGS_ROW_ID = 1

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Abandoned carts expire like the old Redis carts did (24 hours)
CART_TTL_SECONDS = int(os.environ.get("CART_TTL_SECONDS", "86400"))

# Upper bound on live session carts; the least recently used one is dropped first
CART_MAX_SESSIONS = int(os.environ.get("CART_MAX_SESSIONS", "10000"))
