"""
Storefront Core

Single-tenant storefront: catalog reads, an in-memory shopping cart and a
checkout that hands the order to a chat app instead of a payment processor.

- cart: line identity, pricing, cart store
- checkout: order message and channel link
- catalog: Supabase-backed catalog store
- services: money and currency display
- routers: FastAPI endpoints
"""
