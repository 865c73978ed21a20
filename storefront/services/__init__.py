"""Storefront services: money arithmetic and currency display."""
