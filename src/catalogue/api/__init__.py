"""Catalogue domain API package."""

from catalogue.api.errors import register_exception_handlers
from catalogue.api.routes import category_router, product_router

__all__ = ["product_router", "category_router", "register_exception_handlers"]
