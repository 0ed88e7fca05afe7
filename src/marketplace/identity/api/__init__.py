"""Identity API package."""

from marketplace.identity.api.routes import admin_router, customer_router, user_router

__all__ = ["user_router", "admin_router", "customer_router"]
