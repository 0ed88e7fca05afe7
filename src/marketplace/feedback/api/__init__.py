"""Feedback API package."""

from marketplace.feedback.api.routes import comment_router, vendor_router

__all__ = ["comment_router", "vendor_router"]
