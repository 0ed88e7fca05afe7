"""Notifications API package."""

from marketplace.notifications.api.routes import email_router

__all__ = ["email_router"]
