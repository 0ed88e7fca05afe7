"""Runtime settings for the marketplace.

Settings are read from ``MARKETPLACE_*`` environment variables once and then
shared process-wide. Collaborators (mailer, token service, fulfillment,
image storage) take the relevant section at construction time; nothing is
hard coded in them.

Tests swap settings with ``set_settings()`` and restore defaults with
``reset_settings()``.
"""

import os
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, Field


class DispatchPolicy(Enum):
    """When a vendor acceptance flips an order to Dispatched.

    ALL_ITEMS waits until every line in the cart is accepted, whichever vendor
    owns it. VENDOR_ITEMS dispatches as soon as the calling vendor's own lines
    are accepted.
    """

    ALL_ITEMS = "all_items"
    VENDOR_ITEMS = "vendor_items"


class MailSettings(BaseModel):
    host: str | None = None
    port: int = 587
    username: str | None = None
    password: str | None = None
    sender: str = "no-reply@marketplace.local"
    use_tls: bool = True
    timeout: float = Field(default=10.0, gt=0)


class AuthSettings(BaseModel):
    secret_key: str = "marketplace-development-secret-key-change-me"
    algorithm: str = "HS256"
    token_ttl_minutes: int = Field(default=60, gt=0)
    password_iterations: int = Field(default=260_000, ge=1)


class FulfillmentSettings(BaseModel):
    dispatch_policy: DispatchPolicy = DispatchPolicy.ALL_ITEMS
    max_accept_attempts: int = Field(default=3, ge=1)


class InventorySettings(BaseModel):
    low_stock_threshold: int = Field(default=10, ge=0)


class StorageSettings(BaseModel):
    upload_dir: str = "uploads"
    public_prefix: str = "/uploads"


class Settings(BaseModel):
    mail: MailSettings = Field(default_factory=MailSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    fulfillment: FulfillmentSettings = Field(default_factory=FulfillmentSettings)
    inventory: InventorySettings = Field(default_factory=InventorySettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


# Environment variable -> (section, field)
_ENV_MAP = {
    "MARKETPLACE_SMTP_HOST": ("mail", "host"),
    "MARKETPLACE_SMTP_PORT": ("mail", "port"),
    "MARKETPLACE_SMTP_USERNAME": ("mail", "username"),
    "MARKETPLACE_SMTP_PASSWORD": ("mail", "password"),
    "MARKETPLACE_SMTP_SENDER": ("mail", "sender"),
    "MARKETPLACE_SMTP_USE_TLS": ("mail", "use_tls"),
    "MARKETPLACE_SMTP_TIMEOUT": ("mail", "timeout"),
    "MARKETPLACE_JWT_SECRET": ("auth", "secret_key"),
    "MARKETPLACE_JWT_ALGORITHM": ("auth", "algorithm"),
    "MARKETPLACE_JWT_TTL_MINUTES": ("auth", "token_ttl_minutes"),
    "MARKETPLACE_PASSWORD_ITERATIONS": ("auth", "password_iterations"),
    "MARKETPLACE_DISPATCH_POLICY": ("fulfillment", "dispatch_policy"),
    "MARKETPLACE_MAX_ACCEPT_ATTEMPTS": ("fulfillment", "max_accept_attempts"),
    "MARKETPLACE_LOW_STOCK_THRESHOLD": ("inventory", "low_stock_threshold"),
    "MARKETPLACE_UPLOAD_DIR": ("storage", "upload_dir"),
    "MARKETPLACE_UPLOAD_PUBLIC_PREFIX": ("storage", "public_prefix"),
}


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    environ = os.environ if environ is None else environ

    sections: dict[str, dict] = {}
    for variable, (section, field) in _ENV_MAP.items():
        value = environ.get(variable)
        if value is not None and value != "":
            sections.setdefault(section, {})[field] = value

    return Settings.model_validate(sections)


_current_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment on first use."""
    global _current_settings
    if _current_settings is None:
        _current_settings = load_settings()
    return _current_settings


def set_settings(settings: Settings) -> None:
    """Override the active settings (useful for tests)."""
    global _current_settings
    _current_settings = settings


def reset_settings() -> None:
    """Drop overrides so the next access reloads from the environment."""
    global _current_settings
    _current_settings = None
