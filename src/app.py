"""Marketplace FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request under a domain route runs inside the marketplace domain
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV picks the config overlay ("test", "production").
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from marketplace.domain import marketplace
from marketplace.utils.logging import bind_request, clear_request

marketplace.init()

_PASSTHROUGH_PREFIXES = ("/health", "/docs", "/redoc", "/openapi.json")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Marketplace API",
    description="Multi-vendor marketplace: catalogue, carts, orders and fulfillment",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the marketplace domain context for each API request."""
    if request.url.path.startswith(_PASSTHROUGH_PREFIXES):
        return await call_next(request)
    bind_request(method=request.method, path=request.url.path)
    try:
        with marketplace.domain_context():
            return await call_next(request)
    finally:
        clear_request()


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from marketplace.api.errors import register_exception_handlers  # noqa: E402
from marketplace.catalogue.api import category_router, product_router  # noqa: E402
from marketplace.feedback.api import comment_router, vendor_router  # noqa: E402
from marketplace.identity.api import admin_router, customer_router, user_router  # noqa: E402
from marketplace.inventory.api import inventory_router  # noqa: E402
from marketplace.notifications.api import email_router  # noqa: E402
from marketplace.ordering.api import cart_router, order_router  # noqa: E402

for router in (
    user_router,
    admin_router,
    customer_router,
    product_router,
    category_router,
    inventory_router,
    cart_router,
    order_router,
    comment_router,
    vendor_router,
    email_router,
):
    app.include_router(router)

register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": marketplace.name})
