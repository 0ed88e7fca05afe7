"""Pydantic request/response schemas for the Ordering API.

These are external contracts, kept separate from the Protean commands.
Quantities are not range-checked here: the commands reject non-positive
values so the client gets a 400 with the domain's message.
"""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    user_id: str


class AddCartItemRequest(BaseModel):
    product_id: str
    product_name: str | None = None
    quantity: int = 1
    price: float = 0.0
    image_path: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "65f1c0ffee0000000000abcd",
                    "product_name": "Ceramic Mug",
                    "quantity": 2,
                    "price": 12.5,
                }
            ]
        }
    }


class UpdateCartItemQuantityRequest(BaseModel):
    quantity: int


class UpdateCartStatusRequest(BaseModel):
    is_active: bool


# ---------------------------------------------------------------------------
# Cart Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class CartItemIdResponse(BaseModel):
    item_id: str


class CartChangeResponse(BaseModel):
    """``applied`` is False when the cart or line did not exist."""

    status: str = "ok"
    applied: bool


class CartItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: str | None = None
    quantity: int
    price: float
    image_path: str | None = None
    status: str


class CartResponse(BaseModel):
    id: str
    user_id: str
    is_active: bool
    items: list[CartItemResponse]
    total_price: float


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    customer_id: str
    cart_id: str
    total_price: float = 0.0
    shipping_address: str | None = None
    payment_status: str = "Pending"
    notes: str | None = None
    order_date: datetime | None = None


class UpdateOrderRequest(BaseModel):
    customer_id: str
    cart_id: str
    total_price: float = 0.0
    shipping_address: str | None = None
    status: str | None = None
    payment_status: str | None = None
    notes: str | None = None
    order_date: datetime | None = None


class UpsertOrderRequest(UpdateOrderRequest):
    order_id: str | None = None


# ---------------------------------------------------------------------------
# Order Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    cart_id: str
    total_price: float
    shipping_address: str | None = None
    order_date: datetime | None = None
    status: str
    payment_status: str | None = None
    notes: str | None = None


class VendorProductSchema(BaseModel):
    id: str
    name: str
    price: float
    vendor_id: str
    image_path: str | None = None


class VendorLineItemResponse(BaseModel):
    item_id: str
    product: VendorProductSchema
    quantity: int
    status: str


class AcceptanceResponse(BaseModel):
    all_accepted: bool
