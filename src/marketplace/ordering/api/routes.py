"""FastAPI routes for Ordering: carts, orders and vendor acceptance."""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.api.schemas import StatusResponse
from marketplace.ordering.api.schemas import (
    AcceptanceResponse,
    AddCartItemRequest,
    CartChangeResponse,
    CartIdResponse,
    CartItemIdResponse,
    CartItemResponse,
    CartResponse,
    CreateCartRequest,
    CreateOrderRequest,
    OrderIdResponse,
    OrderResponse,
    UpdateCartItemQuantityRequest,
    UpdateCartStatusRequest,
    UpdateOrderRequest,
    UpsertOrderRequest,
    VendorLineItemResponse,
    VendorProductSchema,
)
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.cart.items import RemoveCartItem, UpdateCartItemQuantity, add_item_to_cart
from marketplace.ordering.cart.management import ClearCart, DeleteCart, open_cart, set_cart_status
from marketplace.ordering.order.cancellation import CancelOrder
from marketplace.ordering.order.creation import CreateOrder, UpsertOrder
from marketplace.ordering.order.fulfillment import accept_vendor_line_items
from marketplace.ordering.order.modification import DeleteOrder, UpdateOrder
from marketplace.ordering.order.order import Order
from marketplace.ordering.order.queries import (
    get_vendor_line_items,
    list_orders,
    orders_for_customer,
    orders_for_vendor,
)
from marketplace.shared.ids import ensure_object_id


def _cart_response(cart) -> CartResponse:
    return CartResponse(
        id=str(cart.id),
        user_id=str(cart.user_id),
        is_active=cart.is_active,
        items=[
            CartItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                product_name=item.product_name,
                quantity=item.quantity,
                price=item.price or 0.0,
                image_path=item.image_path,
                status=item.status,
            )
            for item in cart.items
        ],
        total_price=cart.total_price,
    )


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        customer_id=str(order.customer_id),
        cart_id=str(order.cart_id),
        total_price=order.total_price or 0.0,
        shipping_address=order.shipping_address,
        order_date=order.order_date,
        status=order.status,
        payment_status=order.payment_status,
        notes=order.notes,
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    ensure_object_id(body.user_id, "user_id")
    return CartIdResponse(cart_id=open_cart(body.user_id))


# -- addressed by cart id ---------------------------------------------------
@cart_router.get("/cart/{cart_id}", response_model=CartResponse)
async def get_cart_by_id(cart_id: str) -> CartResponse:
    ensure_object_id(cart_id, "cart_id")
    return _cart_response(current_domain.repository_for(Cart).get(cart_id))


@cart_router.patch("/cart/{cart_id}/status", response_model=StatusResponse)
async def update_cart_status(cart_id: str, body: UpdateCartStatusRequest) -> StatusResponse:
    ensure_object_id(cart_id, "cart_id")
    set_cart_status(cart_id, body.is_active)
    return StatusResponse()


@cart_router.put("/cart/{cart_id}/items/{item_id}", response_model=CartChangeResponse)
async def update_item_quantity_by_cart(
    cart_id: str, item_id: str, body: UpdateCartItemQuantityRequest
) -> CartChangeResponse:
    ensure_object_id(cart_id, "cart_id")
    command = UpdateCartItemQuantity(cart_id=cart_id, item_id=item_id, quantity=body.quantity)
    return CartChangeResponse(applied=current_domain.process(command, asynchronous=False))


@cart_router.delete("/cart/{cart_id}/items/{item_id}", response_model=CartChangeResponse)
async def remove_item_by_cart(cart_id: str, item_id: str) -> CartChangeResponse:
    ensure_object_id(cart_id, "cart_id")
    command = RemoveCartItem(cart_id=cart_id, item_id=item_id)
    return CartChangeResponse(applied=current_domain.process(command, asynchronous=False))


@cart_router.delete("/cart/{cart_id}/items", response_model=CartChangeResponse)
async def clear_cart_by_id(cart_id: str) -> CartChangeResponse:
    ensure_object_id(cart_id, "cart_id")
    return CartChangeResponse(applied=current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False))


@cart_router.delete("/cart/{cart_id}", response_model=CartChangeResponse)
async def delete_cart_by_id(cart_id: str) -> CartChangeResponse:
    ensure_object_id(cart_id, "cart_id")
    return CartChangeResponse(applied=current_domain.process(DeleteCart(cart_id=cart_id), asynchronous=False))


# -- addressed by user id (the user's active cart) ---------------------------
@cart_router.get("/{user_id}", response_model=CartResponse)
async def get_active_cart(user_id: str) -> CartResponse:
    ensure_object_id(user_id, "user_id")
    cart = current_domain.repository_for(Cart).active_for_user(user_id)
    if cart is None:
        raise ObjectNotFoundError({"_entity": f"User {user_id} has no active cart"})
    return _cart_response(cart)


@cart_router.post("/{user_id}/items", response_model=CartItemIdResponse)
async def add_cart_item(user_id: str, body: AddCartItemRequest) -> CartItemIdResponse:
    ensure_object_id(user_id, "user_id")
    ensure_object_id(body.product_id, "product_id")
    item_id = add_item_to_cart(
        user_id=user_id,
        product_id=body.product_id,
        quantity=body.quantity,
        product_name=body.product_name,
        price=body.price,
        image_path=body.image_path,
    )
    return CartItemIdResponse(item_id=item_id)


@cart_router.put("/{user_id}/items/{item_id}", response_model=CartChangeResponse)
async def update_item_quantity(user_id: str, item_id: str, body: UpdateCartItemQuantityRequest) -> CartChangeResponse:
    ensure_object_id(user_id, "user_id")
    command = UpdateCartItemQuantity(user_id=user_id, item_id=item_id, quantity=body.quantity)
    return CartChangeResponse(applied=current_domain.process(command, asynchronous=False))


@cart_router.delete("/{user_id}/items/{item_id}", response_model=CartChangeResponse)
async def remove_item(user_id: str, item_id: str) -> CartChangeResponse:
    ensure_object_id(user_id, "user_id")
    command = RemoveCartItem(user_id=user_id, item_id=item_id)
    return CartChangeResponse(applied=current_domain.process(command, asynchronous=False))


@cart_router.delete("/{user_id}/items", response_model=CartChangeResponse)
async def clear_active_cart(user_id: str) -> CartChangeResponse:
    ensure_object_id(user_id, "user_id")
    return CartChangeResponse(applied=current_domain.process(ClearCart(user_id=user_id), asynchronous=False))


@cart_router.delete("/{user_id}", response_model=CartChangeResponse)
async def delete_active_cart(user_id: str) -> CartChangeResponse:
    ensure_object_id(user_id, "user_id")
    return CartChangeResponse(applied=current_domain.process(DeleteCart(user_id=user_id), asynchronous=False))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def get_orders() -> list[OrderResponse]:
    return [_order_response(o) for o in list_orders()]


@order_router.get("/customer/{customer_id}", response_model=list[OrderResponse])
async def get_customer_orders(customer_id: str) -> list[OrderResponse]:
    return [_order_response(o) for o in orders_for_customer(customer_id)]


@order_router.get("/vendor/{vendor_email}", response_model=list[OrderResponse])
async def get_vendor_orders(vendor_email: str) -> list[OrderResponse]:
    return [_order_response(o) for o in orders_for_vendor(vendor_email)]


@order_router.get("/vendor/{vendor_email}/order/{order_id}/products", response_model=list[VendorLineItemResponse])
async def get_vendor_order_products(vendor_email: str, order_id: str) -> list[VendorLineItemResponse]:
    ensure_object_id(order_id, "order_id")
    return [
        VendorLineItemResponse(
            item_id=line.item_id,
            product=VendorProductSchema(
                id=str(line.product.id),
                name=line.product.name,
                price=line.product.price,
                vendor_id=line.product.vendor_id,
                image_path=line.product.image_path,
            ),
            quantity=line.quantity,
            status=line.status,
        )
        for line in get_vendor_line_items(vendor_email, order_id)
    ]


@order_router.post("/vendor/{vendor_email}/order/{order_id}/accept", response_model=AcceptanceResponse)
async def accept_vendor_order_products(vendor_email: str, order_id: str) -> AcceptanceResponse:
    ensure_object_id(order_id, "order_id")
    return AcceptanceResponse(all_accepted=accept_vendor_line_items(vendor_email, order_id))


@order_router.put("/cancel/{order_id}", response_model=StatusResponse)
async def cancel_order(order_id: str) -> StatusResponse:
    ensure_object_id(order_id, "order_id")
    current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest) -> OrderIdResponse:
    ensure_object_id(body.cart_id, "cart_id")
    command = CreateOrder(
        customer_id=body.customer_id,
        cart_id=body.cart_id,
        total_price=body.total_price,
        shipping_address=body.shipping_address,
        payment_status=body.payment_status,
        notes=body.notes,
        order_date=body.order_date,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.post("/upsert", response_model=OrderIdResponse)
async def upsert_order(body: UpsertOrderRequest) -> OrderIdResponse:
    if body.order_id:
        ensure_object_id(body.order_id, "order_id")
    command = UpsertOrder(
        order_id=body.order_id,
        customer_id=body.customer_id,
        cart_id=body.cart_id,
        total_price=body.total_price,
        shipping_address=body.shipping_address,
        status=body.status,
        payment_status=body.payment_status,
        notes=body.notes,
        order_date=body.order_date,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    ensure_object_id(order_id, "order_id")
    return _order_response(current_domain.repository_for(Order).get(order_id))


@order_router.put("/{order_id}", response_model=StatusResponse)
async def update_order(order_id: str, body: UpdateOrderRequest) -> StatusResponse:
    ensure_object_id(order_id, "order_id")
    command = UpdateOrder(
        order_id=order_id,
        customer_id=body.customer_id,
        cart_id=body.cart_id,
        total_price=body.total_price,
        shipping_address=body.shipping_address,
        status=body.status,
        payment_status=body.payment_status,
        notes=body.notes,
        order_date=body.order_date,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    ensure_object_id(order_id, "order_id")
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()
