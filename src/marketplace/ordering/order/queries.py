"""Read-side helpers for orders and their vendor lines."""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.ordering.cart.cart import Cart, CartItem, LineStatus
from marketplace.ordering.order.order import Order, OrderStatus


@dataclass
class VendorLineItem:
    product: Product
    quantity: int
    status: str
    item_id: str


def list_orders() -> list[Order]:
    return current_domain.repository_for(Order)._dao.query.all().items


def orders_for_customer(customer_id: str) -> list[Order]:
    return current_domain.repository_for(Order)._dao.query.filter(customer_id=str(customer_id)).all().items


def _product_or_none(product_id) -> Product | None:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        return None


def vendor_items_in_cart(cart: Cart | None, vendor_ref: str) -> list[tuple[CartItem, Product]]:
    """Lines of ``cart`` whose product belongs to ``vendor_ref``.

    Lines whose product has since been deleted belong to nobody and are skipped.
    """
    if cart is None or not cart.items:
        return []

    matches = []
    for item in cart.items:
        product = _product_or_none(item.product_id)
        if product is not None and product.vendor_id == vendor_ref:
            matches.append((item, product))
    return matches


def get_vendor_line_items(vendor_ref: str, order_id: str) -> list[VendorLineItem]:
    """The vendor's lines in an order, with their acceptance status.

    Raises ObjectNotFoundError for an unknown order. A missing or empty cart
    yields an empty list.
    """
    order = current_domain.repository_for(Order).get(order_id)
    cart = current_domain.repository_for(Cart).find(order.cart_id)

    return [
        VendorLineItem(product=product, quantity=item.quantity, status=item.status, item_id=str(item.id))
        for item, product in vendor_items_in_cart(cart, vendor_ref)
    ]


def orders_for_vendor(vendor_ref: str) -> list[Order]:
    """Orders whose cart holds at least one of the vendor's products."""
    cart_repo = current_domain.repository_for(Cart)
    return [order for order in list_orders() if vendor_items_in_cart(cart_repo.find(order.cart_id), vendor_ref)]


def has_pending_orders(product_id: str) -> bool:
    """True when a pending order still waits on a line for this product."""
    cart_repo = current_domain.repository_for(Cart)
    pending = current_domain.repository_for(Order)._dao.query.filter(status=OrderStatus.PENDING.value).all().items

    for order in pending:
        cart = cart_repo.find(order.cart_id)
        if cart is None:
            continue
        for item in cart.items:
            if str(item.product_id) == str(product_id) and item.status == LineStatus.PENDING.value:
                return True
    return False
