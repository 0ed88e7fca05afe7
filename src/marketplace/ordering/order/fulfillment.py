"""Vendor acceptance workflow: command, handler and the retrying entry point.

A vendor accepts every line of an order that belongs to one of its products.
The result says whether all of the vendor's own lines are now accepted; a
vendor with no lines in the order gets False.

Whether the order is dispatched afterwards depends on the dispatch policy:

- ``all_items``: only once every line in the cart is accepted, whichever
  vendor owns it. Other vendors' pending lines hold the order back.
- ``vendor_items``: as soon as the calling vendor's lines are all accepted.

Acceptance is idempotent. Repeating it changes nothing and returns the same
result; an order that is already dispatched stays dispatched. Cancelled
orders cannot be accepted.

Cart and order saves are checked against the version each was loaded at.
When another writer got there first Protean raises ``ExpectedVersionError``;
the handler is retried with fresh reads, and ``accept_vendor_line_items``
starts the whole command again if those retries run out too.
"""

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.config import DispatchPolicy, get_settings
from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.order.order import Order, OrderStatus
from marketplace.ordering.order.queries import vendor_items_in_cart

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class AcceptVendorLineItems:
    order_id = Identifier(required=True)
    vendor_ref = String(required=True, max_length=255)
    dispatch_policy = String(choices=DispatchPolicy, default=DispatchPolicy.ALL_ITEMS.value)


def _should_dispatch(policy: DispatchPolicy, cart: Cart, vendor_accepted: bool) -> bool:
    if policy == DispatchPolicy.VENDOR_ITEMS:
        return vendor_accepted
    return cart.all_items_accepted


@marketplace.command_handler(part_of=Order)
class VendorAcceptanceHandler:
    @handle(AcceptVendorLineItems)
    def accept_vendor_line_items(self, command):
        order_repo = current_domain.repository_for(Order)
        cart_repo = current_domain.repository_for(Cart)

        order = order_repo.get(command.order_id)
        if order.status == OrderStatus.CANCELLED.value:
            raise ValidationError({"status": ["Cannot accept items of a cancelled order"]})

        cart = cart_repo.find(order.cart_id)
        vendor_items = [item for item, _ in vendor_items_in_cart(cart, command.vendor_ref)]
        if not vendor_items:
            logger.info("Vendor has no lines in order", order_id=str(order.id), vendor=command.vendor_ref)
            return False

        newly_accepted = cart.accept_items(vendor_items)
        if newly_accepted:
            cart_repo.add(cart)

        all_accepted = all(item.is_accepted for item in vendor_items)
        policy = DispatchPolicy(command.dispatch_policy)

        if order.is_pending and _should_dispatch(policy, cart, all_accepted):
            order.dispatch()
            order_repo.add(order)
            logger.info("Order dispatched", order_id=str(order.id), policy=policy.value)

        logger.info(
            "Vendor lines accepted",
            order_id=str(order.id),
            vendor=command.vendor_ref,
            newly_accepted=len(newly_accepted),
            all_accepted=all_accepted,
        )
        return all_accepted


def accept_vendor_line_items(vendor_ref, order_id, dispatch_policy: DispatchPolicy | None = None) -> bool:
    """Run the acceptance workflow, retrying when a concurrent write is detected."""
    settings = get_settings().fulfillment
    policy = dispatch_policy or settings.dispatch_policy
    attempts = settings.max_accept_attempts

    for attempt in range(1, attempts + 1):
        try:
            return current_domain.process(
                AcceptVendorLineItems(
                    order_id=order_id,
                    vendor_ref=vendor_ref,
                    dispatch_policy=policy.value,
                ),
                asynchronous=False,
            )
        except ExpectedVersionError:
            if attempt == attempts:
                logger.error("Giving up on vendor acceptance", order_id=str(order_id), attempts=attempts)
                raise
            logger.warning("Concurrent update during vendor acceptance, retrying", order_id=str(order_id), attempt=attempt)
