"""Order replacement and deletion: commands and handler.

Both fail with ObjectNotFoundError when the order does not exist.
"""

import structlog
from protean import handle
from protean.fields import DateTime, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Order")
class UpdateOrder:
    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    total_price = Float(default=0.0, min_value=0.0)
    shipping_address = Text()
    status = String(max_length=20)
    payment_status = String(max_length=20)
    notes = Text()
    order_date = DateTime()


@marketplace.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@marketplace.command_handler(part_of=Order)
class OrderModificationHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.overwrite(
            customer_id=command.customer_id,
            cart_id=command.cart_id,
            total_price=command.total_price,
            shipping_address=command.shipping_address,
            status=command.status,
            payment_status=command.payment_status,
            notes=command.notes,
            order_date=command.order_date,
        )
        repo.add(order)

    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        repo._dao.delete(order)
        logger.info("Order deleted", order_id=str(order.id))
