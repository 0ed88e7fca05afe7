"""Order placement: commands and handler.

``CreateOrder`` always inserts a new order with a freshly minted id.
``UpsertOrder`` keeps the create-or-replace behaviour explicit: without an
``order_id`` it inserts, with one it replaces that existing order.
"""

from protean import handle
from protean.fields import DateTime, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order, PaymentStatus


@marketplace.command(part_of="Order")
class CreateOrder:
    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    total_price = Float(default=0.0, min_value=0.0)
    shipping_address = Text()
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    notes = Text()
    order_date = DateTime()


@marketplace.command(part_of="Order")
class UpsertOrder:
    order_id = Identifier()
    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    total_price = Float(default=0.0, min_value=0.0)
    shipping_address = Text()
    status = String(max_length=20)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    notes = Text()
    order_date = DateTime()


def _place(command):
    order = Order.place(
        customer_id=command.customer_id,
        cart_id=command.cart_id,
        total_price=command.total_price,
        shipping_address=command.shipping_address,
        payment_status=command.payment_status,
        notes=command.notes,
        order_date=command.order_date,
    )
    current_domain.repository_for(Order).add(order)
    return str(order.id)


@marketplace.command_handler(part_of=Order)
class OrderCreationHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        return _place(command)

    @handle(UpsertOrder)
    def upsert_order(self, command):
        if not command.order_id:
            return _place(command)

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
        return str(order.id)
