"""Order aggregate.

An order points at the cart that holds its lines; it does not copy them.
Changing that cart after checkout therefore changes what the order appears
to contain.

State Machine:
    PENDING → DISPATCHED   (vendor acceptance completes)
    PENDING → CANCELLED    (explicit cancel)
    DISPATCHED and CANCELLED are terminal.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from marketplace.domain import marketplace
from marketplace.shared.ids import new_object_id


class OrderStatus(Enum):
    PENDING = "Pending"
    DISPATCHED = "Dispatched"
    CANCELLED = "Cancelled"


class PaymentStatus(Enum):
    PENDING = "Pending"
    PAID = "Paid"
    FAILED = "Failed"
    REFUNDED = "Refunded"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.DISPATCHED, OrderStatus.CANCELLED},
    OrderStatus.DISPATCHED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


@marketplace.aggregate(limit=None)
class Order:
    customer_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    total_price = Float(default=0.0, min_value=0.0)
    shipping_address = Text()
    order_date = DateTime()
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    notes = Text()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_id,
        cart_id,
        total_price=0.0,
        shipping_address=None,
        payment_status=None,
        notes=None,
        order_date=None,
    ):
        if not customer_id:
            raise ValidationError({"customer_id": ["Customer reference is required"]})
        if not cart_id:
            raise ValidationError({"cart_id": ["Cart reference is required"]})

        return cls(
            id=new_object_id(),
            customer_id=customer_id,
            cart_id=cart_id,
            total_price=total_price or 0.0,
            shipping_address=shipping_address,
            order_date=order_date or datetime.now(UTC),
            status=OrderStatus.PENDING.value,
            payment_status=payment_status or PaymentStatus.PENDING.value,
            notes=notes,
        )

    # -------------------------------------------------------------------
    # State machine
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    @property
    def is_pending(self):
        return self.status == OrderStatus.PENDING.value

    def dispatch(self):
        self._assert_can_transition(OrderStatus.DISPATCHED)
        self.status = OrderStatus.DISPATCHED.value

    def cancel(self):
        self._assert_can_transition(OrderStatus.CANCELLED)
        self.status = OrderStatus.CANCELLED.value

    # -------------------------------------------------------------------
    # Replacement
    # -------------------------------------------------------------------
    def overwrite(
        self,
        customer_id,
        cart_id,
        total_price=0.0,
        shipping_address=None,
        status=None,
        payment_status=None,
        notes=None,
        order_date=None,
    ):
        """Replace the order's fields wholesale, as an edit form would.

        A status change still has to follow the state machine.
        """
        if not customer_id:
            raise ValidationError({"customer_id": ["Customer reference is required"]})
        if not cart_id:
            raise ValidationError({"cart_id": ["Cart reference is required"]})

        if status and status != self.status:
            try:
                target = OrderStatus(status)
            except ValueError:
                raise ValidationError({"status": [f"Unknown order status: {status}"]}) from None
            self._assert_can_transition(target)

        self.customer_id = customer_id
        self.cart_id = cart_id
        self.total_price = total_price or 0.0
        self.shipping_address = shipping_address
        self.notes = notes
        if order_date:
            self.order_date = order_date
        if payment_status:
            self.payment_status = payment_status
        if status:
            self.status = status

