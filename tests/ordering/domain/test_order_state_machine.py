"""Domain tests for the Order aggregate and its state machine."""

import pytest
from protean.exceptions import ValidationError

from marketplace.ordering.order.order import Order, OrderStatus, PaymentStatus
from marketplace.shared.ids import new_object_id


def _place(**overrides):
    defaults = {
        "customer_id": new_object_id(),
        "cart_id": new_object_id(),
        "total_price": 25.0,
        "shipping_address": "12 Harbour Street",
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestPlacement:
    def test_new_order_is_pending(self):
        order = _place()
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_status == PaymentStatus.PENDING.value
        assert order.order_date is not None

    def test_cart_reference_required(self):
        with pytest.raises(ValidationError) as exc:
            _place(cart_id=None)
        assert "cart_id" in exc.value.messages

    def test_customer_reference_required(self):
        with pytest.raises(ValidationError) as exc:
            _place(customer_id="")
        assert "customer_id" in exc.value.messages


class TestTransitions:
    def test_pending_to_dispatched(self):
        order = _place()
        order.dispatch()
        assert order.status == OrderStatus.DISPATCHED.value

    def test_pending_to_cancelled(self):
        order = _place()
        order.cancel()
        assert order.status == OrderStatus.CANCELLED.value

    def test_cancelled_cannot_be_dispatched(self):
        order = _place()
        order.cancel()
        with pytest.raises(ValidationError):
            order.dispatch()
        assert order.status == OrderStatus.CANCELLED.value

    def test_dispatched_cannot_be_cancelled(self):
        order = _place()
        order.dispatch()
        with pytest.raises(ValidationError):
            order.cancel()
        assert order.status == OrderStatus.DISPATCHED.value

    def test_dispatched_is_terminal(self):
        order = _place()
        order.dispatch()
        with pytest.raises(ValidationError):
            order.dispatch()


class TestOverwrite:
    def test_overwrite_replaces_fields(self):
        order = _place()
        new_cart = new_object_id()
        order.overwrite(
            customer_id=order.customer_id,
            cart_id=new_cart,
            total_price=40.0,
            shipping_address="1 Quay Road",
            notes="Leave at the door",
        )
        assert order.cart_id == new_cart
        assert order.total_price == 40.0
        assert order.notes == "Leave at the door"
        assert order.status == OrderStatus.PENDING.value

    def test_overwrite_status_follows_state_machine(self):
        order = _place()
        order.cancel()
        with pytest.raises(ValidationError):
            order.overwrite(
                customer_id=order.customer_id,
                cart_id=order.cart_id,
                status=OrderStatus.PENDING.value,
            )

    def test_overwrite_with_unknown_status(self):
        order = _place()
        with pytest.raises(ValidationError) as exc:
            order.overwrite(customer_id=order.customer_id, cart_id=order.cart_id, status="Shipped")
        assert "status" in exc.value.messages

    def test_overwrite_can_dispatch_pending_order(self):
        order = _place()
        order.overwrite(
            customer_id=order.customer_id,
            cart_id=order.cart_id,
            status=OrderStatus.DISPATCHED.value,
        )
        assert order.status == OrderStatus.DISPATCHED.value
