"""Application tests for order placement, modification and cancellation."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from marketplace.ordering.order.cancellation import CancelOrder
from marketplace.ordering.order.creation import CreateOrder, UpsertOrder
from marketplace.ordering.order.modification import DeleteOrder, UpdateOrder
from marketplace.ordering.order.order import Order, OrderStatus
from marketplace.ordering.order.queries import list_orders, orders_for_customer
from marketplace.shared.ids import new_object_id


def _create(**overrides):
    defaults = {
        "customer_id": new_object_id(),
        "cart_id": new_object_id(),
        "total_price": 30.0,
        "shipping_address": "12 Harbour Street",
    }
    defaults.update(overrides)
    return current_domain.process(CreateOrder(**defaults), asynchronous=False)


class TestCreateOrder:
    def test_create_persists_pending_order(self):
        order_id = _create()
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PENDING.value
        assert order._version == 0

    def test_create_always_mints_new_id(self):
        assert _create() != _create()

    def test_missing_cart_reference_rejected(self):
        with pytest.raises(ValidationError):
            current_domain.process(CreateOrder(customer_id=new_object_id()), asynchronous=False)
        assert list_orders() == []

    def test_orders_for_customer(self):
        customer_id = new_object_id()
        _create(customer_id=customer_id)
        _create(customer_id=customer_id)
        _create()
        assert len(orders_for_customer(customer_id)) == 2


class TestUpsertOrder:
    def test_upsert_without_id_inserts(self):
        order_id = current_domain.process(
            UpsertOrder(customer_id=new_object_id(), cart_id=new_object_id()),
            asynchronous=False,
        )
        assert current_domain.repository_for(Order).get(order_id)

    def test_upsert_with_id_replaces(self):
        order_id = _create()
        order = current_domain.repository_for(Order).get(order_id)

        result = current_domain.process(
            UpsertOrder(
                order_id=order_id,
                customer_id=order.customer_id,
                cart_id=order.cart_id,
                total_price=99.0,
                notes="Gift wrap",
            ),
            asynchronous=False,
        )

        assert result == order_id
        updated = current_domain.repository_for(Order).get(order_id)
        assert updated.total_price == 99.0
        assert updated.notes == "Gift wrap"
        assert len(list_orders()) == 1

    def test_upsert_unknown_id_is_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpsertOrder(order_id=new_object_id(), customer_id=new_object_id(), cart_id=new_object_id()),
                asynchronous=False,
            )


class TestUpdateOrder:
    def test_update_overwrites(self):
        order_id = _create()
        order = current_domain.repository_for(Order).get(order_id)
        current_domain.process(
            UpdateOrder(
                order_id=order_id,
                customer_id=order.customer_id,
                cart_id=order.cart_id,
                shipping_address="1 Quay Road",
            ),
            asynchronous=False,
        )
        assert current_domain.repository_for(Order).get(order_id).shipping_address == "1 Quay Road"

    def test_update_cannot_revive_cancelled_order(self):
        order_id = _create()
        current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
        order = current_domain.repository_for(Order).get(order_id)

        with pytest.raises(ValidationError):
            current_domain.process(
                UpdateOrder(
                    order_id=order_id,
                    customer_id=order.customer_id,
                    cart_id=order.cart_id,
                    status=OrderStatus.PENDING.value,
                ),
                asynchronous=False,
            )
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.CANCELLED.value

    def test_update_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateOrder(order_id=new_object_id(), customer_id=new_object_id(), cart_id=new_object_id()),
                asynchronous=False,
            )


class TestCancelAndDelete:
    def test_cancel_pending_order(self):
        order_id = _create()
        current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.CANCELLED.value

    def test_cancel_twice_rejected(self):
        order_id = _create()
        current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)

    def test_delete_order(self):
        order_id = _create()
        current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Order).get(order_id)

    def test_delete_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteOrder(order_id=new_object_id()), asynchronous=False)
