"""Domain tests for the Product and Category aggregates."""

import pytest
from protean.exceptions import ValidationError

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.events import LowStockDetected
from marketplace.catalogue.product.product import Product
from marketplace.shared.ids import new_object_id


@pytest.fixture
def product():
    return Product.create(
        vendor_id="vendor@example.com",
        name="Ceramic Mug",
        price=12.5,
        category_id=new_object_id(),
        category_name="Kitchen",
        stock_quantity=3,
    )


class TestProductCreation:
    def test_defaults(self, product):
        assert product.is_active is True
        assert product.stock_quantity == 3
        assert product.category_name == "Kitchen"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(vendor_id="v", name="Mug", price=-1, category_id=new_object_id())

    def test_negative_initial_stock_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(vendor_id="v", name="Mug", price=1, category_id=new_object_id(), stock_quantity=-4)


class TestStock:
    def test_increase(self, product):
        product.increase_stock(7)
        assert product.stock_quantity == 10

    def test_decrease(self, product):
        product.decrease_stock(2)
        assert product.stock_quantity == 1

    def test_decrease_to_zero(self, product):
        product.decrease_stock(3)
        assert product.stock_quantity == 0

    def test_decrease_below_zero_rejected(self, product):
        with pytest.raises(ValidationError) as exc:
            product.decrease_stock(5)
        assert "quantity" in exc.value.messages
        assert product.stock_quantity == 3

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_adjustment_rejected(self, product, quantity):
        with pytest.raises(ValidationError):
            product.increase_stock(quantity)
        with pytest.raises(ValidationError):
            product.decrease_stock(quantity)

    def test_low_stock(self, product):
        assert product.is_low_on_stock(10) is True
        assert product.is_low_on_stock(3) is False

    def test_decrease_under_threshold_raises_low_stock(self, product):
        product.decrease_stock(1, low_stock_threshold=5)

        event = product._events[-1]
        assert isinstance(event, LowStockDetected)
        assert event.stock_quantity == 2
        assert event.threshold == 5
        assert event.vendor_id == "vendor@example.com"

    def test_decrease_at_threshold_raises_nothing(self, product):
        product.decrease_stock(1, low_stock_threshold=2)
        assert product._events == []

    def test_increase_never_raises_low_stock(self, product):
        product.increase_stock(1)
        assert product._events == []


class TestProductStatus:
    def test_deactivate_and_activate(self, product):
        product.deactivate()
        assert product.is_active is False
        product.activate()
        assert product.is_active is True


class TestCategory:
    def test_rename(self):
        category = Category.create("Kitchen")
        category.rename("  Kitchenware ")
        assert category.name == "Kitchenware"

    def test_blank_name_rejected(self):
        category = Category.create("Kitchen")
        with pytest.raises(ValidationError):
            category.rename("   ")
        assert category.name == "Kitchen"
