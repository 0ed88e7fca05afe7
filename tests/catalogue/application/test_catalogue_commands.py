"""Application tests for category and product commands and catalogue queries."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain
from support.builders import make_category, make_product, new_user_id, place_order

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.category.management import (
    ActivateCategory,
    DeactivateCategory,
    DeleteCategory,
    RenameCategory,
)
from marketplace.catalogue.product.creation import AddProduct, UpdateProduct
from marketplace.catalogue.product.lifecycle import DeactivateProduct, DeleteProduct
from marketplace.catalogue.product.product import Product
from marketplace.catalogue.queries import (
    available_products,
    list_categories,
    products_by_category,
    products_with_categories,
)
from marketplace.ordering.order.cancellation import CancelOrder
from marketplace.ordering.order.fulfillment import accept_vendor_line_items
from marketplace.shared.ids import new_object_id


def _product(product_id):
    return current_domain.repository_for(Product).get(product_id)


class TestCategoryCommands:
    def test_status_changes(self):
        category_id = make_category("Garden")
        current_domain.process(DeactivateCategory(category_id=category_id), asynchronous=False)
        assert [c.name for c in list_categories(is_active=False)] == ["Garden"]

        current_domain.process(ActivateCategory(category_id=category_id), asynchronous=False)
        assert [c.name for c in list_categories(is_active=True)] == ["Garden"]

    def test_rename_refreshes_product_copies(self):
        category_id = make_category("Kitchen")
        first = make_product(category_id=category_id)
        second = make_product(name="Bowl", category_id=category_id)
        elsewhere = make_product(name="Rake", category_id=make_category("Garden"))

        current_domain.process(RenameCategory(category_id=category_id, name="Kitchenware"), asynchronous=False)

        assert _product(first).category_name == "Kitchenware"
        assert _product(second).category_name == "Kitchenware"
        assert _product(elsewhere).category_name == "Garden"

    @pytest.mark.slow
    def test_rename_reaches_every_product_past_the_first_hundred(self):
        category_id = make_category("Kitchen")
        product_ids = [make_product(name=f"Item {n}", category_id=category_id) for n in range(105)]

        current_domain.process(RenameCategory(category_id=category_id, name="Kitchenware"), asynchronous=False)

        assert {_product(product_id).category_name for product_id in product_ids} == {"Kitchenware"}
        assert len(products_by_category(category_id)) == 105

    def test_delete_category(self):
        category_id = make_category()
        current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Category).get(category_id)


class TestProductCommands:
    def test_add_product_copies_category_name(self):
        category_id = make_category("Lighting")
        product = _product(make_product(category_id=category_id))
        assert product.category_name == "Lighting"
        assert product._version == 0

    def test_add_product_with_unknown_category(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                AddProduct(vendor_id="v@example.com", name="Mug", price=1.0, category_id=new_object_id()),
                asynchronous=False,
            )

    def test_add_product_with_negative_stock(self):
        with pytest.raises(ValidationError):
            AddProduct(
                vendor_id="v@example.com", name="Mug", price=1.0, category_id=new_object_id(), stock_quantity=-1
            )

    def test_update_keeps_stock(self):
        product_id = make_product(stock=9)
        category_id = make_category("Dining")

        current_domain.process(
            UpdateProduct(product_id=product_id, name="Large Mug", price=15.0, category_id=category_id),
            asynchronous=False,
        )

        product = _product(product_id)
        assert product.name == "Large Mug"
        assert product.category_name == "Dining"
        assert product.stock_quantity == 9

    def test_deactivate(self):
        product_id = make_product()
        current_domain.process(DeactivateProduct(product_id=product_id), asynchronous=False)
        assert _product(product_id).is_active is False

    def test_delete_product(self):
        product_id = make_product()
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            _product(product_id)


class TestDeleteGuard:
    def test_product_in_pending_order_cannot_be_deleted(self):
        product_id = make_product()
        place_order(new_user_id(), [(product_id, 1)])

        with pytest.raises(ValidationError):
            current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        assert _product(product_id)

    def test_product_can_be_deleted_once_order_is_cancelled(self):
        product_id = make_product()
        order_id, _ = place_order(new_user_id(), [(product_id, 1)])
        current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)

        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            _product(product_id)

    def test_product_can_be_deleted_once_line_is_accepted(self):
        product_id = make_product(vendor="v@example.com")
        order_id, _ = place_order(new_user_id(), [(product_id, 1)])
        accept_vendor_line_items("v@example.com", order_id)

        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            _product(product_id)


class TestQueries:
    def test_products_by_category(self):
        category_id = make_category()
        make_product(category_id=category_id)
        make_product(category_id=make_category("Other"))

        assert len(products_by_category(category_id)) == 1

    def test_products_by_unknown_category(self):
        with pytest.raises(ObjectNotFoundError):
            products_by_category(new_object_id())

    def test_available_products_excludes_out_of_stock(self):
        make_product(name="In stock", stock=4)
        make_product(name="Sold out", stock=0)
        assert [p.name for p in available_products()] == ["In stock"]

    def test_products_with_categories_uses_live_name(self):
        category_id = make_category("Kitchen")
        product_id = make_product(category_id=category_id)

        # Write the category directly so the product copy is left stale
        repo = current_domain.repository_for(Category)
        category = repo.get(category_id)
        category.name = "Cookware"
        repo.add(category)

        assert _product(product_id).category_name == "Kitchen"
        assert products_with_categories()[0].category_name == "Cookware"
