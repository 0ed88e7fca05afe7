"""Read-side helpers for categories and products."""

from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product


def list_categories(is_active: bool | None = None) -> list[Category]:
    query = current_domain.repository_for(Category)._dao.query
    if is_active is not None:
        query = query.filter(is_active=is_active)
    return query.all().items


def list_products() -> list[Product]:
    return current_domain.repository_for(Product)._dao.query.all().items


def products_by_category(category_id: str) -> list[Product]:
    """Products in a category. Raises ObjectNotFoundError for an unknown category."""
    category = current_domain.repository_for(Category).get(category_id)
    return current_domain.repository_for(Product)._dao.query.filter(category_id=str(category.id)).all().items


def available_products() -> list[Product]:
    return current_domain.repository_for(Product)._dao.query.filter(stock_quantity__gt=0).all().items


def products_with_categories() -> list[Product]:
    """All products, with ``category_name`` taken from the live category record."""
    names = {str(category.id): category.name for category in list_categories()}
    products = list_products()
    for product in products:
        product.category_name = names.get(str(product.category_id), product.category_name)
    return products
