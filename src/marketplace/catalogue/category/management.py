"""Category management: commands and handler.

Renaming a category also rewrites the category name copied onto each of its
products, so product reads never show a stale name.
"""

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Category")
class CreateCategory:
    name = String(required=True, max_length=100)
    is_active = Boolean(default=True)


@marketplace.command(part_of="Category")
class RenameCategory:
    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)


@marketplace.command(part_of="Category")
class ActivateCategory:
    category_id = Identifier(required=True)


@marketplace.command(part_of="Category")
class DeactivateCategory:
    category_id = Identifier(required=True)


@marketplace.command(part_of="Category")
class DeleteCategory:
    category_id = Identifier(required=True)


@marketplace.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, is_active=command.is_active)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(RenameCategory)
    def rename_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.rename(command.name)
        repo.add(category)

        product_repo = current_domain.repository_for(Product)
        products = product_repo._dao.query.filter(category_id=str(category.id)).all().items
        for product in products:
            product.refresh_category(category.name)
            product_repo.add(product)

        logger.info("Category renamed", category_id=str(category.id), products_refreshed=len(products))

    @handle(ActivateCategory)
    def activate_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.activate()
        repo.add(category)

    @handle(DeactivateCategory)
    def deactivate_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.deactivate()
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        repo._dao.delete(category)
