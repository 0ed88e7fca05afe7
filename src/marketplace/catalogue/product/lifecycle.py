"""Product activation and removal: commands and handler.

A product still referenced by a pending order cannot be deleted.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.ordering.order.queries import has_pending_orders


@marketplace.command(part_of="Product")
class ActivateProduct:
    product_id = Identifier(required=True)


@marketplace.command(part_of="Product")
class DeactivateProduct:
    product_id = Identifier(required=True)


@marketplace.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@marketplace.command_handler(part_of=Product)
class ProductLifecycleHandler:
    @handle(ActivateProduct)
    def activate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.activate()
        repo.add(product)

    @handle(DeactivateProduct)
    def deactivate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.deactivate()
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        if has_pending_orders(str(product.id)):
            raise ValidationError({"product_id": ["Product is part of a pending order and cannot be deleted"]})
        repo._dao.delete(product)
