"""Stock adjustment: commands, handler and stock lookup.

Stock lives on the Product document. Decreases are refused when they would
take stock below zero or while a pending order still waits on the product.
A decrease that leaves stock under the low-stock threshold raises
``LowStockDetected``; the vendor mail is sent by the notifications handler
once the decrease is committed.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.config import get_settings
from marketplace.domain import marketplace
from marketplace.ordering.order.queries import has_pending_orders

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Product")
class IncreaseStock:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.command(part_of="Product")
class DecreaseStock:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@marketplace.command_handler(part_of=Product)
class StockAdjustmentHandler:
    @handle(IncreaseStock)
    def increase_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.increase_stock(command.quantity)
        repo.add(product)
        return product.stock_quantity

    @handle(DecreaseStock)
    def decrease_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if has_pending_orders(str(product.id)):
            raise ValidationError({"product_id": ["Product has pending orders, stock cannot be decreased"]})

        product.decrease_stock(command.quantity, low_stock_threshold=get_settings().inventory.low_stock_threshold)
        repo.add(product)
        logger.info("Stock decreased", product_id=str(product.id), stock=product.stock_quantity)
        return product.stock_quantity


def get_stock(product_id: str) -> int:
    """Current stock, or 0 for an unknown product."""
    try:
        return current_domain.repository_for(Product).get(product_id).stock_quantity or 0
    except ObjectNotFoundError:
        return 0
