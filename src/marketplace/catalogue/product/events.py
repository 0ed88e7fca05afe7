"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class LowStockDetected:
    """A stock decrease left the product under the low-stock threshold."""

    __version__ = 1

    product_id = Identifier(required=True)
    product_name = String(required=True)
    vendor_id = String(required=True)
    stock_quantity = Integer(required=True)
    threshold = Integer(required=True)
