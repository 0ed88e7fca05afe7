"""Mail reactions to stock events: the vendor is asked to restock."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.catalogue.product.events import LowStockDetected
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.identity.user.user import User
from marketplace.notifications.notifier import notify
from marketplace.notifications.templates import MailTemplate

logger = structlog.get_logger(__name__)


def vendor_email(vendor_ref: str) -> str | None:
    """Mail address for a product's vendor reference (an email or a user id)."""
    if not vendor_ref:
        return None
    if "@" in vendor_ref:
        return vendor_ref
    try:
        return current_domain.repository_for(User).get(vendor_ref).email
    except ObjectNotFoundError:
        logger.warning("Vendor not found for low stock alert", vendor=vendor_ref)
        return None


@marketplace.event_handler(part_of=Product)
class InventoryEventsHandler:
    """Reacts to stock levels dropping under the low-stock threshold."""

    @handle(LowStockDetected)
    def on_low_stock_detected(self, event: LowStockDetected) -> None:
        logger.info("Stock below threshold", product_id=str(event.product_id), stock=event.stock_quantity)
        notify(
            vendor_email(event.vendor_id),
            MailTemplate.LOW_STOCK,
            product_name=event.product_name,
            product_id=str(event.product_id),
            stock_quantity=event.stock_quantity,
            threshold=event.threshold,
        )
