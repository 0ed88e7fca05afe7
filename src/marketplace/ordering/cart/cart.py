"""Cart aggregate: a user's shopping cart and the per-line fulfillment status.

A user has at most one active cart (``is_active`` true). The active cart is
opened on the first add and stays the cart an order points at after
checkout; vendors later accept their own lines in it, flipping each line
from ``pending`` to ``accepted``.

Lines are merged by product: adding a product that is already in the cart
increases the existing line's quantity instead of appending a new line.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String

from marketplace.domain import marketplace
from marketplace.shared.errors import InvariantViolation
from marketplace.shared.ids import new_object_id


class LineStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


@marketplace.entity(part_of="Cart", limit=None)
class CartItem:
    product_id = Identifier(required=True)
    product_name = String(max_length=200)
    quantity = Integer(required=True, min_value=1)
    price = Float(default=0.0, min_value=0.0)
    image_path = String(max_length=500)
    status = String(choices=LineStatus, default=LineStatus.PENDING.value)

    @property
    def is_accepted(self):
        return self.status == LineStatus.ACCEPTED.value


@marketplace.aggregate(limit=None)
class Cart:
    user_id = Identifier(required=True)
    items = HasMany(CartItem)
    is_active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, user_id):
        now = datetime.now(UTC)
        return cls(
            id=new_object_id(),
            user_id=user_id,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------
    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def find_item_for_product(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    @property
    def total_price(self):
        return sum((item.price or 0.0) * item.quantity for item in self.items)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity, product_name=None, price=0.0, image_path=None):
        """Add a product, merging quantities when the product is already in the cart.

        Returns the id of the line that now holds the product.
        """
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

        existing = self.find_item_for_product(product_id)
        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            item = CartItem(
                id=new_object_id(),
                product_id=product_id,
                product_name=product_name,
                quantity=quantity,
                price=price or 0.0,
                image_path=image_path,
                status=LineStatus.PENDING.value,
            )
            self.add_items(item)
            item_id = str(item.id)

        if not self.items:
            raise InvariantViolation("Cart is empty after adding an item", cart_id=str(self.id))

        self.updated_at = datetime.now(UTC)
        return item_id

    def update_item_quantity(self, item_id, quantity):
        """Overwrite a line's quantity. Returns False when the line is not in the cart."""
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

        item = self.find_item(item_id)
        if item is None:
            return False

        item.quantity = quantity
        self.updated_at = datetime.now(UTC)
        return True

    def remove_item(self, item_id):
        """Drop a line. Returns False when the line is not in the cart."""
        item = self.find_item(item_id)
        if item is None:
            return False

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        return True

    def clear(self):
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def set_active(self, is_active):
        self.is_active = is_active
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Fulfillment
    # -------------------------------------------------------------------
    def accept_items(self, items):
        """Mark the given lines accepted. Lines already accepted are left alone."""
        accepted = []
        for item in items:
            if not item.is_accepted:
                item.status = LineStatus.ACCEPTED.value
                accepted.append(str(item.id))

        if accepted:
            self.updated_at = datetime.now(UTC)
        return accepted

    @property
    def all_items_accepted(self):
        return bool(self.items) and all(item.is_accepted for item in self.items)
