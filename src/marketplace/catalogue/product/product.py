"""Product aggregate.

The category name is copied onto the product when it is written. Category
renames refresh the copy (see ``RenameCategory``), and the "with categories"
listing re-joins against the live category for reads.

Stock is only ever changed through ``increase_stock`` / ``decrease_stock`` so
it can never go negative. Concurrent writes are caught by the version check
Protean makes on every save.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text

from marketplace.catalogue.product.events import LowStockDetected
from marketplace.domain import marketplace
from marketplace.shared.ids import new_object_id


@marketplace.aggregate(limit=None)
class Product:
    vendor_id = String(required=True, max_length=255)
    name = String(required=True, max_length=200)
    description = Text()
    price = Float(required=True, min_value=0.0)
    is_active = Boolean(default=True)
    category_id = Identifier(required=True)
    category_name = String(max_length=100)
    stock_quantity = Integer(default=0, min_value=0)
    image_path = String(max_length=500)

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise ValidationError({"stock_quantity": ["Stock quantity cannot be negative"]})

    @classmethod
    def create(
        cls,
        vendor_id,
        name,
        price,
        category_id,
        category_name=None,
        description=None,
        stock_quantity=0,
        image_path=None,
        is_active=True,
    ):
        return cls(
            id=new_object_id(),
            vendor_id=vendor_id,
            name=name,
            description=description,
            price=price,
            is_active=is_active,
            category_id=category_id,
            category_name=category_name,
            stock_quantity=stock_quantity or 0,
            image_path=image_path,
        )

    def update_details(self, name, description, price, category_id, category_name, image_path=None, vendor_id=None):
        """Overwrite the editable fields. Stock is left to the inventory operations."""
        self.name = name
        self.description = description
        self.price = price
        self.category_id = category_id
        self.category_name = category_name
        self.image_path = image_path
        if vendor_id:
            self.vendor_id = vendor_id

    def attach_image(self, image_path):
        self.image_path = image_path

    def refresh_category(self, category_name):
        self.category_name = category_name

    def activate(self):
        self.is_active = True

    def deactivate(self):
        self.is_active = False

    def increase_stock(self, quantity):
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

        self.stock_quantity = (self.stock_quantity or 0) + quantity

    def decrease_stock(self, quantity, low_stock_threshold=None):
        """Take ``quantity`` out of stock.

        Leaving stock under ``low_stock_threshold`` raises ``LowStockDetected``
        so the vendor can be told to restock.
        """
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

        available = self.stock_quantity or 0
        if available < quantity:
            raise ValidationError(
                {"quantity": [f"Insufficient stock: {available} available, {quantity} requested"]}
            )

        self.stock_quantity = available - quantity
        if low_stock_threshold is not None and self.is_low_on_stock(low_stock_threshold):
            self.raise_(
                LowStockDetected(
                    product_id=str(self.id),
                    product_name=self.name,
                    vendor_id=self.vendor_id,
                    stock_quantity=self.stock_quantity,
                    threshold=low_stock_threshold,
                )
            )

    def is_low_on_stock(self, threshold):
        return (self.stock_quantity or 0) < threshold
