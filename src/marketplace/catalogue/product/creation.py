"""Listing and editing products: commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace


@marketplace.command(part_of="Product")
class AddProduct:
    vendor_id = String(required=True, max_length=255)
    name = String(required=True, max_length=200)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category_id = Identifier(required=True)
    stock_quantity = Integer(default=0, min_value=0)
    image_path = String(max_length=500)
    is_active = Boolean(default=True)


@marketplace.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=200)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category_id = Identifier(required=True)
    image_path = String(max_length=500)
    vendor_id = String(max_length=255)


@marketplace.command_handler(part_of=Product)
class ProductCreationHandler:
    @handle(AddProduct)
    def add_product(self, command):
        category = current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            vendor_id=command.vendor_id,
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=str(category.id),
            category_name=category.name,
            stock_quantity=command.stock_quantity,
            image_path=command.image_path,
            is_active=command.is_active,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        category = current_domain.repository_for(Category).get(command.category_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=str(category.id),
            category_name=category.name,
            image_path=command.image_path,
            vendor_id=command.vendor_id,
        )
        repo.add(product)
