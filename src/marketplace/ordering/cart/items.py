"""Cart line management: commands, handler and the locked entry point.

Lines are addressed either through the user's active cart (``user_id``) or
directly by ``cart_id``. Updating or removing a line in a cart that does not
exist is a silent no-op: the handler returns False and nothing is written.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.cart.locks import user_cart_lock

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Cart")
class AddItemToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(max_length=200)
    quantity = Integer(required=True, min_value=1)
    price = Float(default=0.0, min_value=0.0)
    image_path = String(max_length=500)


@marketplace.command(part_of="Cart")
class UpdateCartItemQuantity:
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    user_id = Identifier()
    cart_id = Identifier()


@marketplace.command(part_of="Cart")
class RemoveCartItem:
    item_id = Identifier(required=True)
    user_id = Identifier()
    cart_id = Identifier()


def _require_cart_reference(command):
    if not command.user_id and not command.cart_id:
        raise ValidationError({"cart": ["Either user_id or cart_id is required"]})


@marketplace.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddItemToCart)
    def add_item_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.active_or_new(command.user_id)
        item_id = cart.add_item(
            product_id=command.product_id,
            quantity=command.quantity,
            product_name=command.product_name,
            price=command.price,
            image_path=command.image_path,
        )
        repo.add(cart)
        return item_id

    @handle(UpdateCartItemQuantity)
    def update_cart_item_quantity(self, command):
        _require_cart_reference(command)
        repo = current_domain.repository_for(Cart)
        cart = repo.locate(user_id=command.user_id, cart_id=command.cart_id)
        if cart is None or not cart.update_item_quantity(command.item_id, command.quantity):
            logger.debug("Cart line not found, nothing updated", item_id=str(command.item_id))
            return False

        repo.add(cart)
        return True

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        _require_cart_reference(command)
        repo = current_domain.repository_for(Cart)
        cart = repo.locate(user_id=command.user_id, cart_id=command.cart_id)
        if cart is None or not cart.remove_item(command.item_id):
            logger.debug("Cart line not found, nothing removed", item_id=str(command.item_id))
            return False

        repo.add(cart)
        return True


def add_item_to_cart(user_id, product_id, quantity, product_name=None, price=0.0, image_path=None):
    """Add a product to the user's active cart, opening the cart if needed.

    Runs under the user's cart lock so concurrent first adds share one cart.
    """
    with user_cart_lock(user_id):
        return current_domain.process(
            AddItemToCart(
                user_id=user_id,
                product_id=product_id,
                product_name=product_name,
                quantity=quantity,
                price=price,
                image_path=image_path,
            ),
            asynchronous=False,
        )
