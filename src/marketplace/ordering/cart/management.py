"""Cart lifecycle: commands, handler and locked entry points.

Explicit creation, status changes (checkout and re-activation), clearing
and deletion. Anything that can make a cart active runs under the owner's
cart lock so a user never ends up with two active carts.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.cart.locks import user_cart_lock

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Cart")
class CreateCart:
    """Open an active cart for the user, or return the one already open."""

    user_id = Identifier(required=True)


@marketplace.command(part_of="Cart")
class UpdateCartStatus:
    cart_id = Identifier(required=True)
    is_active = Boolean(required=True)


@marketplace.command(part_of="Cart")
class ClearCart:
    user_id = Identifier()
    cart_id = Identifier()


@marketplace.command(part_of="Cart")
class DeleteCart:
    user_id = Identifier()
    cart_id = Identifier()


@marketplace.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.active_for_user(command.user_id)
        if cart is None:
            cart = Cart.open(command.user_id)
            repo.add(cart)
            logger.info("Cart opened", cart_id=str(cart.id), user_id=str(command.user_id))
        return str(cart.id)

    @handle(UpdateCartStatus)
    def update_cart_status(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)

        if command.is_active:
            # Re-activating supersedes whichever cart is currently active
            current = repo.active_for_user(cart.user_id)
            if current is not None and str(current.id) != str(cart.id):
                current.set_active(False)
                repo.add(current)

        cart.set_active(command.is_active)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        if not command.user_id and not command.cart_id:
            raise ValidationError({"cart": ["Either user_id or cart_id is required"]})

        repo = current_domain.repository_for(Cart)
        cart = repo.locate(user_id=command.user_id, cart_id=command.cart_id)
        if cart is None:
            return False

        cart.clear()
        repo.add(cart)
        return True

    @handle(DeleteCart)
    def delete_cart(self, command):
        if not command.user_id and not command.cart_id:
            raise ValidationError({"cart": ["Either user_id or cart_id is required"]})

        repo = current_domain.repository_for(Cart)
        cart = repo.locate(user_id=command.user_id, cart_id=command.cart_id)
        if cart is None:
            return False

        repo._dao.delete(cart)
        logger.info("Cart deleted", cart_id=str(cart.id))
        return True


def open_cart(user_id):
    """Explicitly open the user's active cart. Returns the cart id."""
    with user_cart_lock(user_id):
        return current_domain.process(CreateCart(user_id=user_id), asynchronous=False)


def set_cart_status(cart_id, is_active):
    """Check a cart out (``is_active=False``) or make it the active cart again."""
    cart = current_domain.repository_for(Cart).get(cart_id)
    with user_cart_lock(cart.user_id):
        current_domain.process(UpdateCartStatus(cart_id=cart_id, is_active=is_active), asynchronous=False)
