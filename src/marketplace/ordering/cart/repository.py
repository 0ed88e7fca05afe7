"""Repository for the Cart aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart


@marketplace.repository(part_of=Cart)
class CartRepository:
    def active_for_user(self, user_id) -> Cart | None:
        """The user's active cart, or None."""
        carts = self._dao.query.filter(user_id=str(user_id), is_active=True).all().items
        return carts[0] if carts else None

    def all_for_user(self, user_id) -> list[Cart]:
        return self._dao.query.filter(user_id=str(user_id)).all().items

    def find(self, cart_id) -> Cart | None:
        """Like ``get`` but returns None instead of raising for an unknown id."""
        try:
            return self.get(cart_id)
        except ObjectNotFoundError:
            return None

    def active_or_new(self, user_id) -> Cart:
        """The user's active cart, or a freshly opened one that is not yet persisted.

        Callers must hold ``user_cart_lock(user_id)`` until the new cart is
        committed, otherwise two requests can both open a cart.
        """
        cart = self.active_for_user(user_id)
        if cart is None:
            cart = Cart.open(user_id)
        return cart

    def locate(self, user_id=None, cart_id=None) -> Cart | None:
        """Resolve a cart either directly by id or as the user's active cart."""
        if cart_id:
            return self.find(cart_id)
        return self.active_for_user(user_id)
