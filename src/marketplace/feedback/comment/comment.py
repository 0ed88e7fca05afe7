"""Comment aggregate: a user's review of a product, optionally rated 1 to 5."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.shared.ids import new_object_id


@marketplace.aggregate(limit=None)
class Comment:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    vendor_id = String(required=True, max_length=255)
    rating = Integer(min_value=1, max_value=5)
    comments = Text()
    created_at = DateTime()

    @classmethod
    def post(cls, user_id, product_id, vendor_id, rating=None, comments=None):
        return cls(
            id=new_object_id(),
            user_id=user_id,
            product_id=product_id,
            vendor_id=vendor_id,
            rating=rating,
            comments=comments,
            created_at=datetime.now(UTC),
        )
