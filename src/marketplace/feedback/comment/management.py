"""Product comments: commands, handler and rating queries."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.feedback.comment.comment import Comment


@marketplace.command(part_of="Comment")
class AddComment:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    vendor_id = String(required=True, max_length=255)
    rating = Integer(min_value=1, max_value=5)
    comments = Text()


@marketplace.command(part_of="Comment")
class DeleteComment:
    comment_id = Identifier(required=True)


@marketplace.command_handler(part_of=Comment)
class CommentHandler:
    @handle(AddComment)
    def add_comment(self, command):
        comment = Comment.post(
            user_id=command.user_id,
            product_id=command.product_id,
            vendor_id=command.vendor_id,
            rating=command.rating,
            comments=command.comments,
        )
        current_domain.repository_for(Comment).add(comment)
        return str(comment.id)

    @handle(DeleteComment)
    def delete_comment(self, command):
        repo = current_domain.repository_for(Comment)
        comment = repo.get(command.comment_id)
        repo._dao.delete(comment)


def comments_for(**criteria) -> list[Comment]:
    """Comments matching ``product_id``, ``vendor_id`` or ``user_id``."""
    return current_domain.repository_for(Comment)._dao.query.filter(**criteria).all().items


def average_rating(product_id: str) -> float | None:
    """Mean rating of a product's comments, or None when nobody commented.

    Comments posted without a rating count as zero.
    """
    comments = comments_for(product_id=product_id)
    if not comments:
        return None
    return sum(comment.rating or 0 for comment in comments) / len(comments)
