"""FastAPI routes for Feedback: product comments and vendor ranking."""

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.api.schemas import StatusResponse
from marketplace.feedback.api.schemas import (
    AddCommentRequest,
    CommentIdResponse,
    CommentResponse,
    RankingIdResponse,
    RankVendorRequest,
    RatingResponse,
    VendorCommentRequest,
    VendorCommentResponse,
    VendorScoreResponse,
)
from marketplace.feedback.comment.management import AddComment, DeleteComment, average_rating, comments_for
from marketplace.feedback.vendor.management import (
    CommentOnVendor,
    RankVendor,
    average_vendor_score,
    comments_for_vendor,
    get_vendor_comment,
)
from marketplace.shared.ids import ensure_object_id


def _comment_response(comment) -> CommentResponse:
    return CommentResponse(
        id=str(comment.id),
        user_id=str(comment.user_id),
        product_id=str(comment.product_id),
        vendor_id=comment.vendor_id,
        rating=comment.rating,
        comments=comment.comments,
        created_at=comment.created_at,
    )


def _vendor_comment_response(note) -> VendorCommentResponse:
    return VendorCommentResponse(
        id=str(note.id),
        customer_id=str(note.customer_id),
        vendor_id=note.vendor_id,
        comment=note.comment,
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


# ---------------------------------------------------------------------------
# Comment Router
# ---------------------------------------------------------------------------
comment_router = APIRouter(prefix="/comments", tags=["comments"])


@comment_router.post("", status_code=201, response_model=CommentIdResponse)
async def add_comment(body: AddCommentRequest) -> CommentIdResponse:
    ensure_object_id(body.user_id, "user_id")
    ensure_object_id(body.product_id, "product_id")
    command = AddComment(
        user_id=body.user_id,
        product_id=body.product_id,
        vendor_id=body.vendor_id,
        rating=body.rating,
        comments=body.comments,
    )
    result = current_domain.process(command, asynchronous=False)
    return CommentIdResponse(comment_id=result)


@comment_router.get("/product/{product_id}", response_model=list[CommentResponse])
async def get_product_comments(product_id: str) -> list[CommentResponse]:
    return [_comment_response(c) for c in comments_for(product_id=product_id)]


@comment_router.get("/product/{product_id}/rating", response_model=RatingResponse)
async def get_product_rating(product_id: str) -> RatingResponse:
    rating = average_rating(product_id)
    if rating is None:
        raise ObjectNotFoundError({"_entity": f"No comments for product {product_id}"})
    return RatingResponse(product_id=product_id, average_rating=rating)


@comment_router.get("/vendor/{vendor_id}", response_model=list[CommentResponse])
async def get_vendor_product_comments(vendor_id: str) -> list[CommentResponse]:
    return [_comment_response(c) for c in comments_for(vendor_id=vendor_id)]


@comment_router.get("/user/{user_id}", response_model=list[CommentResponse])
async def get_user_comments(user_id: str) -> list[CommentResponse]:
    return [_comment_response(c) for c in comments_for(user_id=user_id)]


@comment_router.delete("/{comment_id}", response_model=StatusResponse)
async def delete_comment(comment_id: str) -> StatusResponse:
    ensure_object_id(comment_id, "comment_id")
    current_domain.process(DeleteComment(comment_id=comment_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Vendor Router
# ---------------------------------------------------------------------------
vendor_router = APIRouter(prefix="/vendors", tags=["vendors"])


@vendor_router.post("/{vendor_id}/rank", status_code=201, response_model=RankingIdResponse)
async def rank_vendor(vendor_id: str, body: RankVendorRequest) -> RankingIdResponse:
    ensure_object_id(body.customer_id, "customer_id")
    command = RankVendor(customer_id=body.customer_id, vendor_id=vendor_id, score=body.score)
    return RankingIdResponse(ranking_id=current_domain.process(command, asynchronous=False))


@vendor_router.get("/{vendor_id}/score", response_model=VendorScoreResponse)
async def get_vendor_score(vendor_id: str) -> VendorScoreResponse:
    return VendorScoreResponse(vendor_id=vendor_id, average_score=average_vendor_score(vendor_id))


@vendor_router.post("/{vendor_id}/comments", response_model=VendorCommentResponse)
async def comment_on_vendor(vendor_id: str, body: VendorCommentRequest) -> VendorCommentResponse:
    ensure_object_id(body.customer_id, "customer_id")
    command = CommentOnVendor(customer_id=body.customer_id, vendor_id=vendor_id, comment=body.comment)
    current_domain.process(command, asynchronous=False)
    return _vendor_comment_response(get_vendor_comment(body.customer_id, vendor_id))


@vendor_router.get("/{vendor_id}/comments", response_model=list[VendorCommentResponse])
async def get_vendor_comments(vendor_id: str) -> list[VendorCommentResponse]:
    return [_vendor_comment_response(n) for n in comments_for_vendor(vendor_id)]


@vendor_router.get("/{vendor_id}/comments/{customer_id}", response_model=VendorCommentResponse)
async def get_customer_vendor_comment(vendor_id: str, customer_id: str) -> VendorCommentResponse:
    return _vendor_comment_response(get_vendor_comment(customer_id, vendor_id))
