"""Pydantic request/response schemas for the Feedback API."""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Product comments
# ---------------------------------------------------------------------------
class AddCommentRequest(BaseModel):
    user_id: str
    product_id: str
    vendor_id: str
    rating: int | None = None
    comments: str | None = None


class CommentIdResponse(BaseModel):
    comment_id: str


class CommentResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    vendor_id: str
    rating: int | None = None
    comments: str | None = None
    created_at: datetime | None = None


class RatingResponse(BaseModel):
    product_id: str
    average_rating: float


# ---------------------------------------------------------------------------
# Vendor feedback
# ---------------------------------------------------------------------------
class RankVendorRequest(BaseModel):
    customer_id: str
    score: int


class VendorCommentRequest(BaseModel):
    customer_id: str
    comment: str


class RankingIdResponse(BaseModel):
    ranking_id: str


class VendorScoreResponse(BaseModel):
    vendor_id: str
    average_score: float


class VendorCommentResponse(BaseModel):
    id: str
    customer_id: str
    vendor_id: str
    comment: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
