"""Pydantic request/response schemas for the Inventory API."""

from pydantic import BaseModel


class AdjustStockRequest(BaseModel):
    # Validated by the stock commands so a non-positive quantity is a 400
    quantity: int


class StockResponse(BaseModel):
    product_id: str
    stock_quantity: int
