"""FastAPI routes for stock management."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from marketplace.inventory.api.schemas import AdjustStockRequest, StockResponse
from marketplace.inventory.stock import DecreaseStock, IncreaseStock, get_stock
from marketplace.shared.ids import ensure_object_id

inventory_router = APIRouter(prefix="/inventory", tags=["inventory"])


@inventory_router.get("/{product_id}/stock", response_model=StockResponse)
async def read_stock(product_id: str) -> StockResponse:
    return StockResponse(product_id=product_id, stock_quantity=get_stock(product_id))


@inventory_router.post("/{product_id}/increase", response_model=StockResponse)
async def increase_stock(product_id: str, body: AdjustStockRequest) -> StockResponse:
    ensure_object_id(product_id, "product_id")
    command = IncreaseStock(product_id=product_id, quantity=body.quantity)
    stock = current_domain.process(command, asynchronous=False)
    return StockResponse(product_id=product_id, stock_quantity=stock)


@inventory_router.post("/{product_id}/decrease", response_model=StockResponse)
async def decrease_stock(product_id: str, body: AdjustStockRequest) -> StockResponse:
    ensure_object_id(product_id, "product_id")
    command = DecreaseStock(product_id=product_id, quantity=body.quantity)
    stock = current_domain.process(command, asynchronous=False)
    return StockResponse(product_id=product_id, stock_quantity=stock)
