"""Pydantic request/response schemas for the Catalogue API."""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class CreateCategoryRequest(BaseModel):
    name: str
    is_active: bool = True


class UpdateCategoryRequest(BaseModel):
    name: str


class CategoryIdResponse(BaseModel):
    category_id: str


class CategoryResponse(BaseModel):
    id: str
    name: str
    is_active: bool


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    vendor_id: str
    name: str
    description: str | None = None
    price: float
    category_id: str
    stock_quantity: int = 0
    image_path: str | None = None
    is_active: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "vendor_id": "vendor@example.com",
                    "name": "Ceramic Mug",
                    "description": "350ml stoneware mug",
                    "price": 12.5,
                    "category_id": "65f1c0ffee0000000000abcd",
                    "stock_quantity": 40,
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    name: str
    description: str | None = None
    price: float
    category_id: str
    image_path: str | None = None
    vendor_id: str | None = None


class ProductIdResponse(BaseModel):
    product_id: str


class ImageUploadResponse(BaseModel):
    image_path: str


class ProductResponse(BaseModel):
    id: str
    vendor_id: str
    name: str
    description: str | None = None
    price: float
    is_active: bool
    category_id: str
    category_name: str | None = None
    stock_quantity: int
    image_path: str | None = None
