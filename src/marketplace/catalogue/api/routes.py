"""FastAPI routes for the Catalogue: products and categories."""

from fastapi import APIRouter, File, Form, UploadFile
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from marketplace.api.schemas import StatusResponse
from marketplace.catalogue.api.schemas import (
    CategoryIdResponse,
    CategoryResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    ImageUploadResponse,
    ProductIdResponse,
    ProductResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from marketplace.catalogue.category.category import Category
from marketplace.catalogue.category.management import (
    ActivateCategory,
    CreateCategory,
    DeactivateCategory,
    DeleteCategory,
    RenameCategory,
)
from marketplace.catalogue.product.creation import AddProduct, UpdateProduct
from marketplace.catalogue.product.images import AttachProductImage, store_image
from marketplace.catalogue.product.lifecycle import ActivateProduct, DeactivateProduct, DeleteProduct
from marketplace.catalogue.product.product import Product
from marketplace.catalogue.queries import (
    available_products,
    list_categories,
    list_products,
    products_by_category,
    products_with_categories,
)
from marketplace.shared.ids import ensure_object_id


def _category_response(category) -> CategoryResponse:
    return CategoryResponse(id=str(category.id), name=category.name, is_active=category.is_active)


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        vendor_id=product.vendor_id,
        name=product.name,
        description=product.description,
        price=product.price,
        is_active=product.is_active,
        category_id=str(product.category_id),
        category_name=product.category_name,
        stock_quantity=product.stock_quantity or 0,
        image_path=product.image_path,
    )


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def get_products() -> list[ProductResponse]:
    return [_product_response(p) for p in list_products()]


@product_router.get("/available", response_model=list[ProductResponse])
async def get_available_products() -> list[ProductResponse]:
    return [_product_response(p) for p in available_products()]


@product_router.get("/with-categories", response_model=list[ProductResponse])
async def get_products_with_categories() -> list[ProductResponse]:
    return [_product_response(p) for p in products_with_categories()]


@product_router.get("/category/{category_id}", response_model=list[ProductResponse])
async def get_products_by_category(category_id: str) -> list[ProductResponse]:
    ensure_object_id(category_id, "category_id")
    return [_product_response(p) for p in products_by_category(category_id)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    ensure_object_id(product_id, "product_id")
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: CreateProductRequest) -> ProductIdResponse:
    ensure_object_id(body.category_id, "category_id")
    command = AddProduct(
        vendor_id=body.vendor_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        stock_quantity=body.stock_quantity,
        image_path=body.image_path,
        is_active=body.is_active,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.post("/upload-image", response_model=ImageUploadResponse)
async def upload_product_image(
    product_id: str | None = Form(None),
    image_file: UploadFile | None = File(None),
) -> ImageUploadResponse:
    """Store an uploaded image and point the product at it."""
    if not product_id:
        raise ValidationError({"product_id": ["Product ID is required"]})
    if image_file is None:
        raise ValidationError({"image_file": ["No file uploaded"]})
    ensure_object_id(product_id, "product_id")

    # Unknown products are rejected before anything is written to disk
    current_domain.repository_for(Product).get(product_id)

    image_path = store_image(image_file.filename, await image_file.read())
    current_domain.process(AttachProductImage(product_id=product_id, image_path=image_path), asynchronous=False)
    return ImageUploadResponse(image_path=image_path)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> StatusResponse:
    ensure_object_id(product_id, "product_id")
    ensure_object_id(body.category_id, "category_id")
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        image_path=body.image_path,
        vendor_id=body.vendor_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.patch("/{product_id}/activate", response_model=StatusResponse)
async def activate_product(product_id: str) -> StatusResponse:
    ensure_object_id(product_id, "product_id")
    current_domain.process(ActivateProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.patch("/{product_id}/deactivate", response_model=StatusResponse)
async def deactivate_product(product_id: str) -> StatusResponse:
    ensure_object_id(product_id, "product_id")
    current_domain.process(DeactivateProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str) -> StatusResponse:
    ensure_object_id(product_id, "product_id")
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.get("", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [_category_response(c) for c in list_categories()]


@category_router.get("/active", response_model=list[CategoryResponse])
async def get_active_categories() -> list[CategoryResponse]:
    return [_category_response(c) for c in list_categories(is_active=True)]


@category_router.get("/inactive", response_model=list[CategoryResponse])
async def get_inactive_categories() -> list[CategoryResponse]:
    return [_category_response(c) for c in list_categories(is_active=False)]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    ensure_object_id(category_id, "category_id")
    return _category_response(current_domain.repository_for(Category).get(category_id))


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(name=body.name, is_active=body.is_active)
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    ensure_object_id(category_id, "category_id")
    current_domain.process(RenameCategory(category_id=category_id, name=body.name), asynchronous=False)
    return StatusResponse()


@category_router.patch("/{category_id}/activate", response_model=StatusResponse)
async def activate_category(category_id: str) -> StatusResponse:
    ensure_object_id(category_id, "category_id")
    current_domain.process(ActivateCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


@category_router.patch("/{category_id}/deactivate", response_model=StatusResponse)
async def deactivate_category(category_id: str) -> StatusResponse:
    ensure_object_id(category_id, "category_id")
    current_domain.process(DeactivateCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    ensure_object_id(category_id, "category_id")
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()
