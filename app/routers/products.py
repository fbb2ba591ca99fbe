# app/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.errors import ProductNotFoundError
from app.core.logging import get_logger
from app.crud import products as crud
from app.db.database import get_session
from app.schemas.products import SQL_INT_MAX, ProductCreate, ProductCreated, ProductRead

logger = get_logger(__name__)

router = APIRouter(tags=["Products"])

_TEXT = {"content": {"text/plain": {"schema": {"type": "string"}}}}
NOT_FOUND = {404: {"description": "Product not found", **_TEXT}}
BAD_REQUEST = {400: {"description": "Missing or invalid fields", **_TEXT}}
SERVER_ERROR = {500: {"description": "Database error message", **_TEXT}}


# 1. READ ALL (GET /api/products)
@router.get(
    "",
    response_model=List[ProductRead],
    summary="Get all products in ascending order by id",
    responses={200: {"description": "List of all products"}, **SERVER_ERROR},
)
async def read_products(session: AsyncSession = Depends(get_session)):
    return await crud.list_products(session)


# 2. READ SINGLE (GET /api/products/{product_id})
@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get a single product by ID",
    responses={200: {"description": "Product details"}, **BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
async def read_product(
    product_id: int = Path(ge=1, le=SQL_INT_MAX),
    session: AsyncSession = Depends(get_session),
):
    product = await crud.get_product(session, product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


# 3. CREATE (POST /api/products)
@router.post(
    "",
    response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new product",
    responses={201: {"description": "Product created successfully"}, **BAD_REQUEST, **SERVER_ERROR},
)
async def create_product(
    product_in: ProductCreate,
    session: AsyncSession = Depends(get_session),
):
    """Name, price and qty are required. Description defaults to an empty string."""
    product = await crud.create_product(session, product_in)
    logger.info("Created product %s", product.id)
    return ProductCreated(message="Product created successfully", id=product.id)


# 4. UPDATE (PUT /api/products/{product_id})
@router.put(
    "/{product_id}",
    response_class=PlainTextResponse,
    summary="Update an existing product",
    responses={
        200: {"description": "Product updated successfully", **_TEXT},
        **BAD_REQUEST,
        **NOT_FOUND,
        **SERVER_ERROR,
    },
)
async def update_product(
    product_in: ProductCreate,
    product_id: int = Path(ge=1, le=SQL_INT_MAX),
    session: AsyncSession = Depends(get_session),
):
    """Replaces every mutable field. There is no partial update."""
    if await crud.update_product(session, product_id, product_in) == 0:
        raise ProductNotFoundError(product_id)
    logger.info("Updated product %s", product_id)
    return "Product updated successfully"


# 5. DELETE (DELETE /api/products/{product_id})
@router.delete(
    "/{product_id}",
    response_class=PlainTextResponse,
    summary="Delete a product by ID",
    responses={
        200: {"description": "Product deleted successfully", **_TEXT},
        **BAD_REQUEST,
        **NOT_FOUND,
        **SERVER_ERROR,
    },
)
async def delete_product(
    product_id: int = Path(ge=1, le=SQL_INT_MAX),
    session: AsyncSession = Depends(get_session),
):
    if await crud.delete_product(session, product_id) == 0:
        raise ProductNotFoundError(product_id)
    logger.info("Deleted product %s", product_id)
    return "Product deleted successfully"
