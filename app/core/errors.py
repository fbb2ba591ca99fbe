"""
Exception types and the handlers that turn them into plain-text responses.

    400  request validation (missing fields, bad types, non-numeric ids)
    404  unknown product id, unknown route
    500  anything the store raises, with the raw driver message
"""

from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("name", "price", "qty")

PRODUCT_NOT_FOUND = "Product not found"
ROUTE_NOT_FOUND = "Route not found"
REQUIRED_FIELDS_MISSING = "Name, price and qty are required"
INVALID_PRODUCT_ID = "Invalid product id"


class ProductNotFoundError(Exception):
    def __init__(self, product_id: int):
        super().__init__(PRODUCT_NOT_FOUND)
        self.product_id = product_id


class DatabaseUnavailableError(Exception):
    """The initial connect attempt failed, so there is no handle to query with."""


def store_error_message(exc: Exception) -> str:
    # SQLAlchemy wraps the DBAPI error; the caller gets the driver's own text
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


def _is_missing(error: Dict[str, Any]) -> bool:
    if error.get("type") == "missing":
        return True
    loc = error.get("loc", ())
    if len(loc) < 2 or loc[0] != "body" or loc[-1] not in REQUIRED_FIELDS:
        return False
    value = error.get("input")
    return value is None or (isinstance(value, str) and not value.strip())


def validation_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        return INVALID_PRODUCT_ID
    if any(_is_missing(error) for error in errors):
        return REQUIRED_FIELDS_MISSING

    first = errors[0] if errors else {}
    if first.get("type") == "json_invalid":
        field = "body"
    else:
        field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "body"
    return f"Invalid product data: {field}: {first.get('msg', 'invalid value')}"


async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return PlainTextResponse(PRODUCT_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return PlainTextResponse(validation_error_message(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def store_error_handler(request: Request, exc: Exception):
    message = store_error_message(exc)
    logger.error("%s %s failed: %s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched paths (404) and unmatched verbs on known paths (405) look the same
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(ROUTE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(DatabaseUnavailableError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
