"""Translation of domain and catalogue errors into HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers as register_protean_exception_handlers

from catalogue.shared.exceptions import CategoryTreeIntegrityError, EventPublicationError, SkuConflictError

logger = structlog.get_logger(__name__)


def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    errors = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors[".".join(location) or "body"] = error.get("msg", "Invalid value")
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": _field_errors(exc)},
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": exc.messages},
    )


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


async def sku_conflict_handler(request: Request, exc: SkuConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": str(exc), "sku_ids": exc.sku_ids},
    )


async def event_publication_handler(request: Request, exc: EventPublicationError) -> JSONResponse:
    # The product is already stored; the caller gets its id to reconcile.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Product saved but event publication failed", "product_id": exc.product_id},
    )


async def tree_integrity_handler(request: Request, exc: CategoryTreeIntegrityError) -> JSONResponse:
    logger.error("Category tree integrity violated", orphan_ids=exc.orphan_ids)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Category hierarchy is inconsistent"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then the catalogue's response shapes on top."""
    register_protean_exception_handlers(app)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(SkuConflictError, sku_conflict_handler)
    app.add_exception_handler(EventPublicationError, event_publication_handler)
    app.add_exception_handler(CategoryTreeIntegrityError, tree_integrity_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
