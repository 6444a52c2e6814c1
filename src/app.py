"""Catalog service FastAPI application.

Processes commands synchronously via HTTP inside the catalogue domain
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml
# ("test", "production", ...).
from uuid import uuid4

from catalogue.domain import catalogue  # noqa: E402
from catalogue.utils.logging import add_context, clear_context, get_logger
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

catalogue.init()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Catalog Service API",
    description="Categories, products, option groups and SKUs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the catalogue domain context and bind request info to log lines."""
    add_context(
        request_id=request.headers.get("X-Request-ID", uuid4().hex),
        method=request.method,
        path=request.url.path,
    )
    try:
        with catalogue.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import category_router, product_router, register_exception_handlers  # noqa: E402

app.include_router(product_router)
app.include_router(category_router)
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domain": catalogue.name,
        }
    )
