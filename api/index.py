"""
Storefront - Main FastAPI Application

Single entry point for the catalog, cart and checkout API.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import CORS_ORIGINS
from storefront.errors import StorefrontError
from storefront.logging import get_logger

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

app = FastAPI(
    title="Storefront",
    description="Catalog, cart and chat checkout API",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    """Cart and checkout errors are recoverable; report them to the client"""
    logger.warning(f"{request.method} {request.url.path} failed: {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": exc.message, "retryable": exc.retryable},
    )


from storefront.routers.products import router as products_router
from storefront.routers.cart import router as cart_router

app.include_router(products_router)
app.include_router(cart_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}
