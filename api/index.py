"""
Librería Central Storefront - Main FastAPI Application

Single entry point for the storefront API, deployed as one serverless
function. Routers live in `storefront.routers`.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from storefront import config
from storefront.cart import get_cart_store
from storefront.db import is_supabase_configured
from storefront.errors import ERROR_INTERNAL
from storefront.logging import get_logger
from storefront.preview import get_preview_store
from storefront.routers.admin import router as admin_router
from storefront.routers.cart import router as cart_router
from storefront.routers.deps import CART_SESSION_HEADER, PREVIEW_SESSION_HEADER
from storefront.routers.public import router as public_router
from storefront.services.media import is_cloudinary_configured

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    if not is_supabase_configured():
        logger.warning("Supabase not configured: public reads return empty data")
    yield
    # Sessions are process-local; drop whatever expired while we ran
    get_cart_store().purge_expired()
    get_preview_store().purge_expired()


app = FastAPI(
    title="Librería Central",
    description="Storefront API: catalog, WhatsApp cart checkout and admin panel",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[CART_SESSION_HEADER, PREVIEW_SESSION_HEADER],
)

app.include_router(public_router, prefix="/api")
app.include_router(cart_router, prefix="/api/cart")
app.include_router(admin_router, prefix="/api/admin")


@app.exception_handler(APIError)
async def supabase_error_handler(request: Request, exc: APIError):
    """PostgREST errors surface as 500 with the database message."""
    logger.error(f"Supabase error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"detail": exc.message or ERROR_INTERNAL})


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "storefront",
        "supabase": is_supabase_configured(),
        "cloudinary": is_cloudinary_configured(),
    }
