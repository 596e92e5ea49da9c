"""
ErrandRunners Cart Service

Cart, delivery pricing and checkout API for the ErrandRunners customer app.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from .core.config import settings  # noqa: E402
from .core.dependencies import close_rules_client, sync_service_zones  # noqa: E402
from .routes import stores_router, cart_router, pricing_router, checkout_router  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Backend configured: {settings.backend_configured}")
    if settings.backend_configured:
        await sync_service_zones()

    yield

    logger.info(f"{settings.app_name} shutting down...")
    await close_rules_client()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Single-store cart, delivery pricing and checkout",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(stores_router)
app.include_router(cart_router)
app.include_router(pricing_router)
app.include_router(checkout_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "ErrandRunners Cart API",
        "docs": "/docs",
        "endpoints": {
            "stores": "/api/stores",
            "cart": "/api/cart",
            "pricing": "/api/pricing",
            "checkout": "/api/checkout",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "errandrunners-cart"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "errandrunners.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
