from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
import uvicorn
import logging
from contextlib import asynccontextmanager

from smart_energy.core.config import settings
from smart_energy.core.database import init_db
from smart_energy.core.redis_client import init_redis, close_redis
from smart_energy.api.v1.api import api_router
from smart_energy.core.logging import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"Starting up {settings.APP_NAME}...")
    init_db()
    if settings.NOTIFIER_BACKEND == "redis":
        init_redis()
    logger.info(f"{settings.APP_NAME} startup complete")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    close_redis()


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Device control and energy usage monitoring for the smart home",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    TrustedHostMiddleware,
    allowed_hosts=settings.ALLOWED_HOSTS
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/api/health")
def health_check():
    """Main health check endpoint"""
    return {
        "status": "healthy",
        "service": "smart-energy",
        "version": settings.VERSION,
        "modules": ["devices", "energy"],
        "notifier": settings.NOTIFIER_BACKEND
    }


# Root endpoint
@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.APP_NAME,
        "description": "Device control and energy usage monitoring",
        "version": settings.VERSION,
        "docs": "/docs",
        "modules": ["devices", "energy"]
    }


if __name__ == "__main__":
    uvicorn.run(
        "smart_energy.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
