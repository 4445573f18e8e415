"""
Rentals FastAPI Application

Main entry point for the Rentals API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.database import MongoDB
from common.utils import register_exception_handlers

# App-specific imports
from rentals.config import settings
from rentals.database import ensure_indexes

# Import routers
from rentals.routers import (
    auth_router,
    user_router,
    city_router,
    place_router,
    reservation_router,
    review_router,
)

# Import service initialization
from rentals.dependencies import init_all_services

logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown tasks like database connections
    and service initialization.
    """
    # Startup
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)
    logger.info("Starting Rentals API...")

    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )

    await ensure_indexes(main_db.db)

    init_all_services(db=main_db.db, settings=settings)
    logger.info("All services initialized successfully!")

    yield

    # Shutdown
    logger.info("Shutting down Rentals API...")
    await main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Rentals API",
    description="Rental marketplace: places, reservations and reviews",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Exception Handlers
# =============================================================================
register_exception_handlers(app)

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
app.include_router(auth_router, prefix=settings.API_PREFIX, tags=["Authentication"])
app.include_router(user_router, prefix=settings.API_PREFIX, tags=["Users"])
app.include_router(city_router, prefix=settings.API_PREFIX, tags=["Cities"])
app.include_router(place_router, prefix=settings.API_PREFIX, tags=["Places"])
app.include_router(reservation_router, prefix=settings.API_PREFIX, tags=["Reservations"])
app.include_router(review_router, prefix=settings.API_PREFIX, tags=["Reviews"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and database connection.
    """
    return {
        "status": "ok",
        "version": "1.0.0",
        "database": main_db.is_connected,
    }


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
