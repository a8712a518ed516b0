"""
Open Alternatives

Main application entry point.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from .config import get_settings
from .models.database import async_session_maker, get_db, init_db
from .services.catalog import CatalogService, seed_catalog
from .api import catalog_router, contact_router, sitemap_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Open Alternatives")

    # Initialize database
    await init_db()
    logger.info("Database initialized")

    # Load the sample catalog
    async with async_session_maker() as db:
        added = await seed_catalog(db)
    logger.info(f"Catalog loaded ({sum(added.values())} new rows)")

    if not (settings.github_token and settings.github_repo):
        logger.warning("GitHub token/repository not configured; contact form submissions will fail")

    logger.info(f"Open Alternatives running at http://{settings.host}:{settings.port}")

    yield

    logger.info("Shutting down Open Alternatives")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Open Alternatives - a catalog of open-source alternatives to proprietary software

    * Catalog: `/api/categories`, `/api/alternatives`
    * Linked data: `/api/catalog/export`
    * Sitemap: `/sitemap.xml`
    * Contact: `/api/contact`
    """,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(catalog_router)
app.include_router(contact_router)
app.include_router(sitemap_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


@app.get("/api/stats")
async def get_statistics(db: AsyncSession = Depends(get_db)):
    """Catalog row counts."""
    return await CatalogService(db).get_statistics()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "openalt.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
