"""
Sitemap route.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..models.database import get_db
from ..services.catalog import CatalogService
from ..services.sitemap import generate_sitemap

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml")
async def sitemap(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """XML sitemap of static pages, categories and alternatives."""
    catalog = CatalogService(db)
    content = generate_sitemap(
        await catalog.list_categories(),
        await catalog.list_alternatives(),
        site_url=settings.site_url,
    )
    return Response(content=content, media_type="application/xml")
