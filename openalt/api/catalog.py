"""
Catalog API routes.

Read-only access to categories, proprietary products and alternatives,
plus the alternatives search, per-page SEO data and the linked-data export.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.alternative import AlternativeRecord
from ..models.category import CategoryRecord
from ..models.database import get_db
from ..models.review import ReviewRecord
from ..models.search import SearchFilters, SearchResult, SortKey, SortOrder
from ..models.software import ProprietarySoftwareRecord
from ..services.catalog import CatalogService
from ..services.linked_data import SERIALIZATION_FORMATS, CatalogGraph
from ..services.seo import alternative_page_seo

router = APIRouter(prefix="/api", tags=["catalog"])


def get_catalog(db: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get("/categories", response_model=List[CategoryRecord])
async def list_categories(catalog: CatalogService = Depends(get_catalog)):
    """List all categories."""
    return await catalog.list_categories()


@router.get("/categories/{slug}")
async def get_category(slug: str, catalog: CatalogService = Depends(get_catalog)):
    """A category with its proprietary products and alternatives."""
    category = await catalog.get_category(slug)
    if not category:
        raise HTTPException(status_code=404, detail=f"Category not found: {slug}")

    proprietary = await catalog.list_proprietary_software(category_id=category.id)
    alternatives = await catalog.list_alternatives(category_id=category.id)
    return {
        "category": category.model_dump(mode="json", by_alias=True),
        "proprietarySoftware": [p.model_dump(mode="json", by_alias=True) for p in proprietary],
        "alternatives": [a.model_dump(mode="json", by_alias=True) for a in alternatives],
    }


@router.get("/proprietary", response_model=List[ProprietarySoftwareRecord])
async def list_proprietary_software(
    category: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog),
):
    """List proprietary products, most popular first."""
    return await catalog.list_proprietary_software(category_id=category)


@router.get("/proprietary/{software_id}/alternatives", response_model=List[AlternativeRecord])
async def list_alternatives_for(software_id: str, catalog: CatalogService = Depends(get_catalog)):
    """Open-source alternatives to one proprietary product."""
    if not await catalog.get_proprietary_software(software_id):
        raise HTTPException(status_code=404, detail=f"Proprietary software not found: {software_id}")
    return await catalog.alternatives_for(software_id)


@router.get("/alternatives", response_model=SearchResult)
async def search_alternatives(
    q: Optional[str] = Query(None, description="Text matched against name and description"),
    category: Optional[str] = None,
    license: Optional[str] = None,
    platform: Optional[str] = None,
    rating: Optional[float] = Query(None, ge=0, le=5, description="Minimum rating"),
    sort_by: SortKey = "popularity",
    sort_order: SortOrder = "desc",
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Search alternatives.

    Sort keys: popularity (bookmarks), rating, newest, name.
    """
    filters = SearchFilters(
        category=category,
        license=license,
        platform=platform,
        rating=rating,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return await catalog.search(filters, query=q, page=page, limit=limit)


@router.get("/alternatives/{alternative_id}", response_model=AlternativeRecord)
async def get_alternative(alternative_id: str, catalog: CatalogService = Depends(get_catalog)):
    """Get one alternative."""
    alternative = await catalog.get_alternative(alternative_id)
    if not alternative:
        raise HTTPException(status_code=404, detail=f"Alternative not found: {alternative_id}")
    return alternative


@router.get("/alternatives/{alternative_id}/reviews", response_model=List[ReviewRecord])
async def list_reviews(alternative_id: str, catalog: CatalogService = Depends(get_catalog)):
    """Reviews of an alternative, most helpful first."""
    if not await catalog.get_alternative(alternative_id):
        raise HTTPException(status_code=404, detail=f"Alternative not found: {alternative_id}")
    return await catalog.list_reviews(alternative_id)


@router.get("/alternatives/{alternative_id}/seo")
async def get_alternative_seo(alternative_id: str, catalog: CatalogService = Depends(get_catalog)):
    """Meta tags and JSON-LD blocks for an alternative's page."""
    alternative = await catalog.get_alternative(alternative_id)
    if not alternative:
        raise HTTPException(status_code=404, detail=f"Alternative not found: {alternative_id}")

    categories = {c.id: c for c in await catalog.list_categories()}
    proprietary = await catalog.get_proprietary_software(alternative.proprietary_software_id)
    return alternative_page_seo(alternative, categories.get(alternative.category_id), proprietary)


@router.get("/catalog/export")
async def export_catalog(
    format: str = Query("turtle", pattern="^(turtle|xml|jsonld)$"),
    catalog: CatalogService = Depends(get_catalog),
):
    """Export the catalog as schema.org linked data."""
    graph = CatalogGraph().add_catalog(
        await catalog.list_categories(),
        await catalog.list_proprietary_software(),
        await catalog.list_alternatives(),
    )
    return Response(content=graph.serialize(format), media_type=SERIALIZATION_FORMATS[format][1])
