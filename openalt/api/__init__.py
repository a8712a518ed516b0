"""
Open Alternatives API Routes.
"""

from .catalog import router as catalog_router
from .contact import router as contact_router
from .sitemap import router as sitemap_router

__all__ = [
    "catalog_router",
    "contact_router",
    "sitemap_router",
]
