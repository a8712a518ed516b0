"""
Search query descriptor and result envelope.
"""

from typing import List, Literal, Optional

from .alternative import AlternativeRecord
from .schema import CatalogModel

SortKey = Literal["popularity", "rating", "newest", "name"]
SortOrder = Literal["asc", "desc"]


class SearchFilters(CatalogModel):
    """Filters and ordering for an alternatives search."""
    category: Optional[str] = None
    license: Optional[str] = None
    platform: Optional[str] = None
    rating: Optional[float] = None  # minimum rating
    sort_by: SortKey = "popularity"
    sort_order: SortOrder = "desc"


class SearchResult(CatalogModel):
    """One page of alternatives plus the filters that produced it."""
    alternatives: List[AlternativeRecord]
    total: int
    page: int
    limit: int
    filters: SearchFilters
