"""
Data models for Open Alternatives.
"""

from .database import Base, get_db, init_db
from .category import Category, CategoryRecord, SAMPLE_CATEGORIES
from .software import ProprietarySoftware, ProprietarySoftwareRecord, SAMPLE_PROPRIETARY_SOFTWARE
from .alternative import (
    OpenSourceAlternative,
    AlternativeRecord,
    Platform,
    Feature,
    SAMPLE_ALTERNATIVES,
)
from .review import Review, ReviewRecord, User, UserRecord
from .search import SearchFilters, SearchResult

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "Category",
    "CategoryRecord",
    "SAMPLE_CATEGORIES",
    "ProprietarySoftware",
    "ProprietarySoftwareRecord",
    "SAMPLE_PROPRIETARY_SOFTWARE",
    "OpenSourceAlternative",
    "AlternativeRecord",
    "Platform",
    "Feature",
    "SAMPLE_ALTERNATIVES",
    "Review",
    "ReviewRecord",
    "User",
    "UserRecord",
    "SearchFilters",
    "SearchResult",
]
