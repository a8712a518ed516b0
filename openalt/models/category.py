"""
Software category models.
"""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from datetime import datetime
from typing import Optional

from .database import Base, utcnow
from .schema import CatalogModel


class Category(Base):
    """Database model for software categories."""

    __tablename__ = "categories"

    id = Column(String(100), primary_key=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    icon = Column(String(50), nullable=False, default="Box")
    parent_id = Column(String(100), ForeignKey("categories.id"), nullable=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


# Predefined categories. "other" backs the ingestion fallback.
SAMPLE_CATEGORIES = [
    {
        "id": "office-suites",
        "name": "Office Suites",
        "description": "Word processors, spreadsheets, and presentation software",
        "icon": "FileText",
        "slug": "office-suites",
    },
    {
        "id": "media-players",
        "name": "Media Players",
        "description": "Audio and video playback software",
        "icon": "Play",
        "slug": "media-players",
    },
    {
        "id": "graphic-design",
        "name": "Graphic Design",
        "description": "Image editing and design tools",
        "icon": "Palette",
        "slug": "graphic-design",
    },
    {
        "id": "development",
        "name": "Development Tools",
        "description": "IDEs, text editors, and development utilities",
        "icon": "Code",
        "slug": "development",
    },
    {
        "id": "communication",
        "name": "Communication",
        "description": "Email clients, messaging, and video conferencing",
        "icon": "MessageCircle",
        "slug": "communication",
    },
    {
        "id": "other",
        "name": "Other",
        "description": "Alternatives that do not fit an existing category yet",
        "icon": "Box",
        "slug": "other",
    },
]


class CategoryRecord(CatalogModel):
    """Category as seen by pages, SEO and the sitemap."""
    id: str
    name: str
    description: str
    icon: str
    slug: str
    parent_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
