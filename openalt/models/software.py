"""
Proprietary software models.
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text
from datetime import datetime
from typing import Optional

from .database import Base, utcnow
from .schema import CatalogModel


class ProprietarySoftware(Base):
    """A proprietary product that alternatives are listed against."""

    __tablename__ = "proprietary_software"

    id = Column(String(100), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    website = Column(String(500), nullable=False, default="")
    logo = Column(String(500))
    category_id = Column(String(100), ForeignKey("categories.id"), nullable=False, index=True)
    popularity = Column(Float, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


SAMPLE_PROPRIETARY_SOFTWARE = [
    {
        "id": "microsoft-office",
        "name": "Microsoft Office",
        "description": "Microsoft's productivity suite including Word, Excel, PowerPoint",
        "website": "https://office.microsoft.com",
        "category_id": "office-suites",
        "popularity": 95,
    },
    {
        "id": "spotify",
        "name": "Spotify",
        "description": "Music streaming service with premium features",
        "website": "https://spotify.com",
        "category_id": "media-players",
        "popularity": 90,
    },
    {
        "id": "photoshop",
        "name": "Adobe Photoshop",
        "description": "Professional image editing and graphic design software",
        "website": "https://adobe.com/products/photoshop",
        "category_id": "graphic-design",
        "popularity": 88,
    },
    {
        "id": "sublime-text",
        "name": "Sublime Text",
        "description": "Sophisticated text editor for code, markup and prose",
        "website": "https://sublimetext.com",
        "category_id": "development",
        "popularity": 75,
    },
]


class ProprietarySoftwareRecord(CatalogModel):
    """Proprietary product record."""
    id: str
    name: str
    description: str
    website: str
    logo: Optional[str] = None
    category_id: str
    popularity: float
    created_at: datetime
    updated_at: datetime
