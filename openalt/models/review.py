"""
Review and user models.
"""

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text
from datetime import datetime
from typing import List, Optional

from .database import Base, utcnow
from .schema import CatalogModel


class Review(Base):
    """A user review of an alternative."""

    __tablename__ = "reviews"

    id = Column(String(100), primary_key=True)
    alternative_id = Column(String(200), ForeignKey("alternatives.id"), nullable=False, index=True)
    user_id = Column(String(100), ForeignKey("users.id"), nullable=False, index=True)
    rating = Column(Float, nullable=False)
    title = Column(String(200), nullable=False)
    comment = Column(Text, nullable=False, default="")
    helpful = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class User(Base):
    """
    Site user.

    bookmarks, reviews and submissions hold ids of other rows; they are weak
    references and nothing cascades from them.
    """

    __tablename__ = "users"

    id = Column(String(100), primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(200), nullable=False)
    avatar = Column(String(500))
    bookmarks = Column(JSON, nullable=False, default=list)
    reviews = Column(JSON, nullable=False, default=list)
    submissions = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=utcnow)


class ReviewRecord(CatalogModel):
    id: str
    alternative_id: str
    user_id: str
    rating: float
    title: str
    comment: str
    helpful: int = 0
    created_at: datetime
    updated_at: datetime


class UserRecord(CatalogModel):
    id: str
    username: str
    email: str
    avatar: Optional[str] = None
    bookmarks: List[str] = []
    reviews: List[str] = []
    submissions: List[str] = []
    created_at: datetime
