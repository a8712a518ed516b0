"""
Catalog service.

Read access, search and write-through for the catalog store. Routes, the
sitemap and the ingestion pipeline all go through this class instead of
touching the ORM directly.
"""

import copy
import logging
from typing import Dict, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.alternative import AlternativeRecord, OpenSourceAlternative, SAMPLE_ALTERNATIVES
from ..models.category import Category, CategoryRecord, SAMPLE_CATEGORIES
from ..models.review import Review, ReviewRecord, User
from ..models.search import SearchFilters, SearchResult
from ..models.software import (
    ProprietarySoftware,
    ProprietarySoftwareRecord,
    SAMPLE_PROPRIETARY_SOFTWARE,
)

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "popularity": OpenSourceAlternative.bookmark_count,
    "rating": OpenSourceAlternative.rating,
    "newest": OpenSourceAlternative.created_at,
    "name": func.lower(OpenSourceAlternative.name),
}

# Engagement numbers and creation time belong to the store
STORE_OWNED_FIELDS = {"created_at", "rating", "review_count", "bookmark_count"}

# Collected listings carry no value for these, so an update keeps the stored one
UNCOLLECTED_FIELDS = {"languages", "screenshots", "logo", "contributors"}


def _merge_features(stored: List[dict], incoming: List[dict]) -> List[dict]:
    """Incoming features, keeping the stored description and notes for known names."""
    known = {f["name"]: f for f in stored}
    merged = []
    for feature in incoming:
        previous = known.get(feature["name"])
        if previous and not feature["description"]:
            feature = {
                **feature,
                "description": previous.get("description", ""),
                "notes": previous.get("notes"),
            }
        merged.append(feature)
    return merged


class CatalogService:
    """Queries and updates over one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # -- categories ---------------------------------------------------------

    async def list_categories(self) -> List[CategoryRecord]:
        result = await self.db.execute(select(Category).order_by(Category.name))
        return [CategoryRecord.model_validate(c) for c in result.scalars().all()]

    async def get_category(self, slug: str) -> Optional[CategoryRecord]:
        result = await self.db.execute(select(Category).where(Category.slug == slug))
        category = result.scalar_one_or_none()
        return CategoryRecord.model_validate(category) if category else None

    async def category_exists(self, category_id: str) -> bool:
        return await self.db.get(Category, category_id) is not None

    # -- proprietary software -----------------------------------------------

    async def list_proprietary_software(
        self, category_id: Optional[str] = None
    ) -> List[ProprietarySoftwareRecord]:
        query = select(ProprietarySoftware).order_by(ProprietarySoftware.popularity.desc())
        if category_id:
            query = query.where(ProprietarySoftware.category_id == category_id)
        result = await self.db.execute(query)
        return [ProprietarySoftwareRecord.model_validate(p) for p in result.scalars().all()]

    async def get_proprietary_software(self, software_id: str) -> Optional[ProprietarySoftwareRecord]:
        software = await self.db.get(ProprietarySoftware, software_id)
        return ProprietarySoftwareRecord.model_validate(software) if software else None

    # -- alternatives -------------------------------------------------------

    async def list_alternatives(self, category_id: Optional[str] = None) -> List[AlternativeRecord]:
        query = select(OpenSourceAlternative).order_by(OpenSourceAlternative.id)
        if category_id:
            query = query.where(OpenSourceAlternative.category_id == category_id)
        result = await self.db.execute(query)
        return [AlternativeRecord.model_validate(a) for a in result.scalars().all()]

    async def get_alternative(self, alternative_id: str) -> Optional[AlternativeRecord]:
        alternative = await self.db.get(OpenSourceAlternative, alternative_id)
        return AlternativeRecord.model_validate(alternative) if alternative else None

    async def alternatives_for(self, proprietary_id: str) -> List[AlternativeRecord]:
        """Alternatives listed against one proprietary product, best rated first."""
        result = await self.db.execute(
            select(OpenSourceAlternative)
            .where(OpenSourceAlternative.proprietary_software_id == proprietary_id)
            .order_by(OpenSourceAlternative.rating.desc(), OpenSourceAlternative.id)
        )
        return [AlternativeRecord.model_validate(a) for a in result.scalars().all()]

    async def list_reviews(self, alternative_id: str) -> List[ReviewRecord]:
        result = await self.db.execute(
            select(Review)
            .where(Review.alternative_id == alternative_id)
            .order_by(Review.helpful.desc(), Review.created_at.desc())
        )
        return [ReviewRecord.model_validate(r) for r in result.scalars().all()]

    async def search(
        self,
        filters: SearchFilters,
        query: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
    ) -> SearchResult:
        """
        Search alternatives.

        Category, license, minimum rating and the free-text query are pushed
        into SQL. Platforms live in a JSON column, so that filter and the
        paging after it run in Python.
        """
        stmt = select(OpenSourceAlternative)

        if filters.category:
            stmt = stmt.where(OpenSourceAlternative.category_id == filters.category)
        if filters.license:
            stmt = stmt.where(func.lower(OpenSourceAlternative.license) == filters.license.lower())
        if filters.rating is not None:
            stmt = stmt.where(OpenSourceAlternative.rating >= filters.rating)
        if query:
            pattern = f"%{query.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(OpenSourceAlternative.name).like(pattern),
                    func.lower(OpenSourceAlternative.description).like(pattern),
                )
            )

        column = SORT_COLUMNS[filters.sort_by]
        order = column.asc() if filters.sort_order == "asc" else column.desc()
        stmt = stmt.order_by(order, OpenSourceAlternative.id)

        result = await self.db.execute(stmt)
        matches = [AlternativeRecord.model_validate(a) for a in result.scalars().all()]

        if filters.platform:
            wanted = filters.platform.lower()
            matches = [
                a for a in matches
                if any(p.supported and p.name.lower() == wanted for p in a.platforms)
            ]

        start = (page - 1) * limit
        return SearchResult(
            alternatives=matches[start:start + limit],
            total=len(matches),
            page=page,
            limit=limit,
            filters=filters,
        )

    # -- writes -------------------------------------------------------------

    async def upsert_alternative(self, record: AlternativeRecord, proprietary_name: str) -> bool:
        """
        Insert or replace an alternative.

        A missing proprietary product gets a placeholder row so the
        alternative's reference always resolves. An update keeps the stored
        engagement numbers and the fields collected listings never carry.
        Returns True when a new alternative row was created.
        """
        if await self.db.get(ProprietarySoftware, record.proprietary_software_id) is None:
            logger.info(f"Creating placeholder proprietary software: {proprietary_name}")
            self.db.add(ProprietarySoftware(
                id=record.proprietary_software_id,
                name=proprietary_name,
                category_id=record.category_id,
            ))

        existing = await self.db.get(OpenSourceAlternative, record.id)
        if existing is None:
            self.db.add(OpenSourceAlternative(**record.model_dump()))
            await self.db.flush()
            return True

        values = record.model_dump(exclude=STORE_OWNED_FIELDS | UNCOLLECTED_FIELDS)
        values["features"] = _merge_features(existing.features or [], values["features"])
        for key, value in values.items():
            setattr(existing, key, value)
        await self.db.flush()
        return False

    async def get_statistics(self) -> Dict[str, int]:
        """Row counts per catalog table."""
        counts = {}
        for name, model in (
            ("categories", Category),
            ("proprietary_software", ProprietarySoftware),
            ("alternatives", OpenSourceAlternative),
            ("reviews", Review),
            ("users", User),
        ):
            counts[name] = await self.db.scalar(select(func.count()).select_from(model))
        return counts


async def seed_catalog(db: AsyncSession) -> Dict[str, int]:
    """
    Load the sample dataset into the store.

    Rows whose id already exists are left alone, so seeding is safe to run
    on every startup. Returns how many rows were added per table.
    """
    added = {"categories": 0, "proprietary_software": 0, "alternatives": 0}

    for model, rows, key in (
        (Category, SAMPLE_CATEGORIES, "categories"),
        (ProprietarySoftware, SAMPLE_PROPRIETARY_SOFTWARE, "proprietary_software"),
        (OpenSourceAlternative, SAMPLE_ALTERNATIVES, "alternatives"),
    ):
        for data in rows:
            if await db.get(model, data["id"]) is None:
                db.add(model(**copy.deepcopy(data)))
                added[key] += 1
        await db.flush()

    await db.commit()
    logger.info(f"Seeded catalog: {added}")
    return added
