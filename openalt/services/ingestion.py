"""
Alternative ingestion.

Collects alternative listings from external sources, then validates,
sanitizes, deduplicates and reshapes them into catalog records before they
are written to the store.

The per-source collectors are placeholders that return canned data; no
scraping or API client exists yet.
"""

import asyncio
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Awaitable, Callable, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.alternative import AlternativeRecord, Feature, Platform
from ..models.database import utcnow
from .catalog import CatalogService

logger = logging.getLogger(__name__)


class InvalidAlternativeError(ValueError):
    """Raised when a record that fails validation reaches the transform step."""


@dataclass
class DataSource:
    """An external website or API alternatives can be collected from."""
    name: str
    url: str
    description: str
    type: Literal["api", "scraping", "manual"]
    rate_limit: Optional[int] = None  # requests per minute


DATA_SOURCES = [
    DataSource(
        name="OpenAlternative.co",
        url="https://openalternative.co",
        description="Curated list of open source alternatives",
        type="scraping",
        rate_limit=10,
    ),
    DataSource(
        name="AlternativeTo",
        url="https://alternativeto.net",
        description="Comprehensive database of software alternatives",
        type="scraping",
        rate_limit=5,
    ),
    DataSource(
        name="OSSAlternatives",
        url="https://ossalternatives.to",
        description="Open source alternatives database",
        type="scraping",
        rate_limit=10,
    ),
    DataSource(
        name="OpenAltly",
        url="https://www.openaltly.com",
        description="Curated open source alternatives",
        type="scraping",
        rate_limit=10,
    ),
    DataSource(
        name="GitHub Awesome Lists",
        url="https://github.com/topics/awesome-alternatives",
        description="Community-maintained awesome lists",
        type="api",
        rate_limit=30,
    ),
]


class CollectedAlternative(BaseModel):
    """An alternative listing as scraped from a source, before normalization."""
    name: str
    description: str
    website: str
    repository: Optional[str] = None
    license: str
    platforms: List[str]
    category: str
    proprietary_alternative: str
    features: List[str] = []
    pros: List[str] = []
    cons: List[str] = []
    rating: Optional[float] = None
    review_count: Optional[int] = None
    stars: Optional[int] = None
    forks: Optional[int] = None
    last_updated: datetime
    source: str


@dataclass
class SourceResult:
    """Outcome of collecting from one source: records, or the failure reason."""
    source: str
    alternatives: List[CollectedAlternative] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CollectionReport:
    """Merged, deduplicated records plus the per-source outcomes."""
    alternatives: List[CollectedAlternative]
    results: List[SourceResult]

    @property
    def failures(self) -> List[SourceResult]:
        return [r for r in self.results if not r.ok]

    @property
    def failed_count(self) -> int:
        return len(self.failures)


@dataclass
class IngestionReport:
    created: int = 0
    updated: int = 0
    skipped: int = 0
    duplicates: int = 0


# Category keywords -> category id. Known ids map to themselves.
CATEGORY_KEYWORDS: Dict[str, str] = {
    "office": "office-suites",
    "productivity": "office-suites",
    "media": "media-players",
    "audio": "media-players",
    "video": "media-players",
    "graphics": "graphic-design",
    "design": "graphic-design",
    "development": "development",
    "programming": "development",
    "communication": "communication",
    "messaging": "communication",
    "office-suites": "office-suites",
    "media-players": "media-players",
    "graphic-design": "graphic-design",
}
DEFAULT_CATEGORY = "other"

PLATFORM_ICONS: Dict[str, str] = {
    "Windows": "Monitor",
    "macOS": "Apple",
    "Linux": "Tux",
    "Web": "Globe",
    "Android": "Smartphone",
    "iOS": "Smartphone",
}
DEFAULT_PLATFORM_ICON = "Monitor"

_NON_ID_CHARS = re.compile(r"[^a-z0-9]")


def generate_id(name: str) -> str:
    """
    Derive a catalog id from a display name.

    Lowercases and replaces every character outside [a-z0-9] with "-".
    Distinct names can collide: "Foo!" and "Foo?" both become "foo-".
    """
    return _NON_ID_CHARS.sub("-", name.lower())


def map_category(category: str) -> str:
    """Map a free-text category to a category id (case-insensitive)."""
    return CATEGORY_KEYWORDS.get(category.strip().lower(), DEFAULT_CATEGORY)


def get_platform_icon(platform: str) -> str:
    """Icon tag for a platform name, Monitor when unknown."""
    return PLATFORM_ICONS.get(platform, DEFAULT_PLATFORM_ICON)


def validate_alternative(alt: CollectedAlternative) -> bool:
    """True when every field needed to build a catalog record is present."""
    return bool(
        alt.name
        and alt.description
        and alt.website
        and alt.license
        and len(alt.platforms) > 0
        and alt.category
        and alt.proprietary_alternative
    )


def sanitize_alternative(alt: CollectedAlternative) -> CollectedAlternative:
    """Return a copy with surrounding whitespace stripped from every text field."""
    return alt.model_copy(update={
        "name": alt.name.strip(),
        "description": alt.description.strip(),
        "website": alt.website.strip(),
        "repository": alt.repository.strip() if alt.repository is not None else None,
        "license": alt.license.strip(),
        "platforms": [p.strip() for p in alt.platforms],
        "category": alt.category.strip(),
        "proprietary_alternative": alt.proprietary_alternative.strip(),
        "features": [f.strip() for f in alt.features],
        "pros": [p.strip() for p in alt.pros],
        "cons": [c.strip() for c in alt.cons],
        "source": alt.source.strip(),
    })


def deduplicate_alternatives(alternatives: Iterable[CollectedAlternative]) -> List[CollectedAlternative]:
    """Keep the first record per case-insensitive, trimmed name."""
    seen = set()
    unique = []
    for alt in alternatives:
        key = alt.name.lower().strip()
        if key in seen:
            continue
        seen.add(key)
        unique.append(alt)
    return unique


def transform_to_internal_format(collected: Iterable[CollectedAlternative]) -> List[AlternativeRecord]:
    """
    Reshape collected listings into catalog records.

    Callers filter with validate_alternative first; an invalid record here
    raises InvalidAlternativeError.
    """
    records = []
    for alt in collected:
        if not validate_alternative(alt):
            raise InvalidAlternativeError(f"Invalid alternative record: {alt.name!r}")

        now = utcnow()
        records.append(AlternativeRecord(
            id=generate_id(alt.name),
            name=alt.name,
            description=alt.description,
            website=alt.website,
            repository=alt.repository,
            category_id=map_category(alt.category),
            proprietary_software_id=generate_id(alt.proprietary_alternative),
            license=alt.license,
            platforms=[
                Platform(name=name, icon=get_platform_icon(name), supported=True)
                for name in alt.platforms
            ],
            features=[Feature(name=name, description="", available=True) for name in alt.features],
            pros=alt.pros,
            cons=alt.cons,
            rating=alt.rating or 0,
            review_count=alt.review_count or 0,
            bookmark_count=0,
            stars=alt.stars,
            forks=alt.forks,
            last_updated=alt.last_updated,
            created_at=now,
            updated_at=now,
        ))
    return records


Collector = Callable[[], Awaitable[List[CollectedAlternative]]]


class DataCollector:
    """
    Runs every source collector and merges their results.

    Sources are independent, so they run concurrently; results are merged in
    DATA_SOURCES order so "first occurrence wins" stays deterministic.
    """

    def __init__(self, sources: Optional[List[DataSource]] = None):
        self.sources = sources or DATA_SOURCES

    async def collect_from_open_alternative(self) -> List[CollectedAlternative]:
        return [
            CollectedAlternative(
                name="LibreOffice",
                description="Free and open source office suite",
                website="https://libreoffice.org",
                repository="https://github.com/LibreOffice/core",
                license="MPL-2.0",
                platforms=["Windows", "macOS", "Linux"],
                category="office-suites",
                proprietary_alternative="Microsoft Office",
                features=["Word Processing", "Spreadsheets", "Presentations", "Database"],
                pros=["Free", "Cross-platform", "Regular updates"],
                cons=["Interface feels dated", "Large file size"],
                rating=4.2,
                review_count=1250,
                stars=1500,
                forks=300,
                last_updated=utcnow(),
                source="openalternative.co",
            ),
        ]

    async def collect_from_alternative_to(self) -> List[CollectedAlternative]:
        return []

    async def collect_from_oss_alternatives(self) -> List[CollectedAlternative]:
        return []

    async def collect_from_open_altly(self) -> List[CollectedAlternative]:
        return []

    async def collect_from_github(self) -> List[CollectedAlternative]:
        return []

    def collectors(self) -> Dict[str, Collector]:
        """Source name -> collector coroutine."""
        return {
            "OpenAlternative.co": self.collect_from_open_alternative,
            "AlternativeTo": self.collect_from_alternative_to,
            "OSSAlternatives": self.collect_from_oss_alternatives,
            "OpenAltly": self.collect_from_open_altly,
            "GitHub Awesome Lists": self.collect_from_github,
        }

    async def _run_source(self, source: DataSource, collector: Collector) -> SourceResult:
        try:
            alternatives = await collector()
        except Exception as e:
            logger.warning(f"Collection from {source.name} failed: {e}")
            return SourceResult(source=source.name, error=str(e) or type(e).__name__)

        logger.info(f"Collected {len(alternatives)} alternatives from {source.name}")
        return SourceResult(source=source.name, alternatives=alternatives)

    async def collect_all(self) -> CollectionReport:
        """Collect from every source; one failing source never aborts the rest."""
        collectors = self.collectors()
        runnable = [s for s in self.sources if s.name in collectors]

        results = await asyncio.gather(
            *(self._run_source(s, collectors[s.name]) for s in runnable)
        )

        merged = []
        for result in results:
            merged.extend(result.alternatives)

        report = CollectionReport(alternatives=deduplicate_alternatives(merged), results=list(results))
        if report.failed_count:
            logger.warning(
                f"{report.failed_count}/{len(results)} sources failed: "
                f"{', '.join(r.source for r in report.failures)}"
            )
        return report


async def ingest_alternatives(
    db: AsyncSession,
    collected: Iterable[CollectedAlternative],
) -> IngestionReport:
    """
    Validate, sanitize, deduplicate, transform and store collected records.

    Invalid records are skipped and counted; unknown categories fall back to
    "other" and unknown proprietary products get a placeholder row.
    """
    report = IngestionReport()
    catalog = CatalogService(db)

    valid = []
    for alt in collected:
        clean = sanitize_alternative(alt)
        if validate_alternative(clean):
            valid.append(clean)
        else:
            report.skipped += 1
            logger.warning(f"Skipping invalid alternative from {alt.source}: {alt.name!r}")

    unique = deduplicate_alternatives(valid)
    report.duplicates = len(valid) - len(unique)

    written = {}
    for alt, record in zip(unique, transform_to_internal_format(unique)):
        if record.id in written:
            logger.warning(
                f"Id {record.id!r} from {alt.name!r} collides with {written[record.id]!r} "
                f"in this batch; the later record replaces the earlier one"
            )
        written[record.id] = alt.name

        if not await catalog.category_exists(record.category_id):
            logger.warning(f"Unknown category {record.category_id!r} for {record.name}, using {DEFAULT_CATEGORY!r}")
            record = record.model_copy(update={"category_id": DEFAULT_CATEGORY})

        if await catalog.upsert_alternative(record, alt.proprietary_alternative):
            report.created += 1
        else:
            report.updated += 1

    await db.commit()
    logger.info(
        f"Ingestion complete: {report.created} created, {report.updated} updated, "
        f"{report.skipped} skipped, {report.duplicates} duplicates"
    )
    return report
