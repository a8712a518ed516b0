"""
Database initialization script.

Creates the tables, loads the sample catalog, then runs one collection and
ingestion pass over the configured sources:

    python -m openalt.init_db
"""

import asyncio
import logging
from .models.database import init_db, async_session_maker
from .services.catalog import CatalogService, seed_catalog
from .services.ingestion import DataCollector, ingest_alternatives

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Initialize the database with default data."""
    logger.info("Initializing Open Alternatives database...")

    await init_db()
    logger.info("Database tables created")

    async with async_session_maker() as db:
        await seed_catalog(db)

        report = await DataCollector().collect_all()
        for failure in report.failures:
            logger.warning(f"Source {failure.source} failed: {failure.error}")

        ingestion = await ingest_alternatives(db, report.alternatives)
        logger.info(
            f"Collected {len(report.alternatives)} alternatives "
            f"({report.failed_count} sources failed); "
            f"{ingestion.created} created, {ingestion.updated} updated"
        )

        stats = await CatalogService(db).get_statistics()
        logger.info(f"Catalog now holds: {stats}")

    logger.info("Database initialization complete!")


if __name__ == "__main__":
    asyncio.run(main())
