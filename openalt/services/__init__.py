"""
Open Alternatives services - catalog logic and export formats.
"""

from .catalog import CatalogService, seed_catalog
from .contact import GitHubIssueBridge
from .ingestion import DataCollector, ingest_alternatives
from .linked_data import CatalogGraph

__all__ = [
    "CatalogService",
    "seed_catalog",
    "GitHubIssueBridge",
    "DataCollector",
    "ingest_alternatives",
    "CatalogGraph",
]
