"""Shared test fixtures for Open Alternatives tests.

Provides:
- An isolated SQLite file for the application engine (set before import)
- db / catalog_db: a fresh per-test store, empty or seeded
- client: a TestClient with the app lifespan (tables + seed data) started
- make_alternative(): factory for collected alternative records
"""

from __future__ import annotations

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="openalt-tests-")
os.environ["OPENALT_DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'app.db')}"
for _var in ("GITHUB_TOKEN", "GITHUB_REPO", "OPENALT_GITHUB_TOKEN", "OPENALT_GITHUB_REPO"):
    os.environ.pop(_var, None)

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from openalt.models.database import build_engine, build_session_maker, init_db  # noqa: E402
from openalt.services.catalog import seed_catalog  # noqa: E402
from openalt.services.ingestion import CollectedAlternative  # noqa: E402


@pytest_asyncio.fixture
async def db(tmp_path):
    """Empty catalog store backed by a per-test SQLite file."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    session_maker = build_session_maker(engine)
    async with session_maker() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def catalog_db(db):
    """Store loaded with the sample catalog."""
    await seed_catalog(db)
    return db


@pytest.fixture(scope="session")
def client():
    """TestClient with the lifespan run once for the whole session."""
    from openalt.main import app

    with TestClient(app) as test_client:
        yield test_client


def make_alternative(**overrides) -> CollectedAlternative:
    """A valid collected record; override any field."""
    data = {
        "name": "Krita",
        "description": "Digital painting application",
        "website": "https://krita.org",
        "repository": "https://invent.kde.org/graphics/krita",
        "license": "GPL-3.0",
        "platforms": ["Windows", "macOS", "Linux"],
        "category": "Graphics",
        "proprietary_alternative": "Adobe Photoshop",
        "features": ["Brush Engines", "Layers"],
        "pros": ["Free", "Great for painting"],
        "cons": ["Less suited to photo editing"],
        "rating": 4.6,
        "review_count": 420,
        "stars": 7000,
        "forks": 900,
        "last_updated": datetime(2024, 1, 1),
        "source": "test",
    }
    data.update(overrides)
    return CollectedAlternative(**data)
