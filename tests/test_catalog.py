"""Tests for CatalogService and seed_catalog."""

from __future__ import annotations

from datetime import datetime

import pytest

from openalt.models.alternative import AlternativeRecord
from openalt.models.review import User, UserRecord
from openalt.models.search import SearchFilters
from openalt.services.catalog import CatalogService, seed_catalog

pytestmark = pytest.mark.asyncio


def _ids(result):
    return [a.id for a in result.alternatives]


class TestSeed:
    async def test_first_seed_adds_everything(self, db):
        added = await seed_catalog(db)
        assert added == {"categories": 6, "proprietary_software": 4, "alternatives": 5}

    async def test_seed_is_idempotent(self, catalog_db):
        added = await seed_catalog(catalog_db)
        assert added == {"categories": 0, "proprietary_software": 0, "alternatives": 0}

        stats = await CatalogService(catalog_db).get_statistics()
        assert stats == {
            "categories": 6,
            "proprietary_software": 4,
            "alternatives": 5,
            "reviews": 0,
            "users": 0,
        }


class TestReads:
    async def test_categories_sorted_by_name(self, catalog_db):
        categories = await CatalogService(catalog_db).list_categories()
        assert [c.name for c in categories] == [
            "Communication",
            "Development Tools",
            "Graphic Design",
            "Media Players",
            "Office Suites",
            "Other",
        ]

    async def test_get_category_by_slug(self, catalog_db):
        catalog = CatalogService(catalog_db)
        category = await catalog.get_category("development")
        assert category.name == "Development Tools"
        assert category.parent_id is None
        assert await catalog.get_category("nope") is None

    async def test_category_exists(self, catalog_db):
        catalog = CatalogService(catalog_db)
        assert await catalog.category_exists("other") is True
        assert await catalog.category_exists("gaming") is False

    async def test_proprietary_by_category(self, catalog_db):
        software = await CatalogService(catalog_db).list_proprietary_software("development")
        assert [s.id for s in software] == ["sublime-text"]

    async def test_get_alternative(self, catalog_db):
        catalog = CatalogService(catalog_db)
        vscode = await catalog.get_alternative("vscode")
        assert vscode.name == "Visual Studio Code"
        assert vscode.platform_names == ["Windows", "macOS", "Linux", "Web"]
        assert vscode.platforms[1].icon == "Apple"
        assert await catalog.get_alternative("missing") is None

    async def test_alternatives_for_best_rated_first(self, catalog_db):
        alternatives = await CatalogService(catalog_db).alternatives_for("sublime-text")
        assert [a.id for a in alternatives] == ["vscode", "vim", "emacs"]

    async def test_list_alternatives_by_category(self, catalog_db):
        alternatives = await CatalogService(catalog_db).list_alternatives("media-players")
        assert [a.id for a in alternatives] == ["audacious"]

    async def test_no_reviews(self, catalog_db):
        assert await CatalogService(catalog_db).list_reviews("vim") == []


class TestSearch:
    async def test_defaults_sort_by_popularity_desc(self, catalog_db):
        result = await CatalogService(catalog_db).search(SearchFilters())
        assert _ids(result) == ["vscode", "vim", "emacs", "libreoffice", "audacious"]
        assert result.total == 5
        assert result.filters.sort_by == "popularity"
        assert result.filters.sort_order == "desc"

    async def test_category_filter(self, catalog_db):
        result = await CatalogService(catalog_db).search(SearchFilters(category="development"))
        assert _ids(result) == ["vscode", "vim", "emacs"]

    async def test_platform_filter_case_insensitive(self, catalog_db):
        result = await CatalogService(catalog_db).search(SearchFilters(platform="web"))
        assert _ids(result) == ["vscode"]
        assert result.total == 1

    async def test_license_filter_case_insensitive(self, catalog_db):
        result = await CatalogService(catalog_db).search(SearchFilters(license="mit"))
        assert _ids(result) == ["vscode"]

    async def test_minimum_rating(self, catalog_db):
        result = await CatalogService(catalog_db).search(SearchFilters(rating=4.2))
        assert _ids(result) == ["vscode", "vim", "libreoffice"]

    async def test_sort_by_name_ascending(self, catalog_db):
        result = await CatalogService(catalog_db).search(
            SearchFilters(sort_by="name", sort_order="asc")
        )
        assert _ids(result) == ["audacious", "emacs", "libreoffice", "vim", "vscode"]

    async def test_sort_by_rating_ascending(self, catalog_db):
        result = await CatalogService(catalog_db).search(
            SearchFilters(sort_by="rating", sort_order="asc")
        )
        assert _ids(result) == ["audacious", "emacs", "libreoffice", "vim", "vscode"]

    async def test_text_query_matches_description(self, catalog_db):
        result = await CatalogService(catalog_db).search(SearchFilters(), query="EDITOR")
        assert _ids(result) == ["vscode", "vim", "emacs"]

    async def test_paging(self, catalog_db):
        catalog = CatalogService(catalog_db)
        page_two = await catalog.search(SearchFilters(), page=2, limit=2)
        assert _ids(page_two) == ["emacs", "libreoffice"]
        assert page_two.total == 5
        assert page_two.page == 2
        assert page_two.limit == 2

        past_end = await catalog.search(SearchFilters(), page=4, limit=2)
        assert past_end.alternatives == []
        assert past_end.total == 5

    async def test_no_matches(self, catalog_db):
        result = await CatalogService(catalog_db).search(
            SearchFilters(category="communication")
        )
        assert result.alternatives == []
        assert result.total == 0


def _record(**overrides) -> AlternativeRecord:
    now = datetime(2024, 6, 1)
    data = {
        "id": "gimp",
        "name": "GIMP",
        "description": "GNU Image Manipulation Program",
        "website": "https://gimp.org",
        "proprietary_software_id": "photoshop",
        "category_id": "graphic-design",
        "license": "GPL-3.0",
        "platforms": [{"name": "Linux", "icon": "Tux"}],
        "last_updated": now,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return AlternativeRecord(**data)


class TestUpsert:
    async def test_insert_then_update(self, catalog_db):
        catalog = CatalogService(catalog_db)

        assert await catalog.upsert_alternative(_record(), "Adobe Photoshop") is True
        assert [a.id for a in await catalog.alternatives_for("photoshop")] == ["gimp"]

        updated = _record(description="Free image editor", rating=3.0)
        assert await catalog.upsert_alternative(updated, "Adobe Photoshop") is False

        gimp = await catalog.get_alternative("gimp")
        assert gimp.description == "Free image editor"
        assert gimp.rating == 0

    async def test_update_keeps_store_engagement(self, catalog_db):
        catalog = CatalogService(catalog_db)
        await catalog.upsert_alternative(
            _record(id="vscode", name="VS Code", proprietary_software_id="sublime-text",
                    category_id="development", bookmark_count=1),
            "Sublime Text",
        )
        vscode = await catalog.get_alternative("vscode")
        assert vscode.name == "VS Code"
        assert vscode.bookmark_count == 12000
        assert vscode.review_count == 5000

    async def test_missing_proprietary_gets_placeholder(self, catalog_db):
        catalog = CatalogService(catalog_db)
        await catalog.upsert_alternative(
            _record(id="inkscape", name="Inkscape", proprietary_software_id="adobe-illustrator"),
            "Adobe Illustrator",
        )
        placeholder = await catalog.get_proprietary_software("adobe-illustrator")
        assert placeholder.name == "Adobe Illustrator"
        assert placeholder.category_id == "graphic-design"
        assert placeholder.popularity == 0


class TestUsers:
    async def test_user_row_reads_as_record(self, catalog_db):
        catalog_db.add(User(
            id="u1",
            username="ada",
            email="ada@example.org",
            bookmarks=["vim", "emacs"],
        ))
        await catalog_db.commit()

        stats = await CatalogService(catalog_db).get_statistics()
        assert stats["users"] == 1

        user = UserRecord.model_validate(await catalog_db.get(User, "u1"))
        assert user.avatar is None
        assert user.bookmarks == ["vim", "emacs"]
        assert user.reviews == []
        assert user.created_at is not None
        assert user.model_dump(by_alias=True)["submissions"] == []
