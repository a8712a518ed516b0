"""Tests for the catalog record types."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from openalt.models.alternative import AlternativeRecord, Feature, Platform
from openalt.models.search import SearchFilters

STAMP = datetime(2024, 1, 1)


def _minimal(**overrides):
    data = {
        "id": "krita",
        "name": "Krita",
        "description": "Painting",
        "website": "https://krita.org",
        "proprietary_software_id": "photoshop",
        "category_id": "graphic-design",
        "license": "GPL-3.0",
        "last_updated": STAMP,
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    data.update(overrides)
    return AlternativeRecord(**data)


class TestAlternativeRecord:
    def test_optional_fields_absent(self):
        record = _minimal()
        assert record.repository is None
        assert record.logo is None
        assert record.stars is None
        assert record.platforms == []
        assert record.rating == 0
        assert record.bookmark_count == 0

    def test_camel_case_round_trip(self):
        record = _minimal()
        dumped = record.model_dump(by_alias=True)
        assert dumped["proprietarySoftwareId"] == "photoshop"
        assert dumped["reviewCount"] == 0
        assert AlternativeRecord.model_validate(dumped) == record

    def test_frozen(self):
        with pytest.raises(ValidationError):
            _minimal().name = "Other"

    def test_platform_names(self):
        record = _minimal(platforms=[Platform(name="Linux", icon="Tux"), {"name": "Web", "icon": "Globe"}])
        assert record.platform_names == ["Linux", "Web"]

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            AlternativeRecord(id="x", name="X")


class TestValueTypes:
    def test_feature_defaults(self):
        feature = Feature(name="Layers")
        assert feature.description == ""
        assert feature.available is True
        assert feature.notes is None

    def test_search_filter_defaults(self):
        filters = SearchFilters()
        assert filters.sort_by == "popularity"
        assert filters.sort_order == "desc"
        assert filters.model_dump(by_alias=True)["sortBy"] == "popularity"

    def test_search_filter_rejects_unknown_sort(self):
        with pytest.raises(ValidationError):
            SearchFilters(sort_by="downloads")
