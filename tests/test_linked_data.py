"""Tests for the RDF export of the catalog."""

from __future__ import annotations

import json
from datetime import datetime

import pytest
from rdflib import Graph, Literal
from rdflib.namespace import RDF

from openalt.models.alternative import SAMPLE_ALTERNATIVES, AlternativeRecord
from openalt.models.category import SAMPLE_CATEGORIES, CategoryRecord
from openalt.models.software import SAMPLE_PROPRIETARY_SOFTWARE, ProprietarySoftwareRecord
from openalt.services.linked_data import OA, OA_DATA, SCHEMA, CatalogGraph

STAMP = datetime(2024, 1, 1)


@pytest.fixture
def graph():
    return CatalogGraph().add_catalog(
        [CategoryRecord(**c, created_at=STAMP, updated_at=STAMP) for c in SAMPLE_CATEGORIES],
        [ProprietarySoftwareRecord(**p, created_at=STAMP, updated_at=STAMP)
         for p in SAMPLE_PROPRIETARY_SOFTWARE],
        [AlternativeRecord(**a, last_updated=STAMP, created_at=STAMP, updated_at=STAMP)
         for a in SAMPLE_ALTERNATIVES],
    )


class TestCatalogGraph:
    def test_counts(self, graph):
        assert graph.count(SCHEMA.DefinedTerm) == 6
        # proprietary products and alternatives are both applications
        assert graph.count(SCHEMA.SoftwareApplication) == 9
        assert graph.count(SCHEMA.AggregateRating) == 5

    def test_alternative_links(self, graph):
        vim = OA_DATA["alternative/vim"]
        g = graph.graph
        assert (vim, OA.alternativeTo, OA_DATA["proprietary/sublime-text"]) in g
        assert (vim, SCHEMA.applicationCategory, OA_DATA["category/development"]) in g
        assert (vim, SCHEMA.operatingSystem, Literal("Linux")) in g
        assert (vim, SCHEMA.name, Literal("Vim")) in g

    def test_rating_node(self, graph):
        g = graph.graph
        rating = g.value(OA_DATA["alternative/vscode"], SCHEMA.aggregateRating)
        assert (rating, RDF.type, SCHEMA.AggregateRating) in g
        assert g.value(rating, SCHEMA.ratingValue).toPython() == 4.8
        assert g.value(rating, SCHEMA.reviewCount).toPython() == 5000

    def test_turtle_round_trips(self, graph):
        parsed = Graph().parse(data=graph.serialize("turtle"), format="turtle")
        assert len(parsed) == len(graph.graph)

    def test_jsonld_is_json(self, graph):
        assert json.loads(graph.serialize("jsonld"))

    def test_xml(self, graph):
        assert graph.serialize("xml").lstrip().startswith("<?xml")

    def test_unknown_format(self, graph):
        with pytest.raises(ValueError, match="Unsupported format"):
            graph.serialize("n3")
