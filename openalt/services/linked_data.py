"""
Linked-data export of the catalog.

Maps categories, proprietary products and alternatives to schema.org RDF
triples in an rdflib graph, serializable as Turtle, RDF/XML or JSON-LD.
"""

import logging
from typing import Iterable
from rdflib import BNode, Graph, Literal, Namespace, URIRef
from rdflib.namespace import DCTERMS, RDF, RDFS, XSD

from ..config import get_settings
from ..models.alternative import AlternativeRecord
from ..models.category import CategoryRecord
from ..models.software import ProprietarySoftwareRecord

logger = logging.getLogger(__name__)
settings = get_settings()

SCHEMA = Namespace("https://schema.org/")
OA = Namespace(settings.openalt_namespace)
OA_DATA = Namespace(settings.openalt_data_namespace)

SERIALIZATION_FORMATS = {
    "turtle": ("turtle", "text/turtle"),
    "xml": ("xml", "application/rdf+xml"),
    "jsonld": ("json-ld", "application/ld+json"),
}


class CatalogGraph:
    """
    RDF view of the catalog.

    Alternatives are schema:SoftwareApplication resources linked to their
    category (schema:DefinedTerm) and to the proprietary product they
    replace via oa:alternativeTo.
    """

    def __init__(self):
        self.graph = Graph()
        self._bind_namespaces()
        self._add_ontology()

    def _bind_namespaces(self):
        self.graph.bind("schema", SCHEMA)
        self.graph.bind("oa", OA)
        self.graph.bind("data", OA_DATA)
        self.graph.bind("dcterms", DCTERMS)

    def _add_ontology(self):
        self.graph.add((OA.alternativeTo, RDF.type, RDF.Property))
        self.graph.add((OA.alternativeTo, RDFS.label, Literal("Alternative To")))
        self.graph.add((OA.alternativeTo, RDFS.comment, Literal("Proprietary product this software replaces")))

    def add_category(self, category: CategoryRecord) -> URIRef:
        uri = OA_DATA[f"category/{category.slug}"]
        self.graph.add((uri, RDF.type, SCHEMA.DefinedTerm))
        self.graph.add((uri, SCHEMA.name, Literal(category.name)))
        self.graph.add((uri, SCHEMA.description, Literal(category.description)))
        self.graph.add((uri, SCHEMA.identifier, Literal(category.id)))
        return uri

    def add_proprietary(self, software: ProprietarySoftwareRecord) -> URIRef:
        uri = OA_DATA[f"proprietary/{software.id}"]
        self.graph.add((uri, RDF.type, SCHEMA.SoftwareApplication))
        self.graph.add((uri, SCHEMA.name, Literal(software.name)))
        if software.description:
            self.graph.add((uri, SCHEMA.description, Literal(software.description)))
        if software.website:
            self.graph.add((uri, SCHEMA.url, URIRef(software.website)))
        return uri

    def add_alternative(self, alternative: AlternativeRecord) -> URIRef:
        uri = OA_DATA[f"alternative/{alternative.id}"]

        self.graph.add((uri, RDF.type, SCHEMA.SoftwareApplication))
        self.graph.add((uri, SCHEMA.name, Literal(alternative.name)))
        self.graph.add((uri, SCHEMA.description, Literal(alternative.description)))
        self.graph.add((uri, SCHEMA.url, URIRef(alternative.website)))
        self.graph.add((uri, SCHEMA.license, Literal(alternative.license)))
        self.graph.add((uri, SCHEMA.dateModified, Literal(alternative.updated_at.isoformat(), datatype=XSD.dateTime)))

        if alternative.repository:
            self.graph.add((uri, SCHEMA.codeRepository, URIRef(alternative.repository)))

        for platform in alternative.platforms:
            if platform.supported:
                self.graph.add((uri, SCHEMA.operatingSystem, Literal(platform.name)))

        for language in alternative.languages:
            self.graph.add((uri, SCHEMA.programmingLanguage, Literal(language)))

        for feature in alternative.features:
            if feature.available:
                self.graph.add((uri, SCHEMA.featureList, Literal(feature.name)))

        self.graph.add((uri, SCHEMA.applicationCategory, OA_DATA[f"category/{alternative.category_id}"]))
        self.graph.add((uri, OA.alternativeTo, OA_DATA[f"proprietary/{alternative.proprietary_software_id}"]))

        rating = BNode()
        self.graph.add((uri, SCHEMA.aggregateRating, rating))
        self.graph.add((rating, RDF.type, SCHEMA.AggregateRating))
        self.graph.add((rating, SCHEMA.ratingValue, Literal(alternative.rating)))
        self.graph.add((rating, SCHEMA.reviewCount, Literal(alternative.review_count)))

        logger.debug(f"Added alternative {alternative.id} to RDF graph")
        return uri

    def add_catalog(
        self,
        categories: Iterable[CategoryRecord],
        proprietary: Iterable[ProprietarySoftwareRecord],
        alternatives: Iterable[AlternativeRecord],
    ) -> "CatalogGraph":
        for category in categories:
            self.add_category(category)
        for software in proprietary:
            self.add_proprietary(software)
        for alternative in alternatives:
            self.add_alternative(alternative)
        return self

    def count(self, rdf_type: URIRef) -> int:
        return sum(1 for _ in self.graph.subjects(RDF.type, rdf_type))

    def serialize(self, format: str = "turtle") -> str:
        """
        Serialize the graph.

        Args:
            format: one of turtle, xml, jsonld
        """
        if format not in SERIALIZATION_FORMATS:
            raise ValueError(f"Unsupported format: {format}")
        return self.graph.serialize(format=SERIALIZATION_FORMATS[format][0])
