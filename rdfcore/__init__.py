"""RDF 1.1 and RDF-star data model, parser and formatter interfaces, and conformance tools."""

__version__ = "0.1.0"