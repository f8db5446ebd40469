"""IRIs of the vocabularies used by test manifests."""

from __future__ import annotations

from ..model import NamedNode

__all__ = [
    "MF_INCLUDE",
    "MF_ENTRIES",
    "MF_MANIFEST",
    "MF_NAME",
    "MF_ACTION",
    "MF_RESULT",
    "RDF_FIRST",
    "RDF_NIL",
    "RDF_REST",
    "RDF_TYPE",
    "RDFS_COMMENT",
]

_MF = "http://www.w3.org/2001/sw/DataAccess/tests/test-manifest#"
_RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
_RDFS = "http://www.w3.org/2000/01/rdf-schema#"

MF_INCLUDE = NamedNode(_MF + "include")
MF_ENTRIES = NamedNode(_MF + "entries")
MF_MANIFEST = NamedNode(_MF + "Manifest")
MF_NAME = NamedNode(_MF + "name")
MF_ACTION = NamedNode(_MF + "action")
MF_RESULT = NamedNode(_MF + "result")

RDF_FIRST = NamedNode(_RDF + "first")
RDF_NIL = NamedNode(_RDF + "nil")
RDF_REST = NamedNode(_RDF + "rest")
RDF_TYPE = NamedNode(_RDF + "type")

RDFS_COMMENT = NamedNode(_RDFS + "comment")