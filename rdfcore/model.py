"""Core RDF 1.1 and RDF-star data structures: IRIs, blank nodes, literals, triples and quads.

String conversion of every type yields an N-Triples, Turtle and SPARQL compatible
representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "NamedNode",
    "BlankNode",
    "Literal",
    "Triple",
    "Quad",
    "Subject",
    "Term",
    "GraphName",
    "quote_string",
]

_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", '"': '\\"', "\\": "\\\\"})


def quote_string(value: str) -> str:
    """Return ``value`` as a double-quoted string with N-Triples escapes applied."""
    return '"' + value.translate(_ESCAPES) + '"'


@dataclass(frozen=True, order=True)
class NamedNode:
    """An RDF IRI."""

    iri: str

    def __str__(self) -> str:
        return f"<{self.iri}>"


@dataclass(frozen=True, order=True)
class BlankNode:
    """An RDF blank node, identified by its blank node identifier."""

    id: str

    def __str__(self) -> str:
        return f"_:{self.id}"


@dataclass(frozen=True)
class Literal:
    """An RDF literal.

    A literal is simple when it has neither ``language`` nor ``datatype``,
    a language-tagged string when ``language`` is set, and typed when
    ``datatype`` is set. Setting both is an error.
    """

    value: str
    language: Optional[str] = None
    datatype: Optional[NamedNode] = None

    def __post_init__(self) -> None:
        if self.language is not None and self.datatype is not None:
            raise ValueError("a literal cannot have both a language tag and a datatype")
        if self.datatype is not None and not isinstance(self.datatype, NamedNode):
            raise TypeError("a literal datatype must be a NamedNode")

    def __str__(self) -> str:
        quoted = quote_string(self.value)
        if self.language is not None:
            return f"{quoted}@{self.language}"
        if self.datatype is not None:
            return f"{quoted}^^{self.datatype}"
        return quoted


def _format_term(term: object) -> str:
    if isinstance(term, Triple):
        return f"<< {term} >>"
    return str(term)


@dataclass(frozen=True)
class Triple:
    """An RDF triple. The subject and object may themselves be triples (RDF-star)."""

    subject: Union[NamedNode, BlankNode, "Triple"]
    predicate: NamedNode
    object: Union[NamedNode, BlankNode, Literal, "Triple"]

    def __post_init__(self) -> None:
        _check_triple_parts(self.subject, self.predicate, self.object)

    def __str__(self) -> str:
        return f"{_format_term(self.subject)} {self.predicate} {_format_term(self.object)}"


@dataclass(frozen=True)
class Quad:
    """An RDF triple inside a dataset, with an optional graph name."""

    subject: Union[NamedNode, BlankNode, Triple]
    predicate: NamedNode
    object: Union[NamedNode, BlankNode, Literal, Triple]
    graph_name: Optional[Union[NamedNode, BlankNode]] = None

    def __post_init__(self) -> None:
        _check_triple_parts(self.subject, self.predicate, self.object)
        if self.graph_name is not None and not isinstance(
            self.graph_name, (NamedNode, BlankNode)
        ):
            raise TypeError("a graph name must be a NamedNode or a BlankNode")

    @classmethod
    def from_triple(cls, triple: Triple, graph_name=None) -> "Quad":
        """Place ``triple`` in the graph ``graph_name`` (the default graph if None)."""
        return cls(triple.subject, triple.predicate, triple.object, graph_name)

    def __str__(self) -> str:
        text = f"{_format_term(self.subject)} {self.predicate} {_format_term(self.object)}"
        if self.graph_name is not None:
            text += f" {self.graph_name}"
        return text


def _check_triple_parts(subject: object, predicate: object, obj: object) -> None:
    if not isinstance(subject, (NamedNode, BlankNode, Triple)):
        raise TypeError("a subject must be a NamedNode, a BlankNode or a Triple")
    if not isinstance(predicate, NamedNode):
        raise TypeError("a predicate must be a NamedNode")
    if not isinstance(obj, (NamedNode, BlankNode, Literal, Triple)):
        raise TypeError("an object must be a NamedNode, a BlankNode, a Literal or a Triple")


Subject = Union[NamedNode, BlankNode, Triple]
Term = Union[NamedNode, BlankNode, Literal, Triple]
GraphName = Union[NamedNode, BlankNode]