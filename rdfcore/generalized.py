"""Generalized RDF: variables, and any kind of term in any quad position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

from .model import BlankNode, Literal, NamedNode, Quad, Triple
from .parser import _iterate, _parse_all

__all__ = [
    "Variable",
    "GeneralizedTerm",
    "StrictRdfError",
    "GeneralizedQuad",
    "GeneralizedQuadsParser",
    "to_named_node",
    "to_subject",
    "to_graph_name",
    "to_term",
]


@dataclass(frozen=True, order=True)
class Variable:
    """A SPARQL variable."""

    name: str

    def __str__(self) -> str:
        return f"?{self.name}"


GeneralizedTerm = Union[NamedNode, BlankNode, Literal, Variable, Triple]

_GENERALIZED_TYPES = (NamedNode, BlankNode, Literal, Variable, Triple)
_VARIABLE_MESSAGE = "Variable cannot be converted to Term"


class StrictRdfError(ValueError):
    """Raised when generalized RDF cannot be converted to strict RDF."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _check_generalized(term: object) -> None:
    if not isinstance(term, _GENERALIZED_TYPES):
        raise TypeError(
            "a generalized term must be a NamedNode, a BlankNode, a Literal, "
            "a Variable or a Triple"
        )


def to_named_node(term: GeneralizedTerm) -> NamedNode:
    """Return ``term`` as a predicate, or raise StrictRdfError."""
    if isinstance(term, NamedNode):
        return term
    if isinstance(term, BlankNode):
        raise StrictRdfError("Blank node cannot be used as predicate")
    if isinstance(term, Literal):
        raise StrictRdfError("Literal cannot be used as predicate")
    if isinstance(term, Variable):
        raise StrictRdfError(_VARIABLE_MESSAGE)
    if isinstance(term, Triple):
        raise StrictRdfError("Triple cannot be used as predicate")
    _check_generalized(term)
    raise AssertionError("unreachable")


def to_subject(term: GeneralizedTerm) -> Union[NamedNode, BlankNode, Triple]:
    """Return ``term`` as a subject, or raise StrictRdfError."""
    if isinstance(term, (NamedNode, BlankNode, Triple)):
        return term
    if isinstance(term, Literal):
        raise StrictRdfError("Literal cannot be used a subject")
    if isinstance(term, Variable):
        raise StrictRdfError(_VARIABLE_MESSAGE)
    _check_generalized(term)
    raise AssertionError("unreachable")


def to_graph_name(term: GeneralizedTerm) -> Union[NamedNode, BlankNode]:
    """Return ``term`` as a graph name, or raise StrictRdfError."""
    if isinstance(term, (NamedNode, BlankNode)):
        return term
    if isinstance(term, Literal):
        raise StrictRdfError("Literal cannot be used a graph name")
    if isinstance(term, Variable):
        raise StrictRdfError(_VARIABLE_MESSAGE)
    if isinstance(term, Triple):
        raise StrictRdfError("Triple cannot be used as a graph name")
    _check_generalized(term)
    raise AssertionError("unreachable")


def to_term(term: GeneralizedTerm) -> Union[NamedNode, BlankNode, Literal, Triple]:
    """Return ``term`` as a strict RDF term, or raise StrictRdfError."""
    if isinstance(term, (NamedNode, BlankNode, Literal, Triple)):
        return term
    if isinstance(term, Variable):
        raise StrictRdfError(_VARIABLE_MESSAGE)
    _check_generalized(term)
    raise AssertionError("unreachable")


@dataclass(frozen=True)
class GeneralizedQuad:
    """A quad whose positions may hold any generalized term."""

    subject: GeneralizedTerm
    predicate: GeneralizedTerm
    object: GeneralizedTerm
    graph_name: Optional[GeneralizedTerm] = None

    def __post_init__(self) -> None:
        _check_generalized(self.subject)
        _check_generalized(self.predicate)
        _check_generalized(self.object)
        if self.graph_name is not None:
            _check_generalized(self.graph_name)

    @classmethod
    def from_quad(cls, quad: Quad) -> "GeneralizedQuad":
        """Build a generalized quad from a strict one."""
        return cls(quad.subject, quad.predicate, quad.object, quad.graph_name)

    def to_quad(self) -> Quad:
        """Convert to a strict quad, raising StrictRdfError when not possible."""
        subject = to_subject(self.subject)
        predicate = to_named_node(self.predicate)
        obj = to_term(self.object)
        graph_name = None if self.graph_name is None else to_graph_name(self.graph_name)
        return Quad(subject, predicate, obj, graph_name)

    def to_triple(self) -> Triple:
        """Convert to a strict triple, raising StrictRdfError when not possible."""
        if self.graph_name is not None:
            raise StrictRdfError("Quad in named graph cannot be converted to Triple")
        return Triple(
            to_subject(self.subject),
            to_named_node(self.predicate),
            to_term(self.object),
        )

    def __str__(self) -> str:
        text = f"{self.subject} {self.predicate} {self.object} ."
        if self.graph_name is not None:
            return f"GRAPH {self.graph_name} {{ {text}}}"
        return text


class GeneralizedQuadsParser(ABC):
    """A parser producing generalized quads."""

    def parse_all(self, on_quad: Callable[[GeneralizedQuad], None]) -> None:
        """Parse the whole input, calling ``on_quad`` for each quad read."""
        _parse_all(self, on_quad)

    @abstractmethod
    def parse_step(self, on_quad: Callable[[GeneralizedQuad], None]) -> None:
        """Parse a small chunk of input, calling ``on_quad`` for each quad read."""

    @abstractmethod
    def is_end(self) -> bool:
        """Return True once the input has been completely consumed."""

    def iterate(
        self, convert: Optional[Callable[[GeneralizedQuad], Any]] = None
    ) -> Iterator[Any]:
        """Yield the quads read, passed through ``convert`` if given."""
        return _iterate(self, convert)