"""An in-memory RDF dataset: a set of quads with simple pattern lookups."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from ..model import BlankNode, GraphName, NamedNode, Quad, Subject, Term, Triple

__all__ = ["Dataset"]


def _as_quad(item: Union[Triple, Quad]) -> Quad:
    if isinstance(item, Quad):
        return item
    if isinstance(item, Triple):
        return Quad.from_triple(item)
    raise TypeError("a dataset holds only Triple or Quad values")


class Dataset:
    """A set of quads. Triples are stored as quads in the default graph."""

    def __init__(self, quads: Iterable[Union[Triple, Quad]] = ()):
        self._quads: set[Quad] = {_as_quad(quad) for quad in quads}

    def insert(self, quad: Union[Triple, Quad]) -> None:
        """Add a triple or a quad; adding one already present changes nothing."""
        self._quads.add(_as_quad(quad))

    def __iter__(self) -> Iterator[Quad]:
        return iter(self._quads)

    def __len__(self) -> int:
        return len(self._quads)

    def __contains__(self, quad: object) -> bool:
        if isinstance(quad, Triple):
            quad = Quad.from_triple(quad)
        return quad in self._quads

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._quads == other._quads

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Dataset({sorted(map(str, self._quads))!r})"

    def __str__(self) -> str:
        return "".join(f"{quad}\n" for quad in self._quads)

    def triples_for_subject(self, subject: Subject) -> Iterator[Quad]:
        """Yield the quads whose subject is ``subject``."""
        return (quad for quad in self._quads if quad.subject == subject)

    def triples_for_object(self, object: Term) -> Iterator[Quad]:
        """Yield the quads whose object is ``object``."""
        return (quad for quad in self._quads if quad.object == object)

    def object_for_subject_predicate(
        self, subject: Subject, predicate: NamedNode
    ) -> Optional[Term]:
        """Return the object of some quad with this subject and predicate, or None."""
        return next(
            (
                quad.object
                for quad in self._quads
                if quad.subject == subject and quad.predicate == predicate
            ),
            None,
        )

    def subject_for_predicate_object(
        self, predicate: NamedNode, object: Term
    ) -> Optional[Subject]:
        """Return the subject of some quad with this predicate and object, or None."""
        return next(
            (
                quad.subject
                for quad in self._quads
                if quad.predicate == predicate and quad.object == object
            ),
            None,
        )

    def graph_names(self) -> set[Optional[GraphName]]:
        """Return the graph names used, with None standing for the default graph."""
        return {quad.graph_name for quad in self._quads}

    def blank_node_count(self) -> int:
        """Return the number of distinct blank nodes used directly in quads."""
        nodes: set[BlankNode] = set()
        for quad in self._quads:
            for part in (quad.subject, quad.object, quad.graph_name):
                if isinstance(part, BlankNode):
                    nodes.add(part)
        return len(nodes)