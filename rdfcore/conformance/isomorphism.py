"""Isomorphism check between RDF datasets that may contain blank nodes."""

from __future__ import annotations

from itertools import permutations
from typing import Iterable, Mapping, Optional, Union

from ..model import BlankNode, Literal, NamedNode, Quad, Triple
from .dataset import Dataset

__all__ = ["are_datasets_isomorphic"]

_Mapping = Mapping[BlankNode, BlankNode]


def _collect_triple_blank_nodes(triple: Triple, nodes: set[BlankNode]) -> None:
    for part in (triple.subject, triple.object):
        if isinstance(part, BlankNode):
            nodes.add(part)
        elif isinstance(part, Triple):
            _collect_triple_blank_nodes(part, nodes)


def _dataset_blank_nodes(dataset: Dataset) -> set[BlankNode]:
    nodes: set[BlankNode] = set()
    for quad in dataset:
        for part in (quad.subject, quad.object):
            if isinstance(part, BlankNode):
                nodes.add(part)
            elif isinstance(part, Triple):
                _collect_triple_blank_nodes(part, nodes)
        if isinstance(quad.graph_name, BlankNode):
            nodes.add(quad.graph_name)
    return nodes


def _blank_node_signature(node: BlankNode, dataset: Dataset) -> int:
    """Hash the ground neighbourhood of ``node``, independently of its identifier."""
    outgoing = sorted(
        {
            (str(quad.predicate), str(quad.object))
            for quad in dataset.triples_for_subject(node)
            if not isinstance(quad.object, (BlankNode, Triple))
        }
    )
    incoming = sorted(
        {
            (str(quad.subject), str(quad.predicate))
            for quad in dataset.triples_for_object(node)
            if not isinstance(quad.subject, (BlankNode, Triple))
        }
    )
    return hash((tuple(outgoing), tuple(incoming)))


def _group_by_signature(
    nodes: Iterable[BlankNode], dataset: Dataset
) -> dict[int, list[BlankNode]]:
    groups: dict[int, list[BlankNode]] = {}
    for node in nodes:
        groups.setdefault(_blank_node_signature(node, dataset), []).append(node)
    return groups


def _map_triple(triple: Triple, mapping: _Mapping) -> Triple:
    return Triple(
        _map_part(triple.subject, mapping),
        triple.predicate,
        _map_part(triple.object, mapping),
    )


def _map_part(
    part: Union[NamedNode, BlankNode, Literal, Triple], mapping: _Mapping
) -> Union[NamedNode, BlankNode, Literal, Triple]:
    if isinstance(part, BlankNode):
        return mapping[part]
    if isinstance(part, Triple):
        return _map_triple(part, mapping)
    return part


def _map_graph_name(
    graph_name: Optional[Union[NamedNode, BlankNode]], mapping: _Mapping
) -> Optional[Union[NamedNode, BlankNode]]:
    if isinstance(graph_name, BlankNode):
        return mapping[graph_name]
    return graph_name


def _is_contained(mapping: _Mapping, a: Dataset, b: Dataset) -> bool:
    return all(
        Quad(
            _map_part(quad.subject, mapping),
            quad.predicate,
            _map_part(quad.object, mapping),
            _map_graph_name(quad.graph_name, mapping),
        )
        in b
        for quad in a
    )


def _search(
    groups: list[tuple[list[BlankNode], list[BlankNode]]],
    mapping: dict[BlankNode, BlankNode],
    a: Dataset,
    b: Dataset,
) -> bool:
    if not groups:
        return _is_contained(mapping, a, b)
    (a_nodes, b_nodes), rest = groups[0], groups[1:]
    for candidate in permutations(a_nodes):
        attempt = dict(mapping)
        attempt.update(zip(candidate, b_nodes))
        if _search(rest, attempt, a, b):
            return True
    return False


def are_datasets_isomorphic(a: Dataset, b: Dataset) -> bool:
    """Return True if ``a`` and ``b`` are equal up to a renaming of blank nodes."""
    if len(a) != len(b):
        return False

    a_groups = _group_by_signature(_dataset_blank_nodes(a), a)
    b_groups = _group_by_signature(_dataset_blank_nodes(b), b)
    if len(a_groups) != len(b_groups):
        return False

    mapping: dict[BlankNode, BlankNode] = {}
    ambiguous: list[tuple[list[BlankNode], list[BlankNode]]] = []
    for signature, a_nodes in a_groups.items():
        b_nodes = b_groups.get(signature, [])
        if len(a_nodes) != len(b_nodes):
            return False
        if len(a_nodes) == 1:
            mapping[a_nodes[0]] = b_nodes[0]
        else:
            ambiguous.append((sorted(a_nodes), b_nodes))

    return _search(ambiguous, mapping, a, b)