"""Reading of RDF test manifests: the tests they list and the manifests they include."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Union

from ..model import BlankNode, Literal, NamedNode, Triple
from .dataset import Dataset
from .vocab import (
    MF_ACTION,
    MF_ENTRIES,
    MF_INCLUDE,
    MF_MANIFEST,
    MF_NAME,
    MF_RESULT,
    RDF_FIRST,
    RDF_NIL,
    RDF_REST,
    RDF_TYPE,
    RDFS_COMMENT,
)

__all__ = [
    "ManifestEntry",
    "ManifestErrorKind",
    "ManifestError",
    "ManifestReader",
    "rdf_list",
]

FileReader = Callable[[str], Dataset]


@dataclass(frozen=True)
class ManifestEntry:
    """A single test listed in a manifest."""

    id: NamedNode
    kind: NamedNode
    name: Optional[str]
    comment: Optional[str]
    action: str
    result: Optional[str]

    def __str__(self) -> str:
        text = str(self.kind)
        if self.name is not None:
            text += f' named "{self.name}"'
        if self.comment is not None:
            text += f' with comment "{self.comment}"'
        return text + f' on file "{self.action}"'


class ManifestErrorKind(Enum):
    """The ways a manifest can be malformed, with their message templates."""

    AMBIGUOUS_MANIFEST = "Could not decide what is the manifest IRI in {}"
    INVALID_TEST_TYPE = "The test {} has an unsupported or missing rdf:type"
    INVALID_TEST_ACTION = "The test {} has an invalid or missing mf:action"
    INVALID_TEST_RESULT = "The test {} has an invalid mf:result"
    INVALID_MANIFEST_LIST = "The manifest {} contains an invalid mf:include list"
    INVALID_TEST_LIST = "The manifest {} contains an invalid mf:entries list"


class ManifestError(Exception):
    """Raised when a manifest or one of its tests is malformed."""

    def __init__(self, kind: ManifestErrorKind, node: NamedNode):
        super().__init__(kind.value.format(node))
        self.kind = kind
        self.node = node


def rdf_list(
    graph: Dataset, root: Union[NamedNode, BlankNode]
) -> Iterator[Union[NamedNode, BlankNode, Literal, Triple]]:
    """Yield the members of the RDF collection starting at ``root``."""
    current: Optional[Union[NamedNode, BlankNode]] = root
    while current is not None:
        item = graph.object_for_subject_predicate(current, RDF_FIRST)
        rest = graph.object_for_subject_predicate(current, RDF_REST)
        if isinstance(rest, (NamedNode, BlankNode)) and rest != RDF_NIL:
            current = rest
        else:
            current = None
        if item is None:
            return
        yield item


def _literal_value(term: object) -> Optional[str]:
    return term.value if isinstance(term, Literal) else None


class ManifestReader:
    """Iterate over the tests of a manifest and of the manifests it includes.

    ``file_reader`` loads the dataset behind a URL. Errors found in a manifest
    are raised from the iteration; iterating again carries on with what is left.
    """

    def __init__(self, manifest_url: str, file_reader: FileReader):
        self._graph = Dataset()
        self._tests_to_do: list = []
        self._manifests_to_do: list[str] = [manifest_url]
        self._file_reader = file_reader

    def __iter__(self) -> "ManifestReader":
        return self

    def __next__(self) -> ManifestEntry:
        while True:
            if self._tests_to_do:
                test = self._tests_to_do.pop()
                if isinstance(test, NamedNode):
                    return self._read_entry(test)
                continue
            if not self._manifests_to_do:
                raise StopIteration
            self._load_manifest(self._manifests_to_do.pop())

    def _read_entry(self, node: NamedNode) -> ManifestEntry:
        graph = self._graph
        kind = graph.object_for_subject_predicate(node, RDF_TYPE)
        if not isinstance(kind, NamedNode):
            raise ManifestError(ManifestErrorKind.INVALID_TEST_TYPE, node)
        name = _literal_value(graph.object_for_subject_predicate(node, MF_NAME))
        comment = _literal_value(graph.object_for_subject_predicate(node, RDFS_COMMENT))
        action = graph.object_for_subject_predicate(node, MF_ACTION)
        if not isinstance(action, NamedNode):
            raise ManifestError(ManifestErrorKind.INVALID_TEST_ACTION, node)
        result = graph.object_for_subject_predicate(node, MF_RESULT)
        if result is not None and not isinstance(result, NamedNode):
            raise ManifestError(ManifestErrorKind.INVALID_TEST_RESULT, node)
        return ManifestEntry(
            id=node,
            kind=kind,
            name=name,
            comment=comment,
            action=action.iri,
            result=None if result is None else result.iri,
        )

    def _load_manifest(self, url: str) -> None:
        manifest = NamedNode(url)
        for quad in self._file_reader(url):
            self._graph.insert(quad)

        candidates = [
            quad.subject
            for quad in self._graph
            if quad.predicate == RDF_TYPE and quad.object == MF_MANIFEST
        ]
        if not candidates:
            subject = manifest
        elif len(candidates) == 1:
            subject = candidates[0]
        else:
            raise ManifestError(ManifestErrorKind.AMBIGUOUS_MANIFEST, manifest)

        includes = self._graph.object_for_subject_predicate(subject, MF_INCLUDE)
        if isinstance(includes, BlankNode):
            self._manifests_to_do.extend(
                item.iri
                for item in rdf_list(self._graph, includes)
                if isinstance(item, NamedNode)
            )
        elif includes is not None:
            raise ManifestError(ManifestErrorKind.INVALID_MANIFEST_LIST, manifest)

        entries = self._graph.object_for_subject_predicate(subject, MF_ENTRIES)
        if isinstance(entries, BlankNode):
            self._tests_to_do.extend(rdf_list(self._graph, entries))
        elif entries is not None:
            raise ManifestError(ManifestErrorKind.INVALID_TEST_LIST, manifest)