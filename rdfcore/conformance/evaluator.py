"""Evaluation of parser conformance tests listed in RDF test manifests."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Union

from .dataset import Dataset
from .isomorphism import are_datasets_isomorphic
from .manifest import ManifestEntry, ManifestError, ManifestErrorKind
from .report import EvaluationResult, Outcome

__all__ = [
    "EvaluationErrorKind",
    "EvaluationError",
    "POSITIVE_SYNTAX_TESTS",
    "NEGATIVE_TESTS",
    "EVAL_TESTS",
    "evaluate_parser_tests",
    "resolve_w3c_test_path",
    "read_w3c_rdf_test_file",
]

_RDFT = "http://www.w3.org/ns/rdftest#"

POSITIVE_SYNTAX_TESTS = frozenset(
    _RDFT + name
    for name in (
        "TestNTriplesPositiveSyntax",
        "TestNQuadsPositiveSyntax",
        "TestTurtlePositiveSyntax",
        "TestTrigPositiveSyntax",
    )
)

NEGATIVE_TESTS = frozenset(
    _RDFT + name
    for name in (
        "TestNTriplesNegativeSyntax",
        "TestNQuadsNegativeSyntax",
        "TestTurtleNegativeSyntax",
        "TestTurtleNegativeEval",
        "TestTrigNegativeSyntax",
        "TestTrigNegativeEval",
        "TestXMLNegativeSyntax",
    )
)

EVAL_TESTS = frozenset(
    _RDFT + name for name in ("TestTurtleEval", "TestTrigEval", "TestXMLEval")
)

_URL_PREFIXES = (
    ("http://w3c.github.io/rdf-tests/", ""),
    ("http://www.w3.org/2013/RDFXMLTests/", "rdf-xml/"),
    ("https://w3c.github.io/rdf-star/", "../rdf-star/"),
)

FileReader = Callable[[str], Dataset]


class EvaluationErrorKind(Enum):
    """The ways locating or reading a test file can fail."""

    UNKNOWN_TEST_URL = "unknown_test_url"
    UNSUPPORTED_FORMAT = "unsupported_format"
    IO = "io"


class EvaluationError(Exception):
    """Raised when a test file cannot be located, read or recognised."""

    def __init__(self, kind: EvaluationErrorKind, target: str, cause: object = None):
        if kind is EvaluationErrorKind.UNKNOWN_TEST_URL:
            message = f"The URL {target} does not corresponds to a known RDF test"
        elif kind is EvaluationErrorKind.UNSUPPORTED_FORMAT:
            message = f"The extension of {target} does not match any supported format"
        else:
            message = f"I/O error on file {target}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.target = target
        self.cause = cause


def _parse_error(action: str, error: Exception) -> Outcome:
    return Outcome.failure(f"Parse error on file {action}: {error}")


def _evaluate(entry: ManifestEntry, file_reader: FileReader) -> Outcome:
    kind = entry.kind.iri
    if kind in POSITIVE_SYNTAX_TESTS:
        try:
            file_reader(entry.action)
        except Exception as error:
            return _parse_error(entry.action, error)
        return Outcome.success()

    if kind in NEGATIVE_TESTS:
        try:
            file_reader(entry.action)
        except Exception:
            return Outcome.success()
        return Outcome.failure("file parsed without error even if it should not")

    if kind in EVAL_TESTS:
        try:
            actual = file_reader(entry.action)
        except Exception as error:
            return _parse_error(entry.action, error)
        if entry.result is None:
            raise ManifestError(ManifestErrorKind.INVALID_TEST_RESULT, entry.id)
        try:
            expected = file_reader(entry.result)
        except Exception as error:
            return _parse_error(entry.action, error)
        if are_datasets_isomorphic(expected, actual):
            return Outcome.success()
        return Outcome.failure(
            "The two files are not isomorphics. "
            f"Expected:\n{expected}\nActual:\n{actual}"
        )

    raise ManifestError(ManifestErrorKind.INVALID_TEST_TYPE, entry.kind)


def evaluate_parser_tests(
    manifest: Iterable[ManifestEntry], file_reader: FileReader
) -> list[EvaluationResult]:
    """Run every test of ``manifest``, loading files through ``file_reader``.

    Parse failures become failed outcomes; a malformed test raises ManifestError.
    """
    return [
        EvaluationResult(entry.id, _evaluate(entry, file_reader)) for entry in manifest
    ]


def resolve_w3c_test_path(url: str, tests_path: Union[str, Path]) -> Path:
    """Map the URL of a W3C test file to its location under ``tests_path``."""
    for prefix, replacement in _URL_PREFIXES:
        if url.startswith(prefix):
            return Path(tests_path) / url.replace(prefix, replacement)
    raise EvaluationError(EvaluationErrorKind.UNKNOWN_TEST_URL, url)


def read_w3c_rdf_test_file(url: str, tests_path: Union[str, Path]) -> BinaryIO:
    """Open the local copy of the W3C test file at ``url`` for binary reading."""
    path = resolve_w3c_test_path(url, tests_path)
    try:
        return open(path, "rb")
    except OSError as error:
        raise EvaluationError(EvaluationErrorKind.IO, str(path), error) from error