from pathlib import Path

import pytest

from rdfcore.conformance.dataset import Dataset
from rdfcore.conformance.evaluator import (
    EvaluationError,
    EvaluationErrorKind,
    evaluate_parser_tests,
    read_w3c_rdf_test_file,
    resolve_w3c_test_path,
)
from rdfcore.conformance.manifest import ManifestEntry, ManifestError, ManifestErrorKind
from rdfcore.model import BlankNode, Literal, NamedNode, Triple

RDFT = "http://www.w3.org/ns/rdftest#"
EX = "http://example.com/"


def entry(name, kind, action, result=None):
    return ManifestEntry(
        id=NamedNode(EX + name),
        kind=NamedNode(RDFT + kind),
        name=name,
        comment=None,
        action=action,
        result=result,
    )


def make_reader(files):
    def reader(url):
        value = files[url]
        if isinstance(value, Exception):
            raise value
        return value

    return reader


def sample(blank_id, value="v"):
    return Dataset(
        [Triple(BlankNode(blank_id), NamedNode(EX + "p"), Literal(value))]
    )


def test_positive_syntax_passes():
    reader = make_reader({"a.nt": Dataset()})
    results = evaluate_parser_tests([entry("t1", "TestNTriplesPositiveSyntax", "a.nt")], reader)
    assert len(results) == 1
    assert results[0].test == NamedNode(EX + "t1")
    assert results[0].outcome.passed


def test_positive_syntax_failure_message():
    reader = make_reader({"a.ttl": ValueError("bad syntax")})
    results = evaluate_parser_tests(
        [entry("t1", "TestTurtlePositiveSyntax", "a.ttl")], reader
    )
    assert results[0].outcome.error == "Parse error on file a.ttl: bad syntax"


def test_negative_syntax_passes_on_error():
    reader = make_reader({"bad.nq": ValueError("oops")})
    results = evaluate_parser_tests([entry("t", "TestNQuadsNegativeSyntax", "bad.nq")], reader)
    assert results[0].outcome.passed


def test_negative_syntax_fails_when_parsed():
    reader = make_reader({"ok.rdf": Dataset()})
    results = evaluate_parser_tests([entry("t", "TestXMLNegativeSyntax", "ok.rdf")], reader)
    assert results[0].outcome.error == "file parsed without error even if it should not"


def test_eval_isomorphic_passes():
    reader = make_reader({"in.ttl": sample("a"), "out.nt": sample("b")})
    results = evaluate_parser_tests(
        [entry("t", "TestTurtleEval", "in.ttl", "out.nt")], reader
    )
    assert results[0].outcome.passed


def test_eval_not_isomorphic_fails():
    reader = make_reader({"in.trig": sample("a", "x"), "out.nq": sample("a", "y")})
    results = evaluate_parser_tests(
        [entry("t", "TestTrigEval", "in.trig", "out.nq")], reader
    )
    error = results[0].outcome.error
    assert error.startswith("The two files are not isomorphics. Expected:\n")
    assert '"y"' in error and '"x"' in error


def test_eval_expected_file_error_reports_action():
    reader = make_reader({"in.ttl": Dataset(), "out.nt": ValueError("broken")})
    results = evaluate_parser_tests(
        [entry("t", "TestTurtleEval", "in.ttl", "out.nt")], reader
    )
    assert results[0].outcome.error == "Parse error on file in.ttl: broken"


def test_eval_without_result_raises():
    reader = make_reader({"in.ttl": Dataset()})
    with pytest.raises(ManifestError) as info:
        evaluate_parser_tests([entry("t", "TestTurtleEval", "in.ttl")], reader)
    assert info.value.kind is ManifestErrorKind.INVALID_TEST_RESULT
    assert info.value.node == NamedNode(EX + "t")


def test_unknown_test_type_raises():
    with pytest.raises(ManifestError) as info:
        evaluate_parser_tests([entry("t", "TestSomethingElse", "x")], make_reader({}))
    assert info.value.kind is ManifestErrorKind.INVALID_TEST_TYPE


def test_results_keep_manifest_order():
    reader = make_reader({"a.nt": Dataset(), "b.nt": ValueError("no")})
    entries = [
        entry("first", "TestNTriplesPositiveSyntax", "a.nt"),
        entry("second", "TestNTriplesNegativeSyntax", "b.nt"),
    ]
    results = evaluate_parser_tests(entries, reader)
    assert [r.test for r in results] == [e.id for e in entries]
    assert all(r.outcome.passed for r in results)


def test_resolve_paths(tmp_path):
    assert resolve_w3c_test_path(
        "http://w3c.github.io/rdf-tests/ntriples/manifest.ttl", tmp_path
    ) == tmp_path / "ntriples/manifest.ttl"
    assert resolve_w3c_test_path(
        "http://www.w3.org/2013/RDFXMLTests/manifest.ttl", tmp_path
    ) == tmp_path / "rdf-xml/manifest.ttl"
    assert resolve_w3c_test_path(
        "https://w3c.github.io/rdf-star/tests/nt/syntax/manifest.ttl", tmp_path
    ) == tmp_path / "../rdf-star/tests/nt/syntax/manifest.ttl"


def test_resolve_unknown_url(tmp_path):
    with pytest.raises(EvaluationError) as info:
        resolve_w3c_test_path("http://example.com/test.nt", tmp_path)
    assert info.value.kind is EvaluationErrorKind.UNKNOWN_TEST_URL
    assert str(info.value) == (
        "The URL http://example.com/test.nt does not corresponds to a known RDF test"
    )


def test_read_file_round_trip(tmp_path):
    content = b"<http://example.com/s> <http://example.com/p> <http://example.com/o> .\n"
    (tmp_path / "ntriples").mkdir()
    (tmp_path / "ntriples" / "a.nt").write_bytes(content)
    with read_w3c_rdf_test_file("http://w3c.github.io/rdf-tests/ntriples/a.nt", tmp_path) as f:
        assert f.read() == content


def test_read_missing_file(tmp_path):
    with pytest.raises(EvaluationError) as info:
        read_w3c_rdf_test_file("http://w3c.github.io/rdf-tests/missing.nt", tmp_path)
    assert info.value.kind is EvaluationErrorKind.IO
    assert info.value.target == str(Path(tmp_path) / "missing.nt")
    assert str(info.value).startswith("I/O error on file ")


def test_unsupported_format_message():
    error = EvaluationError(EvaluationErrorKind.UNSUPPORTED_FORMAT, "file.xyz")
    assert str(error) == "The extension of file.xyz does not match any supported format"