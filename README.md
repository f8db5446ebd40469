# rdfcore

Building blocks for RDF 1.1 and RDF-star tooling. It has no dependencies
outside the standard library.

- `rdfcore.model` holds the RDF data model: `NamedNode`, `BlankNode`,
  `Literal`, `Triple` and `Quad`. These are frozen dataclasses. Their string
  forms are compatible with N-Triples, Turtle and SPARQL. A triple can be the
  subject or object of another triple, as RDF-star allows. `quote_string`
  applies the N-Triples string escapes.
- `rdfcore.parser` holds the abstract bases `TriplesParser` and `QuadsParser`
  for parsers that work step by step. It also has `ParseError`, which can carry
  a `LineBytePosition`.
- `rdfcore.formatter` holds the abstract bases `TriplesFormatter` and
  `QuadsFormatter`.
- `rdfcore.generalized` covers generalized RDF. It has the SPARQL `Variable`,
  `GeneralizedQuad` and the abstract `GeneralizedQuadsParser`. The functions
  `to_named_node`, `to_subject`, `to_graph_name` and `to_term` convert back to
  strict RDF, as do `GeneralizedQuad.to_quad()` and `to_triple()`. They raise
  `StrictRdfError` when a conversion is not possible.
- `rdfcore.conformance` has the tools for running conformance test manifests:
  - `dataset.Dataset`, a set of quads with pattern lookups.
  - `isomorphism.are_datasets_isomorphic`.
  - `manifest.ManifestReader` and `manifest.rdf_list`.
  - `evaluator.evaluate_parser_tests`.
  - `report.EvaluationResult` and `report.Outcome`.

## Installation

```
pip install rdfcore
```

## The data model

```python
from rdfcore.model import NamedNode, BlankNode, Literal, Triple, Quad

triple = Triple(
    BlankNode("a1"),
    NamedNode("http://schema.org/name"),
    Literal("foo\nbar", language="en"),
)
print(triple)
# _:a1 <http://schema.org/name> "foo\nbar"@en

quad = Quad.from_triple(triple, NamedNode("http://example.com/"))
print(quad)
# _:a1 <http://schema.org/name> "foo\nbar"@en <http://example.com/>
```

A literal without `language` and `datatype` is a simple literal. Setting both
raises `ValueError`. Putting a term in a position it may not hold raises
`TypeError`, for example a literal as a subject.

## Writing a parser

Subclass `TriplesParser` or `QuadsParser` and implement `parse_step` and
`is_end`. The base class then provides `parse_all(callback)` and
`iterate(convert=None)`:

```python
from rdfcore.parser import TriplesParser

class ListParser(TriplesParser):
    def __init__(self, triples):
        self._pending = list(triples)

    def parse_step(self, on_triple):
        on_triple(self._pending.pop(0))

    def is_end(self):
        return not self._pending

for triple in ListParser([triple]).iterate():
    print(triple)
```

`iterate` runs one step at a time. When a single step yields several items,
they come out in the reverse of the order in which they were read. Exceptions
raised by the parser or by `convert` propagate.

## Generalized RDF

```python
from rdfcore.generalized import GeneralizedQuad, Variable

q = GeneralizedQuad(Variable("s"), Variable("p"), Variable("o"), Variable("g"))
print(q)          # GRAPH ?g { ?s ?p ?o .}
q.to_quad()       # raises StrictRdfError: Variable cannot be converted to Term
```

## Comparing datasets

```python
from rdfcore.conformance.dataset import Dataset
from rdfcore.conformance.isomorphism import are_datasets_isomorphic

assert are_datasets_isomorphic(Dataset(quads_a), Dataset(quads_b))
```

Two datasets are isomorphic when some one-to-one renaming of their blank nodes
makes them equal. `Dataset` accepts both triples and quads. Triples go into the
default graph.

## Running a test manifest

`ManifestReader(manifest_url, file_reader)` yields a `ManifestEntry` for each
test in the manifest and in the manifests it includes. `file_reader` is a
function that turns a URL into a `Dataset`. `evaluate_parser_tests` runs
positive syntax, negative syntax and evaluation tests with that same function
and returns `EvaluationResult` values:

```python
from rdfcore.conformance.manifest import ManifestReader
from rdfcore.conformance.evaluator import evaluate_parser_tests

def load(url):
    ...  # parse the file behind `url` and return a Dataset

for result in evaluate_parser_tests(ManifestReader(manifest_url, load), load):
    print(result)   # e.g. "<http://...#test-1>: passed"
```

A malformed manifest or test raises `ManifestError`. The following helpers
find the local copy of a W3C test file under a directory:

- `evaluator.resolve_w3c_test_path(url, tests_path)` returns its path.
- `evaluator.read_w3c_rdf_test_file(url, tests_path)` opens it for binary
  reading.

Both raise `EvaluationError` for an unknown URL or an unreadable file.

## What this package does not do

This package defines the interfaces and the test-running machinery only. It
has no parsers or serializers for concrete syntaxes such as N-Triples,
N-Quads, Turtle, TriG or RDF/XML. Reading manifests and test files therefore
needs a `file_reader` that you supply. There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```