import io

import pytest

from rdfcore.formatter import QuadsFormatter, TriplesFormatter
from rdfcore.model import NamedNode, Quad, Triple

FOO = NamedNode("http://example.com/foo")
SAME_AS = NamedNode("http://schema.org/sameAs")


class LineTriples(TriplesFormatter):
    def __init__(self):
        self.out = io.StringIO()

    def format(self, triple):
        self.out.write(f"{triple} .\n")


class LineQuads(QuadsFormatter):
    def __init__(self):
        self.out = io.StringIO()

    def format(self, quad):
        self.out.write(f"{quad} .\n")


def test_triples_formatter_is_abstract():
    with pytest.raises(TypeError):
        TriplesFormatter()


def test_quads_formatter_is_abstract():
    with pytest.raises(TypeError):
        QuadsFormatter()


def test_triples_formatter_writes_model_representation():
    formatter = LineTriples()
    formatter.format(Triple(FOO, SAME_AS, FOO))
    assert formatter.out.getvalue() == (
        "<http://example.com/foo> <http://schema.org/sameAs> <http://example.com/foo> .\n"
    )


def test_quads_formatter_writes_graph_name():
    formatter = LineQuads()
    graph = NamedNode("http://example.com/")
    formatter.format(Quad(FOO, SAME_AS, FOO, graph))
    assert formatter.out.getvalue().endswith(" <http://example.com/> .\n")