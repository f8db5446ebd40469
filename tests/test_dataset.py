import pytest

from rdfcore.conformance.dataset import Dataset
from rdfcore.model import BlankNode, Literal, NamedNode, Quad, Triple

S = NamedNode("http://example.com/s")
P = NamedNode("http://example.com/p")
Q = NamedNode("http://example.com/q")
O = NamedNode("http://example.com/o")
G = NamedNode("http://example.com/g")
B = BlankNode("b1")
LIT = Literal("foo", language="en")


@pytest.fixture
def dataset():
    return Dataset(
        [
            Triple(S, P, O),
            Quad(S, Q, LIT, G),
            Triple(B, P, S),
        ]
    )


def test_triple_is_stored_in_default_graph():
    data = Dataset()
    data.insert(Triple(S, P, O))
    assert Quad(S, P, O) in data
    assert Quad(S, P, O, G) not in data
    assert Triple(S, P, O) in data


def test_duplicates_are_ignored():
    data = Dataset()
    data.insert(Triple(S, P, O))
    data.insert(Quad(S, P, O))
    assert len(data) == 1


def test_len_and_iteration(dataset):
    assert len(dataset) == 3
    assert set(dataset) == {Quad(S, P, O), Quad(S, Q, LIT, G), Quad(B, P, S)}


def test_empty_dataset_is_falsy():
    assert not Dataset()
    assert len(Dataset()) == 0


def test_insert_rejects_other_values():
    with pytest.raises(TypeError):
        Dataset().insert(S)


def test_str_has_one_line_per_quad(dataset):
    lines = str(dataset).splitlines()
    assert sorted(lines) == sorted(str(quad) for quad in dataset)
    assert str(dataset).endswith("\n")


def test_str_of_empty_dataset():
    assert str(Dataset()) == ""


def test_triples_for_subject(dataset):
    assert set(dataset.triples_for_subject(S)) == {Quad(S, P, O), Quad(S, Q, LIT, G)}
    assert list(dataset.triples_for_subject(O)) == []


def test_triples_for_object(dataset):
    assert list(dataset.triples_for_object(S)) == [Quad(B, P, S)]
    assert list(dataset.triples_for_object(LIT)) == [Quad(S, Q, LIT, G)]


def test_object_for_subject_predicate(dataset):
    assert dataset.object_for_subject_predicate(S, Q) == LIT
    assert dataset.object_for_subject_predicate(B, P) == S
    assert dataset.object_for_subject_predicate(O, P) is None


def test_subject_for_predicate_object(dataset):
    assert dataset.subject_for_predicate_object(P, O) == S
    assert dataset.subject_for_predicate_object(P, S) == B
    assert dataset.subject_for_predicate_object(Q, O) is None


def test_equality_ignores_insertion_order():
    first = Dataset([Triple(S, P, O), Triple(B, P, S)])
    second = Dataset([Triple(B, P, S), Triple(S, P, O)])
    assert first == second
    assert first != Dataset([Triple(S, P, O)])


def test_graph_names_and_blank_nodes(dataset):
    assert dataset.graph_names() == {None, G}
    assert dataset.blank_node_count() == 1


def test_rdf_star_subject_lookup():
    inner = Triple(S, P, O)
    data = Dataset([Triple(inner, Q, LIT)])
    assert data.object_for_subject_predicate(inner, Q) == LIT
    assert data.subject_for_predicate_object(Q, LIT) == inner