"""Property-based checks of the edge equality and hashing contract."""

from hypothesis import assume, given
from hypothesis import strategies as st

from viewgraph import CallableEdgeFactory, Edge, SequentialEdgeFactory

NAN = float("nan")

vertices = st.one_of(
    st.integers(),
    st.floats(allow_nan=True),
    st.booleans(),
    st.text(max_size=8),
    st.tuples(st.integers(), st.text(max_size=4)),
)
small_vertices = st.sampled_from([0, 1, 2, 0.0, -0.0, 1.0, True, False, NAN])


@given(vertices, vertices)
def test_endpoints_are_preserved(a, b):
    edge = Edge(a, b)

    assert edge.source is a
    assert edge.target is b


@given(vertices, vertices)
def test_equality_is_reflexive_across_instances(a, b):
    assert Edge(a, b) == Edge(a, b)
    assert not Edge(a, b) != Edge(a, b)


@given(vertices, vertices)
def test_direction_matters(a, b):
    assume(not (a is b or a == b))

    assert Edge(a, b) != Edge(b, a)


@given(small_vertices, small_vertices, small_vertices, small_vertices)
def test_equal_edges_have_equal_hashes(a, b, c, d):
    left = Edge(a, b)
    right = Edge(c, d)

    if left == right:
        assert hash(left) == hash(right)
        assert right == left
    else:
        assert (a, b) != (c, d)


@given(vertices, vertices)
def test_edge_never_equals_its_tuple(a, b):
    assert Edge(a, b) != (a, b)


@given(vertices)
def test_self_loops_are_equal(a):
    assert Edge(a, a) == Edge(a, a)
    assert Edge(a, a).is_self_loop


@given(vertices, vertices)
def test_factories_agree_with_direct_construction(a, b):
    expected = Edge(a, b)

    assert Edge.factory().create_edge(a, b) == expected
    assert CallableEdgeFactory(Edge).create_edge(a, b) == expected
    assert SequentialEdgeFactory().create_edge(a, b) == expected
