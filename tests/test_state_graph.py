import pytest

from dsworkbench.state_graph import Edge, StateGraph


@pytest.fixture
def graph():
    g = StateGraph()
    g.add_vertex(1, "Alpha")
    g.add_vertex(2, "Beta")
    g.add_vertex(3, "Gamma")
    return g


def test_add_vertex_and_lookup(graph):
    assert graph.has_vertex(2)
    assert not graph.has_vertex(9)
    assert graph.vertex(2).name == "Beta"
    assert len(graph) == 3


def test_duplicate_vertex_refused(graph):
    with pytest.raises(ValueError):
        graph.add_vertex(1, "Other")
    assert graph.vertex(1).name == "Alpha"


def test_missing_vertex_raises_key_error(graph):
    with pytest.raises(KeyError):
        graph.vertex(42)
    with pytest.raises(KeyError):
        graph.update_vertex(42, "Nowhere")
    with pytest.raises(KeyError):
        graph.delete_vertex(42)
    with pytest.raises(KeyError):
        graph.neighbors(42)


def test_update_vertex_renames(graph):
    graph.update_vertex(3, "Delta")
    assert graph.vertex(3).name == "Delta"


def test_add_edge_is_stored_on_both_ends(graph):
    graph.add_edge(1, 2, 7)
    assert graph.has_edge(1, 2)
    assert graph.has_edge(2, 1)
    assert not graph.has_edge(1, 3)
    assert graph.neighbors(1) == [Edge(2, 7)]
    assert graph.neighbors(2) == [Edge(1, 7)]


def test_add_edge_requires_both_vertices(graph):
    with pytest.raises(KeyError):
        graph.add_edge(1, 99, 4)
    assert graph.neighbors(1) == []


def test_duplicate_edge_refused(graph):
    graph.add_edge(1, 2, 7)
    with pytest.raises(ValueError):
        graph.add_edge(1, 2, 8)
    with pytest.raises(ValueError):
        graph.add_edge(2, 1, 8)
    assert graph.neighbors(1) == [Edge(2, 7)]


def test_update_edge_changes_both_sides(graph):
    graph.add_edge(1, 2, 7)
    graph.update_edge(2, 1, 11)
    assert graph.neighbors(1) == [Edge(2, 11)]
    assert graph.neighbors(2) == [Edge(1, 11)]


def test_update_missing_edge_raises(graph):
    with pytest.raises(KeyError):
        graph.update_edge(1, 3, 5)


def test_delete_edge_removes_both_sides(graph):
    graph.add_edge(1, 2, 7)
    graph.add_edge(1, 3, 4)
    graph.delete_edge(1, 2)
    assert not graph.has_edge(1, 2)
    assert not graph.has_edge(2, 1)
    assert graph.neighbors(1) == [Edge(3, 4)]


def test_delete_missing_edge_raises(graph):
    with pytest.raises(KeyError):
        graph.delete_edge(2, 3)


def test_delete_vertex_drops_incoming_edges(graph):
    graph.add_edge(1, 2, 7)
    graph.add_edge(3, 2, 5)
    graph.add_edge(1, 3, 4)
    graph.delete_vertex(2)
    assert not graph.has_vertex(2)
    assert graph.neighbors(1) == [Edge(3, 4)]
    assert graph.neighbors(3) == [Edge(1, 4)]


def test_neighbors_returns_copy(graph):
    graph.add_edge(1, 2, 7)
    edges = graph.neighbors(1)
    edges.clear()
    assert graph.has_edge(1, 2)


def test_render_lists_vertices_in_insertion_order(graph):
    graph.add_edge(1, 2, 7)
    assert graph.render() == (
        "Alpha (1) --> [2(7) --> ]\n"
        "Beta (2) --> [1(7) --> ]\n"
        "Gamma (3) --> []\n"
    )


def test_render_empty_graph():
    assert StateGraph().render() == ""