import io

import pytest

from dungeoncrawl.graph import Graph, GraphError


def chain(n):
    graph = Graph()
    graph.create(n)
    for v in range(n - 1):
        graph.insert_edge_directed(v, v + 1)
    return graph


def edges_of(graph):
    return {
        (src, dest)
        for src in range(len(graph))
        for dest in graph._vertex(src).edges
    }


def test_new_graph_is_empty():
    graph = Graph()
    assert graph.is_empty()
    assert len(graph) == 0


def test_create_sets_size():
    graph = Graph()
    graph.create(4)
    assert not graph.is_empty()
    assert len(graph) == 4


def test_create_twice_raises():
    graph = Graph()
    graph.create(2)
    with pytest.raises(GraphError):
        graph.create(3)


def test_clear_empties():
    graph = chain(3)
    graph.clear()
    assert graph.is_empty()
    assert len(graph) == 0


def test_vertex_data_round_trip():
    graph = Graph()
    graph.create(2)
    graph.set_vertex_data(1, "treasure")
    assert graph.get_vertex_data(1) == "treasure"
    assert graph.get_vertex_data(0) is None


def test_vertex_out_of_range():
    graph = Graph()
    graph.create(2)
    with pytest.raises(IndexError):
        graph.set_vertex_data(2, "x")
    with pytest.raises(IndexError):
        graph.get_vertex_data(5)
    with pytest.raises(IndexError):
        Graph().get_vertex_data(0)


def test_insert_directed_rejects_duplicates():
    graph = Graph()
    graph.create(3)
    assert graph.insert_edge_directed(0, 1) is True
    assert graph.insert_edge_directed(0, 1) is False
    assert edges_of(graph) == {(0, 1)}


def test_insert_directed_out_of_range():
    graph = Graph()
    graph.create(2)
    with pytest.raises(IndexError):
        graph.insert_edge_directed(0, 2)


def test_delete_directed():
    graph = chain(3)
    assert graph.delete_edge_directed(0, 1) is True
    assert graph.delete_edge_directed(0, 1) is False
    assert edges_of(graph) == {(1, 2)}


def test_undirected_edges_both_ways():
    graph = Graph()
    graph.create(3)
    assert graph.insert_edge_undirected(0, 2) is True
    assert graph.insert_edge_undirected(0, 2) is False
    assert edges_of(graph) == {(0, 2), (2, 0)}
    assert graph.delete_edge_undirected(2, 0) is True
    assert edges_of(graph) == set()


def test_save_format(tmp_path):
    graph = Graph()
    graph.create(3)
    graph.insert_edge_directed(0, 1)
    graph.insert_edge_directed(0, 2)
    target = tmp_path / "g.txt"
    graph.save(target)
    assert target.read_text(encoding="utf-8") == "Grafo\n3\n2 1 \n\n\n"


def test_save_empty_raises(tmp_path):
    with pytest.raises(GraphError):
        Graph().save(tmp_path / "g.txt")


def test_save_load_round_trip(tmp_path):
    graph = Graph()
    graph.create(4)
    graph.insert_edge_undirected(0, 1)
    graph.insert_edge_directed(1, 3)
    graph.insert_edge_directed(3, 2)
    target = tmp_path / "g.txt"
    graph.save(target)
    loaded = Graph()
    loaded.load(target)
    assert len(loaded) == len(graph)
    assert edges_of(loaded) == edges_of(graph)


def test_load_replaces_existing(tmp_path):
    target = tmp_path / "g.txt"
    target.write_text("Grafo\n2\n1\n0\n", encoding="utf-8")
    graph = chain(5)
    graph.load(target)
    assert len(graph) == 2
    assert edges_of(graph) == {(0, 1), (1, 0)}


@pytest.mark.parametrize(
    "content",
    [
        "Graph\n2\n",
        "",
        "Grafo\n",
        "Grafo\nabc\n",
        "Grafo\n0\n",
        "Grafo\n2\n1 x\n",
        "Grafo\n2\n1 1\n",
        "Grafo\n2\n5\n",
        "Grafo\n2\n1  0\n",
        "Grafo\n1\n\n0\n",
    ],
)
def test_load_rejects_bad_files(tmp_path, content):
    target = tmp_path / "g.txt"
    target.write_text(content, encoding="utf-8")
    graph = chain(2)
    with pytest.raises(GraphError):
        graph.load(target)
    assert graph.is_empty()


def test_load_missing_file(tmp_path):
    with pytest.raises(GraphError):
        Graph().load(tmp_path / "absent.txt")


def test_dfs_reaches_only_reachable():
    graph = Graph()
    graph.create(5)
    graph.insert_edge_directed(0, 1)
    graph.insert_edge_directed(0, 2)
    graph.insert_edge_directed(2, 3)
    order = graph.depth_first_search(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]


def test_dfs_visits_last_pushed_first():
    graph = Graph()
    graph.create(3)
    graph.insert_edge_directed(0, 1)
    graph.insert_edge_directed(0, 2)
    assert graph.depth_first_search(0) == [0, 1, 2]


def test_dfs_out_of_range():
    with pytest.raises(IndexError):
        chain(2).depth_first_search(2)


def test_bfs_path_along_chain():
    graph = chain(4)
    assert list(graph.bfs_path(0, 3)) == [0, 1, 2, 3]


def test_bfs_path_unreachable_is_empty():
    graph = chain(4)
    assert graph.bfs_path(3, 0).is_empty()


def test_bfs_path_to_self():
    assert list(chain(3).bfs_path(1, 1)) == [1]


def test_bfs_path_follows_edges():
    graph = Graph()
    graph.create(6)
    for src, dest in [(0, 1), (0, 2), (1, 3), (2, 4), (4, 5), (3, 5), (5, 0)]:
        graph.insert_edge_directed(src, dest)
    path = list(graph.bfs_path(0, 5))
    assert path[0] == 0 and path[-1] == 5
    assert len(set(path)) == len(path)
    for src, dest in zip(path, path[1:]):
        assert dest in graph._vertex(src).edges


def test_bfs_out_of_range():
    with pytest.raises(IndexError):
        chain(2).bfs_path(0, 9)


def test_display_format():
    graph = Graph()
    graph.create(2)
    graph.set_vertex_data(0, "a")
    graph.set_vertex_data(1, "b")
    graph.insert_edge_directed(0, 1)
    out = io.StringIO()
    graph.display(out)
    assert out.getvalue() == "[0] a: 1 \n[1] b: \n"


def test_display_empty_writes_nothing():
    out = io.StringIO()
    Graph().display(out)
    assert out.getvalue() == ""