import pytest

from skelgraph.skeleton import (
    Skeleton,
    SkeletonEdge,
    SkeletonPoint,
    SkeletonVertex,
    SparseSkeletonGraph,
)


def _graph_with_two_vertices():
    graph = SparseSkeletonGraph()
    a = graph.add_vertex(SkeletonVertex(point=(0.0, 0.0, 0.0), distance=1.0))
    b = graph.add_vertex(SkeletonVertex(point=(1.0, 2.0, 3.0), distance=2.0))
    return graph, a, b


def test_vertex_ids_are_sequential_from_zero():
    graph, a, b = _graph_with_two_vertices()
    assert (a, b) == (0, 1)
    assert graph.get_vertex(b).vertex_id == b
    assert graph.vertex_ids() == [0, 1]


def test_add_vertex_stores_a_copy():
    graph = SparseSkeletonGraph()
    original = SkeletonVertex(point=(1.0, 1.0, 1.0))
    vid = graph.add_vertex(original)
    graph.get_vertex(vid).edge_list.append(42)
    assert original.edge_list == []
    assert original.vertex_id == -1


def test_add_edge_links_vertices_and_copies_points():
    graph, a, b = _graph_with_two_vertices()
    eid = graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
    edge = graph.get_edge(eid)
    assert edge.edge_id == eid
    assert edge.start_point == graph.get_vertex(a).point
    assert edge.end_point == graph.get_vertex(b).point
    assert graph.get_vertex(a).edge_list == [eid]
    assert graph.get_vertex(b).edge_list == [eid]
    assert graph.are_vertices_directly_connected(a, b)
    assert graph.are_vertices_directly_connected(b, a)


def test_add_edge_to_missing_vertex_raises():
    graph, a, _ = _graph_with_two_vertices()
    with pytest.raises(KeyError):
        graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=99))
    assert graph.edge_ids() == []


def test_get_missing_raises_key_error():
    graph = SparseSkeletonGraph()
    with pytest.raises(KeyError):
        graph.get_vertex(3)
    with pytest.raises(KeyError):
        graph.get_edge(3)


def test_remove_edge_unhooks_from_vertices():
    graph, a, b = _graph_with_two_vertices()
    eid = graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
    graph.remove_edge(eid)
    assert not graph.has_edge(eid)
    assert graph.get_vertex(a).edge_list == []
    assert not graph.are_vertices_directly_connected(a, b)


def test_remove_vertex_removes_all_incident_edges():
    graph, a, b = _graph_with_two_vertices()
    c = graph.add_vertex(SkeletonVertex(point=(5.0, 5.0, 5.0)))
    e1 = graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
    e2 = graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=c))
    e3 = graph.add_edge(SkeletonEdge(start_vertex=b, end_vertex=c))
    graph.remove_vertex(a)
    assert not graph.has_vertex(a)
    assert graph.edge_ids() == [e3]
    assert not graph.has_edge(e1) and not graph.has_edge(e2)
    assert graph.get_vertex(b).edge_list == [e3]


def test_remove_unknown_ids_is_harmless():
    graph, a, b = _graph_with_two_vertices()
    graph.remove_vertex(17)
    graph.remove_edge(17)
    assert graph.vertex_ids() == [a, b]


def test_clear_resets_ids():
    graph, a, b = _graph_with_two_vertices()
    graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
    graph.clear()
    assert graph.vertex_ids() == [] and graph.edge_ids() == []
    assert graph.add_vertex(SkeletonVertex()) == 0


def test_serialized_items_keep_their_ids():
    graph = SparseSkeletonGraph()
    graph.add_serialized_vertex(SkeletonVertex(vertex_id=7, edge_list=[3]))
    graph.add_serialized_vertex(SkeletonVertex(vertex_id=2, edge_list=[3]))
    graph.add_serialized_edge(SkeletonEdge(edge_id=3, start_vertex=7, end_vertex=2))
    assert graph.vertex_ids() == [2, 7]
    assert graph.edge_ids() == [3]
    assert graph.are_vertices_directly_connected(7, 2)


def test_skeleton_pointclouds():
    p1 = SkeletonPoint(point=(1.0, 0.0, 0.0), distance=0.5)
    p2 = SkeletonPoint(point=(2.0, 0.0, 0.0), distance=0.7)
    p3 = SkeletonPoint(point=(3.0, 0.0, 0.0), distance=0.9)
    skeleton = Skeleton(points=[p1, p2, p3], edge_points=[p2, p3], vertex_points=[p3])
    assert skeleton.pointcloud() == [p2.point, p3.point]
    assert skeleton.pointcloud_with_distances() == (
        [p1.point, p2.point, p3.point],
        [0.5, 0.7, 0.9],
    )
    assert skeleton.edge_pointcloud_with_distances() == ([p2.point, p3.point], [0.7, 0.9])
    assert skeleton.vertex_pointcloud_with_distances() == ([p3.point], [0.9])