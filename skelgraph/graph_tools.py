"""Helpers for measuring and labelling the sparse skeleton graph."""

from __future__ import annotations

import math
from collections.abc import MutableMapping, Sequence

from skelgraph.skeleton import Point, SparseSkeletonGraph


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Point, b: Point) -> Point:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _norm(v: Point) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def max_edge_distance_on_path(
    start: Point, end: Point, coordinate_path: Sequence[Point]
) -> tuple[float, int]:
    """Largest distance of a path point from the line through start and end.

    Returns the distance and the index of the first point reaching it. An
    empty path, or a line whose start and end coincide, gives ``(0.0, 0)``.
    """
    direction = _sub(end, start)
    length = _norm(direction)
    max_d = 0.0
    max_index = 0
    if length == 0.0:
        return max_d, max_index
    for index, point in enumerate(coordinate_path):
        d = _norm(_cross(direction, _sub(start, point))) / length
        if d > max_d:
            max_d = d
            max_index = index
    return max_d, max_index


def merge_subgraphs(
    subgraph_1: int, subgraph_2: int, subgraph_map: MutableMapping[int, int]
) -> None:
    """Merge two subgraphs in ``subgraph_map`` into the lower of their targets.

    Every entry mapping to the higher target is redirected to the lower one.
    Subgraphs missing from the map are entered with target 0 first.
    """
    target_1 = subgraph_map.setdefault(subgraph_1, 0)
    target_2 = subgraph_map.setdefault(subgraph_2, 0)
    new_subgraph = min(target_1, target_2)
    old_subgraph = max(target_1, target_2)
    for key, value in subgraph_map.items():
        if value == old_subgraph:
            subgraph_map[key] = new_subgraph


def label_subgraph(graph: SparseSkeletonGraph, vertex_id: int, subgraph_id: int) -> int:
    """Give ``subgraph_id`` to every vertex reachable from ``vertex_id``.

    Returns how many vertices were newly labelled; vertices that already
    carry ``subgraph_id`` are not entered again.
    """
    num_labelled = 0
    stack = [vertex_id]
    while stack:
        current = stack.pop()
        vertex = graph.get_vertex(current)
        if vertex.subgraph_id == subgraph_id:
            continue
        vertex.subgraph_id = subgraph_id
        num_labelled += 1
        for edge_id in reversed(vertex.edge_list):
            edge = graph.get_edge(edge_id)
            neighbor = edge.end_vertex if edge.start_vertex == current else edge.start_vertex
            stack.append(neighbor)
    return num_labelled


def label_all_subgraphs(graph: SparseSkeletonGraph) -> dict[int, int]:
    """Label every unlabelled connected component with a fresh id from 1 up.

    Components made of a single vertex are removed from the graph. Returns a
    map from each remaining subgraph id to one of its vertex ids.
    """
    examples: dict[int, int] = {}
    last_subgraph = 0
    for vertex_id in graph.vertex_ids():
        if not graph.has_vertex(vertex_id):
            continue
        if graph.get_vertex(vertex_id).subgraph_id > 0:
            continue
        last_subgraph += 1
        if label_subgraph(graph, vertex_id, last_subgraph) == 1:
            graph.remove_vertex(vertex_id)
        else:
            examples[last_subgraph] = vertex_id
    return examples