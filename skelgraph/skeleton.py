"""Skeleton point sets and the sparse skeleton graph."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

Point = tuple[float, float, float]

_ORIGIN: Point = (0.0, 0.0, 0.0)


@dataclass
class SkeletonPoint:
    """A point of the generalized Voronoi diagram."""

    point: Point = _ORIGIN
    distance: float = 0.0
    num_basis_points: int = 0
    basis_directions: list[Point] = field(default_factory=list)


@dataclass
class SkeletonVertex:
    """A vertex of the sparse skeleton graph."""

    vertex_id: int = -1
    point: Point = _ORIGIN
    distance: float = 0.0
    edge_list: list[int] = field(default_factory=list)
    subgraph_id: int = 0


@dataclass
class SkeletonEdge:
    """An edge of the sparse skeleton graph joining two vertices."""

    edge_id: int = -1
    start_vertex: int = -1
    end_vertex: int = -1
    start_point: Point = _ORIGIN
    end_point: Point = _ORIGIN
    start_distance: float = 0.0
    end_distance: float = 0.0


def _cloud(points: list[SkeletonPoint]) -> tuple[list[Point], list[float]]:
    return [p.point for p in points], [p.distance for p in points]


@dataclass
class Skeleton:
    """All diagram points, with the subsets classified as edges and vertices."""

    points: list[SkeletonPoint] = field(default_factory=list)
    edge_points: list[SkeletonPoint] = field(default_factory=list)
    vertex_points: list[SkeletonPoint] = field(default_factory=list)

    def pointcloud(self) -> list[Point]:
        """Coordinates of the edge points."""
        return [p.point for p in self.edge_points]

    def pointcloud_with_distances(self) -> tuple[list[Point], list[float]]:
        """Coordinates and distances of all skeleton points."""
        return _cloud(self.points)

    def edge_pointcloud_with_distances(self) -> tuple[list[Point], list[float]]:
        """Coordinates and distances of the edge points."""
        return _cloud(self.edge_points)

    def vertex_pointcloud_with_distances(self) -> tuple[list[Point], list[float]]:
        """Coordinates and distances of the vertex points."""
        return _cloud(self.vertex_points)


class SparseSkeletonGraph:
    """Graph of skeleton vertices and edges keyed by integer ids."""

    def __init__(self) -> None:
        self._next_vertex_id = 0
        self._next_edge_id = 0
        self._vertices: dict[int, SkeletonVertex] = {}
        self._edges: dict[int, SkeletonEdge] = {}

    @property
    def vertex_map(self) -> Mapping[int, SkeletonVertex]:
        return self._vertices

    @property
    def edge_map(self) -> Mapping[int, SkeletonEdge]:
        return self._edges

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[SkeletonVertex]:
        return (self._vertices[i] for i in self.vertex_ids())

    def add_vertex(self, vertex: SkeletonVertex) -> int:
        """Store a copy of the vertex under a fresh id and return the id."""
        vertex_id = self._next_vertex_id
        self._next_vertex_id += 1
        self._vertices[vertex_id] = dataclasses.replace(
            vertex, vertex_id=vertex_id, edge_list=list(vertex.edge_list)
        )
        return vertex_id

    def add_edge(self, edge: SkeletonEdge) -> int:
        """Store a copy of the edge, hook it to both vertices, return its id."""
        start = self.get_vertex(edge.start_vertex)
        end = self.get_vertex(edge.end_vertex)
        edge_id = self._next_edge_id
        self._next_edge_id += 1
        self._edges[edge_id] = dataclasses.replace(
            edge, edge_id=edge_id, start_point=start.point, end_point=end.point
        )
        start.edge_list.append(edge_id)
        end.edge_list.append(edge_id)
        return edge_id

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, edge_id: int) -> bool:
        return edge_id in self._edges

    def get_vertex(self, vertex_id: int) -> SkeletonVertex:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise KeyError(f"no vertex with id {vertex_id}") from None

    def get_edge(self, edge_id: int) -> SkeletonEdge:
        try:
            return self._edges[edge_id]
        except KeyError:
            raise KeyError(f"no edge with id {edge_id}") from None

    def clear(self) -> None:
        self._next_vertex_id = 0
        self._next_edge_id = 0
        self._vertices.clear()
        self._edges.clear()

    def vertex_ids(self) -> list[int]:
        """All vertex ids in ascending order."""
        return sorted(self._vertices)

    def edge_ids(self) -> list[int]:
        """All edge ids in ascending order."""
        return sorted(self._edges)

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every edge attached to it; unknown ids are ignored."""
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return
        for edge_id in list(vertex.edge_list):
            self.remove_edge(edge_id)
        del self._vertices[vertex_id]

    def remove_edge(self, edge_id: int) -> None:
        """Remove an edge and unhook it from its vertices; unknown ids are ignored."""
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            return
        for vertex_id in (edge.start_vertex, edge.end_vertex):
            vertex = self._vertices.get(vertex_id)
            if vertex is not None and edge_id in vertex.edge_list:
                vertex.edge_list.remove(edge_id)

    def are_vertices_directly_connected(self, vertex_id_1: int, vertex_id_2: int) -> bool:
        return any(
            vertex_id_2 in (edge.start_vertex, edge.end_vertex)
            for edge in map(self.get_edge, self.get_vertex(vertex_id_1).edge_list)
        )

    def add_serialized_vertex(self, vertex: SkeletonVertex) -> None:
        """Store a vertex under its own id, as read back from storage."""
        self._vertices[vertex.vertex_id] = dataclasses.replace(
            vertex, edge_list=list(vertex.edge_list)
        )

    def add_serialized_edge(self, edge: SkeletonEdge) -> None:
        """Store an edge under its own id, as read back from storage."""
        self._edges[edge.edge_id] = dataclasses.replace(edge)