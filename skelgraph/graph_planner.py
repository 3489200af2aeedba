"""A* planning over a sparse skeleton graph."""

from __future__ import annotations

import math

from skelgraph.skeleton import Point, SparseSkeletonGraph


class SparseGraphPlanner:
    """Plans paths between positions through the vertices of a skeleton graph."""

    def __init__(self, graph: SparseSkeletonGraph | None = None) -> None:
        self.graph = graph
        self._index: list[tuple[int, Point]] | None = None

    def setup(self) -> None:
        """Index the graph's current vertices for nearest-vertex lookups."""
        if self.graph is None:
            raise RuntimeError("no graph set")
        self._index = [(vid, v.point) for vid, v in sorted(self.graph.vertex_map.items())]

    def closest_vertices(self, point: Point, num_vertices: int) -> list[int]:
        """Ids of up to ``num_vertices`` indexed vertices nearest to ``point``."""
        if self._index is None:
            raise RuntimeError("setup() must be called before searching")
        ranked = sorted(self._index, key=lambda item: (math.dist(item[1], point), item[0]))
        return [vid for vid, _ in ranked[:max(num_vertices, 0)]]

    def get_path(self, start_position: Point, end_position: Point) -> list[Point] | None:
        """Vertex coordinates from the vertex nearest the start to the one nearest
        the end, or None if they are not connected."""
        start = self.closest_vertices(start_position, 1)
        end = self.closest_vertices(end_position, 1)
        if not start or not end:
            raise ValueError("the graph has no vertices")
        vertex_path = self.get_path_between_vertices(start[0], end[0])
        if vertex_path is None:
            return None
        return [self.graph.get_vertex(vid).point for vid in vertex_path]

    def get_path_between_vertices(
        self, start_vertex_id: int, end_vertex_id: int
    ) -> list[int] | None:
        """A* search along graph edges; the vertex ids of the path, or None."""
        graph = self.graph
        if graph is None:
            raise RuntimeError("no graph set")
        end_point = graph.get_vertex(end_vertex_id).point
        start_point = graph.get_vertex(start_vertex_id).point

        f_score = {start_vertex_id: math.dist(end_point, start_point)}
        g_score = {start_vertex_id: 0.0}
        parents: dict[int, int] = {}
        open_set = {start_vertex_id}
        closed_set: set[int] = set()

        while open_set:
            current = min(sorted(open_set), key=f_score.__getitem__)
            open_set.remove(current)
            if current == end_vertex_id:
                return self._solution_path(end_vertex_id, parents)
            closed_set.add(current)

            vertex = graph.get_vertex(current)
            for edge_id in vertex.edge_list:
                edge = graph.get_edge(edge_id)
                neighbor = edge.end_vertex if edge.start_vertex == current else edge.start_vertex
                if neighbor in closed_set:
                    continue
                open_set.add(neighbor)
                neighbor_point = graph.get_vertex(neighbor).point
                tentative = g_score[current] + math.dist(neighbor_point, vertex.point)
                if neighbor not in g_score or g_score[neighbor] < tentative:
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + math.dist(end_point, neighbor_point)
                    parents[neighbor] = current
        return None

    @staticmethod
    def _solution_path(end_vertex_id: int, parents: dict[int, int]) -> list[int]:
        path = [end_vertex_id]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        path.reverse()
        return path