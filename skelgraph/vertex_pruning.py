"""Classification of diagram voxels and pruning of crowded diagram vertices."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

from skelgraph.skeleton import SkeletonPoint

FACE_BASIS_POINTS = 9
MIN_EDGE_BASIS_POINTS = 12
VERTEX_BASIS_POINTS = 16


class DiagramClass(NamedTuple):
    """Which parts of the diagram a voxel belongs to."""

    is_face: bool
    is_edge: bool
    is_vertex: bool


class PruneResult(NamedTuple):
    """Vertices that survive pruning and the indices of those removed."""

    kept: list[SkeletonPoint]
    deleted_indices: list[int]


def classify_by_basis_points(num_basis_points: int) -> DiagramClass:
    """Classify a diagram voxel from the number of its basis points.

    Exactly 9 makes a face, 12 or more an edge, exactly 16 a vertex.
    """
    return DiagramClass(
        is_face=num_basis_points == FACE_BASIS_POINTS,
        is_edge=num_basis_points >= MIN_EDGE_BASIS_POINTS,
        is_vertex=num_basis_points == VERTEX_BASIS_POINTS,
    )


def is_vertex_by_edge_neighbors(num_neighbors_on_edges: int) -> bool:
    """True if an edge voxel with this many edge neighbours is a vertex.

    Junctions (three or more neighbours) and line ends (exactly one) are
    vertices.
    """
    return num_neighbors_on_edges >= 3 or num_neighbors_on_edges == 1


def _squared_distance(a, b) -> float:
    return math.dist(a, b) ** 2


def prune_close_vertices(points: Sequence[SkeletonPoint], radius: float) -> PruneResult:
    """Thin out vertices lying closer than ``radius`` to one another.

    Within each cluster the vertex with the largest obstacle distance is kept;
    on ties the one visited first stays. Neighbours are considered nearest
    first, and vertices already removed are ignored.
    """
    radius_sq = radius * radius
    deleted: set[int] = set()

    for i, vertex in enumerate(points):
        if i in deleted:
            continue
        matches = sorted(
            (d, j)
            for j, other in enumerate(points)
            if (d := _squared_distance(vertex.point, other.point)) < radius_sq
        )
        largest_distance = vertex.distance
        favorite = i
        for _, j in matches:
            if j == i or j in deleted:
                continue
            if points[j].distance > largest_distance:
                deleted.add(favorite)
                largest_distance = points[j].distance
                favorite = j
            else:
                deleted.add(j)

    kept = [p for index, p in enumerate(points) if index not in deleted]
    return PruneResult(kept=kept, deleted_indices=sorted(deleted))