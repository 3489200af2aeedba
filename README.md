# skelgraph

Data structures and algorithms for skeleton diagrams of 3D free space. A
skeleton is made of face, edge and vertex points. Its vertices and edges form
a sparse graph that can be searched for paths.

## Modules

- `skelgraph.skeleton`
  - `SkeletonPoint`, `SkeletonVertex`, `SkeletonEdge`: dataclasses. Points
    are `(x, y, z)` tuples.
  - `Skeleton`: holds `points`, `edge_points` and `vertex_points`.
    `pointcloud()` returns the edge-point coordinates.
    `pointcloud_with_distances()`, `edge_pointcloud_with_distances()` and
    `vertex_pointcloud_with_distances()` return `(coordinates, distances)`
    for all points, edge points and vertex points.
  - `SparseSkeletonGraph`: `add_vertex` and `add_edge` store copies and hand
    out ids counting up from 0. `add_edge` fills in the edge's start and end
    points and appends the edge id to both vertices' `edge_list`.
    `get_vertex` and `get_edge` raise `KeyError` for unknown ids.
    `remove_edge` unhooks the edge from its vertices. `remove_vertex` also
    removes every attached edge. Both ignore unknown ids. `vertex_ids()` and
    `edge_ids()` return sorted ids. Other members are `has_vertex`,
    `has_edge`, `are_vertices_directly_connected`, `clear`,
    `add_serialized_vertex` and `add_serialized_edge`; the last two store
    items under their own ids. `vertex_map` and `edge_map` are read-only
    views. `len(graph)` counts vertices, and iterating yields vertices in id
    order.
- `skelgraph.skeleton_voxel`
  - `SkeletonVoxel` holds the distance, the basis-point count, the
    face/edge/vertex flags and the vertex id.
  - `pack_voxel` turns a voxel into three unsigned 32-bit words: the float32
    bits of the distance, the count and flags one byte each, and the vertex
    id. A vertex id that is not positive is stored as -1.
  - `unpack_voxel` reverses `pack_voxel`.
  - `serialize_voxels` and `deserialize_voxels(data, num_voxels)` work on a
    whole block. Both unpack functions raise `ValueError` on a wrong word
    count.
  - `merge_voxel(a, b)` copies every value of `a` into `b`.
- `skelgraph.template_matcher`
  - `VoxelTemplate(neighbor_mask, neighbor_template)` and
    `VoxelTemplateMatcher` match a 3x3x3 neighbourhood given as a 27-bit
    integer, with bit 13 as the centre.
  - `fits_templates` is true if any template matches.
  - `set_deletion_templates`, `set_connectivity_templates` and
    `set_corner_templates` add the built-in template sets.
  - `six_conn_neighbor_mask()` and `eighteen_conn_neighbor_mask()` return the
    connectivity masks.
- `skelgraph.topology`
  - `map_neighbor_index_to_bitset_index` maps a position in the 26-neighbour
    list to a cube bit. Anything else maps to the centre bit.
  - `is_simple_point(neighbors)` is true if removing the centre would not
    split its neighbours.
  - `is_end_point(neighbors, corner_matcher)` takes a matcher loaded with
    corner templates.
- `skelgraph.graph_tools`
  - `max_edge_distance_on_path(start, end, path)` returns the largest
    distance of a path point from the line through start and end, and that
    point's index.
  - `label_subgraph(graph, vertex_id, subgraph_id)` labels a connected
    component and returns how many vertices it newly labelled.
  - `label_all_subgraphs(graph)` labels every unlabelled component. It
    removes single-vertex components and returns one example vertex per
    subgraph.
  - `merge_subgraphs(a, b, subgraph_map)` redirects both subgraphs to the
    lower of their targets.
- `skelgraph.vertex_pruning`
  - `classify_by_basis_points(n)` returns a `DiagramClass`: face if exactly
    9, edge if 12 or more, vertex if exactly 16.
  - `is_vertex_by_edge_neighbors(n)` is true for 1 or for 3 and more.
  - `prune_close_vertices(points, radius)` keeps, within each cluster closer
    than `radius`, the point with the largest distance. It returns a
    `PruneResult(kept, deleted_indices)`.
- `skelgraph.graph_planner`
  - `SparseGraphPlanner(graph)`: call `setup()` to index the graph's
    vertices. `closest_vertices(point, n)` returns the nearest vertex ids.
  - `get_path_between_vertices(a, b)` runs A* along the graph's edges and
    returns vertex ids, or `None` if no path is found.
  - `get_path(start, end)` joins the vertices nearest to `start` and `end`
    and returns their coordinates, or `None`. It raises `ValueError` on an
    empty graph.

## Example

```python
from skelgraph.skeleton import SparseSkeletonGraph, SkeletonVertex, SkeletonEdge
from skelgraph.graph_planner import SparseGraphPlanner

graph = SparseSkeletonGraph()
a = graph.add_vertex(SkeletonVertex(point=(0.0, 0.0, 0.0)))
b = graph.add_vertex(SkeletonVertex(point=(1.0, 0.0, 0.0)))
c = graph.add_vertex(SkeletonVertex(point=(1.0, 1.0, 0.0)))
graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
graph.add_edge(SkeletonEdge(start_vertex=b, end_vertex=c))

planner = SparseGraphPlanner(graph)
planner.setup()
path = planner.get_path((0.1, 0.0, 0.0), (1.0, 0.9, 0.0))
# [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)]
```

## What the package does not do

- It does not build a skeleton from a distance field. Skeletons and graphs
  are filled in by the caller.
- It does not save graphs or voxel layers to files. `pack_voxel` and
  `serialize_voxels` only produce word lists.
- It does not plan paths through voxel grids.
- It has no command-line program.

## Testing

```
pip install -e .[test]
pytest
```