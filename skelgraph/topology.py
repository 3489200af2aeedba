"""Topological tests on 3x3x3 voxel neighbourhoods used when thinning the diagram.

A neighbourhood is a 27-bit integer. Bit ``13`` is the centre voxel.
"""

from __future__ import annotations

from skelgraph.template_matcher import NEIGHBORHOOD_BITS, VoxelTemplateMatcher

CENTER_BIT = 13

# Position in the 26-neighbour list (6-connected first, then 18-, then
# 26-connected) to the bit of the 3x3x3 cube.
_NEIGHBOR_TO_BIT = {
    24: 0, 12: 1, 20: 2, 15: 3, 4: 4, 14: 5, 22: 6, 10: 7, 18: 8,
    9: 9, 3: 10, 7: 11, 1: 12,
    0: 14, 8: 15, 2: 16, 6: 17, 25: 18, 13: 19, 21: 20, 17: 21,
    5: 22, 16: 23, 23: 24, 11: 25, 19: 26,
}

# For each octant: the cube cells it contains and, for each cell, the other
# octants that share it and must be labelled along with it.
_OCTANTS: dict[int, tuple[tuple[int, tuple[int, ...]], ...]] = {
    1: ((0, ()), (1, (2,)), (3, (3,)), (4, (2, 3, 4)), (9, (5,)),
        (10, (2, 5, 6)), (12, (3, 5, 7))),
    2: ((1, (1,)), (4, (1, 3, 4)), (10, (1, 5, 6)), (2, ()), (5, (4,)),
        (11, (6,)), (13, (4, 6, 8))),
    3: ((3, (1,)), (4, (1, 2, 4)), (12, (1, 5, 7)), (6, ()), (7, (4,)),
        (14, (7,)), (15, (4, 7, 8))),
    4: ((4, (1, 2, 3)), (5, (2,)), (13, (2, 6, 8)), (7, (3,)),
        (15, (3, 7, 8)), (8, ()), (16, (8,))),
    5: ((9, (1,)), (10, (1, 2, 6)), (12, (1, 3, 7)), (17, ()), (18, (6,)),
        (20, (7,)), (21, (6, 7, 8))),
    6: ((10, (1, 2, 5)), (11, (2,)), (13, (2, 4, 8)), (18, (5,)),
        (21, (5, 7, 8)), (19, ()), (22, (8,))),
    7: ((12, (1, 3, 5)), (14, (3,)), (15, (3, 4, 8)), (20, (5,)),
        (21, (5, 6, 8)), (23, ()), (24, (8,))),
    8: ((13, (2, 4, 6)), (15, (3, 4, 7)), (16, (4,)), (21, (5, 6, 7)),
        (22, (6,)), (24, (7,)), (25, ())),
}

# An octant containing each cube cell, where labelling of that cell starts.
_START_OCTANT = {
    **dict.fromkeys((0, 1, 3, 4, 9, 10, 12), 1),
    **dict.fromkeys((2, 5, 11, 13), 2),
    **dict.fromkeys((6, 7, 14, 15), 3),
    **dict.fromkeys((8, 16), 4),
    **dict.fromkeys((17, 18, 20, 21), 5),
    **dict.fromkeys((19, 22), 6),
    **dict.fromkeys((23, 24), 7),
    25: 8,
}


def map_neighbor_index_to_bitset_index(neighbor_index: int) -> int:
    """Bit of the 3x3x3 cube for a position in the 26-neighbour list.

    Anything that is not a neighbour position maps to the centre bit.
    """
    return _NEIGHBOR_TO_BIT.get(neighbor_index, CENTER_BIT)


def _label_octant(octant: int, label: int, cube: list[int]) -> None:
    for cell, linked in _OCTANTS[octant]:
        if cube[cell] == 1:
            cube[cell] = label
            for other in linked:
                _label_octant(other, label, cube)


def is_simple_point(neighbors: int) -> bool:
    """True if removing the centre would not split its occupied neighbours.

    The centre bit itself is ignored.
    """
    cube = [
        (neighbors >> bit) & 1
        for bit in range(NEIGHBORHOOD_BITS)
        if bit != CENTER_BIT
    ]
    label = 2
    for cell in range(len(cube)):
        if cube[cell] != 1:
            continue
        _label_octant(_START_OCTANT[cell], label, cube)
        label += 1
        if label - 2 >= 2:
            return False
    return True


def is_end_point(neighbors: int, corner_matcher: VoxelTemplateMatcher) -> bool:
    """True if the centre ends a line of the diagram.

    A single occupied neighbour always makes an end point; more than one
    6-connected neighbour never does; otherwise the corner templates decide.
    """
    if bin(neighbors).count("1") == 1:
        return True
    six_mask = corner_matcher.six_conn_neighbor_mask()
    if bin(six_mask & neighbors).count("1") > 1:
        return False
    return corner_matcher.fits_templates(neighbors)