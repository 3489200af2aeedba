import pytest

from skelgraph.template_matcher import VoxelTemplateMatcher
from skelgraph.topology import (
    is_end_point,
    is_simple_point,
    map_neighbor_index_to_bitset_index,
)

ALL_BITS = (1 << 27) - 1
NON_CENTER_BITS = [b for b in range(27) if b != 13]


def bits(*positions):
    value = 0
    for p in positions:
        value |= 1 << p
    return value


@pytest.mark.parametrize("index, expected", [(24, 0), (12, 1), (4, 4), (1, 12), (0, 14), (19, 26)])
def test_mapping_pinned_values(index, expected):
    assert map_neighbor_index_to_bitset_index(index) == expected


def test_mapping_is_bijection_onto_non_center_bits():
    mapped = sorted(map_neighbor_index_to_bitset_index(i) for i in range(26))
    assert mapped == NON_CENTER_BITS


@pytest.mark.parametrize("index", [26, 27, -1, 100])
def test_mapping_unknown_gives_center(index):
    assert map_neighbor_index_to_bitset_index(index) == 13


def test_empty_neighbourhood_is_simple():
    assert is_simple_point(0) is True


@pytest.mark.parametrize("bit", NON_CENTER_BITS)
def test_single_neighbour_is_simple(bit):
    assert is_simple_point(1 << bit) is True


def test_full_neighbourhood_is_simple():
    assert is_simple_point(ALL_BITS) is True


def test_opposite_corners_are_not_simple():
    assert is_simple_point(bits(0, 26)) is False


def test_opposite_faces_are_not_simple():
    assert is_simple_point(bits(4, 22)) is False


def test_adjacent_neighbours_are_simple():
    assert is_simple_point(bits(0, 1)) is True
    assert is_simple_point(bits(4, 10)) is True


@pytest.mark.parametrize("value", [bits(0, 26), bits(4, 22), bits(0, 1), 0, ALL_BITS])
def test_center_bit_is_ignored(value):
    assert is_simple_point(value | (1 << 13)) == is_simple_point(value & ~(1 << 13))


@pytest.mark.parametrize("bit", NON_CENTER_BITS)
def test_single_neighbour_is_end_point(bit):
    matcher = VoxelTemplateMatcher()
    matcher.set_corner_templates()
    assert is_end_point(1 << bit, matcher) is True


def test_two_six_connected_neighbours_are_not_end_point():
    matcher = VoxelTemplateMatcher()
    matcher.add_integer_template(0, 0)  # matches everything
    assert is_end_point(bits(4, 22), matcher) is False


def test_no_template_means_not_end_point():
    matcher = VoxelTemplateMatcher()
    assert is_end_point(bits(0, 1), matcher) is False


def test_matching_template_makes_end_point():
    matcher = VoxelTemplateMatcher()
    value = bits(0, 1)
    matcher.add_integer_template(value, value)
    assert is_end_point(value, matcher) is True
    assert is_end_point(bits(0, 2), matcher) is False