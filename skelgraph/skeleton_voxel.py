"""Skeleton voxel data and its packing into 32-bit words."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, fields

WORDS_PER_VOXEL = 3
_U32 = 0xFFFFFFFF


@dataclass
class SkeletonVoxel:
    """Per-voxel state of the skeleton layer."""

    distance: float = 0.0
    num_basis_points: int = 0
    is_face: bool = False
    is_edge: bool = False
    is_vertex: bool = False
    vertex_id: int = -1


def _float_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _bits_float(word: int) -> float:
    return struct.unpack("<f", struct.pack("<I", word & _U32))[0]


def pack_voxel(voxel: SkeletonVoxel) -> tuple[int, int, int]:
    """Pack a voxel into three unsigned 32-bit words.

    Vertex ids that are not positive are stored as -1.
    """
    flags = (
        (voxel.num_basis_points & 0xFF)
        | (int(bool(voxel.is_face)) << 8)
        | (int(bool(voxel.is_edge)) << 16)
        | (int(bool(voxel.is_vertex)) << 24)
    )
    vertex_word = (voxel.vertex_id if voxel.vertex_id > 0 else -1) & _U32
    return _float_bits(voxel.distance), flags, vertex_word


def unpack_voxel(words: Sequence[int]) -> SkeletonVoxel:
    """Rebuild a voxel from its three packed words."""
    if len(words) != WORDS_PER_VOXEL:
        raise ValueError(f"expected {WORDS_PER_VOXEL} words, got {len(words)}")
    distance_word, flags, vertex_word = words
    vertex_word &= _U32
    vertex_id = vertex_word - (1 << 32) if vertex_word & 0x80000000 else vertex_word
    return SkeletonVoxel(
        distance=_bits_float(distance_word),
        num_basis_points=flags & 0x000000FF,
        is_face=bool(flags & 0x0000FF00),
        is_edge=bool(flags & 0x00FF0000),
        is_vertex=bool(flags & 0xFF000000),
        vertex_id=vertex_id,
    )


def serialize_voxels(voxels: Iterable[SkeletonVoxel]) -> list[int]:
    """Flatten a block of voxels into a list of 32-bit words."""
    return [word for voxel in voxels for word in pack_voxel(voxel)]


def deserialize_voxels(data: Sequence[int], num_voxels: int) -> list[SkeletonVoxel]:
    """Read back a block of ``num_voxels`` voxels from packed words."""
    if len(data) != num_voxels * WORDS_PER_VOXEL:
        raise ValueError(
            f"expected {num_voxels * WORDS_PER_VOXEL} words for {num_voxels} voxels,"
            f" got {len(data)}"
        )
    return [
        unpack_voxel(data[i : i + WORDS_PER_VOXEL])
        for i in range(0, len(data), WORDS_PER_VOXEL)
    ]


def merge_voxel(voxel_a: SkeletonVoxel, voxel_b: SkeletonVoxel) -> None:
    """Merge ``voxel_a`` into ``voxel_b``: ``voxel_b`` takes all of its values."""
    for f in fields(SkeletonVoxel):
        setattr(voxel_b, f.name, getattr(voxel_a, f.name))