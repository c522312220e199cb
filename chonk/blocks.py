"""Block identifiers, cube faces and the per-block record stored in a chunk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BlockID(IntEnum):
    """Kinds of block a chunk can hold."""

    NONE = 0
    GRASS = 1
    MOSS = 2
    DIRT = 3
    SAND = 4
    STONE = 5
    COAL = 6
    LOG = 7
    LEAF = 8


class Face(IntEnum):
    """The six faces of a cube, in mesh-building order."""

    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3
    TOP = 4
    BOTTOM = 5


_FACE_DIRECTIONS: dict[Face, tuple[int, int, int]] = {
    Face.FRONT: (0, 0, -1),
    Face.BACK: (0, 0, 1),
    Face.LEFT: (-1, 0, 0),
    Face.RIGHT: (1, 0, 0),
    Face.TOP: (0, 1, 0),
    Face.BOTTOM: (0, -1, 0),
}


def face_direction(face: Face | int) -> tuple[int, int, int]:
    """Return the outward unit normal of a cube face as integer offsets."""
    return _FACE_DIRECTIONS[Face(face)]


@dataclass
class Block:
    """A single voxel: its kind and the atlas tiles used for its faces."""

    id: BlockID = BlockID.NONE
    top_tex_id: int = 0
    side_tex_id: int = 0
    bottom_tex_id: int = 0