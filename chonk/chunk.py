"""A fixed-size block of voxels and the triangle mesh built from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from chonk.blocks import Block, BlockID

CHUNK_SIZE_X = 16
CHUNK_SIZE_Y = 16
CHUNK_SIZE_Z = 16
CHUNK_VOLUME = CHUNK_SIZE_X * CHUNK_SIZE_Y * CHUNK_SIZE_Z

ATLAS_ROWS = 5
ATLAS_COLUMNS = 5

VERTEX_STRIDE = 5
"""Floats per vertex: position x, y, z followed by texture u, v."""

TOP_TEXTURE = 0
SIDE_TEXTURE = 1
BOTTOM_TEXTURE = 2


@dataclass(frozen=True)
class FaceTemplate:
    """Corner positions and UVs of one unit-cube face, and which texture it uses."""

    positions: tuple[tuple[float, float, float], ...]
    uvs: tuple[tuple[float, float], ...]
    face_id: int


_QUAD_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))

FACE_TEMPLATES: tuple[FaceTemplate, ...] = (
    FaceTemplate(((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)), _QUAD_UVS, SIDE_TEXTURE),
    FaceTemplate(((1, 0, 1), (0, 0, 1), (0, 1, 1), (1, 1, 1)), _QUAD_UVS, SIDE_TEXTURE),
    FaceTemplate(((0, 0, 1), (0, 0, 0), (0, 1, 0), (0, 1, 1)), _QUAD_UVS, SIDE_TEXTURE),
    FaceTemplate(((1, 0, 0), (1, 0, 1), (1, 1, 1), (1, 1, 0)), _QUAD_UVS, SIDE_TEXTURE),
    FaceTemplate(((0, 1, 0), (1, 1, 0), (1, 1, 1), (0, 1, 1)), _QUAD_UVS, TOP_TEXTURE),
    FaceTemplate(
        ((0, 0, 0), (0, 0, 1), (1, 0, 1), (1, 0, 0)), _QUAD_UVS, BOTTOM_TEXTURE
    ),
)

_BLOCK_TEXTURES: dict[BlockID, tuple[int, int, int]] = {
    BlockID.NONE: (0, 0, 0),
    BlockID.GRASS: (1, 2, 3),
    BlockID.MOSS: (1, 1, 1),
    BlockID.DIRT: (3, 3, 3),
    BlockID.STONE: (4, 4, 4),
}

_FACE_INDEX_PATTERN = np.array([3, 2, 1, 1, 0, 3], dtype=np.uint32)


def block_texture_ids(block_id: BlockID | int) -> tuple[int, int, int]:
    """Atlas tiles (top, side, bottom) for a block kind; unknown kinds use tile 0."""
    return _BLOCK_TEXTURES.get(block_id, (0, 0, 0))


def atlas_uv(tex_id: int, uv: Sequence[float]) -> tuple[float, float]:
    """Map a face-local UV into the tile ``tex_id`` of the texture atlas."""
    col = tex_id % ATLAS_COLUMNS
    row = tex_id // ATLAS_COLUMNS
    u, v = uv
    return (
        col / ATLAS_COLUMNS + u / ATLAS_COLUMNS,
        row / ATLAS_ROWS + v / ATLAS_ROWS,
    )


_TEMPLATE_POSITIONS = np.array([t.positions for t in FACE_TEMPLATES], dtype=np.float32)

_UV_TABLE = np.array(
    [
        [
            [atlas_uv(block_texture_ids(block_id)[t.face_id], uv) for uv in t.uvs]
            for t in FACE_TEMPLATES
        ]
        for block_id in BlockID
    ],
    dtype=np.float32,
)


class Chunk:
    """A 16x16x16 grid of blocks with its interleaved vertex and index data."""

    def __init__(self, position: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        self.position = position
        self.blocks = [Block() for _ in range(CHUNK_VOLUME)]
        self.vertices = np.empty(0, dtype=np.float32)
        self.indices = np.empty(0, dtype=np.uint32)
        self.regenerate()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.asarray(value, dtype=np.float32).reshape(3).copy()

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // VERTEX_STRIDE

    def block_index(self, x, y, z):
        """Flat index of the block at (x, y, z)."""
        return x + CHUNK_SIZE_Z * (z + CHUNK_SIZE_X * y)

    def block_at(self, x: int, y: int, z: int) -> Block:
        """The block at (x, y, z); raises IndexError outside the chunk."""
        if not (
            0 <= x < CHUNK_SIZE_X and 0 <= y < CHUNK_SIZE_Y and 0 <= z < CHUNK_SIZE_Z
        ):
            raise IndexError(f"block ({x}, {y}, {z}) lies outside the chunk")
        return self.blocks[self.block_index(x, y, z)]

    def regenerate(self) -> None:
        """Fill the chunk with grass and rebuild every face of every block."""
        for block in self.blocks:
            block.id = BlockID.GRASS

        ys, xs, zs = (
            axis.ravel()
            for axis in np.meshgrid(
                np.arange(CHUNK_SIZE_Y),
                np.arange(CHUNK_SIZE_X),
                np.arange(CHUNK_SIZE_Z),
                indexing="ij",
            )
        )
        order = self.block_index(xs, ys, zs)
        ids = np.fromiter(
            (int(block.id) for block in self.blocks), dtype=np.intp, count=CHUNK_VOLUME
        )[order]

        world = self._position + np.stack([xs, ys, zs], axis=1).astype(np.float32)
        positions = _TEMPLATE_POSITIONS[np.newaxis] + world[:, np.newaxis, np.newaxis, :]
        uvs = _UV_TABLE[ids]
        self.vertices = np.concatenate([positions, uvs], axis=-1).astype(np.float32).ravel()

        face_count = len(order) * len(FACE_TEMPLATES)
        bases = np.arange(face_count, dtype=np.uint32) * 4
        self.indices = (bases[:, np.newaxis] + _FACE_INDEX_PATTERN).ravel()