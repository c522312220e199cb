"""A standalone triangle mesh with position, UV and face-id attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

VERTEX_STRIDE = 6
"""Floats per vertex: position x, y, z, texture u, v and the face id."""

_FLOAT_SIZE = 4
_ATTRIBUTES = ((3, 0), (2, 3), (1, 5))
"""(component count, float offset) of each vertex attribute, by location."""

# 6 faces x 4 vertices: position, UV, face id (0 top, 1 side, 2 bottom).
CUBE_VERTICES: tuple[float, ...] = (
    # Front
    -0.5, -0.5, 0.5, 0.0, 0.0, 1.0,
    0.5, -0.5, 0.5, 1.0, 0.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 1.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 1.0, 1.0,
    # Back
    -0.5, -0.5, -0.5, 1.0, 0.0, 1.0,
    0.5, -0.5, -0.5, 0.0, 0.0, 1.0,
    0.5, 0.5, -0.5, 0.0, 1.0, 1.0,
    -0.5, 0.5, -0.5, 1.0, 1.0, 1.0,
    # Left
    -0.5, -0.5, -0.5, 0.0, 0.0, 1.0,
    -0.5, -0.5, 0.5, 1.0, 0.0, 1.0,
    -0.5, 0.5, 0.5, 1.0, 1.0, 1.0,
    -0.5, 0.5, -0.5, 0.0, 1.0, 1.0,
    # Right
    0.5, -0.5, -0.5, 1.0, 0.0, 1.0,
    0.5, -0.5, 0.5, 0.0, 0.0, 1.0,
    0.5, 0.5, 0.5, 0.0, 1.0, 1.0,
    0.5, 0.5, -0.5, 1.0, 1.0, 1.0,
    # Top
    -0.5, 0.5, 0.5, 0.0, 0.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 0.0, 0.0,
    0.5, 0.5, -0.5, 1.0, 1.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 1.0, 0.0,
    # Bottom
    -0.5, -0.5, 0.5, 1.0, 0.0, 2.0,
    0.5, -0.5, 0.5, 0.0, 0.0, 2.0,
    0.5, -0.5, -0.5, 0.0, 1.0, 2.0,
    -0.5, -0.5, -0.5, 1.0, 1.0, 2.0,
)

CUBE_INDICES: tuple[int, ...] = (
    0, 1, 2, 2, 3, 0,
    4, 6, 5, 6, 4, 7,
    8, 9, 10, 10, 11, 8,
    12, 14, 13, 14, 12, 15,
    16, 17, 18, 18, 19, 16,
    20, 22, 21, 22, 20, 23,
)


@dataclass
class TextureID:
    """Atlas tiles used for the top, sides and bottom of a mesh."""

    top: int = 0
    side: int = 0
    bottom: int = 0


class Mesh:
    """Interleaved vertex data and triangle indices, uploaded to GL on demand."""

    def __init__(
        self,
        vertices: Sequence[float],
        indices: Sequence[int],
        position: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.vertices = np.asarray(vertices, dtype=np.float32).ravel().copy()
        if len(self.vertices) % VERTEX_STRIDE:
            raise ValueError(
                f"vertex data length {len(self.vertices)} is not a multiple "
                f"of {VERTEX_STRIDE}"
            )
        self.indices = np.asarray(indices, dtype=np.uint32).ravel().copy()
        if self.indices.size and int(self.indices.max()) >= self.vertex_count():
            raise ValueError("an index refers past the last vertex")
        self.position = np.asarray(position, dtype=np.float32).reshape(3).copy()
        self.texture_id = TextureID()
        self._vertex_array = None
        self._buffers: tuple = ()

    def vertex_count(self) -> int:
        """Number of vertices in the mesh."""
        return len(self.vertices) // VERTEX_STRIDE

    @property
    def uploaded(self) -> bool:
        return self._vertex_array is not None

    def upload(self) -> None:
        """Create the GL vertex array and buffers and describe the layout."""
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        vertex_array = VertexArray()
        gl.glBindVertexArray(vertex_array.id)

        vertex_buffer = BufferObject(self.vertices.nbytes)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vertex_buffer.id)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER,
            self.vertices.nbytes,
            self.vertices.tobytes(),
            gl.GL_STATIC_DRAW,
        )

        index_buffer = BufferObject(self.indices.nbytes)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, index_buffer.id)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER,
            self.indices.nbytes,
            self.indices.tobytes(),
            gl.GL_STATIC_DRAW,
        )

        stride = VERTEX_STRIDE * _FLOAT_SIZE
        for location, (size, offset) in enumerate(_ATTRIBUTES):
            gl.glVertexAttribPointer(
                location, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset * _FLOAT_SIZE
            )
            gl.glEnableVertexAttribArray(location)

        gl.glBindVertexArray(0)
        self._vertex_array = vertex_array
        self._buffers = (vertex_buffer, index_buffer)

    def bind(self) -> None:
        """Make this mesh's vertex array current, uploading it first if needed."""
        from pyglet import gl

        if self._vertex_array is None:
            self.upload()
        gl.glBindVertexArray(self._vertex_array.id)

    def unbind(self) -> None:
        """Clear the current vertex array."""
        from pyglet import gl

        gl.glBindVertexArray(0)


def cube_mesh(position: Sequence[float] = (0.0, 0.0, 0.0)) -> Mesh:
    """A unit cube centred on the origin, placed at ``position``."""
    return Mesh(CUBE_VERTICES, CUBE_INDICES, position)