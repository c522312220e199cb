"""Processes, and the scene that draws chunks through one shader and one atlas."""

from __future__ import annotations

from chonk.chunk import VERTEX_STRIDE, Chunk
from chonk.geometry import translate

TEXTURE_UNIFORM = "u_Texture0"
MVP_UNIFORM = "u_MVP"
CLEAR_COLOR = (0.1, 0.1, 0.1, 0.1)

_FLOAT_SIZE = 4
_ATTRIBUTES = ((3, 0), (2, 3))
"""(component count, float offset) of each chunk vertex attribute, by location."""


class Process:
    """Something that is started once and then updated every frame."""

    def on_start(self) -> None:
        """Called once before the first update."""

    def on_update(self, dt: float) -> None:
        """Called once per frame with the frame time in seconds."""


class ChunkProcess(Process):
    """A process that owns a single chunk."""

    def __init__(self) -> None:
        self.chunk = Chunk()


class _ChunkDrawable:
    """GL buffers holding one chunk's mesh, created on first bind."""

    def __init__(self, chunk: Chunk) -> None:
        self.chunk = chunk
        self._vertex_array = None
        self._buffers: tuple = ()
        self._index_count = 0

    def _upload(self) -> None:
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        vertices = self.chunk.vertices
        indices = self.chunk.indices

        vertex_array = VertexArray()
        gl.glBindVertexArray(vertex_array.id)

        vertex_buffer = BufferObject(vertices.nbytes)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vertex_buffer.id)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, vertices.nbytes, vertices.tobytes(), gl.GL_STATIC_DRAW
        )

        index_buffer = BufferObject(indices.nbytes)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, index_buffer.id)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER,
            indices.nbytes,
            indices.tobytes(),
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
        self._index_count = len(indices)

    def bind(self) -> None:
        from pyglet import gl

        if self._vertex_array is None:
            self._upload()
        gl.glBindVertexArray(self._vertex_array.id)

    def draw(self) -> None:
        from pyglet import gl

        gl.glDrawElements(gl.GL_TRIANGLES, self._index_count, gl.GL_UNSIGNED_INT, None)


class Scene:
    """A camera, a shader, a texture atlas and the chunks drawn with them."""

    def __init__(self, camera, shader, texture) -> None:
        self.camera = camera
        self.shader = shader
        self.texture = texture
        self._drawables: list[_ChunkDrawable] = []

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """The chunks in the order they were pushed."""
        return tuple(drawable.chunk for drawable in self._drawables)

    def push_chunk(self, chunk: Chunk) -> None:
        """Add a chunk to be drawn every frame."""
        self._drawables.append(_ChunkDrawable(chunk))

    def chunk_mvps(self) -> list[tuple[Chunk, object]]:
        """Each chunk paired with its model-view-projection matrix."""
        view_projection = self.camera.view_projection
        return [
            (drawable.chunk, view_projection @ translate(drawable.chunk.position))
            for drawable in self._drawables
        ]

    def start(self) -> None:
        """Reset the frame's GL state and bind the shader and texture atlas."""
        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glCullFace(gl.GL_BACK)
        gl.glFrontFace(gl.GL_CCW)
        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        self.shader.bind()
        self.texture.bind()
        self.shader.set_uniform_int(TEXTURE_UNIFORM, 0)

    def stop(self) -> None:
        """Draw every chunk with its own model-view-projection matrix."""
        view_projection = self.camera.view_projection
        for drawable in self._drawables:
            mvp = view_projection @ translate(drawable.chunk.position)
            self.shader.set_uniform_mat4(MVP_UNIFORM, mvp)
            drawable.bind()
            drawable.draw()