"""Vertex data and indexed triangle meshes."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_FLOATS_PER_VERTEX = 8
_FLOAT_SIZE = 4
_STRIDE = _FLOATS_PER_VERTEX * _FLOAT_SIZE
# (attribute location, component count, byte offset)
_ATTRIBUTES = ((0, 3, 0), (1, 2, 3 * _FLOAT_SIZE), (2, 3, 5 * _FLOAT_SIZE))


def _as_vector(value, size: int, name: str) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.shape != (size,):
        raise ValueError(f"{name} must have {size} components, got shape {array.shape}")
    return array


@dataclass(eq=False)
class Vertex:
    """A vertex with position, texture coordinates and normal."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(2))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.position = _as_vector(self.position, 3, "position")
        self.tex_coords = _as_vector(self.tex_coords, 2, "tex_coords")
        self.normal = _as_vector(self.normal, 3, "normal")


class Mesh:
    """An indexed triangle mesh; GPU buffers are created on first render."""

    def __init__(self, vertices=None, indices=None) -> None:
        self._vertices = np.zeros((0, _FLOATS_PER_VERTEX), dtype=np.float32)
        self._indices = np.zeros(0, dtype=np.uint32)
        self._index_count = 0
        self._vao = 0
        self._vbo = 0
        self._ibo = 0
        self._uploaded = False
        if vertices is not None and indices is not None:
            self.create(vertices, indices)

    def create(self, vertices, indices) -> None:
        """Store interleaved vertex data and the index list."""
        vertices = list(vertices)
        indices = list(indices)
        if not vertices:
            raise ValueError("a mesh needs at least one vertex")
        if not indices:
            raise ValueError("a mesh needs at least one index")
        self.clear()
        rows = [
            np.concatenate((v.position, v.tex_coords, v.normal)) for v in vertices
        ]
        self._vertices = np.ascontiguousarray(np.vstack(rows), dtype=np.float32)
        self._indices = np.ascontiguousarray(indices, dtype=np.uint32)
        self._index_count = len(indices)

    @property
    def index_count(self) -> int:
        """Number of indices drawn by render()."""
        return self._index_count

    @property
    def vertex_data(self) -> np.ndarray:
        """Interleaved rows of position, texture coordinates and normal."""
        view = self._vertices.view()
        view.flags.writeable = False
        return view

    @property
    def index_data(self) -> np.ndarray:
        view = self._indices.view()
        view.flags.writeable = False
        return view

    def _upload(self) -> None:
        from pyglet import gl

        handle = (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, handle)
        self._vao = handle[0]
        gl.glBindVertexArray(self._vao)

        gl.glGenBuffers(1, handle)
        self._ibo = handle[0]
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._ibo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER,
            self._indices.nbytes,
            self._indices.ctypes.data,
            gl.GL_STATIC_DRAW,
        )

        gl.glGenBuffers(1, handle)
        self._vbo = handle[0]
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER,
            self._vertices.nbytes,
            self._vertices.ctypes.data,
            gl.GL_STATIC_DRAW,
        )

        for location, size, offset in _ATTRIBUTES:
            gl.glVertexAttribPointer(location, size, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, offset)
            gl.glEnableVertexAttribArray(location)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)
        gl.glBindVertexArray(0)
        self._uploaded = True

    def render(self) -> None:
        """Draw the mesh as triangles in the current GL context."""
        if self._index_count == 0:
            return
        from pyglet import gl

        if not self._uploaded:
            self._upload()
        gl.glBindVertexArray(self._vao)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._ibo)
        gl.glDrawElements(gl.GL_TRIANGLES, self._index_count, gl.GL_UNSIGNED_INT, 0)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)
        gl.glBindVertexArray(0)

    def clear(self) -> None:
        """Release GPU buffers and drop the mesh data."""
        if self._uploaded:
            from pyglet import gl

            for buffer in (self._ibo, self._vbo):
                if buffer:
                    gl.glDeleteBuffers(1, (gl.GLuint * 1)(buffer))
            if self._vao:
                gl.glDeleteVertexArrays(1, (gl.GLuint * 1)(self._vao))
        self._vao = self._vbo = self._ibo = 0
        self._uploaded = False
        self._vertices = np.zeros((0, _FLOATS_PER_VERTEX), dtype=np.float32)
        self._indices = np.zeros(0, dtype=np.uint32)
        self._index_count = 0