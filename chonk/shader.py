"""GLSL shader programs built from source files on disk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Mapping, Union

import numpy as np

GL_VERTEX_SHADER = 0x8B31
GL_FRAGMENT_SHADER = 0x8B30
GL_GEOMETRY_SHADER = 0x8DD9
GL_INVALID_ENUM = 0x0500

StrPath = Union[str, "PathLike[str]"]


class ShaderType(IntEnum):
    """Pipeline stage a shader source belongs to."""

    UNKNOWN = 0
    VERTEX = 1
    FRAGMENT = 2
    GEOMETRY = 3


class ShaderError(Exception):
    """A shader could not be loaded, compiled, linked or addressed."""


_GL_TYPES = {
    ShaderType.VERTEX: GL_VERTEX_SHADER,
    ShaderType.FRAGMENT: GL_FRAGMENT_SHADER,
    ShaderType.GEOMETRY: GL_GEOMETRY_SHADER,
    ShaderType.UNKNOWN: GL_INVALID_ENUM,
}

_STAGE_NAMES = {
    ShaderType.VERTEX: "vertex",
    ShaderType.FRAGMENT: "fragment",
    ShaderType.GEOMETRY: "geometry",
}


def gl_shader_type(shader_type: ShaderType | int) -> int:
    """The GL enum for a shader stage; UNKNOWN maps to GL_INVALID_ENUM."""
    return _GL_TYPES[ShaderType(shader_type)]


def read_source(path: StrPath) -> str:
    """Read a shader source file, raising ShaderError if it cannot be read."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"failed to load shader: {path}") from exc


@dataclass(frozen=True)
class ShaderStage:
    """One source file of a program and the stage it is compiled as."""

    path: str
    type: ShaderType
    source: str


class Shader:
    """A program linked from several stage sources; linked on first use."""

    def __init__(self, files: Mapping[StrPath, ShaderType]) -> None:
        stages = []
        for path, shader_type in files.items():
            shader_type = ShaderType(shader_type)
            if shader_type is ShaderType.UNKNOWN:
                raise ShaderError(f"unknown shader type for {path}")
            stages.append(ShaderStage(str(path), shader_type, read_source(path)))
        if not stages:
            raise ShaderError("a shader program needs at least one stage")
        self.stages: tuple[ShaderStage, ...] = tuple(stages)
        self._program = None

    @property
    def program(self):
        """The linked GL program, or None before first use."""
        return self._program

    def _linked(self):
        if self._program is None:
            from pyglet.graphics.shader import Shader as StageShader
            from pyglet.graphics.shader import ShaderException, ShaderProgram

            try:
                compiled = [
                    StageShader(stage.source, _STAGE_NAMES[stage.type])
                    for stage in self.stages
                ]
                self._program = ShaderProgram(*compiled)
            except ShaderException as exc:
                raise ShaderError(f"failed to build shader program: {exc}") from exc
        return self._program

    def bind(self) -> None:
        """Make this program current."""
        self._linked().use()

    def unbind(self) -> None:
        """Clear the current program."""
        from pyglet import gl

        gl.glUseProgram(0)

    def _require_uniform(self, name: str):
        program = self._linked()
        if name not in program.uniforms:
            raise ShaderError(f"failed to get uniform with name: {name}")
        return program

    def set_uniform_int(self, name: str, value: int) -> None:
        """Set an int (or sampler) uniform."""
        program = self._require_uniform(name)
        program[name] = int(value)

    def set_uniform_mat4(self, name: str, value) -> None:
        """Set a mat4 uniform from a 4x4 row-major matrix."""
        matrix = np.asarray(value, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
        program = self._require_uniform(name)
        program[name] = tuple(float(v) for v in matrix.T.ravel())