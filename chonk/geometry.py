"""4x4 transform matrices for column vectors (right-handed, GL clip space)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got {array.shape[0]}")
    return array


def _unit(value: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return value / length


def translate(offset: Sequence[float]) -> np.ndarray:
    """Matrix moving points by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def rotate(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Matrix rotating by ``angle`` radians about ``axis``."""
    x, y, z = _unit(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


def scale(factors: Sequence[float]) -> np.ndarray:
    """Matrix scaling each axis by the matching factor."""
    matrix = np.identity(4)
    matrix[:3, :3] = np.diag(_vec3(factors))
    return matrix


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """View matrix for a viewer at ``eye`` looking at ``center``."""
    eye_v = _vec3(eye)
    f = _unit(_vec3(center) - eye_v)
    s = _unit(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye_v)
    matrix[1, 3] = -np.dot(u, eye_v)
    matrix[2, 3] = np.dot(f, eye_v)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection mapping depth [near, far] to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must be non-zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


@dataclass(eq=False)
class Transform:
    """Position, Euler rotation (radians) and scale of an object."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def matrix(self) -> np.ndarray:
        """Model matrix: translation, then X/Y/Z rotation, then scale."""
        rx, ry, rz = _vec3(self.rotation)
        rotation = (
            rotate(rx, (1.0, 0.0, 0.0))
            @ rotate(ry, (0.0, 1.0, 0.0))
            @ rotate(rz, (0.0, 0.0, 1.0))
        )
        return translate(self.position) @ rotation @ scale(self.scale)