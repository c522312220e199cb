"""Free-flying perspective camera driven by keys and mouse motion."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Sequence

import numpy as np

from chonk.geometry import look_at, perspective

PITCH_LIMIT = 89.9


class MoveKey(Enum):
    """Movement keys, named by the action they perform."""

    FORWARD = "w"
    BACKWARD = "s"
    LEFT = "a"
    RIGHT = "d"
    UP = "e"
    DOWN = "q"


def _unit(value: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return value / length


class Camera:
    """Perspective camera that keeps its view-projection matrix up to date."""

    def __init__(
        self, fov: float, near_plane: float, far_plane: float, width: int, height: int
    ) -> None:
        self._forward = np.array([0.0, 0.0, 1.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self._position = np.array([0.0, 0.0, -5.0])
        self._near_plane = float(near_plane)
        self._far_plane = float(far_plane)
        self._fov = float(fov)
        self.width = int(width)
        self.height = int(height)
        self._aspect_ratio = 1.0

        self.speed = 5.0
        self.sensitivity = 0.3
        self.yaw = 90.0
        self.pitch = 0.0
        self.lock_input = False
        self._first_mouse = True

        # The camera always starts with an 800x600 viewport; callers resize it.
        self.on_resize(800, 600)

    def _recalculate(self) -> None:
        self._view = look_at(self._position, self._position + self._forward, self._up)
        self._projection = perspective(
            self._fov, self._aspect_ratio, self._near_plane, self._far_plane
        )
        self._view_projection = self._projection @ self._view

    @property
    def view(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_projection(self) -> np.ndarray:
        return self._view_projection.copy()

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.asarray(value, dtype=np.float64).reshape(3).copy()
        self._recalculate()

    @property
    def forward(self) -> np.ndarray:
        return self._forward.copy()

    @forward.setter
    def forward(self, value: Sequence[float]) -> None:
        self._forward = np.asarray(value, dtype=np.float64).reshape(3).copy()
        self._recalculate()

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = float(value)
        self._recalculate()

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @near_plane.setter
    def near_plane(self, value: float) -> None:
        self._near_plane = float(value)
        self._recalculate()

    @property
    def far_plane(self) -> float:
        return self._far_plane

    @far_plane.setter
    def far_plane(self, value: float) -> None:
        self._far_plane = float(value)
        self._recalculate()

    def on_resize(self, width: int, height: int) -> None:
        """Adopt a new viewport size and refresh the projection."""
        if height == 0:
            raise ValueError("viewport height must be non-zero")
        self.width = int(width)
        self.height = int(height)
        self._aspect_ratio = self.width / self.height
        self._recalculate()

    def on_update(self, dt: float, pressed: Iterable[MoveKey]) -> None:
        """Move the camera according to the movement keys held this frame."""
        if self.lock_input:
            return
        held = set(pressed)
        if not held:
            return
        right = _unit(np.cross(self._forward, self._up))
        steps = {
            MoveKey.FORWARD: self._forward,
            MoveKey.BACKWARD: -self._forward,
            MoveKey.LEFT: -right,
            MoveKey.RIGHT: right,
            MoveKey.UP: self._up,
            MoveKey.DOWN: -self._up,
        }
        position = self._position.copy()
        for key in MoveKey:
            if key in held:
                position += steps[key] * self.speed * dt
        self.position = position

    def on_mouse_motion(self, xrel: float, yrel: float) -> None:
        """Turn the camera by a relative mouse movement."""
        if self.lock_input:
            return
        if self._first_mouse:
            self._first_mouse = False
            return
        self.yaw += xrel * self.sensitivity
        self.pitch -= yrel * self.sensitivity
        self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self._forward = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self._recalculate()