"""The windowed application: main loop, input handling and frame statistics."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from pathlib import Path

from chonk.camera import Camera, MoveKey
from chonk.chunk import Chunk
from chonk.scene import Scene
from chonk.shader import Shader, ShaderType
from chonk.texture import Texture

TITLE = "Chonk"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720

CAMERA_FOV = 45.0
CAMERA_NEAR = 0.01
CAMERA_FAR = 100.0

ASSETS = Path("assets")
SHADER_FILES = {
    ASSETS / "shaders" / "Default.vert.glsl": ShaderType.VERTEX,
    ASSETS / "shaders" / "Default.frag.glsl": ShaderType.FRAGMENT,
}
TEXTURE_ATLAS = ASSETS / "textures" / "TextureAtlas.png"


@dataclass
class FrameStats:
    """Instant and exponentially averaged frame rate and frame time."""

    frequency: float = 0.02
    fps: float = 0.0
    frame_time: float = 0.0
    avg_fps: float = 0.0
    avg_frame_time: float = 0.0

    def update(self, dt: float) -> None:
        """Fold in one frame lasting ``dt`` seconds."""
        if dt <= 0:
            raise ValueError("frame time must be positive")
        self.fps = 1.0 / dt
        self.frame_time = dt * 1000.0
        keep = 1.0 - self.frequency
        self.avg_fps = self.avg_fps * keep + self.fps * self.frequency
        self.avg_frame_time = (
            self.avg_frame_time * keep + self.frame_time * self.frequency
        )

    def lines(self) -> list[str]:
        """The statistics as display lines."""
        return [
            f"FPS: {self.fps:.0f}",
            f"AVG FPS: {self.avg_fps:.0f}",
            f"Frame Time: {self.frame_time:.3f}",
            f"AVG Frame Time: {self.avg_frame_time:.3f}",
        ]


@dataclass
class InputState:
    """Whether the mouse is captured and whether camera input is frozen."""

    mouse_locked: bool = False
    camera_locked: bool = False

    def toggle_mouse_lock(self) -> bool:
        """Flip mouse capture; returns the new state."""
        self.mouse_locked = not self.mouse_locked
        return self.mouse_locked

    def toggle_camera_lock(self) -> bool:
        """Flip camera input; the mouse is captured exactly when the camera is free."""
        self.camera_locked = not self.camera_locked
        self.mouse_locked = not self.camera_locked
        return self.camera_locked


class App:
    """Owns the window, the scene and the per-frame update."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        import pyglet
        from pyglet import gl
        from pyglet.window import key

        config = gl.Config(
            major_version=4, minor_version=6, double_buffer=True, depth_size=24
        )
        self.window = pyglet.window.Window(
            width, height, caption=TITLE, resizable=True, config=config
        )
        self.window.switch_to()

        self._keys = key.KeyStateHandler()
        self.window.push_handlers(self._keys)
        self.window.push_handlers(
            on_key_press=self._on_key_press,
            on_resize=self._on_window_resize,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
        )

        self.input = InputState()
        self.stats = FrameStats()
        self.camera = Camera(CAMERA_FOV, CAMERA_NEAR, CAMERA_FAR, width, height)
        self.scene = Scene(self.camera, Shader(SHADER_FILES), Texture(TEXTURE_ATLAS))
        self.scene.push_chunk(Chunk())
        self.on_resize(width, height)

    def update(self, dt: float) -> None:
        """Advance one frame: move the camera, draw the scene and present it."""
        self.window.switch_to()
        if dt > 0:
            self.stats.update(dt)
        pressed = {move for move in MoveKey if self._keys[ord(move.value)]}
        self.camera.on_update(dt, pressed)

        self.scene.start()
        self.scene.stop()

        self.window.set_caption(" | ".join([TITLE, *self.stats.lines()]))
        self.window.flip()

    def on_resize(self, width: int, height: int) -> None:
        """Fit the viewport and the camera projection to a new window size."""
        from pyglet import gl

        if height <= 0:
            return
        fb_width, fb_height = self.window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)
        self.camera.on_resize(width, height)

    def run(self) -> None:
        """Poll events and update until the window is closed."""
        import pyglet

        last = time.perf_counter()
        while not self.window.has_exit:
            now = time.perf_counter()
            dt = now - last
            last = now
            pyglet.clock.tick()
            self.window.dispatch_events()
            if self.window.has_exit:
                break
            self.update(dt)
        self.window.close()

    def _on_window_resize(self, width: int, height: int):
        import pyglet

        self.on_resize(width, height)
        return pyglet.event.EVENT_HANDLED

    def _on_key_press(self, symbol: int, modifiers: int):
        import pyglet
        from pyglet.window import key

        if symbol == key.F:
            self.window.set_exclusive_mouse(self.input.toggle_mouse_lock())
            return pyglet.event.EVENT_HANDLED
        if symbol == key.X:
            self.camera.lock_input = self.input.toggle_camera_lock()
            self.window.set_exclusive_mouse(self.input.mouse_locked)
            return pyglet.event.EVENT_HANDLED
        return None

    def _on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        # Window y grows upwards; the camera expects screen-style y growing down.
        self.camera.on_mouse_motion(dx, -dy)

    def _on_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        self.camera.on_mouse_motion(dx, -dy)


def main(argv=None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="chonk", description="Voxel chunk viewer.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    App(args.width, args.height).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())