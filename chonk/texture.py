"""Image textures loaded from disk and bound to GL texture units."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Union

from PIL import Image

GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_RGB8 = 0x8051
GL_RGBA8 = 0x8058

StrPath = Union[str, "PathLike[str]"]

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_CONVERSIONS = {"1": "L", "PA": "RGBA", "CMYK": "RGB", "YCbCr": "RGB"}
_PYGLET_FORMATS = {3: "RGB", 4: "RGBA"}


class TextureError(Exception):
    """An image could not be loaded or turned into a texture."""


@dataclass(frozen=True)
class TextureImage:
    """Decoded 8-bit pixels, rows stored bottom to top."""

    width: int
    height: int
    channels: int
    data: bytes


def load_image(path: StrPath) -> TextureImage:
    """Decode an image file, flipped so the first row is the bottom one."""
    try:
        with Image.open(path) as image:
            image.load()
            if image.mode == "P":
                mode = "RGBA" if "transparency" in image.info else "RGB"
                image = image.convert(mode)
            elif image.mode in _CONVERSIONS:
                image = image.convert(_CONVERSIONS[image.mode])
            if image.mode not in _CHANNELS:
                raise TextureError(
                    f"failed to load texture: {path} (unsupported mode {image.mode})"
                )
            flipped = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
            return TextureImage(
                width=flipped.width,
                height=flipped.height,
                channels=_CHANNELS[flipped.mode],
                data=flipped.tobytes(),
            )
    except OSError as exc:
        raise TextureError(f"failed to load texture: {path}") from exc


def gl_formats(channels: int) -> tuple[int, int]:
    """(internal format, pixel format) GL enums for a channel count."""
    if channels == 4:
        return GL_RGBA8, GL_RGBA
    if channels == 3:
        return GL_RGB8, GL_RGB
    raise TextureError(f"unsupported channel count: {channels}")


class Texture:
    """A 2D texture with nearest filtering and repeat wrapping."""

    def __init__(self, path: StrPath, mipmap_levels: int = 1) -> None:
        if mipmap_levels < 1:
            raise ValueError("a texture needs at least one mipmap level")
        self.path = str(path)
        self.mipmap_levels = int(mipmap_levels)
        self.image = load_image(path)
        self.internal_format, self.pixel_format = gl_formats(self.image.channels)
        self._texture = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def id(self) -> int | None:
        """The GL texture name, or None before the first bind."""
        return None if self._texture is None else self._texture.id

    def _upload(self):
        from pyglet import gl
        from pyglet import image as pyglet_image

        image = self.image
        data = pyglet_image.ImageData(
            image.width,
            image.height,
            _PYGLET_FORMATS[image.channels],
            image.data,
            pitch=image.width * image.channels,
        )
        texture = data.get_texture()
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(
            gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAX_LEVEL, self.mipmap_levels - 1
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        self._texture = texture
        return texture

    def bind(self, slot: int = 0) -> None:
        """Bind to texture unit ``slot``, uploading the image on first use."""
        from pyglet import gl

        texture = self._texture if self._texture is not None else self._upload()
        gl.glActiveTexture(gl.GL_TEXTURE0 + slot)
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id)

    def unbind(self, slot: int = 0) -> None:
        """Clear texture unit ``slot``."""
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0 + slot)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)