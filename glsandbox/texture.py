"""2D textures loaded from image files."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class TextureFormat(Enum):
    RGB = "RGB"
    RGBA = "RGBA"

    @property
    def channels(self) -> int:
        return len(self.value)


class TextureError(Exception):
    """Raised when an image cannot be loaded as a texture."""


class Texture:
    """An image file uploaded as a repeating, mipmapped 2D texture."""

    def __init__(self, file_location: str = "") -> None:
        self.file_location = str(file_location)
        self.width = 0
        self.height = 0
        self.bit_depth = 0
        self._texture_id = 0

    @property
    def texture_id(self) -> int:
        return self._texture_id

    def _decode(self, path: str, fmt: TextureFormat) -> bytes:
        if not path or not Path(path).is_file():
            raise TextureError(f"failed to load texture: {path!r}")
        import pyglet

        try:
            image = pyglet.image.load(path)
        except Exception as exc:
            raise TextureError(f"failed to load texture: {path!r}") from exc
        data = image.get_image_data()
        self.width = data.width
        self.height = data.height
        self.bit_depth = len(data.format)
        # Negative pitch gives rows from the top of the image down.
        return data.get_data(fmt.value, -data.width * fmt.channels)

    def load(self, fmt: TextureFormat = TextureFormat.RGBA) -> None:
        """Decode the image file and upload it to a new GL texture."""
        path = self.file_location
        self.clear()
        self.file_location = path
        pixels = self._decode(path, fmt)

        from pyglet import gl

        handle = (gl.GLuint * 1)()
        gl.glGenTextures(1, handle)
        self._texture_id = int(handle[0])
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture_id)

        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

        gl_format = gl.GL_RGBA if fmt is TextureFormat.RGBA else gl.GL_RGB
        buffer = (gl.GLubyte * len(pixels)).from_buffer_copy(pixels)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl_format, self.width, self.height, 0,
            gl_format, gl.GL_UNSIGNED_BYTE, buffer,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def use(self, slot: int = 0) -> None:
        from pyglet import gl

        gl.glActiveTexture(gl.GL_TEXTURE0 + slot)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture_id)

    def clear(self) -> None:
        """Delete the GL texture and forget the image it came from."""
        if self._texture_id:
            from pyglet import gl

            gl.glDeleteTextures(1, (gl.GLuint * 1)(self._texture_id))
            self._texture_id = 0
            self.width = 0
            self.height = 0
            self.bit_depth = 0
            self.file_location = ""