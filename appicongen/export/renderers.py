"""
AppIconGen: Application Icon Set Generator
Copyright (C) 2025 Travis L. Seymour, PhD

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from appicongen import log
from appicongen.errors import InvalidImageError

RENDERERS = ("pillow", "qt")
DEFAULT_RENDERER = "pillow"


class Renderer:
    """
    Turns one decoded source image into square PNG renditions.

    `thread_safe` tells the export pipeline whether render() may be called
    from several worker threads at once. Renderers backed by a GUI toolkit
    set it to False and get a single worker.
    """

    name = "base"
    thread_safe = True

    def render(self, edge: int) -> bytes:
        raise NotImplementedError


class PillowRenderer(Renderer):
    name = "pillow"
    thread_safe = True

    def __init__(self, data: bytes, resample: Image.Resampling = Image.Resampling.LANCZOS):
        try:
            with Image.open(BytesIO(data)) as img:
                img.load()
                self.image = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise InvalidImageError(f"Unable to decode source image: {e}", cause=e) from e
        self.resample = resample
        log.debug(f"pillow renderer loaded source ({self.image.width}x{self.image.height})")

    def render(self, edge: int) -> bytes:
        resized = self.image.resize((edge, edge), self.resample)
        buffer = BytesIO()
        resized.save(buffer, format="PNG")
        return buffer.getvalue()


def read_source(source: bytes | str | Path) -> bytes:
    """Returns the encoded source image, reading it from disk when given a path."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as e:
        raise InvalidImageError(f"Unable to read source image {path}: {e}", cause=e) from e


def make_renderer(kind: str, data: bytes) -> Renderer:
    kind = (kind or DEFAULT_RENDERER).lower()
    if kind == "pillow":
        return PillowRenderer(data)
    if kind == "qt":
        # PySide6 is only needed when someone asks for it
        from appicongen.export.qtrenderer import QtRenderer

        return QtRenderer(data)
    raise ValueError(f"Unknown renderer {kind!r}, expected one of: {', '.join(RENDERERS)}")
