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

from PySide6.QtCore import QBuffer, QIODevice, QSize, Qt
from PySide6.QtGui import QImage

from appicongen import log
from appicongen.errors import InvalidImageError
from appicongen.export.renderers import Renderer


class QtRenderer(Renderer):
    """
    Scales and encodes with QImage.

    Qt's painting classes expect to be driven from one thread, so the
    export pipeline serializes every call to this renderer.
    """

    name = "qt"
    thread_safe = False

    def __init__(self, data: bytes):
        image = QImage()
        if not image.loadFromData(data):
            raise InvalidImageError("Unable to decode source image with Qt")
        self.image = image.convertToFormat(QImage.Format.Format_ARGB32)
        log.debug(f"qt renderer loaded source ({self.image.width()}x{self.image.height()})")

    def render(self, edge: int) -> bytes:
        scaled = self.image.scaled(
            QSize(edge, edge),
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        buffer = QBuffer()
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        try:
            if not scaled.save(buffer, "PNG"):
                raise RuntimeError(f"Qt could not encode a {edge}x{edge} PNG")
            return bytes(buffer.data())
        finally:
            buffer.close()
