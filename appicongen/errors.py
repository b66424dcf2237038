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

from pathlib import Path


class AppIconError(Exception):
    """Base class for every failure raised while generating an icon set."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ManifestLoadError(AppIconError):
    """The icon specification could not be read or decoded."""


class ExportError(AppIconError):
    """Rendering the icon set failed."""


class InvalidImageError(ExportError):
    """
    A rendition could not be rasterized or encoded.

    `filename` names the rendition that failed, or is None when the
    source image itself could not be decoded.
    """

    def __init__(self, message: str, filename: str | None = None, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.filename = filename


class PersistError(AppIconError):
    """Writing the icon set to disk failed."""

    def __init__(self, message: str, path: Path, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.path = Path(path)


class CleanupError(PersistError):
    """A previous icon set directory could not be removed."""


class CreationError(PersistError):
    """The icon set directory could not be created."""


class WriteError(PersistError):
    """The manifest or a rendition could not be written."""
