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

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# The only Contents.json format version this package reads or writes.
MANIFEST_FORMAT_VERSION = 1


class RenditionSpec(BaseModel):
    """One entry of the `images` array in Contents.json."""

    model_config = ConfigDict(extra="allow", frozen=True)

    filename: str | None = None
    idiom: str
    scale: str
    size: str
    subtype: str | None = None
    role: str | None = None


class ManifestInfo(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    author: str
    format_version: int = Field(alias="version")


class Manifest(BaseModel):
    """
    The icon specification: every rendition an asset catalog expects,
    plus the `info` block Xcode writes alongside it.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    images: tuple[RenditionSpec, ...]
    info: ManifestInfo

    def to_json(self) -> str:
        """Pretty-printed Contents.json text, absent optional keys left out."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2) + "\n"


@dataclass(frozen=True)
class GeneratedIcon:
    filename: str
    data: bytes
    pixels: int
    destination_path: Path | None = None


@dataclass(frozen=True)
class IconSet:
    manifest: Manifest
    images: tuple[GeneratedIcon, ...]

    def __len__(self) -> int:
        return len(self.images)

    def get(self, filename: str) -> GeneratedIcon | None:
        for icon in self.images:
            if icon.filename == filename:
                return icon
        return None
