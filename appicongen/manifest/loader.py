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

import json
from pathlib import Path

from pydantic import ValidationError

from appicongen import log
from appicongen.errors import ManifestLoadError
from appicongen.manifest.models import MANIFEST_FORMAT_VERSION, Manifest
from appicongen.utils.apputils import read_resource_text

MANIFEST_RESOURCE = "Contents.json"


def loads(text: str | bytes) -> Manifest:
    """Decodes Contents.json text into a Manifest."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestLoadError(f"Manifest is not valid JSON: {e}", cause=e) from e

    try:
        manifest = Manifest.model_validate(raw)
    except ValidationError as e:
        raise ManifestLoadError(f"Manifest does not match the icon set schema: {e}", cause=e) from e

    if manifest.info.format_version != MANIFEST_FORMAT_VERSION:
        raise ManifestLoadError(
            f"Unsupported manifest version {manifest.info.format_version} (expected {MANIFEST_FORMAT_VERSION})"
        )
    return manifest


def load_file(path: str | Path) -> Manifest:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestLoadError(f"Unable to read manifest {path}: {e}", cause=e) from e
    return loads(text)


def load() -> Manifest:
    """
    Loads the icon specification bundled with the package.

    The resource ships with the software, so a failure here means a broken
    install rather than bad user input.
    """
    try:
        text = read_resource_text(MANIFEST_RESOURCE)
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestLoadError(f"Bundled manifest {MANIFEST_RESOURCE} is missing or unreadable: {e}", cause=e) from e

    manifest = loads(text)
    log.debug(f"loaded bundled manifest with {len(manifest.images)} image entries")
    return manifest
