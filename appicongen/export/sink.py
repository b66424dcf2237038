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

from collections.abc import Iterable
from pathlib import Path
import shutil

from appicongen import log
from appicongen.errors import CleanupError, CreationError, WriteError
from appicongen.manifest.models import GeneratedIcon, Manifest

ICONSET_DIRNAME = "AppIcon.appiconset"
MANIFEST_FILENAME = "Contents.json"


def iconset_directory(output_directory: str | Path) -> Path:
    return Path(output_directory) / ICONSET_DIRNAME


def _clear(target: Path):
    try:
        if not (target.exists() or target.is_symlink()):
            return
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as e:
        raise CleanupError(f"Unable to remove previous icon set at {target}: {e}", path=target, cause=e) from e
    log.debug(f"removed previous icon set at {target}")


def persist(output_directory: str | Path, manifest: Manifest, images: Iterable[GeneratedIcon]) -> Path:
    """
    Writes `manifest` and every icon into <output_directory>/AppIcon.appiconset.

    Any existing icon set directory is deleted first, so the result never mixes old and new files.
    If a write fails part way through, the files written so far are left in place.

    Returns the icon set directory.
    """
    target = iconset_directory(output_directory)

    _clear(target)

    try:
        target.mkdir(parents=True)
    except OSError as e:
        raise CreationError(f"Unable to create icon set directory {target}: {e}", path=target, cause=e) from e

    contents_path = target / MANIFEST_FILENAME
    try:
        contents_path.write_text(manifest.to_json(), encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Unable to write {contents_path}: {e}", path=contents_path, cause=e) from e

    count = 0
    for icon in images:
        icon_path = target / icon.filename
        try:
            icon_path.write_bytes(icon.data)
        except OSError as e:
            raise WriteError(f"Unable to write {icon_path}: {e}", path=icon_path, cause=e) from e
        count += 1

    log.info(f"Wrote {count} icons and {MANIFEST_FILENAME} to {target}")
    return target
