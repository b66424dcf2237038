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

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
import math

from appicongen import log
from appicongen.manifest.models import Manifest


def leading_number(value: str | None) -> float | None:
    """
    Parses the first 'x'-separated token of a size or scale string.
    E.g., '83.5x83.5' returns 83.5 and '2x' returns 2.0.
    Returns None for anything that is not a finite, positive number.
    """
    if not isinstance(value, str):
        return None
    try:
        number = float(value.split("x")[0])
    except ValueError:
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def pixel_edge(target_size: float) -> int:
    """Rounds a target size half up to a whole pixel count, never below 1."""
    return max(1, math.floor(target_size + 0.5))


@dataclass(frozen=True)
class PlannedRendition:
    filename: str
    target_size: float

    @property
    def pixels(self) -> int:
        return pixel_edge(self.target_size)


class RenditionPlan(Sequence):
    """Deduplicated, ordered work list derived from a Manifest."""

    def __init__(self, manifest: Manifest, entries: Sequence[PlannedRendition]):
        self.manifest = manifest
        self._entries = tuple(entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PlannedRendition]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RenditionPlan({len(self._entries)} renditions)"

    @property
    def filenames(self) -> list[str]:
        return [entry.filename for entry in self._entries]


def plan(manifest: Manifest) -> RenditionPlan:
    """
    Expands a Manifest into one entry per distinct filename.
    Entries without a filename are skipped, the first entry for a filename wins,
    and entries whose size or scale cannot be parsed are dropped.
    """
    seen: set[str] = set()
    entries: list[PlannedRendition] = []

    for spec in manifest.images:
        if not spec.filename or spec.filename in seen:
            continue

        size = leading_number(spec.size)
        scale = leading_number(spec.scale)
        if size is None or scale is None:
            log.debug(f"skipping {spec.filename}: unusable size {spec.size!r} or scale {spec.scale!r}")
            continue

        target_size = size * scale
        if not math.isfinite(target_size):
            log.debug(f"skipping {spec.filename}: unusable size {spec.size!r} or scale {spec.scale!r}")
            continue

        seen.add(spec.filename)
        entries.append(PlannedRendition(filename=spec.filename, target_size=target_size))

    log.debug(f"planned {len(entries)} renditions from {len(manifest.images)} manifest entries")
    return RenditionPlan(manifest, entries)
