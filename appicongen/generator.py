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

from appicongen import log
from appicongen.export import pipeline, sink
from appicongen.export.pipeline import RendererFactory
from appicongen.export.renderers import DEFAULT_RENDERER
from appicongen.manifest import loader, planner
from appicongen.manifest.models import IconSet


def generate(
    source: bytes | str | Path,
    output_directory: str | Path | None = None,
    renderer: str | RendererFactory = DEFAULT_RENDERER,
    max_workers: int | None = None,
) -> IconSet:
    """
    Builds a complete app icon set from one source image.

    Loads the bundled manifest, plans the renditions, renders them and, when
    `output_directory` is given, writes <output_directory>/AppIcon.appiconset.
    Rendering finishes before anything touches the disk, so a failed render
    never leaves files behind.
    """
    manifest = loader.load()
    rendition_plan = planner.plan(manifest)
    icon_set = pipeline.export(
        source,
        rendition_plan,
        renderer=renderer,
        max_workers=max_workers,
        output_directory=output_directory,
    )

    if output_directory is not None:
        sink.persist(output_directory, icon_set.manifest, icon_set.images)
    else:
        log.info(f"Rendered {len(icon_set)} icons in memory")

    return icon_set
