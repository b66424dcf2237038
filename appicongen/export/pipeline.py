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

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
import timeit

from appicongen import log
from appicongen.errors import InvalidImageError
from appicongen.export.renderers import DEFAULT_RENDERER, Renderer, make_renderer, read_source
from appicongen.export.sink import iconset_directory
from appicongen.manifest.models import GeneratedIcon, IconSet
from appicongen.manifest.planner import PlannedRendition, RenditionPlan

RendererFactory = Callable[[bytes], Renderer]


def _resolve_renderer(data: bytes, renderer: str | RendererFactory) -> Renderer:
    if callable(renderer):
        return renderer(data)
    return make_renderer(renderer, data)


def _render_one(renderer: Renderer, entry: PlannedRendition) -> bytes:
    try:
        edge = entry.pixels
    except (OverflowError, ValueError) as e:
        raise InvalidImageError(
            f"{entry.filename} has no usable pixel size ({entry.target_size})", filename=entry.filename, cause=e
        ) from e

    try:
        data = renderer.render(edge)
    except InvalidImageError:
        raise
    except Exception as e:  # noqa: BLE001 - renderers are third-party code
        raise InvalidImageError(
            f"Unable to render {entry.filename} at {edge}px: {e}", filename=entry.filename, cause=e
        ) from e
    if not data:
        raise InvalidImageError(f"Renderer produced no data for {entry.filename}", filename=entry.filename)
    return bytes(data)


def _worker_count(renderer: Renderer, max_workers: int | None, jobs: int) -> int | None:
    if not renderer.thread_safe:
        # one worker == a serializing queue in front of the renderer
        return 1
    if max_workers is None:
        return None
    return max(1, min(max_workers, jobs or 1))


def export(
    source: bytes | str | Path,
    rendition_plan: RenditionPlan,
    renderer: str | RendererFactory = DEFAULT_RENDERER,
    max_workers: int | None = None,
    output_directory: str | Path | None = None,
) -> IconSet:
    """
    Renders every planned rendition of `source` concurrently and collects them into an IconSet.

    Args:
        source: encoded image bytes or a path to an image file.
        rendition_plan: output of planner.plan().
        renderer: a renderer name ("pillow", "qt") or a callable that builds a Renderer from the source bytes.
        max_workers: worker pool size; ignored for renderers that are not thread safe.
        output_directory: when given, each GeneratedIcon records where the sink will write it.
            Nothing is written here.

    Raises:
        InvalidImageError: the source could not be decoded, or any single rendition failed.
            No partial result is returned.
    """
    data = read_source(source)
    active_renderer = _resolve_renderer(data, renderer)
    workers = _worker_count(active_renderer, max_workers, len(rendition_plan))
    target_dir = iconset_directory(output_directory) if output_directory is not None else None

    log.debug(
        f"exporting {len(rendition_plan)} renditions with {active_renderer.name} renderer "
        f"({'serialized' if workers == 1 else 'pooled'})"
    )
    start = timeit.default_timer()

    results: dict[str, bytes] = {}
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="appicongen-render") as executor:
        futures = {executor.submit(_render_one, active_renderer, entry): entry for entry in rendition_plan}
        try:
            for future in as_completed(futures):
                entry = futures[future]
                results[entry.filename] = future.result()
                log.debug(f"    RENDERED: {entry.filename} ({entry.pixels}x{entry.pixels})")
        except Exception as e:
            for pending in futures:
                pending.cancel()
            log.debug(f"export aborted on {getattr(e, 'filename', None)}: {e}")
            raise

    images = tuple(
        GeneratedIcon(
            filename=entry.filename,
            data=results[entry.filename],
            pixels=entry.pixels,
            destination_path=target_dir / entry.filename if target_dir is not None else None,
        )
        for entry in rendition_plan
    )
    log.debug(f"finished exporting after {timeit.default_timer() - start:0.4f} sec.")
    return IconSet(manifest=rendition_plan.manifest, images=images)
