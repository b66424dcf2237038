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

from importlib.resources import as_file, files
from pathlib import Path


def get_resource(*args: str, project: str = "appicongen") -> Path:
    """
    Returns the absolute path of a file inside '[PROJECT]/resources'.

    Args:
        *args: path components relative to '[PROJECT]/resources', e.g., ("Contents.json",).

    Raises:
        FileNotFoundError: If the resource does not exist.
    """
    resource_path = files(project).joinpath("resources", *args)
    with as_file(resource_path) as resolved_path:
        path = Path(resolved_path).resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Resource not found: {'/'.join(args)}")
    return path


def read_resource_text(*args: str, project: str = "appicongen") -> str:
    """Reads a packaged resource as UTF-8 text."""
    return get_resource(*args, project=project).read_text(encoding="utf-8")
