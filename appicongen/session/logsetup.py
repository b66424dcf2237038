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
import sys

from appicongen import log


def setup_logging(debug: bool = False, log_file: str | Path | None = None) -> Path | None:
    """
    Replaces loguru's default sink with the console (and optional file) sinks used by the CLI.
    Library code only emits records; sinks are set up here, once per run.
    """
    log.remove()

    if debug:
        log.add(
            sys.stderr,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{line}</cyan> | {message}",
            colorize=True,
            level="DEBUG",
        )
    else:
        log.add(sys.stderr, format="{message}", colorize=False, level="INFO")

    if log_file is None:
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log.add(
        log_path,
        format="{time: MM-DD-YY | HH:mm:ss} | {module} | {line} | {function} | {level} | {message}",
        colorize=False,
        enqueue=True,
        level="DEBUG" if debug else "INFO",
    )
    return log_path
