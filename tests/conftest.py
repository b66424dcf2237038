from io import BytesIO
import sys
import threading
import time

from PIL import Image, ImageDraw
import pytest

from appicongen import log
from appicongen.export.renderers import Renderer
from appicongen.manifest.models import Manifest


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # the CLI re-points loguru at streams that pytest closes after each test
    log.remove()
    log.add(lambda message: sys.stderr.write(message), level="WARNING")


@pytest.fixture
def source_bytes() -> bytes:
    img = Image.new("RGBA", (256, 256), (10, 132, 255, 255))
    draw = ImageDraw.Draw(img)
    draw.ellipse((48, 48, 208, 208), fill=(255, 255, 255, 255))
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def source_file(tmp_path, source_bytes):
    path = tmp_path / "source.png"
    path.write_bytes(source_bytes)
    return path


@pytest.fixture
def small_manifest() -> Manifest:
    return Manifest.model_validate(
        {
            "images": [
                {"filename": "a.png", "idiom": "iphone", "scale": "2x", "size": "20x20"},
                {"filename": "b.png", "idiom": "iphone", "scale": "3x", "size": "20x20"},
                {"idiom": "car", "scale": "2x", "size": "60x60"},
                {"filename": "a.png", "idiom": "ipad", "scale": "1x", "size": "40x40"},
                {"filename": "c.png", "idiom": "ipad", "scale": "2x", "size": "83.5x83.5"},
            ],
            "info": {"author": "xcode", "version": 1},
        }
    )


def png_size(data: bytes) -> tuple[int, int]:
    with Image.open(BytesIO(data)) as img:
        assert img.format == "PNG"
        return img.size


class FlakyRenderer(Renderer):
    """Produces a tiny PNG for every edge except the ones listed in `fail_edges`."""

    name = "flaky"

    def __init__(self, fail_edges=(), empty_edges=()):
        self.fail_edges = set(fail_edges)
        self.empty_edges = set(empty_edges)

    def render(self, edge: int) -> bytes:
        if edge in self.fail_edges:
            raise RuntimeError(f"cannot rasterize {edge}")
        if edge in self.empty_edges:
            return b""
        buffer = BytesIO()
        Image.new("RGBA", (edge, edge)).save(buffer, format="PNG")
        return buffer.getvalue()


class ThreadAffineRenderer(FlakyRenderer):
    """Records the largest number of simultaneous render() calls."""

    name = "affine"
    thread_safe = False

    def __init__(self):
        super().__init__()
        self.active = 0
        self.peak = 0
        self.threads = set()
        self._lock = threading.Lock()

    def render(self, edge: int) -> bytes:
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
            self.threads.add(threading.get_ident())
        try:
            time.sleep(0.02)
            return super().render(edge)
        finally:
            with self._lock:
                self.active -= 1


class ConcurrentRenderer(ThreadAffineRenderer):
    """Same bookkeeping, but safe to call from many workers at once."""

    name = "concurrent"
    thread_safe = True
