"""PNG output for normalized frames using Pillow."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from PIL import Image

from . import NormalizedCanvas
from ..utils import file_tools

logger = logging.getLogger(__name__)


def encode_canvas(canvas: NormalizedCanvas) -> Image.Image:
    """Wrap canvas pixels in a Pillow RGBA image."""

    return Image.frombytes("RGBA", (canvas.width, canvas.height), canvas.tobytes())


def write_canvas(canvas: NormalizedCanvas, path: Path) -> Optional[Path]:
    """Encode a canvas as PNG and write it to ``path``.

    PNG cannot hold an image with no rows or no columns, so such canvases are
    skipped and ``None`` is returned.
    """

    if canvas.width == 0 or canvas.height == 0:
        logger.warning("Skipping %s: frame canvas is %sx%s", path.name, canvas.width, canvas.height)
        return None
    encode_canvas(canvas).save(path, format="PNG")
    logger.debug("Wrote %sx%s frame to %s", canvas.width, canvas.height, path)
    return path


class PngFrameSink:
    """Writes frames as ``<index>.png`` on a background thread pool.

    ``submit`` returns a future per frame and blocks while ``max_workers``
    writes are already in flight; ``wait`` blocks until every write has
    finished and re-raises the first failure.
    """

    def __init__(self, output_dir: Path, max_workers: int = 4):
        self.output_dir = output_dir
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="png-writer")
        self._slots = threading.BoundedSemaphore(max_workers)
        self._pending: list[tuple[int, Future[Optional[Path]]]] = []
        self._directory_ready = False

    def submit(self, index: int, canvas: NormalizedCanvas) -> Future[Optional[Path]]:
        if not self._directory_ready:
            file_tools.ensure_directory(self.output_dir)
            self._directory_ready = True
        path = file_tools.frame_output_path(self.output_dir, index)
        self._slots.acquire()
        try:
            future = self._executor.submit(write_canvas, canvas, path)
        except BaseException:
            self._slots.release()
            raise
        future.add_done_callback(lambda _: self._slots.release())
        self._pending.append((index, future))
        return future

    def wait(self) -> list[Path]:
        """Block until all submitted frames are done; return written paths by index."""

        ordered = sorted(self._pending, key=lambda item: item[0])
        results = [future.result() for _, future in ordered]
        return [path for path in results if path is not None]

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "PngFrameSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
