# renderer/raytracer.py
import logging
import os
import random
import time
from concurrent import futures
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from pathtracer.core.vector import Color
from pathtracer.renderer.integrator import sample_pixel

logger = logging.getLogger(__name__)

# Share of the machine's cores used when no worker count is given.
WORKER_FRACTION = 0.75


class PixelResult(NamedTuple):
    x: int
    y: int
    color: Color


class RenderError(RuntimeError):
    """A render worker failed; no image is produced."""
    def __init__(self, message: str, pixel: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.pixel = pixel


def default_worker_count(cpu_count: Optional[int] = None) -> int:
    if cpu_count is None:
        cpu_count = os.cpu_count() or 1
    return max(1, int(cpu_count * WORKER_FRACTION))


def pixel_rng(seed: Optional[int], x: int, y: int) -> random.Random:
    """
    Generator for one pixel. A seeded render gives every pixel its own
    stream, so the image does not depend on how pixels are partitioned.
    """
    if seed is None:
        return random.Random()
    return random.Random(f"{seed}:{x}:{y}")


def render_pixels(camera, world, pixels: Iterable[Tuple[int, int]],
                  seed: Optional[int] = None) -> List[PixelResult]:
    return [PixelResult(x, y, sample_pixel(camera, world, x, y, pixel_rng(seed, x, y)))
            for x, y in pixels]


# Per-process scene state, installed once by the pool initializer and only read afterwards.
_worker_state = None


def _init_worker(camera, world, seed):
    global _worker_state
    _worker_state = (camera, world, seed)


def _render_batch(pixels: Sequence[Tuple[int, int]]) -> List[PixelResult]:
    camera, world, seed = _worker_state
    return render_pixels(camera, world, pixels, seed)


class Renderer:
    """
    Renders a camera's view of a world, one independent task per pixel.

    Pixels are handed to a process pool in batches (one image row by
    default). Results come back in completion order and are placed in the
    output buffer by index, so the image does not depend on scheduling.
    """
    def __init__(self, camera, world, workers: Optional[int] = None,
                 seed: Optional[int] = None, batch_size: Optional[int] = None):
        if workers is not None and workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}")
        self.camera = camera
        self.world = world
        self.workers = workers or default_worker_count()
        self.seed = seed
        self.batch_size = batch_size

    @property
    def width(self) -> int:
        return self.camera.image_width

    @property
    def height(self) -> int:
        return self.camera.image_height

    def batches(self) -> List[List[Tuple[int, int]]]:
        size = self.batch_size or self.width
        coords = [(x, y) for y in range(self.height) for x in range(self.width)]
        return [coords[i:i + size] for i in range(0, len(coords), size)]

    def render(self) -> np.ndarray:
        """
        Returns a (height * width, 3) array of linear colors; pixel (x, y)
        is row y * width + x.
        """
        if not self.camera.initialized:
            self.camera.initialize()

        width, height = self.width, self.height
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s)",
                    width, height, self.camera.samples_per_pixel,
                    self.camera.max_depth, self.workers)

        start = time.perf_counter()
        if self.workers == 1:
            results = self._render_serial()
        else:
            results = self._render_parallel()

        expected = width * height
        pixels = np.zeros((expected, 3), dtype=np.float64)
        received = 0
        for x, y, color in results:
            pixels[y * width + x] = (color.x, color.y, color.z)
            received += 1
        if received != expected:
            raise RenderError(f"Expected {expected} pixel results, received {received}")

        logger.info("Rendered %d pixels in %.2fs", expected, time.perf_counter() - start)
        return pixels

    def _render_serial(self) -> List[PixelResult]:
        results = []
        for batch in self.batches():
            try:
                results.extend(render_pixels(self.camera, self.world, batch, self.seed))
            except Exception as exc:
                raise RenderError(f"Rendering failed in batch starting at pixel {batch[0]}",
                                  pixel=batch[0]) from exc
        return results

    def _render_parallel(self) -> List[PixelResult]:
        batches = self.batches()
        results = []
        with futures.ProcessPoolExecutor(max_workers=self.workers,
                                         initializer=_init_worker,
                                         initargs=(self.camera, self.world, self.seed)) as executor:
            pending = {executor.submit(_render_batch, batch): batch for batch in batches}
            report_every = max(1, len(batches) // 10)
            for done, future in enumerate(futures.as_completed(pending), start=1):
                exc = future.exception()
                if exc is not None:
                    batch = pending[future]
                    executor.shutdown(wait=False, cancel_futures=True)
                    raise RenderError(f"Rendering failed in batch starting at pixel {batch[0]}",
                                      pixel=batch[0]) from exc
                results.extend(future.result())
                if done % report_every == 0:
                    logger.debug("Completed %d/%d batches", done, len(batches))
        return results
