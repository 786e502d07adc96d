from pathtracer.renderer.integrator import ray_color, sample_pixel
from pathtracer.renderer.raytracer import (
    PixelResult,
    RenderError,
    Renderer,
    default_worker_count,
)
from pathtracer.renderer.tone_mapping import write_image

__all__ = [
    "PixelResult",
    "RenderError",
    "Renderer",
    "default_worker_count",
    "ray_color",
    "sample_pixel",
    "write_image",
]
