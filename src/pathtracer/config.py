# config.py
from dataclasses import dataclass
from typing import Optional

from pathtracer.camera.camera import Camera

# Sample count and bounce depth per preset.
QUALITY_LEVELS = {
    "preview": {"samples": 10, "depth": 10},
    "balanced": {"samples": 100, "depth": 50},
    "final": {"samples": 500, "depth": 50},
}


@dataclass
class RenderConfig:
    """
    Everything a command-line render needs besides the scene itself.

    A quality preset, when given, replaces the scene's own sample count and
    depth; explicit width/samples/depth values override both.
    """
    scene: str = "cornell_box"
    output: str = "image.png"
    quality: Optional[str] = None
    width: Optional[int] = None
    samples: Optional[int] = None
    depth: Optional[int] = None
    workers: Optional[int] = None
    seed: Optional[int] = None
    texture: Optional[str] = None

    def __post_init__(self):
        if self.quality is not None and self.quality not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality {self.quality!r}; choose from {', '.join(QUALITY_LEVELS)}")
        for name in ("width", "samples", "depth", "workers"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")

    def apply(self, camera: Camera) -> Camera:
        if self.quality is not None:
            level = QUALITY_LEVELS[self.quality]
            camera.set_samples_per_pixel(level["samples"])
            camera.set_max_depth(level["depth"])
        if self.width is not None:
            camera.set_image_width(self.width)
        if self.samples is not None:
            camera.set_samples_per_pixel(self.samples)
        if self.depth is not None:
            camera.set_max_depth(self.depth)
        return camera

    @classmethod
    def from_args(cls, args) -> "RenderConfig":
        return cls(
            scene=args.scene,
            output=args.output,
            quality=args.quality,
            width=args.width,
            samples=args.samples,
            depth=args.depth,
            workers=args.workers,
            seed=args.seed,
            texture=args.texture,
        )
